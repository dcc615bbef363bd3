"""Table-of-contents generation for the fixed README layout."""

from __future__ import annotations

from typing import List

from .constants import SECTION_TITLES, TOC_LABELS, TOC_LEADING, TOC_TRAILING
from .formatting import github_anchor


class TableOfContentsBuilder:
    """Links the canonical sections, plus optional API and scripts entries.

    Technology Stack and Project Structure are linked only when their
    sections are rendered, so every anchor resolves to a heading.
    """

    def build(
        self,
        *,
        include_api_docs: bool,
        include_scripts: bool,
        include_tech_stack: bool = True,
        include_structure: bool = True,
    ) -> str:
        skipped = set()
        if not include_tech_stack:
            skipped.add("tech_stack")
        if not include_structure:
            skipped.add("structure")

        keys: List[str] = [key for key in TOC_LEADING if key not in skipped]
        if include_api_docs:
            keys.append("api_docs")
        if include_scripts:
            keys.append("scripts")
        keys.extend(TOC_TRAILING)

        lines = [f"## {SECTION_TITLES['toc']}", ""]
        for key in keys:
            lines.append(f"- [{TOC_LABELS[key]}](#{github_anchor(SECTION_TITLES[key])})")
        return "\n".join(lines)


__all__ = ["TableOfContentsBuilder"]
