"""README synthesis from repository metadata and a technology profile."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..logging import get_logger
from ..models import DocumentSection, FileEntry, RepositoryMetadata, TechnologyProfile
from .constants import SECTION_ORDER, SECTION_TITLES
from .rendering import SectionRenderer
from .sections import SECTION_BUILDERS, SectionBuilder, SectionInputs

SECTION_SEPARATOR = "\n\n"


class ReadmeSynthesizer:
    """Renders the canonical README sections in a fixed order.

    The output still carries the ``REPO_URL`` / ``REPO_NAME`` placeholders;
    see :func:`readmegen.synthesis.placeholders.resolve_placeholders`.
    """

    def __init__(
        self,
        builders: Optional[Dict[str, SectionBuilder]] = None,
        renderer: Optional[SectionRenderer] = None,
    ) -> None:
        self.builders: Dict[str, SectionBuilder] = dict(SECTION_BUILDERS)
        if builders:
            unknown = sorted(set(builders) - set(SECTION_ORDER))
            if unknown:
                raise ValueError(f"Unknown README sections: {', '.join(unknown)}")
            self.builders.update(builders)
        self.renderer = renderer
        self.logger = get_logger("synthesis")

    def build_sections(
        self,
        metadata: RepositoryMetadata,
        profile: TechnologyProfile,
        listing: Sequence[FileEntry],
    ) -> List[DocumentSection]:
        """Return every section, including empty ones, in canonical order."""
        inputs = SectionInputs.build(metadata, profile, listing, self.renderer)
        sections: List[DocumentSection] = []
        for key in SECTION_ORDER:
            body = self.builders[key](inputs)
            sections.append(
                DocumentSection(key=key, title=SECTION_TITLES.get(key, key), body=body)
            )
        return sections

    def synthesize(
        self,
        metadata: RepositoryMetadata,
        profile: TechnologyProfile,
        listing: Sequence[FileEntry],
    ) -> str:
        """Join the non-empty sections with a blank line between each."""
        sections = self.build_sections(metadata, profile, listing)
        included = [section for section in sections if not section.is_empty]
        skipped = [section.key for section in sections if section.is_empty]
        if skipped:
            self.logger.debug("Omitting empty sections: %s", ", ".join(skipped))
        return SECTION_SEPARATOR.join(section.body for section in included)


__all__ = ["ReadmeSynthesizer", "SECTION_SEPARATOR"]
