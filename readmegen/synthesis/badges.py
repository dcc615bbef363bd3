"""Badge rendering for generated README files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

from .constants import DEFAULT_LANGUAGE_COLOR, FRAMEWORK_BADGES, LANGUAGE_COLORS
from .formatting import shields_escape
from ..models import RepositoryMetadata, TechnologyProfile


@dataclass
class BadgeBuilder:
    """Builds the shields.io badge block shown under the README title."""

    style: str = "for-the-badge"

    def build(self, metadata: RepositoryMetadata, profile: TechnologyProfile) -> str:
        """Return one badge per line; frameworks without a known badge are skipped."""
        badges: List[str] = self.repository_badges(metadata)

        language_badge = self.language_badge(metadata.language)
        if language_badge:
            badges.append(language_badge)

        for framework in profile.frameworks:
            badge = FRAMEWORK_BADGES.get(framework)
            if badge:
                badges.append(badge)

        if metadata.license is not None:
            badges.append(
                self.license_badge(metadata.license.spdx_id, color="green", style=self.style)
            )

        return "\n".join(badges)

    def repository_badges(self, metadata: RepositoryMetadata) -> List[str]:
        if not metadata.full_name:
            return []
        base = "https://img.shields.io/github"
        query = f"style={self.style}&logo=github"
        return [
            f"[![Stars]({base}/stars/{metadata.full_name}?{query})]({metadata.html_url}/stargazers)",
            f"[![Forks]({base}/forks/{metadata.full_name}?{query})]({metadata.html_url}/network/members)",
            f"[![Issues]({base}/issues/{metadata.full_name}?{query})]({metadata.html_url}/issues)",
        ]

    def language_badge(self, language: Optional[str]) -> Optional[str]:
        if not language:
            return None
        color = LANGUAGE_COLORS.get(language, DEFAULT_LANGUAGE_COLOR)
        logo = quote(language.lower(), safe="")
        return (
            f"[![{language}](https://img.shields.io/badge/{shields_escape(language)}-{color}"
            f"?style={self.style}&logo={logo})]()"
        )

    def license_badge(self, spdx_id: str, *, color: str, style: Optional[str] = None) -> str:
        """Return a license badge; without a style the plain `.svg` form is used."""
        url = f"https://img.shields.io/badge/License-{shields_escape(spdx_id)}-{color}"
        url += f"?style={style}" if style else ".svg"
        return f"[![License]({url})](LICENSE)"


__all__ = ["BadgeBuilder"]
