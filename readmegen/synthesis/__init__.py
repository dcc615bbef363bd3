"""README synthesis: section builders, badges, and placeholder resolution."""

from __future__ import annotations

from .constants import CLONE_URL_PLACEHOLDER, REPO_NAME_PLACEHOLDER, SECTION_ORDER
from .placeholders import resolve_placeholders
from .synthesizer import ReadmeSynthesizer

__all__ = [
    "CLONE_URL_PLACEHOLDER",
    "REPO_NAME_PLACEHOLDER",
    "ReadmeSynthesizer",
    "SECTION_ORDER",
    "resolve_placeholders",
]
