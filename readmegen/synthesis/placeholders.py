"""Final substitution of clone URL and repository name tokens."""

from __future__ import annotations

from .constants import CLONE_URL_PLACEHOLDER, REPO_NAME_PLACEHOLDER


def resolve_placeholders(document: str, clone_url: str, repo_name: str) -> str:
    """Replace every ``REPO_URL`` and ``REPO_NAME`` token with literal values."""
    resolved = document.replace(CLONE_URL_PLACEHOLDER, clone_url)
    return resolved.replace(REPO_NAME_PLACEHOLDER, repo_name)


__all__ = ["resolve_placeholders"]
