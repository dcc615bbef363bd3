"""Parsing of GitHub repository URLs."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import InvalidRepositoryReference

_REPOSITORY_URL = re.compile(
    r"^https?://(?:www\.)?github\.com/(?P<owner>[^/\s?#]+)/(?P<repo>[^/\s?#]+?)(?:\.git)?/?$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class RepositoryReference:
    """Owner/repository pair identifying a GitHub repository."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def url(self) -> str:
        return f"https://github.com/{self.full_name}"


def parse_repository_url(url: str) -> RepositoryReference:
    """Return the reference for ``https://github.com/<owner>/<repo>[.git][/]``."""
    candidate = url.strip() if isinstance(url, str) else ""
    match = _REPOSITORY_URL.match(candidate)
    if not match:
        raise InvalidRepositoryReference(url)
    repo = match.group("repo")
    if repo in {".", ".."} or not repo:
        raise InvalidRepositoryReference(url)
    return RepositoryReference(owner=match.group("owner"), repo=repo)


__all__ = ["RepositoryReference", "parse_repository_url"]
