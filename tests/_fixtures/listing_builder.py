"""Helper utilities for constructing in-memory repository listings in tests."""

from __future__ import annotations

import textwrap
from typing import Dict, List

from readmegen.models import FileEntry, LicenseInfo, RepositoryMetadata


class ListingBuilder:
    """Collects root entries plus manifest contents served by a fake fetcher."""

    def __init__(self) -> None:
        self._entries: List[FileEntry] = []
        self._contents: Dict[str, str] = {}
        self.fetched: List[str] = []

    def file(self, name: str, content: str | None = None) -> "ListingBuilder":
        """Add a root file; ``content`` is what the fetcher returns for it."""
        self._entries.append(FileEntry(name=name, path=name, kind="file", size=0))
        if content is not None:
            self._contents[name] = textwrap.dedent(content).lstrip("\n")
        return self

    def dir(self, name: str) -> "ListingBuilder":
        self._entries.append(FileEntry(name=name, path=name, kind="dir"))
        return self

    def entry(self, name: str, path: str, kind: str = "file") -> "ListingBuilder":
        self._entries.append(FileEntry(name=name, path=path, kind=kind))
        return self

    def listing(self) -> List[FileEntry]:
        return list(self._entries)

    def fetch(self, path: str) -> str:
        """Manifest fetcher honoring the empty-string-on-failure contract."""
        self.fetched.append(path)
        return self._contents.get(path, "")


def make_metadata(**overrides: object) -> RepositoryMetadata:
    """Return realistic repository metadata with optional field overrides."""
    values: Dict[str, object] = {
        "name": "awesome-project_x",
        "full_name": "octocat/awesome-project_x",
        "html_url": "https://github.com/octocat/awesome-project_x",
        "clone_url": "https://github.com/octocat/awesome-project_x.git",
        "description": "A sample repository for tests.",
        "language": "TypeScript",
        "license": LicenseInfo(name="Apache License 2.0", spdx_id="Apache-2.0"),
        "created_at": "2023-03-05T10:00:00Z",
        "updated_at": "2024-11-20T08:30:00Z",
        "stargazers_count": 42,
        "forks_count": 7,
        "size": 1536,
    }
    values.update(overrides)
    return RepositoryMetadata(**values)  # type: ignore[arg-type]


__all__ = ["ListingBuilder", "make_metadata"]
