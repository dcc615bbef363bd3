"""Core data models shared across readmegen components."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

DIRECTORY_KINDS = frozenset({"dir", "directory"})


@dataclass(frozen=True)
class LicenseInfo:
    """License name and SPDX identifier reported by the hosting API."""

    name: str
    spdx_id: str


@dataclass(frozen=True)
class RepositoryMetadata:
    """Read-only repository facts consumed by detection and synthesis."""

    name: str
    full_name: str
    html_url: str
    clone_url: str
    description: Optional[str] = None
    language: Optional[str] = None
    license: Optional[LicenseInfo] = None
    created_at: str = ""
    updated_at: str = ""
    stargazers_count: int = 0
    forks_count: int = 0
    size: int = 0
    default_branch: str = "main"
    topics: Tuple[str, ...] = ()

    @property
    def owner(self) -> str:
        return self.full_name.split("/", 1)[0]

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "RepositoryMetadata":
        """Build metadata from a ``GET /repos/{owner}/{repo}`` payload."""
        license_data = payload.get("license")
        license_info = None
        if isinstance(license_data, Mapping) and license_data.get("name"):
            license_info = LicenseInfo(
                name=str(license_data["name"]),
                spdx_id=str(license_data.get("spdx_id") or ""),
            )
        topics = payload.get("topics") or []
        return cls(
            name=str(payload.get("name") or ""),
            full_name=str(payload.get("full_name") or ""),
            html_url=str(payload.get("html_url") or ""),
            clone_url=str(payload.get("clone_url") or ""),
            description=payload.get("description") or None,
            language=payload.get("language") or None,
            license=license_info,
            created_at=str(payload.get("created_at") or ""),
            updated_at=str(payload.get("updated_at") or ""),
            stargazers_count=_as_int(payload.get("stargazers_count")),
            forks_count=_as_int(payload.get("forks_count")),
            size=_as_int(payload.get("size")),
            default_branch=str(payload.get("default_branch") or "main"),
            topics=tuple(str(topic) for topic in topics if isinstance(topic, str)),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["topics"] = list(self.topics)
        return data


@dataclass(frozen=True)
class FileEntry:
    """A single entry of a repository directory listing."""

    name: str
    path: str
    kind: str = "file"
    size: Optional[int] = None
    download_url: Optional[str] = None

    @property
    def is_dir(self) -> bool:
        return self.kind in DIRECTORY_KINDS

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "FileEntry":
        """Build an entry from one item of a ``contents`` listing."""
        name = str(payload.get("name") or "")
        size = payload.get("size")
        return cls(
            name=name,
            path=str(payload.get("path") or name),
            kind=str(payload.get("type") or "file"),
            size=size if isinstance(size, int) else None,
            download_url=payload.get("download_url") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Detection:
    """A technology label emitted by an analyzer for one category."""

    label: str
    category: str
    source: str


@dataclass(frozen=True)
class TechnologyProfile:
    """Deduplicated, categorized output of a detection pass."""

    languages: Mapping[str, int] = field(default_factory=dict)
    frameworks: Tuple[str, ...] = ()
    tools: Tuple[str, ...] = ()
    databases: Tuple[str, ...] = ()
    deployment: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "languages": dict(self.languages),
            "frameworks": list(self.frameworks),
            "tools": list(self.tools),
            "databases": list(self.databases),
            "deployment": list(self.deployment),
        }


@dataclass(frozen=True)
class DocumentSection:
    """Rendered README block; an empty body means the section is omitted."""

    key: str
    title: str
    body: str

    @property
    def is_empty(self) -> bool:
        return not self.body.strip()


def dedupe(labels: Iterable[str]) -> Tuple[str, ...]:
    """Remove duplicates while keeping first-seen order."""
    return tuple(dict.fromkeys(labels))


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return 0
    return 0


__all__ = [
    "Detection",
    "DocumentSection",
    "FileEntry",
    "LicenseInfo",
    "RepositoryMetadata",
    "TechnologyProfile",
    "dedupe",
]
