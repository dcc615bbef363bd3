"""Exception taxonomy shared across readmegen components."""

from __future__ import annotations


class ReadmegenError(RuntimeError):
    """Base class for failures surfaced to readmegen callers."""


class InvalidRepositoryReference(ReadmegenError, ValueError):
    """Raised when a repository URL cannot be parsed into owner/repo."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid GitHub repository URL: {value!r}")
        self.value = value


class UpstreamError(ReadmegenError):
    """Raised when the hosting API cannot serve a request."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class NotFoundError(UpstreamError):
    """Raised when a repository or path does not exist or is inaccessible."""


class ManifestParseWarning(Warning):
    """Signals malformed manifest content; logged, never propagated."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not parse {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "InvalidRepositoryReference",
    "ManifestParseWarning",
    "NotFoundError",
    "ReadmegenError",
    "UpstreamError",
]
