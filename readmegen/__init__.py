"""Infer a GitHub repository's technology stack and synthesize a README."""

from __future__ import annotations

from .detector import TechnologyDetector
from .errors import (
    InvalidRepositoryReference,
    ManifestParseWarning,
    NotFoundError,
    ReadmegenError,
    UpstreamError,
)
from .models import FileEntry, LicenseInfo, RepositoryMetadata, TechnologyProfile
from .orchestrator import AnalysisBundle, Orchestrator
from .synthesis import ReadmeSynthesizer, resolve_placeholders

__version__ = "1.0.0"

__all__ = [
    "AnalysisBundle",
    "FileEntry",
    "InvalidRepositoryReference",
    "LicenseInfo",
    "ManifestParseWarning",
    "NotFoundError",
    "Orchestrator",
    "ReadmeSynthesizer",
    "ReadmegenError",
    "RepositoryMetadata",
    "TechnologyDetector",
    "TechnologyProfile",
    "UpstreamError",
    "__version__",
    "resolve_placeholders",
]
