"""Presence-only analyzers for build, CI, container, and schema markers."""

from __future__ import annotations

from typing import Iterable, Tuple

from .base import Analyzer, DetectionContext
from .catalog import BUILD_MARKERS, DATABASE_MARKERS, MarkerSignature
from ..models import Detection


def marker_present(signature: MarkerSignature, context: DetectionContext) -> bool:
    if signature.names and context.has_file(*signature.names):
        return True
    if signature.suffixes and context.has_suffix(*signature.suffixes):
        return True
    if signature.path_markers and context.path_contains(*signature.path_markers):
        return True
    return False


class _MarkerAnalyzer(Analyzer):
    signatures: Tuple[MarkerSignature, ...] = ()

    def supports(self, context: DetectionContext) -> bool:
        return bool(context.listing)

    def analyze(self, context: DetectionContext) -> Iterable[Detection]:
        return [
            Detection(signature.label, signature.category, self.name)
            for signature in self.signatures
            if marker_present(signature, context)
        ]


class BuildMarkerAnalyzer(_MarkerAnalyzer):
    """Detects build tools, toolchains, CI systems, and container files."""

    name = "markers"
    signatures = BUILD_MARKERS


class DatabaseFileAnalyzer(_MarkerAnalyzer):
    """Detects SQL scripts and schema files independent of any manifest."""

    name = "databases"
    signatures = DATABASE_MARKERS
