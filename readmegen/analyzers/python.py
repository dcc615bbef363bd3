"""Python manifest analyzer implementation."""

from __future__ import annotations

from typing import Iterable, List

from .base import Analyzer, DetectionContext
from .catalog import (
    PYTHON_KEYWORDS,
    PYTHON_MANIFESTS,
    PYTHON_PACKAGE_TOOL,
    PYTHON_REQUIREMENTS,
    TOOLS,
)
from ..models import Detection


class PythonManifestAnalyzer(Analyzer):
    """Keyword matching against requirements.txt."""

    name = "python"

    def supports(self, context: DetectionContext) -> bool:
        return context.has_file(*PYTHON_MANIFESTS)

    def analyze(self, context: DetectionContext) -> Iterable[Detection]:
        detections: List[Detection] = [Detection(PYTHON_PACKAGE_TOOL, TOOLS, self.name)]
        if not context.has_file(PYTHON_REQUIREMENTS):
            return detections

        content = context.read_manifest(PYTHON_REQUIREMENTS)
        for signature in PYTHON_KEYWORDS:
            if signature.matches(content):
                detections.append(Detection(signature.label, signature.category, self.name))
        return detections
