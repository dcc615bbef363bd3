"""Node.js manifest analyzer implementation."""

from __future__ import annotations

from typing import Iterable, List

from .base import Analyzer, DetectionContext
from .catalog import NODE_MANIFEST, NODE_SIGNATURES
from .utils import parse_node_dependencies
from ..errors import ManifestParseWarning
from ..logging import get_logger
from ..models import Detection


class NodeManifestAnalyzer(Analyzer):
    """Maps package.json dependencies to frameworks, tools, and databases."""

    name = "node"

    def __init__(self) -> None:
        self.logger = get_logger("analyzers.node")

    def supports(self, context: DetectionContext) -> bool:
        return context.has_file(NODE_MANIFEST)

    def analyze(self, context: DetectionContext) -> Iterable[Detection]:
        content = context.read_manifest(NODE_MANIFEST)
        if not content.strip():
            self.logger.debug("%s is empty or unavailable; skipping", NODE_MANIFEST)
            return []

        path = context.path_for(NODE_MANIFEST) or NODE_MANIFEST
        try:
            dependencies = parse_node_dependencies(content, path)
        except ManifestParseWarning as warning:
            self.logger.warning("%s", warning)
            return []

        detections: List[Detection] = []
        for signature in NODE_SIGNATURES:
            if signature.matches(dependencies):
                detections.append(Detection(signature.label, signature.category, self.name))
        return detections
