"""Technology detection over a flat repository listing."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .analyzers import Analyzer, DetectionContext, ManifestFetcher, discover_analyzers
from .analyzers.catalog import CATEGORIES, DATABASES, DEPLOYMENT, FRAMEWORKS, TOOLS
from .logging import get_logger
from .models import FileEntry, TechnologyProfile, dedupe


class TechnologyDetector:
    """Runs analyzers in a fixed order and folds their output into a profile.

    The detector keeps no per-run state, so one instance can serve concurrent
    passes for different repositories.
    """

    def __init__(self, analyzers: Optional[Iterable[Analyzer]] = None) -> None:
        self.analyzers: List[Analyzer] = (
            list(analyzers) if analyzers is not None else discover_analyzers()
        )
        self.logger = get_logger("detector")

    def detect(
        self,
        listing: Sequence[FileEntry],
        language_bytes: Mapping[str, int],
        fetch_manifest: ManifestFetcher,
    ) -> TechnologyProfile:
        """Return the technology profile for ``listing``.

        ``fetch_manifest`` is only called for manifests the analyzers need and
        must return ``""`` when content is unavailable.
        """
        context = DetectionContext(listing, fetch_manifest)
        buckets: Dict[str, List[str]] = {category: [] for category in CATEGORIES}

        for analyzer in self.analyzers:
            if not analyzer.supports(context):
                continue
            for detection in analyzer.analyze(context):
                bucket = buckets.get(detection.category)
                if bucket is None:
                    self.logger.debug(
                        "Ignoring %s from %s: unknown category %s",
                        detection.label,
                        detection.source,
                        detection.category,
                    )
                    continue
                bucket.append(detection.label)

        profile = TechnologyProfile(
            languages=dict(language_bytes),
            frameworks=dedupe(buckets[FRAMEWORKS]),
            tools=dedupe(buckets[TOOLS]),
            databases=dedupe(buckets[DATABASES]),
            deployment=dedupe(buckets[DEPLOYMENT]),
        )
        self.logger.debug(
            "Detected %d frameworks, %d tools, %d databases, %d deployment targets",
            len(profile.frameworks),
            len(profile.tools),
            len(profile.databases),
            len(profile.deployment),
        )
        return profile


__all__ = ["TechnologyDetector"]
