"""Base classes for detection analyzers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..errors import UpstreamError
from ..logging import get_logger
from ..models import Detection, FileEntry

ManifestFetcher = Callable[[str], str]

_logger = get_logger("analyzers")


class DetectionContext:
    """Case-normalized view of a listing plus memoized manifest access."""

    def __init__(self, listing: Sequence[FileEntry], fetch_manifest: ManifestFetcher) -> None:
        self.listing: Tuple[FileEntry, ...] = tuple(listing)
        self.names: List[str] = [entry.name.lower() for entry in self.listing]
        self.paths: List[str] = [entry.path.lower() for entry in self.listing]
        self._name_set = frozenset(self.names)
        self._fetch_manifest = fetch_manifest
        self._contents: Dict[str, str] = {}

    def has_file(self, *names: str) -> bool:
        """Return True when any of the lower-cased ``names`` is in the listing."""
        return any(name in self._name_set for name in names)

    def has_suffix(self, *suffixes: str) -> bool:
        return any(name.endswith(suffixes) for name in self.names)

    def path_contains(self, *markers: str) -> bool:
        return any(marker in path for path in self.paths for marker in markers)

    def path_for(self, name: str) -> Optional[str]:
        """Return the listed path for a lower-cased file name."""
        for entry, lowered in zip(self.listing, self.names):
            if lowered == name:
                return entry.path
        return None

    def read_manifest(self, name: str) -> str:
        """Fetch a manifest once per pass; missing or failed fetches yield ``""``."""
        if name in self._contents:
            return self._contents[name]
        path = self.path_for(name)
        content = ""
        if path is not None:
            try:
                content = self._fetch_manifest(path) or ""
            except UpstreamError as exc:
                _logger.warning("Could not fetch %s: %s", path, exc)
                content = ""
        self._contents[name] = content
        return content


class Analyzer(ABC):
    """Contract for analyzers that emit detections from a listing."""

    name: str = "analyzer"

    @abstractmethod
    def supports(self, context: DetectionContext) -> bool:
        """Return True when this analyzer should run for the repository."""

    @abstractmethod
    def analyze(self, context: DetectionContext) -> Iterable[Detection]:
        """Produce detections in first-seen order."""
