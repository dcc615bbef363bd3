"""Detection analyzers and plugin discovery."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterator, List, Sequence, Tuple

from .base import Analyzer, DetectionContext, ManifestFetcher
from .markers import BuildMarkerAnalyzer, DatabaseFileAnalyzer
from .node import NodeManifestAnalyzer
from .python import PythonManifestAnalyzer

_ENTRY_POINT_GROUP = "readmegen.analyzers"

AnalyzerFactory = Callable[[], Analyzer]

# Evaluation order fixes first-seen order within each category.
_BUILTIN_FACTORIES: Dict[str, AnalyzerFactory] = {
    "node": NodeManifestAnalyzer,
    "python": PythonManifestAnalyzer,
    "markers": BuildMarkerAnalyzer,
    "databases": DatabaseFileAnalyzer,
}


def discover_analyzers(enabled: Sequence[str] | None = None) -> List[Analyzer]:
    """Instantiate built-in analyzers, then plugins, optionally filtered by name.

    Names are case-insensitive. A plugin may not shadow a built-in name.
    Requesting a name nobody provides raises ``ValueError``.
    """
    wanted = {name.lower() for name in enabled} if enabled is not None else None

    analyzers: List[Analyzer] = []
    provided: set[str] = set()
    for name, factory in _candidate_factories():
        if name in provided:
            continue
        provided.add(name)
        if wanted is not None and name not in wanted:
            continue
        analyzers.append(_instantiate(name, factory))

    if wanted is not None and wanted - provided:
        missing = ", ".join(sorted(wanted - provided))
        raise ValueError(f"Unknown analyzers requested: {missing}")
    return analyzers


def _candidate_factories() -> Iterator[Tuple[str, AnalyzerFactory]]:
    yield from _BUILTIN_FACTORIES.items()
    for entry in metadata.entry_points().select(group=_ENTRY_POINT_GROUP):
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - depends on installed plugins
            raise RuntimeError(f"Failed to load analyzer plugin '{entry.name}': {exc}") from exc
        yield entry.name.lower(), _plugin_factory(loaded)


def _plugin_factory(obj: object) -> AnalyzerFactory:
    if isinstance(obj, Analyzer):
        return lambda: obj
    if callable(obj):
        return obj  # type: ignore[return-value]
    raise TypeError("Analyzer plugin must be an Analyzer, Analyzer subclass, or factory")


def _instantiate(name: str, factory: AnalyzerFactory) -> Analyzer:
    instance = factory()
    if not isinstance(instance, Analyzer):
        raise TypeError(f"Analyzer factory for '{name}' did not return an Analyzer instance")
    return instance


__all__ = [
    "Analyzer",
    "AnalyzerFactory",
    "BuildMarkerAnalyzer",
    "DatabaseFileAnalyzer",
    "DetectionContext",
    "ManifestFetcher",
    "NodeManifestAnalyzer",
    "PythonManifestAnalyzer",
    "discover_analyzers",
]
