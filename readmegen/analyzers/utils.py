"""Shared helper utilities for analyzer implementations."""

from __future__ import annotations

import json
from typing import Iterable, Set

from ..errors import ManifestParseWarning
from ..logging import get_logger
from .catalog import DEFAULT_PACKAGE_MANAGER, LOCKFILES

_NODE_DEPENDENCY_GROUPS = ("dependencies", "devDependencies")
_logger = get_logger("analyzers.node")


def parse_node_dependencies(content: str, path: str = "package.json") -> Set[str]:
    """Return runtime and dev dependency names merged into one lookup set.

    Unreadable JSON raises :class:`ManifestParseWarning`. A group that is not
    an object is logged and skipped so the remaining groups still count.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestParseWarning(path, f"invalid JSON ({exc.msg})") from exc
    if not isinstance(data, dict):
        raise ManifestParseWarning(path, "top-level value is not an object")

    names: Set[str] = set()
    for group in _NODE_DEPENDENCY_GROUPS:
        deps = data.get(group)
        if deps is None:
            continue
        if not isinstance(deps, dict):
            _logger.warning("%s", ManifestParseWarning(path, f"'{group}' is not an object"))
            continue
        names.update(str(name) for name in deps)
    return names


def detect_package_manager(file_names: Iterable[str]) -> str:
    """Infer the Node package manager from lockfiles in the listing."""
    lowered = {name.lower() for name in file_names}
    for lockfile, manager in LOCKFILES:
        if lockfile in lowered:
            return manager
    return DEFAULT_PACKAGE_MANAGER
