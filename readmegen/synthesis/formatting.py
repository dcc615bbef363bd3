"""Formatting helpers used by section builders."""

from __future__ import annotations

import math
import re
from datetime import datetime
from urllib.parse import quote

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")
_WORD_START = re.compile(r"\b\w")


def title_from_name(name: str) -> str:
    """Turn ``my-cool_repo`` into ``My Cool Repo``."""
    spaced = name.replace("-", " ").replace("_", " ")
    return _WORD_START.sub(lambda match: match.group(0).upper(), spaced)


def format_bytes(size: int) -> str:
    """Render a byte count with 1024-based units and two decimals."""
    if size <= 0:
        return "0 Bytes"
    index = int(math.floor(math.log(size) / math.log(1024)))
    # log() can land just below an exact power of 1024.
    if size >= 1024 ** (index + 1):
        index += 1
    index = min(index, len(_SIZE_UNITS) - 1)
    value = size / math.pow(1024, index)
    return f"{value:.2f} {_SIZE_UNITS[index]}"


def format_date(timestamp: str) -> str:
    """Render an ISO-8601 timestamp as ``M/D/YYYY``."""
    if not timestamp:
        return "Unknown"
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def format_percentage(part: int, total: int) -> str:
    if total <= 0:
        return "0.0"
    return f"{part / total * 100:.1f}"


def shields_escape(value: str) -> str:
    """Escape a static-badge path segment for img.shields.io."""
    escaped = value.replace("-", "--").replace("_", "__").replace(" ", "_")
    return quote(escaped, safe="")


def github_anchor(title: str) -> str:
    """Return the fragment GitHub generates for a heading."""
    slug = title.strip().lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    return re.sub(r"\s", "-", slug)
