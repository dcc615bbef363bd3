"""GitHub collaborator: URL parsing and REST access."""

from __future__ import annotations

from .client import GitHubClient, HTTPResponse, Transport
from .references import RepositoryReference, parse_repository_url

__all__ = [
    "GitHubClient",
    "HTTPResponse",
    "RepositoryReference",
    "Transport",
    "parse_repository_url",
]
