"""Minimal GitHub REST client used to collect repository signals."""

from __future__ import annotations

import base64
import binascii
import http.client
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from ..config import DEFAULT_API_BASE, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, GitHubConfig
from ..errors import NotFoundError, UpstreamError
from ..logging import get_logger
from ..models import FileEntry, RepositoryMetadata
from .references import RepositoryReference


@dataclass
class HTTPResponse:
    """Status and raw body returned by a transport."""

    status: int
    body: bytes
    reason: str = ""


Transport = Callable[[Request, float], HTTPResponse]


def urllib_transport(request: Request, timeout: float) -> HTTPResponse:
    """Send ``request`` with urllib; HTTP errors become responses, not exceptions."""
    try:
        with urlopen(request, timeout=timeout) as response:  # type: ignore[arg-type]
            return HTTPResponse(status=response.status, body=response.read())
    except HTTPError as exc:
        try:
            body = exc.read() or b""
        except (OSError, http.client.HTTPException):
            body = b""
        return HTTPResponse(status=exc.code, body=body, reason=str(exc.reason))
    except URLError as exc:
        raise UpstreamError(f"GitHub API request failed: {exc.reason}") from exc
    except http.client.HTTPException as exc:
        raise UpstreamError(f"GitHub API returned a malformed response: {exc!r}") from exc
    except OSError as exc:
        raise UpstreamError(f"GitHub API request failed: {exc}") from exc


class GitHubClient:
    """Fetches metadata, listings, language bytes, and file contents."""

    def __init__(
        self,
        *,
        api_base: str = DEFAULT_API_BASE,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Transport | None = None,
    ) -> None:
        self.api_base = api_base.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport or urllib_transport
        self.logger = get_logger("github")

    @classmethod
    def from_config(
        cls, config: GitHubConfig, *, transport: Transport | None = None
    ) -> "GitHubClient":
        return cls(
            api_base=config.api_base,
            token=config.token,
            timeout=config.timeout,
            user_agent=config.user_agent,
            transport=transport,
        )

    def fetch_metadata(self, reference: RepositoryReference) -> RepositoryMetadata:
        payload = self._get_json(self._repo_path(reference))
        if not isinstance(payload, Mapping):
            raise UpstreamError(f"Unexpected repository payload for {reference.full_name}")
        return RepositoryMetadata.from_api(payload)

    def fetch_listing(self, reference: RepositoryReference, path: str = "") -> List[FileEntry]:
        """Return the immediate children of ``path`` (the root by default)."""
        payload = self._get_json(self._contents_path(reference, path))
        if not isinstance(payload, list):
            raise UpstreamError(f"'{path or '/'}' in {reference.full_name} is not a directory")
        return [FileEntry.from_api(item) for item in payload if isinstance(item, Mapping)]

    def fetch_language_bytes(self, reference: RepositoryReference) -> Dict[str, int]:
        payload = self._get_json(f"{self._repo_path(reference)}/languages")
        if not isinstance(payload, Mapping):
            raise UpstreamError(f"Unexpected languages payload for {reference.full_name}")
        return {
            str(language): size
            for language, size in payload.items()
            if isinstance(size, int) and not isinstance(size, bool)
        }

    def fetch_file_content(self, reference: RepositoryReference, path: str) -> str:
        """Return decoded text for ``path``; any failure yields ``""``."""
        try:
            payload = self._get_json(self._contents_path(reference, path))
        except UpstreamError as exc:
            self.logger.warning("Could not fetch %s: %s", path, exc)
            return ""

        content = payload.get("content") if isinstance(payload, Mapping) else None
        if not isinstance(content, str):
            self.logger.warning("Could not fetch %s: file content not available", path)
            return ""
        try:
            return base64.b64decode(content.replace("\n", "")).decode("utf-8")
        except (binascii.Error, ValueError) as exc:
            self.logger.warning("Could not decode %s: %s", path, exc)
            return ""

    def _repo_path(self, reference: RepositoryReference) -> str:
        return f"/repos/{quote(reference.owner, safe='')}/{quote(reference.repo, safe='')}"

    def _contents_path(self, reference: RepositoryReference, path: str) -> str:
        return f"{self._repo_path(reference)}/contents/{quote(path.strip('/'), safe='/')}"

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_json(self, path: str) -> Any:
        url = f"{self.api_base}{path}"
        self.logger.debug("GET %s", url)
        request = Request(url, headers=self._headers(), method="GET")
        response = self._transport(request, self.timeout)

        if response.status == 404:
            raise NotFoundError(f"GitHub API error: Not Found ({path})", status=404)
        if response.status >= 400:
            detail = _error_message(response)
            raise UpstreamError(
                f"GitHub API error: {response.status} {detail}".rstrip(),
                status=response.status,
            )

        try:
            return json.loads(response.body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise UpstreamError(f"GitHub API returned invalid JSON for {path}") from exc


def _error_message(response: HTTPResponse) -> str:
    try:
        payload = json.loads(response.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return response.reason
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return response.reason


__all__ = ["GitHubClient", "HTTPResponse", "Transport", "urllib_transport"]
