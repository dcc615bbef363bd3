"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest

try:
    from fastapi.testclient import TestClient
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    pytest.skip("fastapi not installed", allow_module_level=True)

from readmegen.errors import InvalidRepositoryReference, NotFoundError, UpstreamError
from readmegen.github import RepositoryReference
from readmegen.models import FileEntry, TechnologyProfile
from readmegen.orchestrator import AnalysisBundle
from readmegen.service import create_app
from readmegen.synthesis.rendering import TemplateError
from tests._fixtures.listing_builder import make_metadata


class _StubOrchestrator:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.urls: list[str] = []

    def analyze(self, url: str) -> AnalysisBundle:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return AnalysisBundle(
            reference=RepositoryReference("octocat", "awesome-project_x"),
            metadata=make_metadata(),
            listing=[FileEntry("src", "src", kind="dir")],
            profile=TechnologyProfile(languages={"Python": 10}, frameworks=("FastAPI",)),
            document="# Awesome Project X\n\nÜnicode body",
        )


def _client(stub: _StubOrchestrator) -> TestClient:
    return TestClient(create_app(lambda: stub))  # type: ignore[arg-type, return-value]


def test_health_endpoint() -> None:
    response = _client(_StubOrchestrator()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_returns_bundle() -> None:
    stub = _StubOrchestrator()

    response = _client(stub).post("/analyze", json={"url": "https://github.com/octocat/awesome-project_x"})

    assert response.status_code == 200
    payload = response.json()
    assert stub.urls == ["https://github.com/octocat/awesome-project_x"]
    assert payload["profile"]["frameworks"] == ["FastAPI"]
    assert payload["metadata"]["full_name"] == "octocat/awesome-project_x"
    assert payload["listing"] == [
        {"name": "src", "path": "src", "kind": "dir", "size": None, "download_url": None}
    ]
    assert payload["document"].startswith("# Awesome Project X")


def test_readme_download_headers() -> None:
    response = _client(_StubOrchestrator()).post(
        "/readme", json={"url": "https://github.com/octocat/awesome-project_x"}
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "text/markdown; charset=utf-8"
    assert response.headers["content-disposition"] == 'attachment; filename="README.md"'
    assert response.content.decode("utf-8").endswith("Ünicode body")


@pytest.mark.parametrize(
    ("error", "status", "detail"),
    [
        (InvalidRepositoryReference("nope"), 400, "Please enter a valid GitHub repository URL"),
        (
            NotFoundError("GitHub API error: Not Found", status=404),
            404,
            "Analysis failed: GitHub API error: Not Found",
        ),
        (
            UpstreamError("GitHub API error: 403 API rate limit exceeded", status=403),
            502,
            "Analysis failed: GitHub API error: 403 API rate limit exceeded",
        ),
    ],
)
def test_errors_map_to_status_codes(error: Exception, status: int, detail: str) -> None:
    response = _client(_StubOrchestrator(error)).post("/analyze", json={"url": "x"})

    assert response.status_code == status
    assert response.json() == {"detail": detail}


def test_missing_url_is_rejected_by_validation() -> None:
    response = _client(_StubOrchestrator()).post("/analyze", json={})

    assert response.status_code == 422


def test_broken_custom_template_is_a_server_error() -> None:
    stub = _StubOrchestrator(TemplateError("Section template not found: usage_node.md.j2"))

    response = _client(stub).post("/readme", json={"url": "https://github.com/o/r"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Section template not found: usage_node.md.j2"}
