from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, List

import pytest

from readmegen.config import OutputConfig, ReadmegenConfig
from readmegen.errors import InvalidRepositoryReference, NotFoundError
from readmegen.github import RepositoryReference
from readmegen.models import FileEntry, RepositoryMetadata
from readmegen.orchestrator import Orchestrator
from tests._fixtures.listing_builder import ListingBuilder, make_metadata


class _FakeClient:
    def __init__(self, listing: ListingBuilder, metadata: RepositoryMetadata | None = None) -> None:
        self._builder = listing
        self._metadata = metadata or make_metadata()
        self.references: List[RepositoryReference] = []
        self.threads: set[str] = set()
        self._lock = threading.Lock()

    def _record(self, reference: RepositoryReference) -> None:
        with self._lock:
            self.references.append(reference)
            self.threads.add(threading.current_thread().name)

    def fetch_metadata(self, reference: RepositoryReference) -> RepositoryMetadata:
        self._record(reference)
        return self._metadata

    def fetch_listing(self, reference: RepositoryReference) -> List[FileEntry]:
        self._record(reference)
        return self._builder.listing()

    def fetch_language_bytes(self, reference: RepositoryReference) -> Dict[str, int]:
        self._record(reference)
        return {"TypeScript": 750, "JavaScript": 250}

    def fetch_file_content(self, reference: RepositoryReference, path: str) -> str:
        return self._builder.fetch(path)


class _MissingClient(_FakeClient):
    def fetch_metadata(self, reference: RepositoryReference) -> RepositoryMetadata:
        raise NotFoundError("GitHub API error: Not Found", status=404)


@pytest.fixture
def config(tmp_path: Path) -> ReadmegenConfig:
    return ReadmegenConfig(root=tmp_path, output=OutputConfig(path=tmp_path / "out" / "README.md"))


@pytest.fixture
def node_project(listing_builder: ListingBuilder) -> ListingBuilder:
    return (
        listing_builder.file(
            "package.json",
            '{"dependencies": {"react": "18", "express": "4"}, "devDependencies": {"jest": "29"}}',
        )
        .file("pnpm-lock.yaml")
        .dir("src")
    )


def test_analyze_runs_full_pipeline(config: ReadmegenConfig, node_project: ListingBuilder) -> None:
    client = _FakeClient(node_project)
    orchestrator = Orchestrator(client=client, config=config)  # type: ignore[arg-type]

    bundle = orchestrator.analyze("https://github.com/octocat/awesome-project_x.git")

    assert bundle.reference == RepositoryReference("octocat", "awesome-project_x")
    assert client.references == [bundle.reference] * 3
    assert all(name.startswith("readmegen-fetch") for name in client.threads)
    assert bundle.profile.frameworks == ("React", "Express.js")
    assert bundle.profile.tools == ("Jest",)
    assert bundle.document.startswith("# Awesome Project X")
    assert "pnpm install" in bundle.document
    assert "git clone https://github.com/octocat/awesome-project_x.git" in bundle.document
    assert "REPO_URL" not in bundle.document
    assert "REPO_NAME" not in bundle.document


def test_bundle_serializes_for_clients(config: ReadmegenConfig, node_project: ListingBuilder) -> None:
    bundle = Orchestrator(client=_FakeClient(node_project), config=config).analyze(  # type: ignore[arg-type]
        "https://github.com/octocat/awesome-project_x"
    )

    payload = bundle.to_dict()

    assert set(payload) == {"metadata", "listing", "profile", "document"}
    assert payload["profile"]["languages"] == {"TypeScript": 750, "JavaScript": 250}
    assert payload["listing"][-1]["kind"] == "dir"


def test_invalid_url_never_reaches_client(config: ReadmegenConfig, listing_builder: ListingBuilder) -> None:
    client = _FakeClient(listing_builder)

    with pytest.raises(InvalidRepositoryReference):
        Orchestrator(client=client, config=config).analyze("octocat/awesome")  # type: ignore[arg-type]
    assert client.references == []


def test_upstream_errors_propagate(config: ReadmegenConfig, listing_builder: ListingBuilder) -> None:
    orchestrator = Orchestrator(client=_MissingClient(listing_builder), config=config)  # type: ignore[arg-type]

    with pytest.raises(NotFoundError):
        orchestrator.analyze("https://github.com/octocat/missing")


def test_write_uses_configured_output(config: ReadmegenConfig, node_project: ListingBuilder) -> None:
    orchestrator = Orchestrator(client=_FakeClient(node_project), config=config)  # type: ignore[arg-type]
    bundle = orchestrator.analyze("https://github.com/octocat/awesome-project_x")

    path = orchestrator.write(bundle)

    assert path == config.output.path
    assert path.read_text(encoding="utf-8") == bundle.document


def test_write_into_directory_names_file_readme(
    config: ReadmegenConfig, node_project: ListingBuilder, tmp_path: Path
) -> None:
    orchestrator = Orchestrator(client=_FakeClient(node_project), config=config)  # type: ignore[arg-type]
    bundle = orchestrator.analyze("https://github.com/octocat/awesome-project_x")
    target_dir = tmp_path / "export"
    target_dir.mkdir()

    path = orchestrator.write(bundle, target_dir)

    assert path == target_dir / "README.md"
    assert "🚀 Installation" in path.read_text(encoding="utf-8")


def test_enabled_analyzers_come_from_config(tmp_path: Path, node_project: ListingBuilder) -> None:
    config = ReadmegenConfig(root=tmp_path)
    config.analyzers.enabled = ["markers"]

    bundle = Orchestrator(client=_FakeClient(node_project), config=config).analyze(  # type: ignore[arg-type]
        "https://github.com/octocat/awesome-project_x"
    )

    assert bundle.profile.frameworks == ()
    assert node_project.fetched == []
