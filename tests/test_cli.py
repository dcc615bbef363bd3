"""CLI parser and exit behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from readmegen import cli
from readmegen.cli import _build_parser
from readmegen.errors import NotFoundError
from readmegen.models import TechnologyProfile
from readmegen.orchestrator import AnalysisBundle
from readmegen.github import RepositoryReference
from tests._fixtures.listing_builder import make_metadata


def test_cli_accepts_verbose_before_command() -> None:
    args = _build_parser().parse_args(["--verbose", "detect", "https://github.com/o/r"])
    assert args.verbose is True
    assert args.command == "detect"


def test_cli_accepts_verbose_after_command() -> None:
    args = _build_parser().parse_args(["generate", "https://github.com/o/r", "-v"])
    assert args.verbose is True
    assert args.command == "generate"


def test_generate_accepts_output_and_stdout_flags() -> None:
    args = _build_parser().parse_args(
        ["generate", "https://github.com/o/r", "--output", "out/", "--stdout"]
    )
    assert args.url == "https://github.com/o/r"
    assert args.output == "out/"
    assert args.stdout is True


def test_serve_defaults() -> None:
    args = _build_parser().parse_args(["serve"])
    assert args.host == "127.0.0.1"
    assert args.port == 8000
    assert args.verbose is False


class _StubOrchestrator:
    error: Exception | None = None

    def __init__(self, config: object = None) -> None:
        self.config = config

    def analyze(self, url: str) -> AnalysisBundle:
        if self.error is not None:
            raise self.error
        return AnalysisBundle(
            reference=RepositoryReference("octocat", "awesome-project_x"),
            metadata=make_metadata(),
            listing=[],
            profile=TechnologyProfile(frameworks=("React",)),
            document="# Awesome Project X",
        )

    def write(self, bundle: AnalysisBundle, destination: Path | None = None) -> Path:
        target = destination or Path("README.md")
        target.write_text(bundle.document, encoding="utf-8")
        return target


@pytest.fixture
def stub_orchestrator(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> type[_StubOrchestrator]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "Orchestrator", _StubOrchestrator)
    _StubOrchestrator.error = None
    return _StubOrchestrator


def test_invalid_url_exits_with_message(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["detect", "https://example.com/nope"])

    assert excinfo.value.code == 1
    assert "Please enter a valid GitHub repository URL" in capsys.readouterr().err


def test_generate_writes_readme(stub_orchestrator, tmp_path: Path, capsys) -> None:
    cli.main(["generate", "https://github.com/octocat/awesome-project_x"])

    assert (tmp_path / "README.md").read_text(encoding="utf-8") == "# Awesome Project X"
    assert "README created at README.md" in capsys.readouterr().out


def test_generate_to_stdout(stub_orchestrator, capsys) -> None:
    cli.main(["generate", "https://github.com/octocat/awesome-project_x", "--stdout"])

    assert capsys.readouterr().out == "# Awesome Project X\n"


def test_detect_prints_profile_json(stub_orchestrator, capsys) -> None:
    cli.main(["detect", "https://github.com/octocat/awesome-project_x"])

    assert '"React"' in capsys.readouterr().out


def test_upstream_failure_exits_nonzero(stub_orchestrator, capsys) -> None:
    stub_orchestrator.error = NotFoundError("GitHub API error: Not Found", status=404)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["detect", "https://github.com/octocat/missing"])

    assert excinfo.value.code == 1
    assert "Analysis failed: GitHub API error: Not Found" in capsys.readouterr().err
