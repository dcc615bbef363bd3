"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ReadmegenError

CONFIG_FILENAME = ".readmegen.yml"
DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "readmegen"
ENV_TOKEN_KEYS = ("READMEGEN_GITHUB_TOKEN", "GITHUB_TOKEN", "GH_TOKEN")


class ConfigError(ReadmegenError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitHubConfig:
    """Hosting API settings from .readmegen.yml."""

    api_base: str = DEFAULT_API_BASE
    token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class AnalyzerConfig:
    """Analyzer enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Where the generated README is written."""

    path: Path = Path("README.md")


@dataclass
class LoggingConfig:
    """Optional DEBUG log file, relative to the config directory."""

    file: Optional[Path] = None


@dataclass
class TemplatesConfig:
    """Directory whose `<section>.md.j2` files override the built-in templates."""

    dir: Optional[Path] = None


@dataclass
class ReadmegenConfig:
    """Represents the high-level settings defined in .readmegen.yml."""

    root: Path
    github: GitHubConfig = field(default_factory=GitHubConfig)
    analyzers: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    templates: TemplatesConfig = field(default_factory=TemplatesConfig)


def load_config(config_path: Path) -> ReadmegenConfig:
    """Load configuration from disk, falling back to defaults and the environment."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    github_data = _as_dict(data.get("github"))
    github = GitHubConfig(
        api_base=(_as_str(github_data.get("api_base")) or DEFAULT_API_BASE).rstrip("/"),
        token=_as_str(github_data.get("token")) or _first_env_value(ENV_TOKEN_KEYS),
        timeout=_as_float(github_data.get("timeout")) or DEFAULT_TIMEOUT,
        user_agent=_as_str(github_data.get("user_agent")) or DEFAULT_USER_AGENT,
    )

    analyzer_data = _as_dict(data.get("analyzers"))
    analyzers = AnalyzerConfig(enabled=_as_str_list(analyzer_data.get("enabled")))

    output_data = _as_dict(data.get("output"))
    output = OutputConfig()
    output_path = _as_str(output_data.get("path"))
    if output_path:
        output.path = Path(output_path)

    logging_data = _as_dict(data.get("logging"))
    log_file = _as_str(logging_data.get("file"))
    logging_config = LoggingConfig(file=_relative_to(root, log_file))

    templates_data = _as_dict(data.get("templates"))
    templates = TemplatesConfig(dir=_relative_to(root, _as_str(templates_data.get("dir"))))

    return ReadmegenConfig(
        root=root,
        github=github,
        analyzers=analyzers,
        output=output,
        logging=logging_config,
        templates=templates,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _relative_to(root: Path, value: Optional[str]) -> Optional[Path]:
    if not value:
        return None
    return root / Path(value).expanduser()


def _first_env_value(keys: Sequence[str]) -> str | None:
    for key in keys:
        value = os.getenv(key)
        if value:
            return value
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "AnalyzerConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "GitHubConfig",
    "LoggingConfig",
    "OutputConfig",
    "ReadmegenConfig",
    "TemplatesConfig",
    "load_config",
]
