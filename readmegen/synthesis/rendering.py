"""Jinja2 rendering of the long-form README section bodies."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound
from jinja2 import TemplateError as JinjaTemplateError

from ..errors import ReadmegenError
from .constants import CLONE_URL_PLACEHOLDER, REPO_NAME_PLACEHOLDER

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")
TEMPLATE_SUFFIX = ".md.j2"


class TemplateError(ReadmegenError):
    """Raised when a section template is missing or fails to render."""


class SectionRenderer:
    """Renders ``<name>.md.j2`` templates; a custom directory shadows the defaults."""

    def __init__(self, templates_dir: Optional[Path] = None) -> None:
        directories: List[str] = []
        if templates_dir is not None:
            directories.append(str(templates_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        self.templates_dir = templates_dir
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, name: str, /, **context: Any) -> str:
        try:
            template = self._env.get_template(f"{name}{TEMPLATE_SUFFIX}")
            return template.render(**context)
        except TemplateNotFound as exc:
            raise TemplateError(f"Section template not found: {exc.name}") from exc
        except JinjaTemplateError as exc:
            raise TemplateError(f"Failed to render {name}{TEMPLATE_SUFFIX}: {exc}") from exc

    def render_installation(self, name: str, **context: Any) -> str:
        """Render an installation variant with the placeholder clone step."""
        clone_step = self.render(
            "clone_step",
            clone_url=CLONE_URL_PLACEHOLDER,
            repo_name=REPO_NAME_PLACEHOLDER,
        )
        return self.render(name, clone_step=clone_step, **context)


DEFAULT_RENDERER = SectionRenderer()


__all__ = ["DEFAULT_RENDERER", "SectionRenderer", "TemplateError"]
