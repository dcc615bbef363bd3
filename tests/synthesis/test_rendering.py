from __future__ import annotations

from pathlib import Path

import pytest

from readmegen.models import TechnologyProfile
from readmegen.synthesis import ReadmeSynthesizer
from readmegen.synthesis.rendering import DEFAULT_TEMPLATES_DIR, SectionRenderer, TemplateError
from tests._fixtures.listing_builder import make_metadata


def test_rendered_template_drops_trailing_newline() -> None:
    renderer = SectionRenderer()

    scripts = renderer.render("scripts")

    assert scripts.startswith("| Script | Description |")
    assert scripts.endswith("Run `npm run` to see all available scripts.")


def test_installation_embeds_placeholder_clone_step() -> None:
    body = SectionRenderer().render_installation("installation_generic")

    assert body.count("git clone REPO_URL") == 1
    assert "   cd REPO_NAME\n   ```\n\n2. **Follow" in body


def test_custom_directory_shadows_builtin_templates(tmp_path: Path) -> None:
    (tmp_path / "contributing.md.j2").write_text("Open an issue first.\n", encoding="utf-8")
    synthesizer = ReadmeSynthesizer(renderer=SectionRenderer(tmp_path))

    document = synthesizer.synthesize(make_metadata(), TechnologyProfile(), [])

    assert "## 🤝 Contributing\n\nOpen an issue first." in document
    assert "Made with ❤️ by the development team" in document


def test_missing_template_raises_template_error(tmp_path: Path) -> None:
    with pytest.raises(TemplateError, match="not found"):
        SectionRenderer(tmp_path).render("changelog")


def test_undefined_variable_raises_template_error(tmp_path: Path) -> None:
    (tmp_path / "license.md.j2").write_text("{{ licence_name }}\n", encoding="utf-8")

    with pytest.raises(TemplateError, match="license.md.j2"):
        SectionRenderer(tmp_path).render("license", name="MIT", badge="")


def test_builtin_templates_are_packaged() -> None:
    names = {path.name for path in DEFAULT_TEMPLATES_DIR.glob("*.md.j2")}

    assert {"clone_step.md.j2", "contact.md.j2", "installation_node.md.j2"} <= names
