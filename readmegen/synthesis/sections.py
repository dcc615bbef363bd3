"""Section builders for synthesized README documents.

Every builder is a pure function of :class:`SectionInputs` and returns the
rendered markdown for its section, or ``""`` when the section has nothing to
say. Inclusion never depends on another section's output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional, Sequence, Tuple

from ..analyzers.catalog import NODE_MANIFEST
from ..analyzers.utils import detect_package_manager
from ..models import FileEntry, RepositoryMetadata, TechnologyProfile
from .badges import BadgeBuilder
from .constants import (
    API_FILE_MARKERS,
    API_FRAMEWORK_MARKERS,
    DEFAULT_ABOUT,
    DEFAULT_API_PORT,
    DEFAULT_DESCRIPTION,
    DEFAULT_LICENSE_ID,
    DEFAULT_LICENSE_NAME,
    DIRECTORY_GLYPH,
    DJANGO_PORT,
    FALLBACK_FEATURES,
    FILE_GLYPH,
    GRADLE_MANIFESTS,
    MAVEN_MANIFESTS,
    PROJECT_TYPE_BY_FILE,
    PROJECT_TYPE_BY_FRAMEWORKS,
    PYTHON_INSTALL_MANIFESTS,
    SECTION_TITLES,
    TREE_BRANCH,
    TREE_LAST,
)
from .formatting import format_bytes, format_date, format_percentage, title_from_name
from .rendering import DEFAULT_RENDERER, SectionRenderer
from .toc import TableOfContentsBuilder


@dataclass(frozen=True)
class SectionInputs:
    """Everything a section builder may read."""

    metadata: RepositoryMetadata
    profile: TechnologyProfile
    listing: Tuple[FileEntry, ...]
    renderer: SectionRenderer = field(default=DEFAULT_RENDERER, compare=False, repr=False)
    names: FrozenSet[str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", frozenset(entry.name.lower() for entry in self.listing))

    @classmethod
    def build(
        cls,
        metadata: RepositoryMetadata,
        profile: TechnologyProfile,
        listing: Sequence[FileEntry],
        renderer: SectionRenderer | None = None,
    ) -> "SectionInputs":
        return cls(
            metadata=metadata,
            profile=profile,
            listing=tuple(listing),
            renderer=renderer or DEFAULT_RENDERER,
        )

    def has_file(self, *names: str) -> bool:
        return any(name in self.names for name in names)


def _heading(key: str) -> str:
    return f"## {SECTION_TITLES[key]}"


# Predicates shared by the table of contents and the gated sections.


def has_package_manifest(inputs: SectionInputs) -> bool:
    return inputs.has_file(NODE_MANIFEST)


def has_python_manifest(inputs: SectionInputs) -> bool:
    return inputs.has_file(*PYTHON_INSTALL_MANIFESTS)


def has_tech_stack(inputs: SectionInputs) -> bool:
    profile = inputs.profile
    return bool(
        profile.languages
        or profile.frameworks
        or profile.tools
        or profile.databases
        or profile.deployment
    )


def has_structure(inputs: SectionInputs) -> bool:
    return bool(inputs.listing)


def should_include_api_docs(inputs: SectionInputs) -> bool:
    if any(
        marker in framework
        for framework in inputs.profile.frameworks
        for marker in API_FRAMEWORK_MARKERS
    ):
        return True
    for entry in inputs.listing:
        name = entry.name.lower()
        path = entry.path.lower()
        if any(marker in name or marker in path for marker in API_FILE_MARKERS):
            return True
    return False


def detect_project_type(inputs: SectionInputs) -> Optional[str]:
    """Return a single best-effort project label, most specific rule first."""
    frameworks = set(inputs.profile.frameworks)
    for required, label in PROJECT_TYPE_BY_FRAMEWORKS:
        if frameworks.issuperset(required):
            return label
    for file_name, label in PROJECT_TYPE_BY_FILE:
        if inputs.has_file(file_name):
            return label
    return None


# Builders, in document order.


def build_header(inputs: SectionInputs) -> str:
    title = title_from_name(inputs.metadata.name)
    description = inputs.metadata.description or DEFAULT_DESCRIPTION
    return f"# {title}\n\n{description}"


def build_badges(inputs: SectionInputs) -> str:
    return BadgeBuilder().build(inputs.metadata, inputs.profile)


def build_about(inputs: SectionInputs) -> str:
    metadata = inputs.metadata
    lines = [_heading("about"), "", metadata.description or DEFAULT_ABOUT, ""]

    project_type = detect_project_type(inputs)
    if project_type:
        lines.extend([f"**Project Type:** {project_type}", ""])

    lines.append(f"**Created:** {format_date(metadata.created_at)}")
    lines.append(f"**Last Updated:** {format_date(metadata.updated_at)}")
    lines.append(f"**Repository Size:** {format_bytes(metadata.size * 1024)}")
    return "\n".join(lines)


def build_table_of_contents(inputs: SectionInputs) -> str:
    return TableOfContentsBuilder().build(
        include_api_docs=should_include_api_docs(inputs),
        include_scripts=has_package_manifest(inputs),
        include_tech_stack=has_tech_stack(inputs),
        include_structure=has_structure(inputs),
    )


_FeatureRule = Tuple[Callable[[SectionInputs], bool], Callable[[SectionInputs], str]]

_FEATURE_RULES: Tuple[_FeatureRule, ...] = (
    (
        lambda i: "React" in i.profile.frameworks,
        lambda i: "⚛️ Built with React for dynamic user interfaces",
    ),
    (
        lambda i: "React" in i.profile.frameworks and "TypeScript" in i.profile.tools,
        lambda i: "📘 Full TypeScript support for type safety",
    ),
    (
        lambda i: "Next.js" in i.profile.frameworks,
        lambda i: "🚀 Server-side rendering with Next.js",
    ),
    (
        lambda i: "Next.js" in i.profile.frameworks,
        lambda i: "📱 Optimized for performance and SEO",
    ),
    (
        lambda i: "Tailwind CSS" in i.profile.tools,
        lambda i: "🎨 Responsive design with Tailwind CSS",
    ),
    (
        lambda i: "Express.js" in i.profile.frameworks,
        lambda i: "🔧 RESTful API with Express.js",
    ),
    (
        lambda i: bool(i.profile.databases),
        lambda i: f"🗄️ Database integration with {', '.join(i.profile.databases)}",
    ),
    (
        lambda i: i.has_file("dockerfile"),
        lambda i: "🐳 Docker containerization for easy deployment",
    ),
    (
        lambda i: any(".github/workflows" in entry.path for entry in i.listing),
        lambda i: "🔄 Automated CI/CD with GitHub Actions",
    ),
    (
        lambda i: any("test" in name or "spec" in name for name in i.names),
        lambda i: "🧪 Comprehensive testing suite",
    ),
    (
        lambda i: i.has_file(".env.example"),
        lambda i: "⚙️ Environment-based configuration",
    ),
)


def derive_features(inputs: SectionInputs) -> List[str]:
    """Return derived feature bullets, or the fixed fallback when none fire."""
    features = [render(inputs) for applies, render in _FEATURE_RULES if applies(inputs)]
    return features or list(FALLBACK_FEATURES)


def build_features(inputs: SectionInputs) -> str:
    bullets = "\n".join(f"- {feature}" for feature in derive_features(inputs))
    return f"{_heading('features')}\n\n{bullets}"


def build_tech_stack(inputs: SectionInputs) -> str:
    if not has_tech_stack(inputs):
        return ""
    profile = inputs.profile
    subsections: List[str] = []

    if profile.languages:
        total = sum(profile.languages.values())
        ordered = sorted(profile.languages.items(), key=lambda item: -item[1])
        lines = [
            f"- **{language}** ({format_percentage(size, total)}%)" for language, size in ordered
        ]
        subsections.append("### Programming Languages\n" + "\n".join(lines))

    for title, labels in (
        ("Frameworks & Libraries", profile.frameworks),
        ("Development Tools", profile.tools),
        ("Databases & Storage", profile.databases),
        ("Deployment & DevOps", profile.deployment),
    ):
        if labels:
            subsections.append(f"### {title}\n" + "\n".join(f"- **{label}**" for label in labels))

    return f"{_heading('tech_stack')}\n\n" + "\n\n".join(subsections)


def _java_context(inputs: SectionInputs) -> Dict[str, str]:
    if inputs.has_file(*MAVEN_MANIFESTS):
        mvn = "./mvnw" if inputs.has_file("mvnw") else "mvn"
        return {"tool": "Maven", "build": f"{mvn} clean install", "run": f"{mvn} spring-boot:run"}
    gradle = "./gradlew" if inputs.has_file("gradlew") else "gradle"
    return {"tool": "Gradle", "build": f"{gradle} build", "run": f"{gradle} run"}


def build_installation(inputs: SectionInputs) -> str:
    renderer = inputs.renderer
    if has_package_manifest(inputs):
        body = renderer.render_installation(
            "installation_node", manager=detect_package_manager(inputs.names)
        )
    elif has_python_manifest(inputs):
        body = renderer.render_installation("installation_python")
    elif inputs.has_file(*MAVEN_MANIFESTS, *GRADLE_MANIFESTS):
        body = renderer.render_installation("installation_java", **_java_context(inputs))
    else:
        body = renderer.render_installation("installation_generic")
    return f"{_heading('installation')}\n\n{body}"


def build_usage(inputs: SectionInputs) -> str:
    if has_package_manifest(inputs):
        body = inputs.renderer.render("usage_node", manager=detect_package_manager(inputs.names))
    elif has_python_manifest(inputs):
        body = inputs.renderer.render("usage_python")
    else:
        body = inputs.renderer.render("usage_generic")
    return f"{_heading('usage')}\n\n{body}"


def render_file_tree(listing: Sequence[FileEntry]) -> str:
    """Render a flat tree: directories first, then ordinal name order."""
    ordered = sorted(listing, key=lambda entry: (not entry.is_dir, entry.name))
    lines: List[str] = []
    for index, entry in enumerate(ordered):
        prefix = TREE_LAST if index == len(ordered) - 1 else TREE_BRANCH
        glyph = DIRECTORY_GLYPH if entry.is_dir else FILE_GLYPH
        lines.append(f"{prefix}{glyph}{entry.name}")
    return "\n".join(lines)


def build_structure(inputs: SectionInputs) -> str:
    if not has_structure(inputs):
        return ""
    return f"{_heading('structure')}\n\n```\n{render_file_tree(inputs.listing)}\n```"


def build_api_docs(inputs: SectionInputs) -> str:
    if not should_include_api_docs(inputs):
        return ""
    port = DJANGO_PORT if "Django" in inputs.profile.frameworks else DEFAULT_API_PORT
    return f"{_heading('api_docs')}\n\n{inputs.renderer.render('api_docs', port=port)}"


def build_scripts(inputs: SectionInputs) -> str:
    if not has_package_manifest(inputs):
        return ""
    return f"{_heading('scripts')}\n\n{inputs.renderer.render('scripts')}"


def build_contributing(inputs: SectionInputs) -> str:
    return f"{_heading('contributing')}\n\n{inputs.renderer.render('contributing')}"


def build_license(inputs: SectionInputs) -> str:
    license_info = inputs.metadata.license
    name = license_info.name if license_info and license_info.name else DEFAULT_LICENSE_NAME
    spdx_id = license_info.spdx_id if license_info and license_info.spdx_id else DEFAULT_LICENSE_ID
    badge = BadgeBuilder().license_badge(spdx_id, color="blue")
    body = inputs.renderer.render("license", name=name, badge=badge)
    return f"{_heading('license')}\n\n{body}"


def build_contact(inputs: SectionInputs) -> str:
    body = inputs.renderer.render(
        "contact", owner=inputs.metadata.owner, url=inputs.metadata.html_url
    )
    return f"{_heading('contact')}\n\n{body}"


SectionBuilder = Callable[[SectionInputs], str]

SECTION_BUILDERS: Dict[str, SectionBuilder] = {
    "header": build_header,
    "badges": build_badges,
    "about": build_about,
    "toc": build_table_of_contents,
    "features": build_features,
    "tech_stack": build_tech_stack,
    "installation": build_installation,
    "usage": build_usage,
    "structure": build_structure,
    "api_docs": build_api_docs,
    "scripts": build_scripts,
    "contributing": build_contributing,
    "license": build_license,
    "contact": build_contact,
}


__all__ = [
    "SECTION_BUILDERS",
    "SectionBuilder",
    "SectionInputs",
    "derive_features",
    "detect_project_type",
    "has_package_manifest",
    "has_python_manifest",
    "has_structure",
    "has_tech_stack",
    "render_file_tree",
    "should_include_api_docs",
]
