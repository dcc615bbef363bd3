"""Signature catalog: manifest keys and file markers mapped to technology labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Tuple

FRAMEWORKS = "frameworks"
TOOLS = "tools"
DATABASES = "databases"
DEPLOYMENT = "deployment"

CATEGORIES: Tuple[str, ...] = (FRAMEWORKS, TOOLS, DATABASES, DEPLOYMENT)


@dataclass(frozen=True)
class DependencySignature:
    """Fires when any ``keys`` is a declared dependency and every ``requires`` is too."""

    keys: Tuple[str, ...]
    label: str
    category: str
    requires: Tuple[str, ...] = ()

    def matches(self, dependencies: AbstractSet[str]) -> bool:
        if not all(base in dependencies for base in self.requires):
            return False
        return any(key in dependencies for key in self.keys)


@dataclass(frozen=True)
class KeywordSignature:
    """Fires on a case-sensitive substring of a flat dependency file."""

    keyword: str
    label: str
    category: str

    def matches(self, content: str) -> bool:
        return self.keyword in content


@dataclass(frozen=True)
class MarkerSignature:
    """Fires on a file name, name suffix, or path fragment; no content needed."""

    label: str
    category: str
    names: Tuple[str, ...] = ()
    suffixes: Tuple[str, ...] = ()
    path_markers: Tuple[str, ...] = ()


# Node.js: package.json dependencies + devDependencies.
# Meta-frameworks list their base library in ``requires`` and follow it.

NODE_MANIFEST = "package.json"

NODE_SIGNATURES: Tuple[DependencySignature, ...] = (
    DependencySignature(("react",), "React", FRAMEWORKS),
    DependencySignature(("next", "nextjs"), "Next.js", FRAMEWORKS, requires=("react",)),
    DependencySignature(("gatsby",), "Gatsby", FRAMEWORKS, requires=("react",)),
    DependencySignature(("react-native",), "React Native", FRAMEWORKS, requires=("react",)),
    DependencySignature(("vue",), "Vue.js", FRAMEWORKS),
    DependencySignature(("nuxt",), "Nuxt.js", FRAMEWORKS, requires=("vue",)),
    DependencySignature(("angular", "@angular/core"), "Angular", FRAMEWORKS),
    DependencySignature(("svelte",), "Svelte", FRAMEWORKS),
    DependencySignature(("express",), "Express.js", FRAMEWORKS),
    DependencySignature(("fastify",), "Fastify", FRAMEWORKS),
    DependencySignature(("@nestjs/core",), "NestJS", FRAMEWORKS),
    DependencySignature(("koa",), "Koa.js", FRAMEWORKS),
    DependencySignature(("hapi",), "Hapi.js", FRAMEWORKS),
    # bundlers
    DependencySignature(("webpack",), "Webpack", TOOLS),
    DependencySignature(("vite",), "Vite", TOOLS),
    DependencySignature(("parcel",), "Parcel", TOOLS),
    DependencySignature(("rollup",), "Rollup", TOOLS),
    DependencySignature(("esbuild",), "ESBuild", TOOLS),
    # styling
    DependencySignature(("tailwindcss",), "Tailwind CSS", TOOLS),
    DependencySignature(("bootstrap",), "Bootstrap", TOOLS),
    DependencySignature(("@mui/material",), "Material-UI", TOOLS),
    DependencySignature(("antd",), "Ant Design", TOOLS),
    DependencySignature(("styled-components",), "Styled Components", TOOLS),
    # testing
    DependencySignature(("jest",), "Jest", TOOLS),
    DependencySignature(("vitest",), "Vitest", TOOLS),
    DependencySignature(("mocha",), "Mocha", TOOLS),
    DependencySignature(("cypress",), "Cypress", TOOLS),
    DependencySignature(("playwright",), "Playwright", TOOLS),
    # databases and ORMs
    DependencySignature(("mongoose",), "MongoDB", DATABASES),
    DependencySignature(("prisma",), "Prisma", DATABASES),
    DependencySignature(("sequelize",), "Sequelize", DATABASES),
    DependencySignature(("typeorm",), "TypeORM", DATABASES),
    DependencySignature(("mysql2", "mysql"), "MySQL", DATABASES),
    DependencySignature(("pg",), "PostgreSQL", DATABASES),
    DependencySignature(("sqlite3",), "SQLite", DATABASES),
    DependencySignature(("redis",), "Redis", DATABASES),
    # state management
    DependencySignature(("redux",), "Redux", TOOLS),
    DependencySignature(("zustand",), "Zustand", TOOLS),
    DependencySignature(("mobx",), "MobX", TOOLS),
    DependencySignature(("typescript",), "TypeScript", TOOLS),
)

# Python: any of these marks the project, only requirements.txt is read.

PYTHON_MANIFESTS: Tuple[str, ...] = ("requirements.txt", "pyproject.toml", "pipfile")
PYTHON_REQUIREMENTS = "requirements.txt"
PYTHON_PACKAGE_TOOL = "pip"

PYTHON_KEYWORDS: Tuple[KeywordSignature, ...] = (
    KeywordSignature("django", "Django", FRAMEWORKS),
    KeywordSignature("flask", "Flask", FRAMEWORKS),
    KeywordSignature("fastapi", "FastAPI", FRAMEWORKS),
    KeywordSignature("streamlit", "Streamlit", FRAMEWORKS),
    KeywordSignature("pandas", "Pandas", TOOLS),
    KeywordSignature("numpy", "NumPy", TOOLS),
    KeywordSignature("tensorflow", "TensorFlow", FRAMEWORKS),
    KeywordSignature("pytorch", "PyTorch", FRAMEWORKS),
)

BUILD_MARKERS: Tuple[MarkerSignature, ...] = (
    MarkerSignature("Maven", TOOLS, names=("pom.xml",)),
    MarkerSignature("Java", FRAMEWORKS, names=("pom.xml",)),
    MarkerSignature("Gradle", TOOLS, names=("build.gradle",)),
    MarkerSignature("Java", FRAMEWORKS, names=("build.gradle",)),
    MarkerSignature(".NET", FRAMEWORKS, suffixes=(".csproj", ".sln")),
    MarkerSignature("Go", FRAMEWORKS, names=("go.mod",)),
    MarkerSignature("Rust", FRAMEWORKS, names=("cargo.toml",)),
    MarkerSignature("Cargo", TOOLS, names=("cargo.toml",)),
    MarkerSignature(
        "Docker",
        DEPLOYMENT,
        names=("dockerfile", "docker-compose.yml", "docker-compose.yaml"),
    ),
    MarkerSignature("GitHub Actions", DEPLOYMENT, path_markers=(".github/workflows",)),
    MarkerSignature("Travis CI", DEPLOYMENT, names=(".travis.yml",)),
    MarkerSignature("Jenkins", DEPLOYMENT, names=("jenkinsfile",)),
    MarkerSignature("GitLab CI", DEPLOYMENT, names=(".gitlab-ci.yml",)),
    MarkerSignature("TypeScript", TOOLS, names=("tsconfig.json",)),
    MarkerSignature("Tailwind CSS", TOOLS, names=("tailwind.config.js", "tailwind.config.ts")),
    MarkerSignature("Next.js", FRAMEWORKS, names=("next.config.js",)),
    MarkerSignature("Nuxt.js", FRAMEWORKS, names=("nuxt.config.js",)),
    MarkerSignature("Vue.js", FRAMEWORKS, names=("vue.config.js",)),
    MarkerSignature("Angular", FRAMEWORKS, names=("angular.json",)),
)

DATABASE_MARKERS: Tuple[MarkerSignature, ...] = (
    MarkerSignature("SQL", DATABASES, suffixes=(".sql",)),
    MarkerSignature("Prisma", DATABASES, names=("schema.prisma",)),
)

# Lockfile -> package manager, checked in order.
LOCKFILES: Tuple[Tuple[str, str], ...] = (
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
    ("package-lock.json", "npm"),
)
DEFAULT_PACKAGE_MANAGER = "npm"


__all__ = [
    "BUILD_MARKERS",
    "CATEGORIES",
    "DATABASES",
    "DATABASE_MARKERS",
    "DEFAULT_PACKAGE_MANAGER",
    "DEPLOYMENT",
    "DependencySignature",
    "FRAMEWORKS",
    "KeywordSignature",
    "LOCKFILES",
    "MarkerSignature",
    "NODE_MANIFEST",
    "NODE_SIGNATURES",
    "PYTHON_KEYWORDS",
    "PYTHON_MANIFESTS",
    "PYTHON_PACKAGE_TOOL",
    "PYTHON_REQUIREMENTS",
    "TOOLS",
]
