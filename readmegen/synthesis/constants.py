"""Shared constants for README synthesis."""

from __future__ import annotations

from typing import Tuple

# Literal tokens embedded during synthesis and replaced by the resolver.
CLONE_URL_PLACEHOLDER = "REPO_URL"
REPO_NAME_PLACEHOLDER = "REPO_NAME"

SECTION_ORDER: tuple[str, ...] = (
    "header",
    "badges",
    "about",
    "toc",
    "features",
    "tech_stack",
    "installation",
    "usage",
    "structure",
    "api_docs",
    "scripts",
    "contributing",
    "license",
    "contact",
)

SECTION_TITLES: dict[str, str] = {
    "about": "📋 About",
    "toc": "📚 Table of Contents",
    "features": "✨ Features",
    "tech_stack": "🛠 Technology Stack",
    "installation": "🚀 Installation",
    "usage": "📖 Usage",
    "structure": "📁 Project Structure",
    "api_docs": "📡 API Documentation",
    "scripts": "📜 Available Scripts",
    "contributing": "🤝 Contributing",
    "license": "📄 License",
    "contact": "📞 Contact",
}

TOC_LABELS: dict[str, str] = {
    "about": "About",
    "features": "Features",
    "tech_stack": "Technology Stack",
    "installation": "Installation",
    "usage": "Usage",
    "structure": "Project Structure",
    "api_docs": "API Documentation",
    "scripts": "Available Scripts",
    "contributing": "Contributing",
    "license": "License",
    "contact": "Contact",
}

TOC_LEADING: Tuple[str, ...] = (
    "about",
    "features",
    "tech_stack",
    "installation",
    "usage",
    "structure",
)
TOC_TRAILING: Tuple[str, ...] = ("contributing", "license", "contact")

DEFAULT_DESCRIPTION = "A modern application built with the latest technologies."
DEFAULT_ABOUT = "This project showcases modern development practices and technologies."

DEFAULT_LICENSE_NAME = "MIT License"
DEFAULT_LICENSE_ID = "MIT"

FALLBACK_FEATURES: Tuple[str, ...] = (
    "✨ Modern and clean architecture",
    "⚡ Optimized for performance",
    "🔒 Secure coding practices",
    "📱 Responsive and user-friendly design",
)

LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "F7DF1E",
    "TypeScript": "3178C6",
    "Python": "3776AB",
    "Java": "ED8B00",
    "Go": "00ADD8",
    "Rust": "000000",
    "C++": "00599C",
    "C#": "239120",
    "PHP": "777BB4",
    "Ruby": "CC342D",
    "Swift": "FA7343",
    "Kotlin": "0095D5",
}
DEFAULT_LANGUAGE_COLOR = "000000"

FRAMEWORK_BADGES: dict[str, str] = {
    "React": "[![React](https://img.shields.io/badge/React-20232A?style=for-the-badge&logo=react&logoColor=61DAFB)]()",
    "Next.js": "[![Next.js](https://img.shields.io/badge/Next.js-000000?style=for-the-badge&logo=next.js&logoColor=white)]()",
    "Vue.js": "[![Vue.js](https://img.shields.io/badge/Vue.js-35495E?style=for-the-badge&logo=vue.js&logoColor=4FC08D)]()",
    "Angular": "[![Angular](https://img.shields.io/badge/Angular-DD0031?style=for-the-badge&logo=angular&logoColor=white)]()",
    "Express.js": "[![Express.js](https://img.shields.io/badge/Express.js-404D59?style=for-the-badge)]()",
    "Django": "[![Django](https://img.shields.io/badge/Django-092E20?style=for-the-badge&logo=django&logoColor=white)]()",
    "Flask": "[![Flask](https://img.shields.io/badge/Flask-000000?style=for-the-badge&logo=flask&logoColor=white)]()",
    "FastAPI": "[![FastAPI](https://img.shields.io/badge/FastAPI-005571?style=for-the-badge&logo=fastapi)]()",
}

# Most specific first; the first rule whose frameworks are all present wins.
PROJECT_TYPE_BY_FRAMEWORKS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("React", "Next.js"), "Next.js Web Application"),
    (("React",), "React Web Application"),
    (("Vue.js", "Nuxt.js"), "Nuxt.js Web Application"),
    (("Vue.js",), "Vue.js Web Application"),
    (("Angular",), "Angular Web Application"),
    (("Django",), "Django Web Application"),
    (("Flask",), "Flask Web Application"),
    (("Express.js",), "Node.js Backend API"),
    (("FastAPI",), "FastAPI Backend API"),
)
PROJECT_TYPE_BY_FILE: Tuple[Tuple[str, str], ...] = (
    ("package.json", "Node.js Application"),
    ("requirements.txt", "Python Application"),
    ("pom.xml", "Java Application"),
    ("cargo.toml", "Rust Application"),
    ("go.mod", "Go Application"),
)

API_FRAMEWORK_MARKERS: Tuple[str, ...] = (
    "Express",
    "Fastify",
    "NestJS",
    "Django",
    "Flask",
    "FastAPI",
)
API_FILE_MARKERS: Tuple[str, ...] = ("api", "routes", "controllers", "endpoints")
DJANGO_PORT = "8000"
DEFAULT_API_PORT = "3000"

PYTHON_INSTALL_MANIFESTS: Tuple[str, ...] = ("requirements.txt", "pyproject.toml")
MAVEN_MANIFESTS: Tuple[str, ...] = ("pom.xml",)
GRADLE_MANIFESTS: Tuple[str, ...] = ("build.gradle", "build.gradle.kts")

TREE_BRANCH = "├── "
TREE_LAST = "└── "
DIRECTORY_GLYPH = "📁 "
FILE_GLYPH = "📄 "
