"""Pipeline orchestration: parse, fetch, detect, synthesize, resolve."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .analyzers import discover_analyzers
from .config import ReadmegenConfig, load_config
from .detector import TechnologyDetector
from .github import GitHubClient, RepositoryReference, parse_repository_url
from .logging import get_logger
from .models import FileEntry, RepositoryMetadata, TechnologyProfile
from .synthesis import ReadmeSynthesizer, resolve_placeholders
from .synthesis.rendering import SectionRenderer

README_FILENAME = "README.md"


@dataclass
class AnalysisBundle:
    """Everything a front-end needs to display and export one analysis."""

    reference: RepositoryReference
    metadata: RepositoryMetadata
    listing: List[FileEntry]
    profile: TechnologyProfile
    document: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "listing": [entry.to_dict() for entry in self.listing],
            "profile": self.profile.to_dict(),
            "document": self.document,
        }


class Orchestrator:
    """Coordinates a README generation run for one repository URL."""

    def __init__(
        self,
        client: GitHubClient | None = None,
        detector: TechnologyDetector | None = None,
        synthesizer: ReadmeSynthesizer | None = None,
        config: ReadmegenConfig | None = None,
    ) -> None:
        self.config = config or load_config(Path.cwd())
        self.client = client or GitHubClient.from_config(self.config.github)
        self.detector = detector or TechnologyDetector(
            discover_analyzers(self.config.analyzers.enabled or None)
        )
        self.synthesizer = synthesizer or ReadmeSynthesizer(
            renderer=SectionRenderer(self.config.templates.dir)
        )
        self.logger = get_logger("orchestrator")

    def analyze(self, url: str) -> AnalysisBundle:
        """Parse, fetch concurrently, detect, synthesize, then resolve placeholders."""
        reference = parse_repository_url(url)
        self.logger.info("Analyzing %s", reference.full_name)

        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="readmegen-fetch") as pool:
            metadata_future = pool.submit(self.client.fetch_metadata, reference)
            listing_future = pool.submit(self.client.fetch_listing, reference)
            languages_future = pool.submit(self.client.fetch_language_bytes, reference)
            metadata = metadata_future.result()
            listing = listing_future.result()
            languages = languages_future.result()
        self.logger.debug(
            "Fetched %d root entries and %d languages", len(listing), len(languages)
        )

        profile = self.detector.detect(
            listing,
            languages,
            lambda path: self.client.fetch_file_content(reference, path),
        )
        draft = self.synthesizer.synthesize(metadata, profile, listing)
        document = resolve_placeholders(draft, metadata.clone_url, metadata.name)
        self.logger.info("Generated README for %s", reference.full_name)

        return AnalysisBundle(
            reference=reference,
            metadata=metadata,
            listing=listing,
            profile=profile,
            document=document,
        )

    def write(self, bundle: AnalysisBundle, destination: Optional[Path] = None) -> Path:
        """Save the document as UTF-8 markdown; directories receive README.md."""
        target = Path(destination) if destination is not None else self.config.output.path
        target = target.expanduser()
        if target.is_dir():
            target = target / README_FILENAME
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(bundle.document, encoding="utf-8")
        self.logger.info("README written to %s", target)
        return target


__all__ = ["AnalysisBundle", "Orchestrator", "README_FILENAME"]
