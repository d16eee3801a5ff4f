"""Claude Code scaffolding for an existing project directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable

from .config import ProjectConfig
from .template import TemplateRenderer
from .templates import (
    BUG_REPORT_TEMPLATE,
    CI_WORKFLOW_TEMPLATE,
    CLAUDE_DIR_README_TEMPLATE,
    CLAUDE_MD_TEMPLATE,
    CONTRIBUTING_TEMPLATE,
    FEATURE_REQUEST_TEMPLATE,
    GITIGNORE_TEMPLATE,
    LICENSE_TEMPLATE,
    MAKEFILE_TEMPLATE,
    PRE_COMMIT_TEMPLATE,
    PULL_REQUEST_TEMPLATE,
)
from .writer import FileWriter

__all__ = [
    "BASE_DIRECTORIES",
    "GITHUB_DIRECTORIES",
    "InitPlan",
    "InitResult",
    "ManifestEntry",
    "ProjectInitializer",
    "build_manifest",
]

LOGGER = logging.getLogger(__name__)


BASE_DIRECTORIES: tuple[str, ...] = (".claude", ".github", ".github/workflows")
GITHUB_DIRECTORIES: tuple[str, ...] = (".github/ISSUE_TEMPLATE",)

_BASE_FILES: tuple[tuple[str, str], ...] = (
    ("CLAUDE.md", CLAUDE_MD_TEMPLATE),
    (".claude/README.md", CLAUDE_DIR_README_TEMPLATE),
    (".gitignore", GITIGNORE_TEMPLATE),
    ("Makefile", MAKEFILE_TEMPLATE),
    (".pre-commit-config.yaml", PRE_COMMIT_TEMPLATE),
    (".github/workflows/ci.yml", CI_WORKFLOW_TEMPLATE),
)

_GITHUB_FILES: tuple[tuple[str, str], ...] = (
    (".github/ISSUE_TEMPLATE/bug_report.md", BUG_REPORT_TEMPLATE),
    (".github/ISSUE_TEMPLATE/feature_request.md", FEATURE_REQUEST_TEMPLATE),
    (".github/pull_request_template.md", PULL_REQUEST_TEMPLATE),
    ("CONTRIBUTING.md", CONTRIBUTING_TEMPLATE),
    ("LICENSE", LICENSE_TEMPLATE),
)


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """A rendered document and the relative path it is written to."""

    path: str
    content: str


def build_manifest(
    config: ProjectConfig,
    renderer: TemplateRenderer,
    today: date,
) -> tuple[ManifestEntry, ...]:
    """Render every document for ``config`` in write order."""

    context = config.context(today)
    templates = list(_BASE_FILES)
    if config.github_enabled:
        templates.extend(_GITHUB_FILES)

    return tuple(
        ManifestEntry(path, renderer.render_string(template, context, missing="error"))
        for path, template in templates
    )


@dataclass(frozen=True, slots=True)
class InitPlan:
    """Directories and documents an initialization would produce."""

    directories: tuple[str, ...]
    manifest: tuple[ManifestEntry, ...]


@dataclass(slots=True)
class InitResult:
    """Paths touched by :meth:`ProjectInitializer.initialize`, in order."""

    base_dir: Path
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)


class ProjectInitializer:
    """Write the Claude Code scaffold into a project directory.

    Every file in the manifest is written unconditionally; deciding whether an
    existing project may be touched at all is left to the caller.
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        writer: FileWriter | None = None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.writer = writer or FileWriter()
        self.clock = clock or date.today

    def plan(self, config: ProjectConfig) -> InitPlan:
        """Return what :meth:`initialize` would create, without side effects."""

        directories = BASE_DIRECTORIES
        if config.github_enabled:
            directories = directories + GITHUB_DIRECTORIES
        manifest = build_manifest(config, self.renderer, self.clock())
        return InitPlan(directories=directories, manifest=manifest)

    def initialize(self, config: ProjectConfig, base_dir: str | Path) -> InitResult:
        """Create the scaffold for ``config`` inside ``base_dir``.

        Errors from the filesystem abort immediately; files written before the
        failure are left in place.
        """

        base_path = Path(base_dir)
        plan = self.plan(config)
        result = InitResult(base_dir=base_path)

        base_entries = plan.manifest[: len(_BASE_FILES)]
        github_entries = plan.manifest[len(_BASE_FILES) :]

        self._create_directories(base_path, BASE_DIRECTORIES, result)
        self._write_entries(base_path, base_entries, result)

        if config.github_enabled:
            self._create_directories(base_path, GITHUB_DIRECTORIES, result)
            self._write_entries(base_path, github_entries, result)

        LOGGER.info(
            "initialized %s: %d directories, %d files",
            config.name,
            len(result.directories),
            len(result.files),
        )
        return result

    def _create_directories(
        self, base_path: Path, directories: tuple[str, ...], result: InitResult
    ) -> None:
        for directory in directories:
            result.directories.append(self.writer.ensure_directory(base_path / directory))

    def _write_entries(
        self, base_path: Path, entries: tuple[ManifestEntry, ...], result: InitResult
    ) -> None:
        for entry in entries:
            result.files.append(self.writer.write(base_path / entry.path, entry.content))
