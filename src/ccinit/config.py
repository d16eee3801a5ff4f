"""Configuration value shared by the initializer and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Mapping

__all__ = ["DEFAULT_DESCRIPTION", "ProjectConfig"]


DEFAULT_DESCRIPTION = "A project optimized for Claude Code development"


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Everything one ``init`` invocation needs to know about the project.

    Attributes
    ----------
    name:
        Display name of the project. Defaults to the base name of the working
        directory and is rendered verbatim into the generated documents.
    description:
        A short sentence describing the project. When no description is
        provided the :class:`ProjectConfig` falls back to
        :data:`DEFAULT_DESCRIPTION`.
    github_username:
        GitHub account owning the repository. A non-empty value enables the
        issue templates, pull request template, ``CONTRIBUTING.md`` and
        ``LICENSE``.
    overwrite:
        Replace existing Claude Code files instead of stopping.
    dry_run:
        Report what would be written without touching the filesystem.
    verbose:
        Print additional diagnostics.
    """

    name: str
    description: str = DEFAULT_DESCRIPTION
    github_username: str = ""
    overwrite: bool = False
    dry_run: bool = False
    verbose: bool = False

    @classmethod
    def from_directory(
        cls,
        directory: str | Path,
        *,
        description: str = "",
        github_username: str = "",
        overwrite: bool = False,
        dry_run: bool = False,
        verbose: bool = False,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` named after ``directory``."""

        normalized_name = " ".join(Path(directory).name.split())
        if not normalized_name:
            raise ValueError(f"cannot derive a project name from '{directory}'")

        summary = description.strip() or DEFAULT_DESCRIPTION

        return cls(
            name=normalized_name,
            description=summary,
            github_username=github_username.strip(),
            overwrite=overwrite,
            dry_run=dry_run,
            verbose=verbose,
        )

    @property
    def github_enabled(self) -> bool:
        return bool(self.github_username)

    def context(self, today: date) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "description": self.description,
            "github_username": self.github_username,
            "date": today.isoformat(),
            "year": str(today.year),
        }
