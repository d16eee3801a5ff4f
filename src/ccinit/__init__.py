"""Make any project ready for Claude Code development.

The package renders a fixed set of documents (project memory, gitignore,
Makefile, pre-commit config, CI workflow and optional GitHub templates) and
writes them into an existing project, either programmatically or through the
``ccinit`` command line interface.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ProjectConfig
from .detector import detect_existing
from .errors import CCInitError
from .scaffold import ManifestEntry, ProjectInitializer, build_manifest
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "CCInitError",
    "ManifestEntry",
    "ProjectConfig",
    "ProjectInitializer",
    "TemplateRenderer",
    "TemplateRenderingError",
    "build_manifest",
    "detect_existing",
]
