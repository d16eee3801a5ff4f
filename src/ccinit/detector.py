"""Detection of Claude Code files that already exist in a project."""

from __future__ import annotations

import logging
import os
from pathlib import Path

__all__ = ["CLAUDE_MARKERS", "detect_existing"]

LOGGER = logging.getLogger(__name__)

# Labels reported to the user, in the order they are checked.
CLAUDE_MARKERS: tuple[str, ...] = ("CLAUDE.md", ".claude/")


def _is_present(path: Path) -> bool:
    try:
        os.stat(path)
    except (OSError, ValueError) as exc:
        # Any failure to stat counts as absent, never as an error.
        LOGGER.debug("treating %s as absent: %s", path, exc)
        return False
    return True


def detect_existing(base_dir: str | Path) -> list[str]:
    """Return the markers from :data:`CLAUDE_MARKERS` present in ``base_dir``."""

    base = Path(base_dir)
    # Any path named .claude counts, whether file or directory.
    existing = [marker for marker in CLAUDE_MARKERS if _is_present(base / marker.rstrip("/"))]
    LOGGER.debug("existing Claude Code files in %s: %s", base, existing)
    return existing
