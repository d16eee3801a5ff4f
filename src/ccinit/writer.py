"""Filesystem writes used by the project initializer."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import DirectoryCreationError, FileWriteError

__all__ = ["FileWriter"]

LOGGER = logging.getLogger(__name__)


class FileWriter:
    """Write rendered documents, creating parent directories as needed.

    Existing files are replaced. Nothing is appended, locked or checksummed.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def ensure_directory(self, path: str | Path) -> Path:
        """Create ``path`` and its parents; an existing directory is fine."""

        directory = Path(path)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(directory, exc.strerror or str(exc)) from exc
        LOGGER.debug("ensured directory %s", directory)
        return directory

    def write(self, path: str | Path, content: str) -> Path:
        """Write ``content`` to ``path``, replacing any previous content."""

        destination = Path(path)
        self.ensure_directory(destination.parent)
        try:
            # newline="" keeps "\n" line endings on every platform
            with destination.open("w", encoding=self.encoding, newline="") as handle:
                handle.write(content)
        except OSError as exc:
            raise FileWriteError(destination, exc.strerror or str(exc)) from exc
        LOGGER.debug("wrote %s (%d bytes)", destination, len(content.encode(self.encoding)))
        return destination
