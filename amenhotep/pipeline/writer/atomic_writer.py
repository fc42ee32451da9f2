"""
Atomic file writer for generated scaffolding.

Ensures that an interrupted write never leaves a half-written file behind.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ...exceptions import OutputExistsError, WriterError


class AtomicWriter:
    """Handles atomic file writes.

    Uses a two-phase approach:
    1. Write to a temporary file in the same directory
    2. Atomically replace the target file
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            WriterError: If file operations fail
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
        except OSError as e:
            raise WriterError(f"failed to create file {path}: {e}") from e

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except OSError as e:
            self._discard(temp_path)
            raise WriterError(f"failed to write content to file {path}: {e}") from e
        except BaseException:
            self._discard(temp_path)
            raise

    def write_if_not_exists(self, path: Path, content: str) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            OutputExistsError: If the file already exists
            WriterError: If file operations fail
        """
        if path.exists():
            raise OutputExistsError(f"Output file already exists: {path}. Set output.mode to 'force' to overwrite.")

        self.write(path, content)

    @staticmethod
    def _discard(temp_path: Path) -> None:
        if temp_path.exists():
            try:
                os.unlink(temp_path)
            except OSError:
                pass  # Best effort cleanup
