"""
Output sinks for generated files.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import click

from ...exceptions import WriterError
from ...logging_config import get_logger
from ..backends.base import GeneratedFile
from ..config import OutputMode
from .atomic_writer import AtomicWriter

logger = get_logger(__name__)


class Writer(ABC):
    """Consumes generated files."""

    @abstractmethod
    def write(self, file: GeneratedFile) -> None:
        """Emit one generated file."""


class ConsoleWriter(Writer):
    """Prints each file's name followed by its content (dry run)."""

    def write(self, file: GeneratedFile) -> None:
        click.echo(file.name)
        click.echo(file.content)


class FileWriter(Writer):
    """Writes each file under an output directory."""

    def __init__(self, directory: Path | str = ".", mode: OutputMode = OutputMode.FORCE, atomic: bool = True):
        self.directory = Path(directory)
        self.mode = mode
        self.atomic = atomic
        self._atomic_writer = AtomicWriter()

    def write(self, file: GeneratedFile) -> None:
        path = self.directory / file.name

        if self.mode == OutputMode.ERROR_IF_EXISTS:
            self._atomic_writer.write_if_not_exists(path, file.content)
        elif self.atomic:
            self._atomic_writer.write(path, file.content)
        else:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(file.content, encoding="utf-8")
            except OSError as e:
                raise WriterError(f"failed to write content to file {path}: {e}") from e

        logger.info("Wrote %s", path)
