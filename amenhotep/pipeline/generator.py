"""
Pipeline generator: discover, scan, render, write.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..logging_config import get_logger
from .backends import CheckpointBackend, GeneratedFile
from .config import GeneratorConfig
from .scanner import DeclarationScanner, SourceUnit, discover_files
from .writer import Writer

logger = get_logger(__name__)


class IndexerGenerator:
    """
    Generates indexer scaffolding from Cairo contracts.

    Any ScanError raised while scanning a file aborts the whole run; nothing
    is rendered or written for a batch containing a malformed file.
    """

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()
        self.scanner = DeclarationScanner()
        self.backend = CheckpointBackend(self.config)

    def discover(self, paths: Iterable[Path | str]) -> list[Path]:
        return discover_files(paths, extension=self.config.source_extension)

    def scan(self, files: Iterable[Path]) -> list[SourceUnit]:
        units = []
        for file in files:
            unit = self.scanner.scan_file(file, encoding=self.config.encoding)
            for notice in unit.notices:
                logger.warning("%s:%d: %s", file, notice.line, notice.kind.value.replace("_", " "))
            units.append(unit)
        return units

    def generate(self, paths: Iterable[Path | str]) -> list[GeneratedFile]:
        """
        Discover, scan and render without writing anything.

        Args:
            paths: Contract files and/or directories

        Returns:
            Rendered files
        """
        files = self.discover(paths)
        logger.info("Parsing %d file(s)", len(files))
        units = self.scan(files)
        return self.backend.generate(units)

    def run(self, paths: Iterable[Path | str], writer: Writer) -> list[GeneratedFile]:
        """Generate scaffolding and hand every file to the writer."""
        generated = self.generate(paths)
        for file in generated:
            writer.write(file)
        return generated
