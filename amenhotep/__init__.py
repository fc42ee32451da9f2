"""Amenhotep

Generates Checkpoint indexer scaffolding (GraphQL schema, JS handler stubs
and a run configuration) from the storage and event declarations of Cairo
contracts.
"""

__version__ = "0.1.0"

from .exceptions import AmenhotepError, ScanError
from .pipeline import (
    ConsoleWriter,
    FileWriter,
    GeneratedFile,
    GeneratorConfig,
    IndexerGenerator,
    OutputMode,
)
from .pipeline.scanner import DeclarationScanner, SourceUnit, scan_file

__all__ = [
    "AmenhotepError",
    "ConsoleWriter",
    "DeclarationScanner",
    "FileWriter",
    "GeneratedFile",
    "GeneratorConfig",
    "IndexerGenerator",
    "OutputMode",
    "ScanError",
    "SourceUnit",
    "scan_file",
]
