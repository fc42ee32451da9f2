"""
Pipeline - Cairo contracts to Checkpoint indexer scaffolding.

1. Phase 1 (Discovery): Expand input paths into .cairo files
2. Phase 2 (Scanner): Extract storage and event declarations per file
3. Phase 3 (Analyzer): Resolve Cairo type tokens into type descriptors
4. Phase 4 (Backend): Render schema, handler stubs and run configuration
5. Phase 5 (Writer): Print to the console or write files
"""

from __future__ import annotations

from .backends import CheckpointBackend, GeneratedFile
from .config import CheckpointConfig, GeneratorConfig, OutputConfig, OutputMode
from .generator import IndexerGenerator
from .writer import AtomicWriter, ConsoleWriter, FileWriter, Writer

__all__ = [
    "AtomicWriter",
    "CheckpointBackend",
    "CheckpointConfig",
    "ConsoleWriter",
    "FileWriter",
    "GeneratedFile",
    "GeneratorConfig",
    "IndexerGenerator",
    "OutputConfig",
    "OutputMode",
    "Writer",
]
