"""
Scaffolding backends.
"""

from __future__ import annotations

from .base import GeneratedFile, IndexerBackend
from .checkpoint_backend import CONFIGURATION_FILE, CheckpointBackend

__all__ = [
    "CONFIGURATION_FILE",
    "CheckpointBackend",
    "GeneratedFile",
    "IndexerBackend",
]
