"""
Output writers: console (dry run) and files (generate).
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .base import ConsoleWriter, FileWriter, Writer

__all__ = [
    "AtomicWriter",
    "ConsoleWriter",
    "FileWriter",
    "Writer",
]
