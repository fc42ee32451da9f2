"""
Declaration scanning for Cairo contracts.
"""

from __future__ import annotations

from .discovery import check_extension, discover_files
from .nodes import (
    Argument,
    EventDeclaration,
    NoticeKind,
    ScanNotice,
    SourceUnit,
    StorageField,
)
from .parser import (
    DeclarationScanner,
    parse_argument,
    parse_event_signature,
    parse_storage_fields,
    scan_file,
)

__all__ = [
    "Argument",
    "DeclarationScanner",
    "EventDeclaration",
    "NoticeKind",
    "ScanNotice",
    "SourceUnit",
    "StorageField",
    "check_extension",
    "discover_files",
    "parse_argument",
    "parse_event_signature",
    "parse_storage_fields",
    "scan_file",
]
