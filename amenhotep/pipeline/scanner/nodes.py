"""
Domain nodes produced by the declaration scanner.

One SourceUnit is built per scanned file. It owns its events and storage
fields; nothing is shared between units.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..analyzer.type_resolver import TypeDescriptor


class NoticeKind(Enum):
    """Conditions the scanner absorbs instead of failing."""

    STORAGE_UNTERMINATED = "storage_unterminated"  # `struct Storage` never closed
    EVENT_MARKER_AT_EOF = "event_marker_at_eof"  # `#[event]` on the last line


@dataclass(frozen=True)
class ScanNotice:
    """A recoverable condition met while scanning, with the marker's line."""

    kind: NoticeKind
    line: int


@dataclass(frozen=True)
class Argument:
    """A typed event argument."""

    name: str
    type: TypeDescriptor

    @property
    def graphql_type(self) -> str:
        return self.type.graphql_type


@dataclass(frozen=True)
class StorageField:
    """A field of the contract's storage block."""

    name: str
    type: TypeDescriptor


@dataclass
class EventDeclaration:
    """An event declared with `#[event]` followed by `fn Name(args)`."""

    name: str
    arguments: list[Argument] = field(default_factory=list)

    # 1-based line of the signature line (not the marker line)
    declared_at_line: int = 0

    # Call sites are not tracked yet
    emitted_at_lines: list[int] = field(default_factory=list)

    @property
    def handler_name(self) -> str:
        """Name of the generated JS handler function."""
        return f"handle{self.name}"

    @property
    def trigger_name(self) -> str:
        """Name of the Checkpoint event trigger."""
        return f"new_{self.name.lower()}"


@dataclass
class SourceUnit:
    """Everything the scanner extracted from one source file."""

    name: str
    events: list[EventDeclaration] = field(default_factory=list)
    storage_fields: list[StorageField] = field(default_factory=list)
    notices: list[ScanNotice] = field(default_factory=list)
    path: Path | None = None

    def add_event(self, event: EventDeclaration) -> None:
        self.events.append(event)

    def has_events(self) -> bool:
        return bool(self.events)

    def has_notice(self, kind: NoticeKind) -> bool:
        return any(notice.kind is kind for notice in self.notices)
