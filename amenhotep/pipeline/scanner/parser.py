"""
Cairo declaration scanner.

Phase 2 of the pipeline: walk a contract's lines once and extract the
storage block and the ``#[event]`` declarations into a SourceUnit. This is
not a Cairo parser; it only recognizes two line-level shapes:

    struct Storage {            #[event]
        _name: felt252,         fn Transfer(from: ContractAddress, value: u256) {}
    }
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from ...exceptions import ArgumentError, EventSignatureError, ScanError
from ...logging_config import get_logger
from ...utils import unit_name_from_path
from ..analyzer.type_resolver import resolve_type
from .nodes import Argument, EventDeclaration, NoticeKind, ScanNotice, SourceUnit, StorageField

logger = get_logger(__name__)

STORAGE_MARKER = "struct Storage"
BLOCK_END = "}"
EVENT_MARKER = "#[event]"
ARGUMENT_SEPARATOR = ", "
NAME_TYPE_SEPARATOR = ": "

EVENT_SIGNATURE = re.compile(r"fn (?P<name>[A-Za-z_][A-Za-z0-9_]*)\((?P<args>.*)\)")


class _LineCursor:
    """Forward-only line reader that counts every line it hands out."""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self.line_nr = 0

    def next(self) -> str | None:
        line = next(self._lines, None)
        if line is None:
            return None
        self.line_nr += 1
        return line.rstrip("\r\n")


class DeclarationScanner:
    """Builds one SourceUnit per file from its storage block and event declarations."""

    def scan(self, lines: Iterable[str], name: str, path: Path | None = None) -> SourceUnit:
        """
        Scan a sequence of lines.

        Args:
            lines: The file's lines, with or without trailing newlines
            name: Name of the resulting unit
            path: Origin of the lines, used in error messages

        Returns:
            The SourceUnit for these lines

        Raises:
            ScanError: If an event signature, an argument or a type is malformed
        """
        unit = SourceUnit(name=name, path=path)
        cursor = _LineCursor(lines)
        storage_done = False

        try:
            while (line := cursor.next()) is not None:
                if not storage_done and STORAGE_MARKER in line:
                    storage_done = self._capture_storage(line, cursor, unit)

                if EVENT_MARKER in line:
                    self._capture_event(cursor, unit)
        except ScanError as e:
            e.with_location(path=path, line=cursor.line_nr)
            raise

        logger.debug(
            "Scanned %s: %d event(s), %d storage field(s)",
            path or name,
            len(unit.events),
            len(unit.storage_fields),
        )
        return unit

    def scan_file(self, path: Path | str, encoding: str = "utf-8") -> SourceUnit:
        """Scan a file on disk. The unit is named after the file stem.

        Undecodable bytes are replaced, so such lines still count toward line
        numbers but never match a marker.
        """
        path = Path(path)
        with open(path, encoding=encoding, errors="replace") as f:
            return self.scan(f, name=unit_name_from_path(path), path=path)

    def _capture_storage(self, marker: str, cursor: _LineCursor, unit: SourceUnit) -> bool:
        """Buffer the storage block up to its closing brace. Returns False if it never closes."""
        marker_line = cursor.line_nr

        # Empty block closed on the marker line (`struct Storage {}`): nothing to
        # capture, and following lines must not be drained looking for a brace
        if BLOCK_END in marker.split(STORAGE_MARKER, 1)[1]:
            return True

        buffer: list[tuple[int, str]] = []
        while (line := cursor.next()) is not None:
            if BLOCK_END in line:
                unit.storage_fields = parse_storage_fields(buffer)
                return True
            buffer.append((cursor.line_nr, line))

        logger.debug("Storage block opened at line %d is never closed, ignoring it", marker_line)
        unit.notices.append(ScanNotice(NoticeKind.STORAGE_UNTERMINATED, marker_line))
        return False

    def _capture_event(self, cursor: _LineCursor, unit: SourceUnit) -> None:
        marker_line = cursor.line_nr
        signature = cursor.next()
        if signature is None:
            logger.debug("Event marker on the last line (%d), no event recorded", marker_line)
            unit.notices.append(ScanNotice(NoticeKind.EVENT_MARKER_AT_EOF, marker_line))
            return

        event = parse_event_signature(signature, line_nr=cursor.line_nr)
        unit.add_event(event)


def parse_event_signature(line: str, line_nr: int) -> EventDeclaration:
    """
    Parse an event signature line such as ``fn Transfer(from: ContractAddress, value: u256)``.

    Args:
        line: The signature line
        line_nr: 1-based line number recorded as the declaration line

    Raises:
        EventSignatureError: If the line is not shaped like ``fn Name(args)``
        ArgumentError: If an argument has no ``name: Type`` separator
        UnknownTypeError: If an argument type is not supported
        ValueError: If line_nr is below 1
    """
    if line_nr < 1:
        raise ValueError(f"line_nr must be a 1-based line number, got {line_nr}")

    match = EVENT_SIGNATURE.search(line)
    if match is None:
        raise EventSignatureError(f"expected an event signature `fn Name(args)`, got {line.strip()!r}", line=line_nr)

    args = match.group("args").strip()
    arguments = [parse_argument(token, line_nr) for token in args.split(ARGUMENT_SEPARATOR)] if args else []

    return EventDeclaration(
        name=match.group("name"),
        arguments=arguments,
        declared_at_line=line_nr,
    )


def parse_argument(token: str, line_nr: int | None = None) -> Argument:
    """Parse one ``name: Type`` argument token."""
    token = token.strip()
    name, separator, raw_type = token.partition(NAME_TYPE_SEPARATOR)
    if not separator or not name.strip():
        raise ArgumentError(f"expected `name: Type` argument, got {token!r}", line=line_nr)

    return Argument(name=name.strip(), type=resolve_type(raw_type))


def parse_storage_fields(lines: Iterable[tuple[int, str]]) -> list[StorageField]:
    """
    Parse buffered storage block lines into fields.

    Lines without a colon (and ``//`` comments) are skipped. Each field line
    is split on its first colon; a trailing comma after the type is dropped.
    """
    fields = []
    for line_nr, line in lines:
        text = line.strip()
        if text.startswith("//") or ":" not in text:
            continue

        name, _, raw_type = text.partition(":")
        raw_type = raw_type.strip().removesuffix(",").strip()
        try:
            field_type = resolve_type(raw_type)
        except ScanError as e:
            e.with_location(line=line_nr)
            raise
        fields.append(StorageField(name=name.strip(), type=field_type))
    return fields


def scan_file(path: Path | str, encoding: str = "utf-8") -> SourceUnit:
    """Scan one file with a fresh scanner."""
    return DeclarationScanner().scan_file(path, encoding=encoding)
