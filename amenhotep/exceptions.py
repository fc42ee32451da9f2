"""
Exception hierarchy for amenhotep.

Recoverable conditions (wrong file extension, unterminated storage block,
trailing event marker) are absorbed where they are detected. Everything
raised from here up to the CLI aborts the run.
"""

from __future__ import annotations

from pathlib import Path


class AmenhotepError(Exception):
    """Base class for all amenhotep errors."""

    pass


class InvalidFileExtensionError(AmenhotepError):
    """Raised when a file does not carry the expected source extension."""

    def __init__(self, path: Path | str, extension: str):
        self.path = Path(path)
        self.extension = extension
        super().__init__(f"file must have a {extension} extension: {path}")


class ScanError(AmenhotepError):
    """Raised when a source file violates a structural assumption of the scanner.

    Attributes:
        path: File being scanned, when known
        line: 1-based line number of the offending line, when known
    """

    def __init__(self, message: str, path: Path | str | None = None, line: int | None = None):
        self.message = message
        self.path = Path(path) if path is not None else None
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        location = ""
        if self.path is not None:
            location = str(self.path)
        if self.line is not None:
            location = f"{location}:{self.line}" if location else f"line {self.line}"
        return f"{location}: {self.message}" if location else self.message

    def with_location(self, path: Path | str | None = None, line: int | None = None) -> ScanError:
        """Fill in missing location details and refresh the message."""
        if self.path is None and path is not None:
            self.path = Path(path)
        if self.line is None and line is not None:
            self.line = line
        self.args = (self._format(),)
        return self


class EventSignatureError(ScanError):
    """Raised when the line after an event marker is not `fn Name(args)`."""

    pass


class ArgumentError(ScanError):
    """Raised when an event argument has no `name: Type` separator."""

    pass


class UnknownTypeError(ScanError):
    """Raised when a type token is not a supported Cairo type."""

    def __init__(self, token: str, reason: str = "", path: Path | str | None = None, line: int | None = None):
        self.token = token
        message = f"Unknown type: {token!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, path=path, line=line)


class ConfigurationError(AmenhotepError):
    """Raised when the configuration file cannot be loaded."""

    pass


class WriterError(AmenhotepError):
    """Raised when a generated file cannot be written."""

    pass


class OutputExistsError(WriterError):
    """Raised when an output file exists and overwriting is disabled."""

    pass
