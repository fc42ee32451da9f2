"""
Source file discovery.

Phase 1 of the pipeline: expand the user's input paths into the ordered
list of contract files to scan.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ...exceptions import InvalidFileExtensionError
from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_EXTENSION = ".cairo"


def check_extension(path: Path | str, extension: str = DEFAULT_EXTENSION) -> Path:
    """
    Ensure a file carries the source extension.

    Raises:
        InvalidFileExtensionError: If it does not
    """
    path = Path(path)
    if path.suffix != extension:
        raise InvalidFileExtensionError(path, extension)
    return path


def discover_files(paths: Iterable[Path | str], extension: str = DEFAULT_EXTENSION) -> list[Path]:
    """
    Expand files and directories into the list of source files to scan.

    Directories are walked recursively in sorted order; symlinked directories
    found during the walk are not followed. Files without the
    extension are skipped. Duplicates are dropped, first occurrence wins.

    Args:
        paths: Files and/or directories
        extension: Extension a source file must carry (e.g. ".cairo")

    Returns:
        Ordered list of source files

    Raises:
        FileNotFoundError: If an input path does not exist
    """
    files: list[Path] = []
    seen: set[Path] = set()

    for path in paths:
        for file in _expand(Path(path), extension):
            key = file.resolve()
            if key in seen:
                continue
            seen.add(key)
            files.append(file)

    logger.debug("Files to parse: %s", [str(f) for f in files])
    return files


def _expand(path: Path, extension: str) -> list[Path]:
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")

    if path.is_dir():
        found = []
        for entry in sorted(path.iterdir()):
            if entry.is_dir() and entry.is_symlink():
                # Linked directories may point back up the tree
                logger.debug("Skipping %s: symlinked directory", entry)
            elif entry.is_dir():
                found.extend(_expand(entry, extension))
            elif entry.suffix == extension:
                found.append(entry)
            else:
                logger.debug("Skipping %s: not a %s file", entry, extension)
        return found

    try:
        return [check_extension(path, extension)]
    except InvalidFileExtensionError as e:
        logger.warning("Skipping %s", e)
        return []
