"""
Utility functions for amenhotep.
"""

from pathlib import Path


def capitalize_first(text: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    Examples:
        "token" -> "Token"
        "erc20_token" -> "Erc20_token"
        "" -> ""
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def unit_name_from_path(path: Path | str) -> str:
    """Derive a unit name from a file path: its stem with the first letter capitalized."""
    return capitalize_first(Path(path).stem)
