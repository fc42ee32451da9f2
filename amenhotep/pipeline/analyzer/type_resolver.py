"""
Cairo type resolution.

Turns a raw type token taken from contract source (``felt252``,
``ContractAddress``, ``u256``, ``LegacyMap<ContractAddress, u256>``, ...)
into a normalized type descriptor used by the scanner and the backends.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ...exceptions import UnknownTypeError

MAP_PREFIX = "LegacyMap"
TYPE_ARG_SEPARATOR = ", "


class PrimitiveKind(str, Enum):
    """Kind of primitive Cairo type."""

    FELT = "felt"
    ADDRESS = "address"
    U8 = "int8"
    U16 = "int16"
    U32 = "int32"
    U64 = "int64"
    U128 = "int128"
    U256 = "int256"

    @property
    def is_small_int(self) -> bool:
        """Unsigned ints that fit a GraphQL Int."""
        return self in (PrimitiveKind.U8, PrimitiveKind.U16, PrimitiveKind.U32)


# Source token -> primitive kind (exact, case-sensitive)
PRIMITIVE_TYPES: dict[str, PrimitiveKind] = {
    "felt252": PrimitiveKind.FELT,
    "ContractAddress": PrimitiveKind.ADDRESS,
    "u8": PrimitiveKind.U8,
    "u16": PrimitiveKind.U16,
    "u32": PrimitiveKind.U32,
    "u64": PrimitiveKind.U64,
    "u128": PrimitiveKind.U128,
    "u256": PrimitiveKind.U256,
}


@dataclass(frozen=True)
class Primitive:
    """A primitive Cairo type."""

    kind: PrimitiveKind

    @property
    def graphql_type(self) -> str:
        # felt252 and the wide ints overflow a GraphQL Int
        return "Int!" if self.kind.is_small_int else "String!"


@dataclass(frozen=True)
class MapType:
    """A ``LegacyMap<key, value>`` type. Key and value may be maps themselves."""

    key: TypeDescriptor
    value: TypeDescriptor

    @property
    def graphql_type(self) -> str:
        return "Text"


TypeDescriptor = Primitive | MapType


def resolve_type(token: str) -> TypeDescriptor:
    """
    Resolve a raw Cairo type token.

    Args:
        token: The type as written in source, e.g. ``LegacyMap<ContractAddress, u256>``

    Returns:
        The matching type descriptor

    Raises:
        UnknownTypeError: If the token is not a supported type
    """
    token = token.strip()

    kind = PRIMITIVE_TYPES.get(token)
    if kind is not None:
        return Primitive(kind)

    if token.startswith(MAP_PREFIX):
        return _resolve_map(token)

    raise UnknownTypeError(token)


def _resolve_map(token: str) -> MapType:
    rest = token[len(MAP_PREFIX) :].strip()
    if not (rest.startswith("<") and rest.endswith(">")):
        raise UnknownTypeError(token, f"expected {MAP_PREFIX}<Key, Value>")

    parts = split_type_arguments(rest[1:-1], token)
    if len(parts) != 2:
        raise UnknownTypeError(token, f"{MAP_PREFIX} takes exactly two type arguments, got {len(parts)}")

    for part in parts:
        if part.startswith("("):
            raise UnknownTypeError(token, f"tuple type {part} is not supported")

    key, value = parts
    return MapType(key=resolve_type(key), value=resolve_type(value))


def split_type_arguments(text: str, token: str | None = None) -> list[str]:
    """Split generic arguments on top-level ``", "``, skipping separators nested in ``<>`` or ``()``."""
    parts: list[str] = []
    depth = 0
    start = 0
    i = 0
    while i < len(text):
        char = text[i]
        if char in "<(":
            depth += 1
        elif char in ">)":
            depth -= 1
            if depth < 0:
                raise UnknownTypeError(token or text, "unbalanced brackets")
        elif depth == 0 and text.startswith(TYPE_ARG_SEPARATOR, i):
            parts.append(text[start:i].strip())
            i += len(TYPE_ARG_SEPARATOR)
            start = i
            continue
        i += 1

    if depth != 0:
        raise UnknownTypeError(token or text, "unbalanced brackets")

    parts.append(text[start:].strip())
    return parts
