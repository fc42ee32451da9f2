"""
Type analysis for Cairo declarations.
"""

from __future__ import annotations

from .type_resolver import (
    PRIMITIVE_TYPES,
    MapType,
    Primitive,
    PrimitiveKind,
    TypeDescriptor,
    resolve_type,
    split_type_arguments,
)

__all__ = [
    "PRIMITIVE_TYPES",
    "MapType",
    "Primitive",
    "PrimitiveKind",
    "TypeDescriptor",
    "resolve_type",
    "split_type_arguments",
]
