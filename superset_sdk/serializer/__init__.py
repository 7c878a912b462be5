"""
Bidirectional wire ↔ DTO serialization.

- ``fields``: ``wire_field``, ``FieldKind`` and the descriptor types
- ``registry``: ``@wire_shape``, ``ShapeRegistry`` and ``describe``
- ``coercion``: per-kind value conversion
- ``service``: ``SerializerService`` with ``hydrate`` / ``dehydrate``
"""

from .fields import (
    FieldDescriptor,
    FieldKind,
    JsonValue,
    ShapeDescriptor,
    WireObject,
    wire_field,
)
from .registry import ShapeRegistry, default_registry, describe, wire_shape
from .service import SerializerService, dehydrate, hydrate

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "JsonValue",
    "SerializerService",
    "ShapeDescriptor",
    "ShapeRegistry",
    "WireObject",
    "default_registry",
    "dehydrate",
    "describe",
    "hydrate",
    "wire_field",
    "wire_shape",
]
