"""
Common DTO utilities for the Superset SDK.

We use frozen Python dataclasses for DTOs. This module provides a small
base class so all DTOs have a consistent API (``to_dict``, ``to_wire``,
``from_wire``).

Design choices:
- Style: synchronous (no async in DTOs or services).
- Immutability: attributes cannot be reassigned; list attributes are
  stored as tuples and mapping attributes as read-only copies
  (``types.MappingProxyType``). Mapping fields make a DTO unhashable.
- Wire mapping: declared per field with ``wire_field`` and registered with
  ``@wire_shape``; see ``superset_sdk.serializer``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Dict, Mapping, Type, TypeVar

from ..serializer.coercion import freeze_mapping, freeze_mapping_list
from ..serializer.fields import FieldKind
from ..serializer.registry import default_registry
from ..serializer.service import SerializerService, default_service


T_BaseDTO = TypeVar("T_BaseDTO", bound="BaseDTO")


@dataclass(frozen=True)
class BaseDTO:
    """
    Base class for DTO dataclasses.

    Subclasses must themselves be ``@dataclass(frozen=True)``.
    """

    def __post_init__(self) -> None:
        shape = vars(type(self)).get("__wire_shape__")
        if shape is None:
            return
        for descriptor in shape:
            value = getattr(self, descriptor.attribute_name)
            if descriptor.kind is FieldKind.LIST_OF_MAPPING:
                frozen = freeze_mapping_list(value)
            elif descriptor.kind is FieldKind.MAPPING:
                frozen = freeze_mapping(value)
            elif descriptor.kind is FieldKind.SCALAR and isinstance(value, list):
                frozen = tuple(value)
            else:
                continue
            object.__setattr__(self, descriptor.attribute_name, frozen)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert this DTO into a plain dict keyed by attribute name (recursively).
        """

        return _plain(self)

    def to_wire(self) -> Dict[str, Any]:
        """
        Convert this DTO into its wire representation.
        """

        return _serializer_for(type(self)).dehydrate(self)

    @classmethod
    def from_wire(cls: Type[T_BaseDTO], data: Any) -> T_BaseDTO:
        """
        Construct this DTO from a decoded API payload.
        """

        return _serializer_for(cls).hydrate(data, cls)


def _serializer_for(cls: type) -> SerializerService:
    registry = getattr(cls, "__wire_registry__", default_registry)
    if registry is default_registry:
        return default_service
    return SerializerService(registry=registry)


def _plain(value: Any) -> Any:
    # asdict() deep-copies and cannot copy the read-only mapping proxies.
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(_plain(item) for item in value)
    return value
