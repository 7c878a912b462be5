"""
Hydration and dehydration of wire-mapped DTOs.

``SerializerService.hydrate`` turns a decoded JSON object into a frozen DTO
and ``SerializerService.dehydrate`` turns a DTO back into a JSON-ready dict.
Both are driven only by the ``ShapeDescriptor`` of the DTO type and keep no
state between calls, so one service can be shared across threads.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from ..core.config import SerializerConfig
from ..core.errors import CoercionError, InvalidWireShapeError
from ..core.logging import get_logger
from .coercion import (
    datetime_from_wire,
    datetime_to_wire,
    mapping_from_wire,
    mapping_list_from_wire,
    mapping_list_to_wire,
    mapping_to_wire,
)
from .fields import FieldDescriptor, FieldKind, ShapeDescriptor
from .registry import ShapeRegistry, TypeId, default_registry


logger = get_logger("superset_sdk.serializer")


class SerializerService:
    """
    Converts between wire JSON objects and registered DTOs.
    """

    def __init__(
        self,
        config: Optional[SerializerConfig] = None,
        registry: Optional[ShapeRegistry] = None,
    ) -> None:
        self._config = config or SerializerConfig()
        self._registry = registry or default_registry

    @property
    def config(self) -> SerializerConfig:
        return self._config

    def describe(self, type_id: TypeId) -> ShapeDescriptor:
        return self._registry.describe(type_id)

    # Wire → DTO

    def hydrate(self, wire: Any, type_id: TypeId) -> Any:
        """
        Build a DTO of ``type_id`` from a decoded JSON object.

        Absent keys and JSON ``null`` take the field default; unknown keys
        are ignored. The DTO is constructed only after every field resolved.

        Raises:
            UnknownShapeError: ``type_id`` is not registered.
            InvalidWireShapeError: ``wire`` is not a mapping.
            CoercionError: a field value does not match its kind.
        """

        shape = self._registry.describe(type_id)
        if not isinstance(wire, Mapping):
            raise InvalidWireShapeError(shape.type_id, wire)

        values: Dict[str, Any] = {}
        for descriptor in shape:
            raw = wire.get(descriptor.wire_name)
            if raw is None:
                values[descriptor.attribute_name] = descriptor.default_value
            else:
                values[descriptor.attribute_name] = self._value_from_wire(descriptor, raw)

        return shape.dto_class(**values)

    def hydrate_many(self, items: Iterable[Any], type_id: TypeId) -> Iterator[Any]:
        """
        Hydrate every item of ``items``; the first failure propagates.
        """

        for item in items:
            yield self.hydrate(item, type_id)

    def _value_from_wire(self, descriptor: FieldDescriptor, raw: Any) -> Any:
        kind = descriptor.kind
        name = descriptor.wire_name

        if kind is FieldKind.SCALAR:
            return raw
        if kind is FieldKind.DATETIME:
            return datetime_from_wire(name, raw, self._config.require_timezone)
        if kind is FieldKind.MAPPING:
            return mapping_from_wire(name, raw)
        if kind is FieldKind.LIST_OF_MAPPING:
            return mapping_list_from_wire(name, raw)
        if kind is FieldKind.NESTED:
            if not isinstance(raw, Mapping):
                raise CoercionError(name, raw, "expected a JSON object")
            try:
                return self.hydrate(raw, descriptor.nested)
            except CoercionError as exc:
                raise CoercionError(
                    f"{name}.{exc.field_name}", exc.raw_value, exc.reason
                ) from exc
        raise CoercionError(name, raw, f"unsupported field kind {kind!r}")

    # DTO → wire

    def dehydrate(self, obj: Any) -> Dict[str, Any]:
        """
        Convert a registered DTO into a new JSON-ready dict.

        Every field of the shape is emitted, unset optionals as ``None``
        (``[]`` for lists of mappings).

        Raises:
            UnknownShapeError: ``type(obj)`` is not registered.
            CoercionError: an attribute holds a value of the wrong kind.
        """

        shape = self._registry.describe(type(obj))

        wire: Dict[str, Any] = {}
        for descriptor in shape:
            value = getattr(obj, descriptor.attribute_name)
            wire[descriptor.wire_name] = self._value_to_wire(descriptor, value)
        return wire

    def _value_to_wire(self, descriptor: FieldDescriptor, value: Any) -> Any:
        kind = descriptor.kind
        name = descriptor.wire_name

        if kind is FieldKind.LIST_OF_MAPPING:
            return [] if value is None else mapping_list_to_wire(name, value)
        if value is None:
            return None
        if kind is FieldKind.SCALAR:
            return _copy_json(value)
        if kind is FieldKind.DATETIME:
            return datetime_to_wire(name, value)
        if kind is FieldKind.MAPPING:
            return mapping_to_wire(name, value)
        if kind is FieldKind.NESTED:
            if isinstance(value, Mapping):
                return dict(value)
            try:
                return self.dehydrate(value)
            except CoercionError as exc:
                raise CoercionError(
                    f"{name}.{exc.field_name}", exc.raw_value, exc.reason
                ) from exc
        raise CoercionError(name, value, f"unsupported field kind {kind!r}")


def _copy_json(value: Any) -> Any:
    # Scalar fields may carry plain JSON arrays (e.g. allowed_domains).
    if isinstance(value, (list, tuple)):
        return [_copy_json(item) for item in value]
    return value


default_service = SerializerService()


def hydrate(wire: Any, type_id: TypeId) -> Any:
    """Hydrate with the default serializer."""
    return default_service.hydrate(wire, type_id)


def dehydrate(obj: Any) -> Dict[str, Any]:
    """Dehydrate with the default serializer."""
    return default_service.dehydrate(obj)
