"""
Field and shape metadata for wire-mapped DTOs.

A DTO is a frozen dataclass whose fields are declared with ``wire_field``.
Each declaration stores a ``FieldDescriptor`` without its attribute name in
the dataclass field metadata; the ``@wire_shape`` decorator (see
``registry``) completes those descriptors and builds an immutable
``ShapeDescriptor`` once, when the class is defined.
"""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from ..core.errors import ShapeDefinitionError


# JSON values as produced by ``json.loads``.
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
WireObject = Mapping[str, Any]

WIRE_METADATA_KEY = "superset_sdk.wire"


class FieldKind(str, Enum):
    """
    Coercion rule applied to a field during hydration/dehydration.
    """

    SCALAR = "scalar"
    DATETIME = "datetime"
    MAPPING = "mapping"
    LIST_OF_MAPPING = "list_of_mapping"
    NESTED = "nested"


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One DTO attribute and the wire key it is exchanged under.
    """

    wire_name: str
    attribute_name: str
    kind: FieldKind = FieldKind.SCALAR
    required: bool = False
    default_value: Any = None
    nested: Optional[type] = None


@dataclass(frozen=True)
class ShapeDescriptor:
    """
    Ordered field metadata defining one DTO type's wire mapping.
    """

    type_id: str
    dto_class: type
    fields: Tuple[FieldDescriptor, ...]

    def __post_init__(self) -> None:
        seen_attributes = set()
        seen_wire_names = set()
        for descriptor in self.fields:
            if descriptor.attribute_name in seen_attributes:
                raise ShapeDefinitionError(
                    f"{self.type_id}: duplicate attribute {descriptor.attribute_name!r}"
                )
            if descriptor.wire_name in seen_wire_names:
                raise ShapeDefinitionError(
                    f"{self.type_id}: duplicate wire name {descriptor.wire_name!r}"
                )
            if descriptor.kind is FieldKind.NESTED and descriptor.nested is None:
                raise ShapeDefinitionError(
                    f"{self.type_id}: nested field {descriptor.attribute_name!r} "
                    "does not declare its DTO type"
                )
            seen_attributes.add(descriptor.attribute_name)
            seen_wire_names.add(descriptor.wire_name)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def wire_names(self) -> Tuple[str, ...]:
        return tuple(descriptor.wire_name for descriptor in self.fields)

    @property
    def attribute_names(self) -> Tuple[str, ...]:
        return tuple(descriptor.attribute_name for descriptor in self.fields)

    def by_attribute(self, attribute_name: str) -> FieldDescriptor:
        for descriptor in self.fields:
            if descriptor.attribute_name == attribute_name:
                return descriptor
        raise KeyError(attribute_name)

    def by_wire_name(self, wire_name: str) -> FieldDescriptor:
        for descriptor in self.fields:
            if descriptor.wire_name == wire_name:
                return descriptor
        raise KeyError(wire_name)


def wire_field(
    wire_name: str,
    *,
    kind: FieldKind = FieldKind.SCALAR,
    required: bool = False,
    default: Any = MISSING,
    nested: Optional[type] = None,
) -> Any:
    """
    Declare a DTO attribute exchanged under ``wire_name``.

    Required fields have no constructor default; when their wire key is
    absent, hydration substitutes ``default`` (``None`` unless given).
    Optional fields default to ``None``, or ``()`` for ``LIST_OF_MAPPING``.

    Usage::

        @wire_shape
        @dataclass(frozen=True)
        class Dashboard(BaseDTO):
            id: Optional[int] = wire_field("id", required=True)
            title: Optional[str] = wire_field("dashboard_title")
    """

    if default is MISSING:
        default = () if kind is FieldKind.LIST_OF_MAPPING else None

    descriptor = FieldDescriptor(
        wire_name=wire_name,
        attribute_name="",
        kind=kind,
        required=required,
        default_value=default,
        nested=nested,
    )
    metadata = {WIRE_METADATA_KEY: descriptor}

    if required:
        return field(metadata=metadata)
    return field(default=default, metadata=metadata)
