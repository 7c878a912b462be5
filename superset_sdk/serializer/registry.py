"""
Process-wide registry of DTO wire shapes.

Shapes are registered by the ``@wire_shape`` class decorator when a DTO
module is imported. Registration is append-only and serialized by a lock;
lookups after that are plain dict reads, so ``describe`` is safe to call
from any number of threads.
"""

from __future__ import annotations

import dataclasses
import threading
from typing import Callable, Dict, Optional, Tuple, TypeVar, Union

from ..core.errors import ShapeDefinitionError, UnknownShapeError
from ..core.logging import get_logger
from .fields import WIRE_METADATA_KEY, FieldDescriptor, ShapeDescriptor


logger = get_logger("superset_sdk.serializer.registry")

T = TypeVar("T", bound=type)

TypeId = Union[str, type]


class ShapeRegistry:
    """
    Holds the ``ShapeDescriptor`` of every known DTO, keyed by class and name.
    """

    def __init__(self) -> None:
        self._by_class: Dict[type, ShapeDescriptor] = {}
        self._by_name: Dict[str, ShapeDescriptor] = {}
        self._lock = threading.Lock()

    def register(self, shape: ShapeDescriptor) -> ShapeDescriptor:
        """
        Register ``shape``. Registering the same class again returns the
        shape already stored; reusing a name for another class fails.
        """

        with self._lock:
            existing = self._by_class.get(shape.dto_class)
            if existing is not None:
                return existing

            clash = self._by_name.get(shape.type_id)
            if clash is not None and clash.dto_class is not shape.dto_class:
                raise ShapeDefinitionError(
                    f"Shape name {shape.type_id!r} is already registered for "
                    f"{clash.dto_class.__qualname__}"
                )

            self._by_class[shape.dto_class] = shape
            self._by_name[shape.type_id] = shape

        logger.debug("Registered wire shape %s (%d fields)", shape.type_id, len(shape))
        return shape

    def describe(self, type_id: TypeId) -> ShapeDescriptor:
        """
        Return the shape for a DTO class or registered name.

        Raises:
            UnknownShapeError: If ``type_id`` was never registered.
        """

        if isinstance(type_id, str):
            shape = self._by_name.get(type_id)
        else:
            shape = self._by_class.get(type_id)
        if shape is None:
            raise UnknownShapeError(type_id)
        return shape

    def is_registered(self, type_id: TypeId) -> bool:
        if isinstance(type_id, str):
            return type_id in self._by_name
        return type_id in self._by_class

    def names(self) -> Tuple[str, ...]:
        return tuple(self._by_name)


default_registry = ShapeRegistry()


def build_shape(cls: type, name: Optional[str] = None) -> ShapeDescriptor:
    """
    Build the ``ShapeDescriptor`` of a dataclass declared with ``wire_field``.

    Every dataclass field must carry wire metadata.
    """

    if not dataclasses.is_dataclass(cls):
        raise ShapeDefinitionError(f"{cls.__qualname__} is not a dataclass")

    type_id = name or cls.__name__
    descriptors = []
    for dc_field in dataclasses.fields(cls):
        declared: Optional[FieldDescriptor] = dc_field.metadata.get(WIRE_METADATA_KEY)
        if declared is None:
            raise ShapeDefinitionError(
                f"{type_id}.{dc_field.name} is not declared with wire_field()"
            )
        descriptors.append(dataclasses.replace(declared, attribute_name=dc_field.name))

    return ShapeDescriptor(type_id=type_id, dto_class=cls, fields=tuple(descriptors))


def wire_shape(
    cls: Optional[T] = None,
    *,
    name: Optional[str] = None,
    registry: Optional[ShapeRegistry] = None,
) -> Union[T, Callable[[T], T]]:
    """
    Class decorator registering a frozen DTO dataclass with the registry.

    Apply it above ``@dataclass(frozen=True)``::

        @wire_shape(name="Dashboard")
        @dataclass(frozen=True)
        class Dashboard(BaseDTO):
            ...
    """

    def decorate(target: T) -> T:
        target_registry = registry or default_registry
        target.__wire_shape__ = target_registry.register(build_shape(target, name))
        target.__wire_registry__ = target_registry
        return target

    if cls is not None:
        return decorate(cls)
    return decorate


def describe(type_id: TypeId) -> ShapeDescriptor:
    """Look up a shape in the default registry."""
    return default_registry.describe(type_id)
