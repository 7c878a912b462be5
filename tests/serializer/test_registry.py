"""
Unit tests for shape declaration and the shape registry.
"""

import concurrent.futures
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import pytest

from superset_sdk.api.dashboard import Dashboard
from superset_sdk.core.dto import BaseDTO
from superset_sdk.core.errors import ShapeDefinitionError, UnknownShapeError
from superset_sdk.serializer import (
    FieldDescriptor,
    FieldKind,
    SerializerService,
    ShapeDescriptor,
    ShapeRegistry,
    describe,
    wire_field,
    wire_shape,
)
from superset_sdk.serializer.registry import build_shape


class TestDescribe:
    """Test shape lookup."""

    def test_dashboard_shape(self):
        shape = describe(Dashboard)

        assert shape.type_id == "Dashboard"
        assert shape.dto_class is Dashboard
        assert len(shape) == 17
        assert shape.attribute_names[:3] == ("id", "title", "slug")
        assert shape.by_attribute("title").wire_name == "dashboard_title"
        assert shape.by_wire_name("changed_on_utc").kind is FieldKind.DATETIME
        assert shape.by_wire_name("owners").kind is FieldKind.LIST_OF_MAPPING
        assert shape.by_wire_name("created_by").kind is FieldKind.MAPPING

    def test_required_field(self):
        descriptor = describe(Dashboard).by_attribute("id")

        assert descriptor.required is True
        assert descriptor.default_value is None

    def test_describe_by_name(self):
        assert describe("Dashboard") is describe(Dashboard)

    def test_unknown_name(self):
        with pytest.raises(UnknownShapeError):
            describe("NoSuchShape")

    def test_unknown_class(self):
        with pytest.raises(UnknownShapeError):
            describe(dict)


class TestRegistration:
    """Test registering shapes in an isolated registry."""

    def test_register_and_hydrate(self):
        registry = ShapeRegistry()

        @wire_shape(name="Chart", registry=registry)
        @dataclass(frozen=True)
        class Chart(BaseDTO):
            id: Optional[int] = wire_field("id", required=True)
            name: Optional[str] = wire_field("slice_name")
            params: Optional[Dict[str, Any]] = wire_field("form_data", kind=FieldKind.MAPPING)

        serializer = SerializerService(registry=registry)
        chart = serializer.hydrate({"id": 4, "slice_name": "Sales", "form_data": {"viz": "bar"}}, "Chart")

        assert chart == Chart(id=4, name="Sales", params={"viz": "bar"})
        assert registry.is_registered("Chart")
        assert registry.is_registered(Chart)
        assert not registry.is_registered("Dashboard")
        assert registry.names() == ("Chart",)
        assert Chart.from_wire({"id": 5, "slice_name": "Revenue"}) == Chart(id=5, name="Revenue")
        assert chart.to_wire() == {"id": 4, "slice_name": "Sales", "form_data": {"viz": "bar"}}

    def test_registering_twice_is_idempotent(self):
        registry = ShapeRegistry()

        @dataclass(frozen=True)
        class Tag(BaseDTO):
            name: Optional[str] = wire_field("name")

        first = registry.register(build_shape(Tag))
        second = registry.register(build_shape(Tag))

        assert second is first

    def test_name_clash_fails(self):
        registry = ShapeRegistry()

        @wire_shape(name="Thing", registry=registry)
        @dataclass(frozen=True)
        class ThingA(BaseDTO):
            name: Optional[str] = wire_field("name")

        @dataclass(frozen=True)
        class ThingB(BaseDTO):
            name: Optional[str] = wire_field("name")

        with pytest.raises(ShapeDefinitionError):
            wire_shape(ThingB, name="Thing", registry=registry)

    def test_concurrent_registration_yields_one_shape(self):
        registry = ShapeRegistry()

        @dataclass(frozen=True)
        class Role(BaseDTO):
            name: Optional[str] = wire_field("name")

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            shapes = list(executor.map(lambda _: registry.register(build_shape(Role)), range(32)))

        assert all(shape is shapes[0] for shape in shapes)
        assert registry.describe(Role) is shapes[0]


class TestShapeDefinition:
    """Test declaration errors."""

    def test_duplicate_wire_name(self):
        @dataclass(frozen=True)
        class Broken(BaseDTO):
            title: Optional[str] = wire_field("name")
            label: Optional[str] = wire_field("name")

        with pytest.raises(ShapeDefinitionError):
            build_shape(Broken)

    def test_duplicate_attribute_name(self):
        with pytest.raises(ShapeDefinitionError):
            ShapeDescriptor(
                type_id="Broken",
                dto_class=object,
                fields=(
                    FieldDescriptor(wire_name="a", attribute_name="x"),
                    FieldDescriptor(wire_name="b", attribute_name="x"),
                ),
            )

    def test_field_without_wire_metadata(self):
        @dataclass(frozen=True)
        class Undeclared(BaseDTO):
            name: Optional[str] = None

        with pytest.raises(ShapeDefinitionError):
            build_shape(Undeclared)

    def test_nested_without_type(self):
        @dataclass(frozen=True)
        class Parent(BaseDTO):
            child: Optional[Any] = wire_field("child", kind=FieldKind.NESTED)

        with pytest.raises(ShapeDefinitionError):
            build_shape(Parent)

    def test_not_a_dataclass(self):
        class Plain:
            pass

        with pytest.raises(ShapeDefinitionError):
            build_shape(Plain)


class TestWireField:
    """Test wire_field defaults."""

    def test_list_default_is_empty_tuple(self):
        @dataclass(frozen=True)
        class Listing(BaseDTO):
            items: Tuple[Dict[str, Any], ...] = wire_field("items", kind=FieldKind.LIST_OF_MAPPING)

        assert Listing().items == ()
        assert build_shape(Listing).by_attribute("items").default_value == ()

    def test_required_field_has_no_constructor_default(self):
        @dataclass(frozen=True)
        class Keyed(BaseDTO):
            id: Optional[int] = wire_field("id", required=True)

        with pytest.raises(TypeError):
            Keyed()

    def test_explicit_hydration_default(self):
        @dataclass(frozen=True)
        class Flagged(BaseDTO):
            enabled: Optional[bool] = wire_field("enabled", default=False)

        assert build_shape(Flagged).by_attribute("enabled").default_value is False
        assert Flagged().enabled is False
