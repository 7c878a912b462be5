"""
Unit tests for per-kind value conversion.
"""

from datetime import datetime, timezone

import pytest

from superset_sdk.core.errors import CoercionError
from superset_sdk.serializer.coercion import (
    datetime_from_wire,
    datetime_to_wire,
    freeze_mapping_list,
    mapping_from_wire,
    mapping_list_from_wire,
    mapping_list_to_wire,
)


class TestDateTime:
    """Test ISO-8601 parsing and rendering."""

    @pytest.mark.parametrize(
        "raw",
        [
            "2024-01-15T14:30:00+00:00",
            "2024-01-15T14:30:00Z",
            "2024-01-15T16:30:00+02:00",
            "2024-01-15T09:30:00-05:00",
        ],
    )
    def test_parses_offsets(self, raw):
        assert datetime_from_wire("ts", raw) == datetime(2024, 1, 15, 14, 30, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", ["not-a-date", "", "2024-13-01T00:00:00Z", "yesterday"])
    def test_rejects_malformed(self, raw):
        with pytest.raises(CoercionError) as exc_info:
            datetime_from_wire("ts", raw)

        assert exc_info.value.field_name == "ts"
        assert exc_info.value.raw_value == raw

    def test_renders_utc(self):
        value = datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)

        assert datetime_to_wire("ts", value) == "2024-01-02T10:00:00+00:00"

    def test_naive_rendered_as_utc(self):
        assert datetime_to_wire("ts", datetime(2024, 1, 2, 10, 0)) == "2024-01-02T10:00:00+00:00"

    def test_render_rejects_non_datetime(self):
        with pytest.raises(CoercionError):
            datetime_to_wire("ts", "2024-01-02")


class TestMappings:
    """Test mapping and list-of-mapping conversion."""

    def test_mapping_is_copied(self):
        raw = {"id": 1}
        value = mapping_from_wire("created_by", raw)

        assert value == raw
        assert value is not raw

    def test_mapping_list_becomes_tuple(self):
        value = mapping_list_from_wire("tags", [{"id": 1}, {"id": 2}])

        assert value == ({"id": 1}, {"id": 2})

    def test_mapping_list_rejects_mapping(self):
        with pytest.raises(CoercionError):
            mapping_list_from_wire("tags", {"id": 1})

    def test_mapping_list_to_wire(self):
        assert mapping_list_to_wire("tags", ({"id": 1},)) == [{"id": 1}]

    def test_mapping_list_to_wire_rejects_string(self):
        with pytest.raises(CoercionError):
            mapping_list_to_wire("tags", "tag1")

    def test_freeze_mapping_list(self):
        assert freeze_mapping_list([{"id": 1}]) == ({"id": 1},)
        assert freeze_mapping_list(None) is None
