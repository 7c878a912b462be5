"""
Per-kind value conversion between wire JSON and DTO attributes.

Hydration direction (``*_from_wire``) validates the raw JSON value and
raises ``CoercionError`` naming the wire field on mismatch. Dehydration
direction (``*_to_wire``) produces fresh, JSON-encodable values.
"""

from __future__ import annotations

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from ..core.errors import CoercionError


def datetime_from_wire(field_name: str, raw: Any, require_timezone: bool = True) -> datetime:
    """
    Parse an ISO-8601 timestamp (``YYYY-MM-DDTHH:MM:SS`` followed by
    ``±HH:MM`` or ``Z``) into an aware ``datetime``.
    """

    if not isinstance(raw, str):
        raise CoercionError(field_name, raw, "expected an ISO-8601 string")

    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        value = datetime.fromisoformat(text)
    except ValueError as exc:
        raise CoercionError(field_name, raw, "not an ISO-8601 timestamp") from exc

    if value.tzinfo is None:
        if require_timezone:
            raise CoercionError(field_name, raw, "timestamp has no UTC offset")
        value = value.replace(tzinfo=timezone.utc)
    return value


def datetime_to_wire(field_name: str, value: Any) -> str:
    """
    Render a ``datetime`` as ISO-8601 in UTC (``+00:00``). Naive values are
    taken to be UTC already.
    """

    if not isinstance(value, datetime):
        raise CoercionError(field_name, value, "expected a datetime")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def mapping_from_wire(field_name: str, raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, Mapping):
        raise CoercionError(field_name, raw, "expected a JSON object")
    return dict(raw)


def mapping_list_from_wire(field_name: str, raw: Any) -> Tuple[Dict[str, Any], ...]:
    """
    Copy a JSON array of objects into a tuple of dicts.

    No element is skipped: dropping malformed list items is up to the
    caller before hydration.
    """

    if not isinstance(raw, (list, tuple)):
        raise CoercionError(field_name, raw, "expected a JSON array")
    items = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise CoercionError(f"{field_name}[{index}]", item, "expected a JSON object")
        items.append(dict(item))
    return tuple(items)


def mapping_to_wire(field_name: str, value: Any) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise CoercionError(field_name, value, "expected a mapping")
    return dict(value)


def mapping_list_to_wire(field_name: str, value: Any) -> List[Dict[str, Any]]:
    if isinstance(value, (str, bytes, Mapping)) or not hasattr(value, "__iter__"):
        raise CoercionError(field_name, value, "expected a sequence of mappings")
    result = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise CoercionError(f"{field_name}[{index}]", item, "expected a mapping")
        result.append(dict(item))
    return result


def freeze_mapping(value: Any) -> Any:
    """Copy a mapping attribute behind a read-only proxy (one level deep)."""
    if isinstance(value, Mapping):
        return MappingProxyType(dict(value))
    return value


def freeze_mapping_list(value: Any) -> Any:
    """Turn a list attribute into a tuple of read-only mapping copies."""
    if isinstance(value, (list, tuple)):
        return tuple(freeze_mapping(item) for item in value)
    return value
