"""
Dashboard DTOs.

Field names follow Python conventions; the wire names are the ones used by
Superset's ``/api/v1/dashboard`` endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..core.dto import BaseDTO
from ..serializer import FieldKind, wire_field, wire_shape


@wire_shape(name="Dashboard")
@dataclass(frozen=True)
class Dashboard(BaseDTO):
    """
    A Superset dashboard as returned by ``GET /api/v1/dashboard[/<id>]``.

    ``owners``, ``tags`` and ``roles`` are tuples of raw records;
    ``created_by`` and ``updated_by`` are raw user records. They are not
    typed further.
    """

    id: Optional[int] = wire_field("id", required=True)
    title: Optional[str] = wire_field("dashboard_title")
    slug: Optional[str] = wire_field("slug")
    url: Optional[str] = wire_field("url")
    is_published: Optional[bool] = wire_field("published")
    css: Optional[str] = wire_field("css")
    position: Optional[str] = wire_field("position_json")
    metadata: Optional[str] = wire_field("json_metadata")
    owners: Tuple[Dict[str, Any], ...] = wire_field("owners", kind=FieldKind.LIST_OF_MAPPING)
    created_by: Optional[Dict[str, Any]] = wire_field("created_by", kind=FieldKind.MAPPING)
    updated_by: Optional[Dict[str, Any]] = wire_field("changed_by", kind=FieldKind.MAPPING)
    updated_at: Optional[datetime] = wire_field("changed_on_utc", kind=FieldKind.DATETIME)
    tags: Tuple[Dict[str, Any], ...] = wire_field("tags", kind=FieldKind.LIST_OF_MAPPING)
    roles: Tuple[Dict[str, Any], ...] = wire_field("roles", kind=FieldKind.LIST_OF_MAPPING)
    thumbnail: Optional[str] = wire_field("thumbnail_url")
    is_managed_externally: Optional[bool] = wire_field("is_managed_externally")
    uuid: Optional[str] = wire_field("uuid")


@wire_shape(name="EmbeddedDashboard")
@dataclass(frozen=True)
class EmbeddedDashboard(BaseDTO):
    """
    Embedding configuration from ``GET /api/v1/dashboard/<id>/embedded``.
    """

    uuid: Optional[str] = wire_field("uuid")
    dashboard_id: Optional[str] = wire_field("dashboard_id")
    allowed_domains: Tuple[str, ...] = wire_field("allowed_domains", default=())
    changed_on: Optional[str] = wire_field("changed_on")
