"""
Security DTOs used for guest token issuance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core.dto import BaseDTO
from ..serializer import FieldKind, wire_field, wire_shape


@wire_shape(name="GuestUser")
@dataclass(frozen=True)
class GuestUser(BaseDTO):
    """
    Identity embedded in a guest token.
    """

    username: Optional[str] = wire_field("username")
    first_name: Optional[str] = wire_field("first_name")
    last_name: Optional[str] = wire_field("last_name")


@wire_shape(name="GuestTokenRequest")
@dataclass(frozen=True)
class GuestTokenRequest(BaseDTO):
    """
    Body of ``POST /api/v1/security/guest_token``.

    ``resources`` items are ``{"type": ..., "id": ...}`` records and ``rls``
    items are row level security rules such as ``{"clause": "user_id = 1"}``.
    """

    resources: Tuple[Dict[str, Any], ...] = wire_field("resources", kind=FieldKind.LIST_OF_MAPPING)
    user: Optional[GuestUser] = wire_field("user", kind=FieldKind.NESTED, nested=GuestUser)
    rls: Tuple[Dict[str, Any], ...] = wire_field("rls", kind=FieldKind.LIST_OF_MAPPING)
