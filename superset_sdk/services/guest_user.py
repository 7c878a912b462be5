"""
Guest user identity for embedded dashboards.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..api.security import GuestUser


class GuestUserService:
    """
    Builds the ``user`` part of a guest token request.

    Missing names fall back to fixed literals; a missing username is derived
    from the first and last name.
    """

    GUEST_FIRST_NAME = "Guest"
    GUEST_LAST_NAME = "User"

    @classmethod
    def create(cls, attributes: Optional[Mapping[str, Any]] = None) -> GuestUser:
        attributes = attributes or {}

        first_name = attributes.get("first_name") or cls.GUEST_FIRST_NAME
        last_name = attributes.get("last_name") or cls.GUEST_LAST_NAME
        username = attributes.get("username") or f"{first_name}_{last_name}"

        return GuestUser(
            username=str(username),
            first_name=str(first_name),
            last_name=str(last_name),
        )
