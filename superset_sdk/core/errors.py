"""
Core error types for the Superset SDK.

These exceptions provide a common base for all raised errors across the
SDK so that callers (services, the client facade and applications built on
top) can handle them in a consistent way.
"""

from __future__ import annotations

from typing import Any


class SupersetError(Exception):
    """
    Base exception for all SDK-specific errors.
    """


class ConfigError(SupersetError):
    """
    Raised when configuration is missing, invalid, or inconsistent.
    """


class IntegrationError(SupersetError):
    """
    Raised when the Superset HTTP API fails (network error, non-2xx status,
    body that is not JSON).
    """


class AuthenticationError(SupersetError):
    """
    Raised when login, CSRF or guest token issuance does not return the
    expected token.
    """


class UnexpectedResponseError(SupersetError):
    """
    Raised when a decoded API response does not have the structure a
    service expects (missing ``result``, wrong type, missing uuid...).
    """


# Serializer errors


class SerializationError(SupersetError):
    """
    Base class for hydration/dehydration failures.
    """


class UnknownShapeError(SerializationError):
    """
    Raised when a DTO type was never registered with the shape registry.
    """

    def __init__(self, type_id: Any) -> None:
        self.type_id = type_id
        name = getattr(type_id, "__name__", type_id)
        super().__init__(f"No wire shape registered for {name!r}")


class ShapeDefinitionError(SerializationError):
    """
    Raised when a DTO declaration is inconsistent (duplicate wire names,
    conflicting registration, missing nested type).
    """


class InvalidWireShapeError(SerializationError):
    """
    Raised when the top-level wire payload is not a mapping.
    """

    def __init__(self, type_name: str, raw: Any) -> None:
        self.type_name = type_name
        self.raw = raw
        super().__init__(
            f"Cannot hydrate {type_name}: expected a JSON object, "
            f"got {type(raw).__name__}"
        )


class CoercionError(SerializationError):
    """
    Raised when a field's raw value cannot be converted to its declared kind.
    """

    def __init__(self, field_name: str, raw_value: Any, reason: str = "") -> None:
        self.field_name = field_name
        self.raw_value = raw_value
        self.reason = reason
        message = f"Cannot coerce field {field_name!r} from value {raw_value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
