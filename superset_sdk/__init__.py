"""
Python client for the Apache Superset REST API.

Packages:
- ``core``: configuration, errors, logging, DTO base class
- ``serializer``: wire JSON ↔ DTO hydration and dehydration
- ``api``: DTOs (dashboards, guest token payloads)
- ``http``: transport and URL building
- ``auth``: access, CSRF and guest tokens
- ``services``: resource services (dashboards, guest users)
"""

from .client import SupersetClient

__all__ = ["SupersetClient"]
