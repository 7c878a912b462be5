"""
DTOs exchanged with the Superset REST API.

Importing this package registers every DTO shape with the default
serializer registry.
"""

from .dashboard import Dashboard, EmbeddedDashboard
from .security import GuestTokenRequest, GuestUser

__all__ = ["Dashboard", "EmbeddedDashboard", "GuestTokenRequest", "GuestUser"]
