"""
Resource services built on the HTTP transport and the serializer.
"""

from .base import ResourceService, filter_mappings
from .dashboard import DashboardService
from .guest_user import GuestUserService

__all__ = ["DashboardService", "GuestUserService", "ResourceService", "filter_mappings"]
