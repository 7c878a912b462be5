"""
Superset authentication (access, CSRF and guest tokens).
"""

from .authentication import AuthenticationService

__all__ = ["AuthenticationService"]
