"""
HTTP transport and URL building for the Superset REST API.
"""

from .superset_http import HttpClient, SupersetHttpClient
from .url_builder import UrlBuilder

__all__ = ["HttpClient", "SupersetHttpClient", "UrlBuilder"]
