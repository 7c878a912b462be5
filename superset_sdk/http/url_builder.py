"""
URL building for Superset REST endpoints.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote


class UrlBuilder:
    """
    Builds ``<base_url>/api/<version>/<path>`` URLs.

    Path placeholders are filled from keyword arguments and URL-quoted::

        builder = UrlBuilder("https://superset.example.com")
        builder.build("dashboard/{identifier}/embedded", identifier="sales")
        # https://superset.example.com/api/v1/dashboard/sales/embedded
    """

    def __init__(self, base_url: str, api_version: str = "v1") -> None:
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version.strip("/")

    @property
    def api_root(self) -> str:
        return f"{self.base_url}/api/{self.api_version}"

    def build(self, path: str, **params: Any) -> str:
        if params:
            path = path.format(
                **{key: quote(str(value), safe="") for key, value in params.items()}
            )
        return f"{self.api_root}/{path.lstrip('/')}"
