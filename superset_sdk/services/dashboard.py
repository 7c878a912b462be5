"""
Dashboard endpoints: lookup, listing and embedded uuid.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Union

from ..api.dashboard import Dashboard, EmbeddedDashboard
from ..core.errors import UnexpectedResponseError
from ..core.logging import get_logger
from .base import ResourceService


logger = get_logger("superset_sdk.services.dashboard")

Identifier = Union[int, str]


class DashboardService(ResourceService):
    """
    Read access to ``/api/v1/dashboard``.
    """

    def get(self, identifier: Identifier) -> Dashboard:
        """
        Fetch one dashboard by numeric id or slug.
        """

        response = self._http.get(self._urls.build("dashboard/{identifier}", identifier=identifier))
        result = self._result(response)
        if not isinstance(result, Mapping):
            raise UnexpectedResponseError(_not_found_message(identifier))
        return self._serializer.hydrate(result, Dashboard)

    def uuid(self, identifier: Identifier) -> str:
        """
        Return the embedded uuid of a dashboard, used to request guest tokens.
        """

        response = self._http.get(
            self._urls.build("dashboard/{identifier}/embedded", identifier=identifier)
        )
        result = self._result(response)
        if not isinstance(result, Mapping):
            raise UnexpectedResponseError(_not_found_message(identifier, "UUID"))

        embedded = self._serializer.hydrate(result, EmbeddedDashboard)
        if not isinstance(embedded.uuid, str):
            raise UnexpectedResponseError(_not_found_message(identifier, "UUID"))
        return embedded.uuid

    def list(self, tag: Optional[str] = None, only_published: Optional[bool] = None) -> List[Dashboard]:
        """
        List dashboards, optionally filtered by tag and published state.

        Non-object items in the response are skipped.
        """

        params: Dict[str, Any] = {}
        if tag is not None:
            params["q"] = json.dumps(
                {"filters": [{"col": "tags", "opr": "dashboard_tags", "value": tag}]},
                separators=(",", ":"),
            )
        if only_published is not None:
            params["published"] = "true" if only_published else "false"

        response = self._http.get(self._urls.build("dashboard"), params)
        result = self._result(response)
        if result is None:
            return []
        if not isinstance(result, list):
            raise UnexpectedResponseError("Invalid dashboards data format received from API")

        dashboards = self._hydrate_list(result, Dashboard)
        logger.debug("Listed %d dashboards (%d raw items)", len(dashboards), len(result))
        return dashboards


def _not_found_message(identifier: Identifier, what: str = "data") -> str:
    return f"Dashboard {what} not found in response for dashboard identifier '{identifier}'"
