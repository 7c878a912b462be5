"""
Shared helpers for resource services.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping

from ..core.logging import get_logger
from ..http.superset_http import HttpClient
from ..http.url_builder import UrlBuilder
from ..serializer import SerializerService
from ..serializer.registry import TypeId


logger = get_logger("superset_sdk.services")


def filter_mappings(items: Iterable[Any]) -> Iterator[Mapping[str, Any]]:
    """
    Yield only the items that are JSON objects, keeping their order.

    Strings, ``None`` and other non-object entries are dropped silently.
    """

    for item in items:
        if isinstance(item, Mapping):
            yield item
        else:
            logger.debug("Skipping non-object list item of type %s", type(item).__name__)


class ResourceService:
    """
    Base class for services that fetch a resource and hydrate it.
    """

    def __init__(
        self,
        http_client: HttpClient,
        url_builder: UrlBuilder,
        serializer: SerializerService,
    ) -> None:
        self._http = http_client
        self._urls = url_builder
        self._serializer = serializer

    def _hydrate_list(self, items: Iterable[Any], type_id: TypeId) -> List[Any]:
        """
        Filter ``items`` to JSON objects, then hydrate each one.

        A hydration failure on an object aborts the whole list.
        """

        return list(self._serializer.hydrate_many(filter_mappings(items), type_id))

    @staticmethod
    def _result(response: Dict[str, Any]) -> Any:
        return response.get("result")
