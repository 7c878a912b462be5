"""
Shared fixtures for the Superset SDK tests.
"""

from unittest.mock import Mock

import pytest

from superset_sdk.core.config import SerializerConfig
from superset_sdk.http.superset_http import SupersetHttpClient
from superset_sdk.http.url_builder import UrlBuilder
from superset_sdk.serializer import SerializerService


BASE_URL = "https://superset.example.com"
UUID = "a1b2c3d4-5e6f-4a7b-8c9d-0e1f2a3b4c5d"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def dashboard_uuid():
    return UUID


@pytest.fixture
def url_builder():
    return UrlBuilder(BASE_URL)


@pytest.fixture
def serializer():
    return SerializerService(SerializerConfig())


@pytest.fixture
def http_client():
    return Mock(spec=SupersetHttpClient)


@pytest.fixture
def complete_dashboard_payload():
    return {
        "id": 123,
        "dashboard_title": "Production Dashboard",
        "slug": "production-dashboard",
        "url": "/superset/dashboard/production/",
        "published": True,
        "css": ".dashboard { background: white; }",
        "position_json": '{"GRID_ID": {"children": []}}',
        "json_metadata": '{"timed_refresh_immune_slices": []}',
        "owners": [
            {"id": 1, "first_name": "Alice", "last_name": "Smith"},
            {"id": 2, "first_name": "Bob", "last_name": "Jones"},
        ],
        "created_by": {"id": 3, "first_name": "Charlie", "last_name": "Brown"},
        "changed_by": {"id": 4, "first_name": "Diana", "last_name": "Prince"},
        "changed_on_utc": "2024-01-15T14:30:00+00:00",
        "tags": [
            {"id": 10, "name": "production", "type": 1},
            {"id": 11, "name": "owner:1", "type": 3},
        ],
        "roles": [
            {"id": 5, "name": "Admin"},
            {"id": 6, "name": "Public"},
        ],
        "thumbnail_url": "/api/v1/dashboard/789/thumbnail/xyz789/",
        "is_managed_externally": True,
        "uuid": UUID,
    }
