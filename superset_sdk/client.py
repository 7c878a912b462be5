"""
Entry point bundling the Superset services behind one object.
"""

from __future__ import annotations

from typing import Optional

from .auth.authentication import AuthenticationService
from .core.config import SdkConfig
from .core.errors import ConfigError
from .core.logging import configure_logging, get_logger
from .http.superset_http import HttpClient, SupersetHttpClient
from .http.url_builder import UrlBuilder
from .serializer import SerializerService
from .services.dashboard import DashboardService


logger = get_logger("superset_sdk.client")


class SupersetClient:
    """
    Superset API client.

    Usage::

        client = SupersetClient.from_config(load_config())
        client.auth().authenticate("admin", "secret")
        for dashboard in client.dashboard().list():
            print(dashboard.title)
    """

    def __init__(
        self,
        http_client: HttpClient,
        url_builder: UrlBuilder,
        serializer: Optional[SerializerService] = None,
    ) -> None:
        self._http = http_client
        self._urls = url_builder
        self._serializer = serializer or SerializerService()
        self._auth: Optional[AuthenticationService] = None
        self._dashboard: Optional[DashboardService] = None

    @classmethod
    def from_config(cls, config: SdkConfig) -> "SupersetClient":
        """
        Factory to construct a client from ``SdkConfig``.

        Logs in right away when credentials are configured.
        """

        if not config.superset:
            raise ConfigError("Superset configuration is not set in SdkConfig")

        configure_logging(config.logging)

        http_client = SupersetHttpClient(
            timeout_seconds=config.superset.timeout_seconds,
            verify_ssl=config.superset.verify_ssl,
        )
        client = cls(
            http_client=http_client,
            url_builder=UrlBuilder(config.superset.base_url, config.superset.api_version),
            serializer=SerializerService(config.serializer),
        )

        if config.superset.username and config.superset.password:
            client.auth().authenticate(
                config.superset.username,
                config.superset.password,
                provider=config.superset.provider,
            )
        return client

    @property
    def serializer(self) -> SerializerService:
        return self._serializer

    def auth(self) -> AuthenticationService:
        if self._auth is None:
            self._auth = AuthenticationService(self._http, self._urls, self._serializer)
        return self._auth

    def dashboard(self) -> DashboardService:
        if self._dashboard is None:
            self._dashboard = DashboardService(self._http, self._urls, self._serializer)
        return self._dashboard
