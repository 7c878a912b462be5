"""
Authentication against Superset's security API.

Covers the three tokens an embedding backend needs:
- the access token (``POST /security/login``), sent as ``Authorization``
- the CSRF token (``GET /security/csrf_token/``), sent as ``X-CSRFToken``
- a guest token (``POST /security/guest_token``) handed to the browser
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..api.security import GuestTokenRequest
from ..core.errors import AuthenticationError
from ..core.logging import get_logger
from ..http.superset_http import HttpClient
from ..http.url_builder import UrlBuilder
from ..serializer import SerializerService
from ..services.guest_user import GuestUserService


logger = get_logger("superset_sdk.auth")


class AuthenticationService:
    """
    Obtains and stores Superset tokens, installing them as default headers
    on the shared HTTP client.
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
        self._access_token: Optional[str] = None
        self._csrf_token: Optional[str] = None
        self._guest_token: Optional[str] = None

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def csrf_token(self) -> Optional[str]:
        return self._csrf_token

    @property
    def guest_token(self) -> Optional[str]:
        return self._guest_token

    def is_authenticated(self) -> bool:
        return self._access_token is not None

    def _referer(self) -> Dict[str, str]:
        return {"Referer": self._urls.base_url}

    def set_access_token(self, token: str) -> "AuthenticationService":
        """
        Use an access token obtained elsewhere. Returns ``self`` for chaining.
        """

        self._access_token = token
        self._http.add_default_header("Authorization", f"Bearer {token}")
        return self

    def authenticate(
        self,
        username: str,
        password: str,
        provider: str = "db",
        refresh: bool = True,
    ) -> "AuthenticationService":
        """
        Log in and store the returned access token.

        Raises:
            AuthenticationError: The response has no string ``access_token``.
        """

        response = self._http.post(
            self._urls.build("security/login"),
            {
                "username": username,
                "password": password,
                "provider": provider,
                "refresh": refresh,
            },
            self._referer(),
        )

        token = response.get("access_token")
        if not isinstance(token, str):
            logger.warning("Login for user %s returned no access token", username)
            raise AuthenticationError("Authentication failed: No access_token received")

        logger.info("Authenticated against %s as %s", self._urls.base_url, username)
        return self.set_access_token(token)

    def request_csrf_token(self) -> str:
        """
        Fetch a CSRF token and send it with every following request.

        Raises:
            AuthenticationError: The response has no string ``result``.
        """

        response = self._http.get(
            self._urls.build("security/csrf_token/"),
            {},
            self._referer(),
        )

        token = response.get("result")
        if not isinstance(token, str):
            raise AuthenticationError("Failed to get CSRF token")

        self._csrf_token = token
        self._http.add_default_header("X-CSRFToken", token)
        return token

    def create_guest_token(
        self,
        user_attributes: Optional[Mapping[str, Any]],
        resources: Mapping[str, str],
        rls: Optional[Iterable[Mapping[str, Any]]] = None,
    ) -> str:
        """
        Request a guest token for embedding.

        Args:
            user_attributes: ``username``/``first_name``/``last_name``; missing
                values are filled by ``GuestUserService``.
            resources: Resource type to id, e.g. ``{"dashboard": "<uuid>"}``.
            rls: Row level security rules, e.g. ``[{"clause": "user_id = 1"}]``.

        Raises:
            AuthenticationError: The response has no string ``token``.
        """

        request = GuestTokenRequest(
            resources=_resource_list(resources),
            user=GuestUserService.create(user_attributes),
            rls=tuple(rls or ()),
        )

        response = self._http.post(
            self._urls.build("security/guest_token"),
            self._serializer.dehydrate(request),
            self._referer(),
        )

        token = response.get("token")
        if not isinstance(token, str):
            raise AuthenticationError("Authentication failed: No token received")

        self._guest_token = token
        logger.debug("Issued guest token for resources %s", list(resources))
        return token


def _resource_list(resources: Mapping[str, str]) -> List[Dict[str, str]]:
    return [{"type": resource_type, "id": resource_id} for resource_type, resource_id in resources.items()]
