"""
Low-level HTTP client for Superset.

This module is responsible for:
- keeping the session (cookies) and default headers
- making HTTP requests
- basic error handling and JSON decoding
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol

import requests

from ..core.errors import IntegrationError, UnexpectedResponseError
from ..core.logging import get_logger


logger = get_logger("superset_sdk.http")


class HttpClient(Protocol):
    """
    Transport interface used by the auth and resource services.
    """

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        ...

    def post(
        self,
        url: str,
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        ...

    def add_default_header(self, name: str, value: str) -> None:
        ...


class SupersetHttpClient:
    """
    ``requests`` based HTTP client for Superset's REST API.

    A single session is kept so the cookie Superset pairs with a CSRF token
    is sent back on later requests.
    """

    def __init__(
        self,
        timeout_seconds: int = 30,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.verify_ssl = verify_ssl
        self._session = session or requests.Session()
        self._default_headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @property
    def default_headers(self) -> Dict[str, str]:
        return dict(self._default_headers)

    def add_default_header(self, name: str, value: str) -> None:
        """
        Send ``name: value`` with every following request.
        """

        self._default_headers[name] = value

    def _headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers = dict(self._default_headers)
        if extra:
            headers.update(extra)
        return headers

    def request(
        self,
        method: str,
        url: str,
        payload: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Make an HTTP request and return the decoded JSON object.

        Raises:
            IntegrationError: network failure, non-2xx status or non-JSON body.
            UnexpectedResponseError: the JSON body is not an object.
        """

        logger.debug("Superset HTTP request: %s %s", method.upper(), url)

        try:
            response = self._session.request(
                method=method.upper(),
                url=url,
                headers=self._headers(headers),
                json=dict(payload) if payload is not None else None,
                params=dict(params) if params else None,
                timeout=self.timeout_seconds,
                verify=self.verify_ssl,
            )
        except requests.RequestException as exc:
            logger.error("Superset request %s %s failed: %s", method.upper(), url, exc)
            raise IntegrationError(f"Superset request failed: {exc}") from exc

        handle_superset_error(response)

        try:
            body = response.json()
        except ValueError as exc:
            raise IntegrationError(
                f"Superset response did not contain valid JSON (status={response.status_code})"
            ) from exc

        if not isinstance(body, dict):
            raise UnexpectedResponseError(
                f"Superset response is not a JSON object (got {type(body).__name__})"
            )
        return body

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        return self.request("GET", url, params=params, headers=headers)

    def post(
        self,
        url: str,
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        return self.request("POST", url, payload=payload, headers=headers)


def handle_superset_error(response: requests.Response) -> None:
    """
    Raise an IntegrationError for non-success responses from Superset.
    """

    if 200 <= response.status_code < 300:
        return

    try:
        payload = response.json()
    except ValueError:
        payload = {"raw": response.text[:200]}

    logger.error(
        "Superset HTTP error %s: %s",
        response.status_code,
        payload,
    )
    raise IntegrationError(f"Superset error {response.status_code}: {payload}")
