"""
Unit tests for AuthenticationService.
"""

import pytest

from superset_sdk.auth.authentication import AuthenticationService
from superset_sdk.core.errors import AuthenticationError


@pytest.fixture
def auth(http_client, url_builder, serializer):
    return AuthenticationService(http_client, url_builder, serializer)


class TestAuthenticate:
    """Test access token login."""

    def test_authenticate_success(self, auth, http_client, base_url):
        http_client.post.return_value = {"access_token": "test-access-token"}

        result = auth.authenticate("admin", "password")

        assert result is auth
        assert auth.access_token == "test-access-token"
        assert auth.is_authenticated()
        http_client.post.assert_called_once_with(
            f"{base_url}/api/v1/security/login",
            {"username": "admin", "password": "password", "provider": "db", "refresh": True},
            {"Referer": base_url},
        )
        http_client.add_default_header.assert_called_once_with(
            "Authorization", "Bearer test-access-token"
        )

    def test_authenticate_with_provider(self, auth, http_client):
        http_client.post.return_value = {"access_token": "token"}

        auth.authenticate("admin", "password", provider="ldap", refresh=False)

        payload = http_client.post.call_args[0][1]
        assert payload["provider"] == "ldap"
        assert payload["refresh"] is False

    @pytest.mark.parametrize("response", [{}, {"access_token": None}, {"access_token": 42}])
    def test_authenticate_without_token(self, auth, http_client, response):
        http_client.post.return_value = response

        with pytest.raises(AuthenticationError, match="Authentication failed: No access_token received"):
            auth.authenticate("admin", "wrong")

        assert not auth.is_authenticated()
        http_client.add_default_header.assert_not_called()

    def test_set_access_token(self, auth, http_client):
        assert auth.set_access_token("external") is auth

        assert auth.access_token == "external"
        http_client.add_default_header.assert_called_once_with("Authorization", "Bearer external")


class TestCsrfToken:
    """Test CSRF token retrieval."""

    def test_request_csrf_token_success(self, auth, http_client, base_url):
        http_client.get.return_value = {"result": "csrf-token-value"}

        assert auth.request_csrf_token() == "csrf-token-value"

        assert auth.csrf_token == "csrf-token-value"
        http_client.get.assert_called_once_with(
            f"{base_url}/api/v1/security/csrf_token/",
            {},
            {"Referer": base_url},
        )
        http_client.add_default_header.assert_called_once_with("X-CSRFToken", "csrf-token-value")

    @pytest.mark.parametrize("response", [{}, {"result": 123}])
    def test_request_csrf_token_failure(self, auth, http_client, response):
        http_client.get.return_value = response

        with pytest.raises(AuthenticationError, match="Failed to get CSRF token"):
            auth.request_csrf_token()

        assert auth.csrf_token is None


class TestGuestToken:
    """Test guest token creation."""

    def test_create_guest_token(self, auth, http_client, base_url, dashboard_uuid):
        http_client.post.return_value = {"token": "guest-token"}

        token = auth.create_guest_token(
            {"username": "jdoe", "first_name": "John", "last_name": "Doe"},
            {"dashboard": dashboard_uuid},
            [{"clause": "user_id = 1"}],
        )

        assert token == "guest-token"
        assert auth.guest_token == "guest-token"
        http_client.post.assert_called_once_with(
            f"{base_url}/api/v1/security/guest_token",
            {
                "resources": [{"type": "dashboard", "id": dashboard_uuid}],
                "user": {"username": "jdoe", "first_name": "John", "last_name": "Doe"},
                "rls": [{"clause": "user_id = 1"}],
            },
            {"Referer": base_url},
        )

    def test_guest_token_default_user(self, auth, http_client, dashboard_uuid):
        http_client.post.return_value = {"token": "guest-token"}

        auth.create_guest_token({}, {"dashboard": dashboard_uuid})

        payload = http_client.post.call_args[0][1]
        assert payload["user"] == {
            "username": "Guest_User",
            "first_name": "Guest",
            "last_name": "User",
        }
        assert payload["rls"] == []

    def test_guest_token_missing(self, auth, http_client, dashboard_uuid):
        http_client.post.return_value = {"error": "nope"}

        with pytest.raises(AuthenticationError, match="Authentication failed: No token received"):
            auth.create_guest_token(None, {"dashboard": dashboard_uuid})

        assert auth.guest_token is None
