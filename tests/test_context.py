"""Tests for caller identity, the identity provider client and the ownership guard."""

from unittest.mock import MagicMock

import pytest
import requests

from ordabok.core.exceptions import AuthenticationError, AuthorizationError
from ordabok.core.identity import AppwriteClient, IdentityProviderError
from ordabok.core.context import parse_authorization, resolve_caller
from ordabok.services.ownership import is_owner, require_admin, require_caller, require_owner


def appwrite(response=None, error=None) -> AppwriteClient:
    http = MagicMock()
    if error is not None:
        http.get.side_effect = error
    else:
        http.get.return_value = response
    return AppwriteClient("https://auth.example.org/v1/", "ordabok", "api-key", session=http)


def sessions_response(*session_ids) -> MagicMock:
    response = MagicMock()
    response.json.return_value = {"total": len(session_ids), "sessions": [{"$id": s} for s in session_ids]}
    return response


class TestParseAuthorization:
    """Tests for the Authorization header format."""

    def test_valid(self) -> None:
        assert parse_authorization("user1;session1") == ("user1", "session1")

    @pytest.mark.parametrize("value", [None, "", "user1", "user1;", ";session1", "a;b;c"])
    def test_malformed(self, value) -> None:
        assert parse_authorization(value) is None


class TestAppwriteClient:
    """Tests for the session check against Appwrite."""

    def test_matching_session(self) -> None:
        client = appwrite(sessions_response("other", "s1"))
        assert client.check_session("s1", "user1") is True

        url = client.http.get.call_args.args[0]
        headers = client.http.get.call_args.kwargs["headers"]
        assert url == "https://auth.example.org/v1/users/user1/sessions"
        assert headers["X-Appwrite-Key"] == "api-key"
        assert headers["X-Appwrite-Project"] == "ordabok"

    def test_no_matching_session(self) -> None:
        assert appwrite(sessions_response("other")).check_session("s1", "user1") is False

    def test_unreachable_provider(self) -> None:
        client = appwrite(error=requests.ConnectionError("refused"))
        with pytest.raises(IdentityProviderError):
            client.check_session("s1", "user1")

    def test_http_error(self) -> None:
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
        with pytest.raises(IdentityProviderError):
            appwrite(response).check_session("s1", "user1")

    def test_invalid_json(self) -> None:
        response = MagicMock()
        response.json.side_effect = ValueError("no json")
        with pytest.raises(IdentityProviderError):
            appwrite(response).check_session("s1", "user1")

    def test_unconfigured_endpoint(self) -> None:
        with pytest.raises(IdentityProviderError):
            AppwriteClient("", "ordabok", "api-key").check_session("s1", "user1")


class TestResolveCaller:
    """Tests for establishing the caller identity."""

    def test_valid_session(self, identity) -> None:
        assert resolve_caller("alice;s-alice", identity) == "alice"
        identity.check_session.assert_called_once_with("s-alice", "alice")

    def test_rejected_session(self, identity) -> None:
        assert resolve_caller("alice;s-bob", identity) is None

    def test_malformed_header_skips_provider(self, identity) -> None:
        assert resolve_caller("alice", identity) is None
        identity.check_session.assert_not_called()

    def test_provider_error_is_anonymous(self) -> None:
        provider = MagicMock()
        provider.check_session.side_effect = IdentityProviderError("timeout")
        assert resolve_caller("alice;s1", provider) is None


class TestOwnership:
    """Tests for the ownership guard."""

    def test_is_owner(self) -> None:
        assert is_owner("alice", "alice")
        assert not is_owner("alice", "bob")
        assert not is_owner("alice", None)

    def test_require_caller(self) -> None:
        assert require_caller("alice") == "alice"
        with pytest.raises(AuthenticationError):
            require_caller(None)

    def test_require_owner(self) -> None:
        require_owner("alice", "alice")
        with pytest.raises(AuthorizationError):
            require_owner("alice", "bob")
        with pytest.raises(AuthenticationError):
            require_owner("alice", None)

    def test_require_admin(self) -> None:
        require_admin("secret", "secret")
        with pytest.raises(AuthorizationError):
            require_admin("Secret", "secret")
        with pytest.raises(AuthorizationError):
            require_admin(None, "secret")
        with pytest.raises(AuthorizationError):
            require_admin("", "")
