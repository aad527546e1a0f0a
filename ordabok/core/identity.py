"""
Client for the external identity provider (Appwrite).

Only session validation is used: the provider lists a user's sessions and a
session is valid when one of them carries the given id.
"""
import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class IdentityProviderError(Exception):
    """Raised when the identity provider cannot answer."""
    pass


class AppwriteClient:
    """Blocking Appwrite users API client."""

    def __init__(
        self,
        endpoint: str,
        project: str,
        api_key: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint.rstrip("/")
        self.project = project
        self.api_key = api_key
        self.timeout = timeout
        self.http = session or requests.Session()

    @classmethod
    def from_settings(cls, settings) -> "AppwriteClient":
        return cls(
            endpoint=settings.appwrite_endpoint,
            project=settings.appwrite_project,
            api_key=settings.appwrite_api_key,
            timeout=settings.appwrite_timeout,
        )

    def check_session(self, session_id: str, user_id: str) -> bool:
        """
        Whether ``session_id`` is a live session of ``user_id``.

        Raises:
            IdentityProviderError: If the provider is unreachable or answers garbage
        """
        if not self.endpoint:
            raise IdentityProviderError("Appwrite endpoint is not configured")

        url = f"{self.endpoint}/users/{user_id}/sessions"
        try:
            response = self.http.get(
                url,
                headers={
                    "X-Appwrite-Key": self.api_key,
                    "X-Appwrite-Project": self.project,
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise IdentityProviderError(f"Session lookup for user {user_id} failed: {e}") from e
        except ValueError as e:
            raise IdentityProviderError(f"Invalid session list for user {user_id}: {e}") from e

        sessions = payload.get("sessions", []) if isinstance(payload, dict) else []
        return any(
            isinstance(session, dict) and session.get("$id") == session_id
            for session in sessions
        )
