"""
Per-request context handed to every repository, resolver and mutation call.
"""
from dataclasses import dataclass, replace
from typing import Optional, Protocol, Tuple
import logging

from ordabok.core.database import Database
from ordabok.core.identity import IdentityProviderError

logger = logging.getLogger(__name__)


class SessionChecker(Protocol):
    def check_session(self, session_id: str, user_id: str) -> bool: ...


@dataclass(frozen=True)
class RequestContext:
    """
    Immutable request value: the connection pool, the administrative key and
    the verified caller identity (``None`` for anonymous requests).
    """
    db: Database
    admin_key: str = ""
    caller: Optional[str] = None

    def with_caller(self, caller: Optional[str]) -> "RequestContext":
        return replace(self, caller=caller)


def parse_authorization(value: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Split an ``Authorization`` header of the form ``userId;sessionId``.

    Returns ``None`` when the header is missing or malformed.
    """
    if not value:
        return None
    parts = value.split(";")
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        logger.info(f"Invalid session key: {value}")
        return None
    return parts[0].strip(), parts[1].strip()


def resolve_caller(authorization: Optional[str], identity: SessionChecker) -> Optional[str]:
    """
    Caller identity established from the ``Authorization`` header.

    Any failure (malformed header, provider error, unknown session) leaves the
    caller anonymous; nothing is raised.
    """
    key = parse_authorization(authorization)
    if key is None:
        return None
    user_id, session_id = key
    try:
        valid = identity.check_session(session_id, user_id)
    except IdentityProviderError as e:
        logger.info(f"Error checking user session: {e}")
        return None
    if not valid:
        logger.info(f"Rejected session for user {user_id}")
        return None
    return user_id
