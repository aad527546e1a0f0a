"""
Ownership guard.

Every check here runs before any mutating repository call, so a refused
operation never leaves a partial mutation behind.
"""
import logging
from typing import Optional

from ordabok.core.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)


def is_owner(owner_id: str, caller_id: Optional[str]) -> bool:
    return caller_id is not None and owner_id == caller_id


def require_caller(caller_id: Optional[str]) -> str:
    """The caller's id, or AuthenticationError for anonymous requests."""
    if caller_id is None:
        raise AuthenticationError("User not authenticated")
    return caller_id


def require_owner(owner_id: str, caller_id: Optional[str]) -> None:
    """
    Raises:
        AuthenticationError: If there is no caller
        AuthorizationError: If the caller does not own the entity
    """
    require_caller(caller_id)
    if not is_owner(owner_id, caller_id):
        logger.info(f"User {caller_id} denied: entity is owned by {owner_id}")
        raise AuthorizationError("User is not the owner of this entity")


def require_admin(secret: Optional[str], admin_key: str) -> None:
    """
    Exact comparison of a caller-supplied secret with the administrative key.
    An unconfigured (empty) key never matches.
    """
    if not admin_key or secret != admin_key:
        logger.warning("Rejected administrative request: invalid admin key")
        raise AuthorizationError("Invalid admin key")
