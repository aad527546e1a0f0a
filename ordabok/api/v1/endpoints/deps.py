"""
Request dependencies shared by the endpoints.
"""
from typing import Optional

from fastapi import Header, Request

from ordabok.core.context import RequestContext, resolve_caller


def get_context(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> RequestContext:
    """
    Build the per-request context.

    The ``Authorization`` header (``userId;sessionId``) is checked against the
    identity provider; any failure leaves the request anonymous.
    """
    state = request.app.state
    caller = resolve_caller(authorization, state.identity)
    return RequestContext(db=state.database, admin_key=state.settings.admin_key, caller=caller)
