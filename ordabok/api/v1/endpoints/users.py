"""
User endpoints.

Users are never created through self-registration: they mirror identity
provider accounts and are managed with the administrative key.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List, Optional

from ordabok.api.v1.endpoints.deps import get_context
from ordabok.api.v1.endpoints.graph_helpers import compose_user, parse_fields
from ordabok.core.context import RequestContext
from ordabok.schemas.graph import UserResponse
from ordabok.schemas.user import NewUserRequest
from ordabok.services import mutations, queries
from ordabok.services.resolvers import UserResolver

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse], response_model_exclude_unset=True)
def get_users(
    admin_key: str,
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    """List every user (administrative)."""
    requested = parse_fields(fields, UserResolver.FIELDS)
    return [compose_user(ctx, user, requested) for user in queries.all_users(ctx, admin_key)]


@router.get("/search", response_model=List[UserResponse], response_model_exclude_unset=True)
def find_user(
    q: str,
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    """Users whose username contains ``q``, ignoring case."""
    requested = parse_fields(fields, UserResolver.FIELDS)
    return [compose_user(ctx, user, requested) for user in queries.find_user(ctx, q)]


@router.get("/{user_id}", response_model=UserResponse, response_model_exclude_unset=True)
def get_user(
    user_id: str,
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    requested = parse_fields(fields, UserResolver.FIELDS)
    return compose_user(ctx, queries.user(ctx, user_id), requested)


@router.post(
    "",
    response_model=UserResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED
)
def create_user(
    request: NewUserRequest,
    ctx: RequestContext = Depends(get_context)
):
    """Mirror an identity provider account (administrative)."""
    user = mutations.db_only_new_user(ctx, request.username, request.id, request.admin_key)
    return compose_user(ctx, user, [])


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(
    user_id: str,
    admin_key: str,
    ctx: RequestContext = Depends(get_context)
):
    """Delete a user (administrative)."""
    mutations.db_only_delete_user(ctx, user_id, admin_key)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/follow", response_model=UserResponse, response_model_exclude_unset=True)
def follow_user(
    user_id: str,
    ctx: RequestContext = Depends(get_context)
):
    return compose_user(ctx, mutations.user_follow_user(ctx, user_id), [])


@router.delete("/{user_id}/follow", response_model=UserResponse, response_model_exclude_unset=True)
def unfollow_user(
    user_id: str,
    ctx: RequestContext = Depends(get_context)
):
    return compose_user(ctx, mutations.user_unfollow_user(ctx, user_id), [])
