"""
Language endpoints.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List, Optional

from ordabok.api.v1.endpoints.deps import get_context
from ordabok.api.v1.endpoints.graph_helpers import compose_language, parse_fields
from ordabok.core.context import RequestContext
from ordabok.models.enums import AgentLanguageRelation
from ordabok.schemas.graph import LanguageResponse
from ordabok.schemas.language import NewLanguage
from ordabok.services import mutations, queries
from ordabok.services.resolvers import LanguageResolver

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=List[LanguageResponse], response_model_exclude_unset=True)
def get_languages(
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    """Retrieve all languages defined in the database."""
    requested = parse_fields(fields, LanguageResolver.FIELDS)
    return [compose_language(ctx, language, requested) for language in queries.all_languages(ctx)]


@router.get("/search", response_model=List[LanguageResponse], response_model_exclude_unset=True)
def find_language(
    q: str,
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    """Languages whose name contains ``q``, ignoring case."""
    requested = parse_fields(fields, LanguageResolver.FIELDS)
    return [compose_language(ctx, language, requested) for language in queries.find_language(ctx, q)]


@router.get("/by-name", response_model=LanguageResponse, response_model_exclude_unset=True)
def get_language_by_name(
    name: str,
    owner: str,
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    """Retrieve a specific language from its name and its owner's id."""
    requested = parse_fields(fields, LanguageResolver.FIELDS)
    return compose_language(ctx, queries.language(ctx, name, owner), requested)


@router.get("/{language_id}", response_model=LanguageResponse, response_model_exclude_unset=True)
def get_language(
    language_id: str,
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    requested = parse_fields(fields, LanguageResolver.FIELDS)
    return compose_language(ctx, queries.language_by_id(ctx, language_id), requested)


@router.post(
    "",
    response_model=LanguageResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED
)
def create_language(
    request: NewLanguage,
    ctx: RequestContext = Depends(get_context)
):
    """Create a language owned by the authenticated user."""
    return compose_language(ctx, mutations.new_language(ctx, request), [])


@router.delete("/{language_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_language(
    language_id: str,
    ctx: RequestContext = Depends(get_context)
):
    """Delete a language owned by the authenticated user."""
    mutations.delete_language(ctx, language_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{language_id}/follow", response_model=LanguageResponse, response_model_exclude_unset=True)
def follow_language(
    language_id: str,
    ctx: RequestContext = Depends(get_context)
):
    return compose_language(ctx, mutations.user_follow_language(ctx, language_id), [])


@router.delete("/{language_id}/follow", response_model=LanguageResponse, response_model_exclude_unset=True)
def unfollow_language(
    language_id: str,
    ctx: RequestContext = Depends(get_context)
):
    return compose_language(ctx, mutations.user_unfollow_language(ctx, language_id), [])


@router.post(
    "/{language_id}/translations/{target_id}",
    response_model=LanguageResponse,
    response_model_exclude_unset=True
)
def add_translation(
    language_id: str,
    target_id: str,
    ctx: RequestContext = Depends(get_context)
):
    """Record that the language translates to ``target_id``."""
    language = mutations.add_translation(ctx, language_id, target_id)
    return compose_language(ctx, language, ["translations"])


@router.delete(
    "/{language_id}/translations/{target_id}",
    response_model=LanguageResponse,
    response_model_exclude_unset=True
)
def remove_translation(
    language_id: str,
    target_id: str,
    ctx: RequestContext = Depends(get_context)
):
    language = mutations.remove_translation(ctx, language_id, target_id)
    return compose_language(ctx, language, ["translations"])


@router.post(
    "/{language_id}/agents/{user_id}",
    response_model=LanguageResponse,
    response_model_exclude_unset=True
)
def add_agent(
    language_id: str,
    user_id: str,
    relationship: AgentLanguageRelation = AgentLanguageRelation.AUTHOR,
    ctx: RequestContext = Depends(get_context)
):
    """Record a user as an author or publisher of the language."""
    language = mutations.add_language_agent(ctx, language_id, user_id, relationship)
    return compose_language(ctx, language, ["authors", "publishers"])


@router.delete(
    "/{language_id}/agents/{user_id}",
    response_model=LanguageResponse,
    response_model_exclude_unset=True
)
def remove_agent(
    language_id: str,
    user_id: str,
    relationship: AgentLanguageRelation = AgentLanguageRelation.AUTHOR,
    ctx: RequestContext = Depends(get_context)
):
    language = mutations.remove_language_agent(ctx, language_id, user_id, relationship)
    return compose_language(ctx, language, ["authors", "publishers"])
