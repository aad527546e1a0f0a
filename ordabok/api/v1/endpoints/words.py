"""
Word endpoints.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List, Optional

from ordabok.api.v1.endpoints.deps import get_context
from ordabok.api.v1.endpoints.graph_helpers import compose_word, parse_fields
from ordabok.core.context import RequestContext
from ordabok.models.enums import WordRelationship
from ordabok.schemas.graph import WordResponse
from ordabok.schemas.word import NewWord, WordLearningRequest
from ordabok.services import mutations, queries
from ordabok.services.resolvers import WordResolver

router = APIRouter(prefix="/words", tags=["words"])


@router.get("", response_model=List[WordResponse], response_model_exclude_unset=True)
def get_words(
    language: str,
    word: str,
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    """Retrieve all words with a set normal form from a set language."""
    requested = parse_fields(fields, WordResolver.FIELDS)
    return [compose_word(ctx, item, requested) for item in queries.words(ctx, language, word)]


@router.get("/search", response_model=List[WordResponse], response_model_exclude_unset=True)
def find_word(
    language: str,
    q: str,
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    """Words of ``language`` whose normal form contains ``q``, ignoring case."""
    requested = parse_fields(fields, WordResolver.FIELDS)
    return [compose_word(ctx, item, requested) for item in queries.find_word(ctx, language, q)]


@router.get("/{word_id}", response_model=WordResponse, response_model_exclude_unset=True)
def get_word(
    word_id: str,
    fields: Optional[str] = None,
    ctx: RequestContext = Depends(get_context)
):
    """Retrieve a specific word from its id."""
    requested = parse_fields(fields, WordResolver.FIELDS)
    return compose_word(ctx, queries.word(ctx, word_id), requested)


@router.post(
    "",
    response_model=WordResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED
)
def create_word(
    request: NewWord,
    ctx: RequestContext = Depends(get_context)
):
    """Create a word in a language owned by the authenticated user."""
    return compose_word(ctx, mutations.new_word(ctx, request), [])


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_word(
    word_id: str,
    ctx: RequestContext = Depends(get_context)
):
    mutations.delete_word(ctx, word_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{word_id}/learning", response_model=WordResponse, response_model_exclude_unset=True)
def learn_word(
    word_id: str,
    request: WordLearningRequest,
    ctx: RequestContext = Depends(get_context)
):
    """Set the authenticated user's learning status for a word."""
    return compose_word(ctx, mutations.user_learn_word(ctx, word_id, request.status), [])


@router.delete("/{word_id}/learning", response_model=WordResponse, response_model_exclude_unset=True)
def unlearn_word(
    word_id: str,
    ctx: RequestContext = Depends(get_context)
):
    return compose_word(ctx, mutations.user_unlearn_word(ctx, word_id), [])


@router.post(
    "/{word_id}/relations/{target_id}",
    response_model=WordResponse,
    response_model_exclude_unset=True
)
def add_relation(
    word_id: str,
    target_id: str,
    relationship: WordRelationship = WordRelationship.RELATED,
    ctx: RequestContext = Depends(get_context)
):
    """Link the word to ``target_id`` as a definition or related word."""
    word = mutations.add_word_relation(ctx, word_id, target_id, relationship)
    return compose_word(ctx, word, ["definitions", "related"])


@router.delete(
    "/{word_id}/relations/{target_id}",
    response_model=WordResponse,
    response_model_exclude_unset=True
)
def remove_relation(
    word_id: str,
    target_id: str,
    relationship: WordRelationship = WordRelationship.RELATED,
    ctx: RequestContext = Depends(get_context)
):
    word = mutations.remove_word_relation(ctx, word_id, target_id, relationship)
    return compose_word(ctx, word, ["definitions", "related"])
