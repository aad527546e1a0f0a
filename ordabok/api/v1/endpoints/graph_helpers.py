"""
Helper functions composing response graphs from resolvers.

Only the relationship fields named in the request are resolved; each one
costs its own store round trips.
"""
from typing import Iterable, List, Optional, Sequence

from ordabok.core.context import RequestContext
from ordabok.core.exceptions import ValidationError
from ordabok.models import Language, User, Word
from ordabok.schemas.graph import LanguageResponse, UserResponse, WordResponse
from ordabok.services.resolvers import LanguageResolver, UserResolver, WordResolver


def parse_fields(fields: Optional[str], allowed: Sequence[str]) -> List[str]:
    """
    Split a comma separated ``fields`` parameter.

    Raises:
        ValidationError: If a name is not a relationship field of the entity
    """
    if not fields:
        return []
    requested = []
    for name in fields.split(","):
        name = name.strip()
        if not name:
            continue
        if name not in allowed:
            raise ValidationError(
                f"Unknown field {name!r}. Must be one of: {', '.join(allowed)}"
            )
        if name not in requested:
            requested.append(name)
    return requested


def to_response(value):
    """Convert a model, a list of models or ``None`` to response schemas."""
    if value is None:
        return None
    if isinstance(value, list):
        return [to_response(item) for item in value]
    if isinstance(value, Language):
        return LanguageResponse.from_model(value)
    if isinstance(value, Word):
        return WordResponse.from_model(value)
    if isinstance(value, User):
        return UserResponse.from_model(value)
    raise TypeError(f"No response schema for {type(value).__name__}")


def _resolve_into(response, resolver, fields: Iterable[str]):
    for field in fields:
        setattr(response, field, to_response(getattr(resolver, field)()))
    return response


def compose_language(ctx: RequestContext, language: Language, fields: Iterable[str]) -> LanguageResponse:
    return _resolve_into(LanguageResponse.from_model(language), LanguageResolver(ctx, language), fields)


def compose_user(ctx: RequestContext, user: User, fields: Iterable[str]) -> UserResponse:
    return _resolve_into(UserResponse.from_model(user), UserResolver(ctx, user), fields)


def compose_word(ctx: RequestContext, word: Word, fields: Iterable[str]) -> WordResponse:
    return _resolve_into(WordResponse.from_model(word), WordResolver(ctx, word), fields)
