"""
Read-side root operations.

Each returns the root entities only; relationship fields are resolved on
demand through ``ordabok.services.resolvers``.
"""
import logging
from typing import List

from ordabok.core.context import RequestContext
from ordabok.models import Language, User, Word
from ordabok.repositories import (
    languages as language_repo,
    users as user_repo,
    words as word_repo,
)
from ordabok.services.ownership import require_admin
from ordabok.utils.text_utils import normalize_word_form, parse_identifier

logger = logging.getLogger(__name__)


def all_languages(ctx: RequestContext) -> List[Language]:
    """Retrieve all languages defined in the database."""
    return language_repo.all_languages(ctx.db)


def language(ctx: RequestContext, name: str, owner: str) -> Language:
    """Retrieve a specific language from its name and its owner's id."""
    return language_repo.find_by_key(ctx.db, name.strip(), owner)


def language_by_id(ctx: RequestContext, language_id: str) -> Language:
    return language_repo.find_by_id(ctx.db, parse_identifier(language_id, "language"))


def find_language(ctx: RequestContext, query: str) -> List[Language]:
    """Languages whose name contains ``query``, ignoring case."""
    return language_repo.search(ctx.db, query)


def user(ctx: RequestContext, user_id: str) -> User:
    """Retrieve a specific user from their Appwrite id."""
    return user_repo.find_by_id(ctx.db, user_id)


def find_user(ctx: RequestContext, query: str) -> List[User]:
    return user_repo.search(ctx.db, query)


def all_users(ctx: RequestContext, admin_key: str) -> List[User]:
    """All users; administrative."""
    require_admin(admin_key, ctx.admin_key)
    return user_repo.all_users(ctx.db)


def word(ctx: RequestContext, word_id: str) -> Word:
    """Retrieve a specific word from its id."""
    return word_repo.find_by_id(ctx.db, parse_identifier(word_id, "word"))


def find_word(ctx: RequestContext, language: str, query: str) -> List[Word]:
    """Words of ``language`` whose normal form contains ``query``, ignoring case."""
    language_id = parse_identifier(language, "language")
    return word_repo.search(ctx.db, language_id, query)


def words(ctx: RequestContext, language: str, word: str) -> List[Word]:
    """All words with a set normal form from a set language."""
    language_id = parse_identifier(language, "language")
    return word_repo.find_by_key(ctx.db, language_id, normalize_word_form(word))
