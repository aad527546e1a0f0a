"""
Mutation orchestrator.

Every mutation runs the same steps and stops at the first failure:

1. the caller must be authenticated (or hold the admin key),
2. input is validated, identifiers parsed, before the store is touched,
3. ownership of the target is checked,
4. the insert or delete runs, inserts re-read the stored row.

Nothing is compensated on failure and read-then-write sequences are not
atomic: a concurrent delete shows up as a NotFoundError.
"""
import logging
import uuid
from typing import List

from ordabok.core.context import RequestContext
from ordabok.core.exceptions import ValidationError
from ordabok.models import (
    AgentLanguageRelation,
    Language,
    User,
    Word,
    WordLearningStatus,
    WordRelationship,
)
from ordabok.repositories import (
    authorship,
    follows,
    languages as language_repo,
    learning,
    translations,
    users as user_repo,
    word_relations,
    words as word_repo,
)
from ordabok.schemas.language import NewLanguage
from ordabok.schemas.word import NewWord
from ordabok.services.ownership import require_admin, require_caller, require_owner
from ordabok.services.resolvers import WordResolver
from ordabok.utils.text_utils import blank_to_none, normalize_word_form, parse_identifier

logger = logging.getLogger(__name__)


# ============================================================================
# Languages
# ============================================================================

def new_language(ctx: RequestContext, new: NewLanguage) -> Language:
    """Create a language owned by the caller and return the stored row."""
    caller = require_caller(ctx.caller)

    name = new.name.strip()
    if not name:
        raise ValidationError("Language name must not be empty")

    language = Language(
        name=name,
        native=blank_to_none(new.native),
        release=new.release,
        genre=list(new.genre),
        abstract=new.abstract,
        description=new.description,
        rights=new.rights,
        license=new.license,
        owner=caller,
    )
    return language_repo.insert(ctx.db, language)


def delete_language(ctx: RequestContext, language_id: str) -> None:
    """Delete a language owned by the caller."""
    caller = require_caller(ctx.caller)
    ident = parse_identifier(language_id, "language")

    language = language_repo.find_by_id(ctx.db, ident)
    require_owner(language.owner, caller)

    language_repo.delete(ctx.db, ident)


def add_translation(ctx: RequestContext, langfrom: str, langto: str) -> Language:
    """Record that ``langfrom`` translates to ``langto``; the caller must own ``langfrom``."""
    caller = require_caller(ctx.caller)
    source_id = parse_identifier(langfrom, "language")
    target_id = parse_identifier(langto, "language")
    if source_id == target_id:
        raise ValidationError("A language cannot be a translation of itself")

    source = language_repo.find_by_id(ctx.db, source_id)
    require_owner(source.owner, caller)
    language_repo.find_by_id(ctx.db, target_id)

    if translations.find(ctx.db, source_id, target_id):
        logger.info(f"Translation link {source_id} -> {target_id} already exists")
    else:
        translations.insert(ctx.db, source_id, target_id)
    return source


def remove_translation(ctx: RequestContext, langfrom: str, langto: str) -> Language:
    caller = require_caller(ctx.caller)
    source_id = parse_identifier(langfrom, "language")
    target_id = parse_identifier(langto, "language")

    source = language_repo.find_by_id(ctx.db, source_id)
    require_owner(source.owner, caller)

    if not translations.find(ctx.db, source_id, target_id):
        raise ValidationError("Language is not translated to this language")
    translations.delete(ctx.db, source_id, target_id)
    return source


def add_language_agent(
    ctx: RequestContext,
    language_id: str,
    user_id: str,
    relationship: AgentLanguageRelation,
) -> Language:
    """Record ``user_id`` as an author or publisher of a language owned by the caller."""
    caller = require_caller(ctx.caller)
    ident = parse_identifier(language_id, "language")

    language = language_repo.find_by_id(ctx.db, ident)
    require_owner(language.owner, caller)
    user_repo.find_by_id(ctx.db, user_id)

    if authorship.find(ctx.db, ident, user_id, relationship):
        logger.info(f"User {user_id} already {relationship.value} of language {ident}")
    else:
        authorship.insert(ctx.db, ident, user_id, relationship)
    return language


def remove_language_agent(
    ctx: RequestContext,
    language_id: str,
    user_id: str,
    relationship: AgentLanguageRelation,
) -> Language:
    caller = require_caller(ctx.caller)
    ident = parse_identifier(language_id, "language")

    language = language_repo.find_by_id(ctx.db, ident)
    require_owner(language.owner, caller)

    if not authorship.find(ctx.db, ident, user_id, relationship):
        raise ValidationError(f"User is not a {relationship.value.lower()} of this language")
    authorship.delete(ctx.db, ident, user_id, relationship)
    return language


# ============================================================================
# Following
# ============================================================================

def user_follow_language(ctx: RequestContext, language_id: str) -> Language:
    """
    Make the caller follow a language.

    Following a language already followed is a no-op.
    """
    caller = require_caller(ctx.caller)
    ident = parse_identifier(language_id, "language")

    language = language_repo.find_by_id(ctx.db, ident)
    if follows.find_language_follows(ctx.db, caller, ident):
        logger.info(f"User {caller} already follows language {ident}")
    else:
        follows.insert_language_follow(ctx.db, caller, ident)
    return language


def user_unfollow_language(ctx: RequestContext, language_id: str) -> Language:
    """
    Stop following a language.

    Raises:
        ValidationError: If the caller does not follow the language
    """
    caller = require_caller(ctx.caller)
    ident = parse_identifier(language_id, "language")

    language = language_repo.find_by_id(ctx.db, ident)
    if not follows.find_language_follows(ctx.db, caller, ident):
        raise ValidationError("User is not following this language")
    follows.delete_language_follows(ctx.db, caller, ident)
    return language


def user_follow_user(ctx: RequestContext, user_id: str) -> User:
    """Make the caller follow another user; idempotent."""
    caller = require_caller(ctx.caller)
    if user_id == caller:
        raise ValidationError("Users cannot follow themselves")

    user = user_repo.find_by_id(ctx.db, user_id)
    if follows.find_user_follows(ctx.db, caller, user_id):
        logger.info(f"User {caller} already follows user {user_id}")
    else:
        follows.insert_user_follow(ctx.db, caller, user_id)
    return user


def user_unfollow_user(ctx: RequestContext, user_id: str) -> User:
    caller = require_caller(ctx.caller)

    user = user_repo.find_by_id(ctx.db, user_id)
    if not follows.find_user_follows(ctx.db, caller, user_id):
        raise ValidationError("User is not following this user")
    follows.delete_user_follows(ctx.db, caller, user_id)
    return user


# ============================================================================
# Words
# ============================================================================

def new_word(ctx: RequestContext, new: NewWord) -> Word:
    """Create a word in a language owned by the caller and return the stored row."""
    caller = require_caller(ctx.caller)

    language_id = parse_identifier(new.language, "language")
    lemma_id = parse_identifier(new.lemma, "lemma") if blank_to_none(new.lemma) else None
    norm = normalize_word_form(new.norm)
    if not norm:
        raise ValidationError("Word norm must not be empty")

    language = language_repo.find_by_id(ctx.db, language_id)
    require_owner(language.owner, caller)

    word = Word(
        norm=norm,
        native=blank_to_none(new.native),
        lemma=lemma_id,
        language=language_id,
        partofspeech=new.partofspeech,
        audio=blank_to_none(new.audio),
        video=blank_to_none(new.video),
        image=blank_to_none(new.image),
        description=new.description,
        etymology=new.etymology,
        usage=new.usage,
        morphology=new.morphology,
    )
    return word_repo.insert(ctx.db, word)


def _owned_word(ctx: RequestContext, word_id: uuid.UUID, caller: str) -> Word:
    """Fetch a word and check the caller owns its language."""
    word = word_repo.find_by_id(ctx.db, word_id)
    language = WordResolver(ctx, word).language()
    require_owner(language.owner, caller)
    return word


def delete_word(ctx: RequestContext, word_id: str) -> None:
    """Delete a word from a language owned by the caller."""
    caller = require_caller(ctx.caller)
    ident = parse_identifier(word_id, "word")

    _owned_word(ctx, ident, caller)
    word_repo.delete(ctx.db, ident)


def add_word_relation(
    ctx: RequestContext,
    source: str,
    target: str,
    relationship: WordRelationship,
) -> Word:
    """Link two words; the caller must own the source word's language. Idempotent."""
    caller = require_caller(ctx.caller)
    source_id = parse_identifier(source, "word")
    target_id = parse_identifier(target, "word")
    if source_id == target_id:
        raise ValidationError("A word cannot be related to itself")

    word = _owned_word(ctx, source_id, caller)
    word_repo.find_by_id(ctx.db, target_id)

    if word_relations.find(ctx.db, source_id, target_id, relationship):
        logger.info(f"{relationship.value} relation {source_id} -> {target_id} already exists")
    else:
        word_relations.insert(ctx.db, source_id, target_id, relationship)
    return word


def remove_word_relation(
    ctx: RequestContext,
    source: str,
    target: str,
    relationship: WordRelationship,
) -> Word:
    caller = require_caller(ctx.caller)
    source_id = parse_identifier(source, "word")
    target_id = parse_identifier(target, "word")

    word = _owned_word(ctx, source_id, caller)
    if not word_relations.find(ctx.db, source_id, target_id, relationship):
        raise ValidationError(f"Words have no {relationship.value.lower()} relation")
    word_relations.delete(ctx.db, source_id, target_id, relationship)
    return word


def user_learn_word(ctx: RequestContext, word_id: str, status: WordLearningStatus) -> Word:
    """Set the caller's learning status for a word, creating the entry if needed."""
    caller = require_caller(ctx.caller)
    ident = parse_identifier(word_id, "word")

    word = word_repo.find_by_id(ctx.db, ident)
    entries: List = learning.find(ctx.db, caller, ident)
    if not entries:
        learning.insert(ctx.db, caller, ident, status)
    elif entries[0].status != status:
        learning.update_status(ctx.db, entries[0].id, status)
    return word


def user_unlearn_word(ctx: RequestContext, word_id: str) -> Word:
    caller = require_caller(ctx.caller)
    ident = parse_identifier(word_id, "word")

    word = word_repo.find_by_id(ctx.db, ident)
    if not learning.find(ctx.db, caller, ident):
        raise ValidationError("User is not learning this word")
    learning.delete(ctx.db, caller, ident)
    return word


# ============================================================================
# Administrative
# ============================================================================

def db_only_new_user(ctx: RequestContext, username: str, user_id: str, admin_key: str) -> User:
    """Mirror an identity provider account in the database."""
    require_admin(admin_key, ctx.admin_key)
    return user_repo.insert(ctx.db, username.strip(), user_id.strip())


def db_only_delete_user(ctx: RequestContext, user_id: str, admin_key: str) -> None:
    require_admin(admin_key, ctx.admin_key)
    user_repo.delete(ctx.db, user_id)
