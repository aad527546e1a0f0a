"""
Relationship resolvers.

One class per entity, one method per relationship field. Nothing is cached:
every call goes back to the store, one repository call per join table and one
per related entity.

- Required references (a language's owner, a word's language) pointing
  nowhere are integrity bugs and raise DatabaseError.
- Optional references (a word's lemma) resolve to ``None`` when stale.
- Collections drop, and log, members that fail to resolve, so one stale join
  row does not fail the whole field.
"""
import logging
import uuid
from typing import Callable, Iterable, List, Optional, TypeVar

from ordabok.core.context import RequestContext
from ordabok.core.exceptions import DatabaseError, NotFoundError
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

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")


def resolve_each(
    ids: Iterable[K],
    fetch: Callable[[K], T],
    what: str,
    source: str,
) -> List[T]:
    """
    Fetch every id on its own, dropping the ones that fail.

    Connection failures still propagate: they would fail every sibling too.
    """
    resolved = []
    for ident in ids:
        try:
            resolved.append(fetch(ident))
        except (NotFoundError, DatabaseError) as e:
            logger.info(f"Failed to retrieve {what} {ident} of {source} from database: {e}")
    return resolved


def _require(fetch: Callable[[], T], what: str, source: str) -> T:
    try:
        return fetch()
    except NotFoundError as e:
        logger.error(f"Integrity violation: {what} of {source} does not exist: {e}")
        raise DatabaseError(
            f"Failed to retrieve {what} of {source}: referenced row does not exist",
            "Internal consistency error",
        ) from e


class LanguageResolver:
    """Relationship fields of a Language."""

    FIELDS = (
        "owner",
        "authors",
        "publishers",
        "translations",
        "translated_from",
        "followers",
        "words",
    )

    def __init__(self, ctx: RequestContext, language: Language):
        self.ctx = ctx
        self.language = language

    @property
    def _source(self) -> str:
        return f"language {self.language.id}"

    def _user(self, user_id: str) -> User:
        return user_repo.find_by_id(self.ctx.db, user_id)

    def _language(self, language_id: uuid.UUID) -> Language:
        return language_repo.find_by_id(self.ctx.db, language_id)

    def owner(self) -> User:
        """User with administrative rights over the language."""
        return _require(lambda: self._user(self.language.owner), "owner", self._source)

    def _agents(self, relationship: AgentLanguageRelation) -> List[User]:
        rows = authorship.agents_of(self.ctx.db, self.language.id, relationship)
        return resolve_each((row.agent for row in rows), self._user, relationship.value.lower(), self._source)

    def authors(self) -> List[User]:
        """People who participate in the elaboration of the language's dictionary."""
        return self._agents(AgentLanguageRelation.AUTHOR)

    def publishers(self) -> List[User]:
        """People who can and do redistribute the language's dictionary."""
        return self._agents(AgentLanguageRelation.PUBLISHER)

    def translations(self) -> List[Language]:
        """Languages in which the current language is translated."""
        rows = translations.translations_of(self.ctx.db, self.language.id)
        return resolve_each((row.langto for row in rows), self._language, "translation", self._source)

    def translated_from(self) -> List[Language]:
        rows = translations.translated_from(self.ctx.db, self.language.id)
        return resolve_each((row.langfrom for row in rows), self._language, "source language", self._source)

    def followers(self) -> List[User]:
        rows = follows.language_followers(self.ctx.db, self.language.id)
        return resolve_each((row.userid for row in rows), self._user, "follower", self._source)

    def words(self) -> List[Word]:
        return word_repo.in_language(self.ctx.db, self.language.id)


class UserResolver:
    """Relationship fields of a User."""

    FIELDS = (
        "languages",
        "following",
        "followers",
        "followed_languages",
        "learning",
        "learned",
    )

    def __init__(self, ctx: RequestContext, user: User):
        self.ctx = ctx
        self.user = user

    @property
    def _source(self) -> str:
        return f"user {self.user.id}"

    def _user(self, user_id: str) -> User:
        return user_repo.find_by_id(self.ctx.db, user_id)

    def languages(self) -> List[Language]:
        """Languages owned by the user."""
        return language_repo.owned_by(self.ctx.db, self.user.id)

    def following(self) -> List[User]:
        rows = follows.followed_by(self.ctx.db, self.user.id)
        return resolve_each((row.following for row in rows), self._user, "followed user", self._source)

    def followers(self) -> List[User]:
        rows = follows.followers_of(self.ctx.db, self.user.id)
        return resolve_each((row.follower for row in rows), self._user, "follower", self._source)

    def followed_languages(self) -> List[Language]:
        rows = follows.languages_followed_by(self.ctx.db, self.user.id)
        return resolve_each(
            (row.lang for row in rows),
            lambda language_id: language_repo.find_by_id(self.ctx.db, language_id),
            "followed language",
            self._source,
        )

    def _words_with_status(self, status: WordLearningStatus) -> List[Word]:
        rows = learning.words_of(self.ctx.db, self.user.id, status)
        return resolve_each(
            (row.word for row in rows),
            lambda word_id: word_repo.find_by_id(self.ctx.db, word_id),
            f"{status.value.lower()} word",
            self._source,
        )

    def learning(self) -> List[Word]:
        """Words the user is currently learning."""
        return self._words_with_status(WordLearningStatus.LEARNING)

    def learned(self) -> List[Word]:
        return self._words_with_status(WordLearningStatus.LEARNED)


class WordResolver:
    """Relationship fields of a Word."""

    FIELDS = (
        "language",
        "lemma",
        "definitions",
        "related",
        "inflections",
    )

    def __init__(self, ctx: RequestContext, word: Word):
        self.ctx = ctx
        self.word = word

    @property
    def _source(self) -> str:
        return f"word {self.word.id}"

    def _word(self, word_id: uuid.UUID) -> Word:
        return word_repo.find_by_id(self.ctx.db, word_id)

    def language(self) -> Language:
        return _require(
            lambda: language_repo.find_by_id(self.ctx.db, self.word.language),
            "language",
            self._source,
        )

    def lemma(self) -> Optional[Word]:
        """Base form of the word; ``None`` when unset or no longer existing."""
        if self.word.lemma is None:
            return None
        try:
            return self._word(self.word.lemma)
        except NotFoundError:
            logger.info(f"Stale lemma {self.word.lemma} of {self._source}")
            return None

    def _related(self, relationship: WordRelationship) -> List[Word]:
        rows = word_relations.relations_from(self.ctx.db, self.word.id, relationship)
        return resolve_each(
            (row.wordtarget for row in rows), self._word, relationship.value.lower(), self._source
        )

    def definitions(self) -> List[Word]:
        return self._related(WordRelationship.DEFINITION)

    def related(self) -> List[Word]:
        return self._related(WordRelationship.RELATED)

    def inflections(self) -> List[Word]:
        """Words having this word as their lemma."""
        return word_repo.inflections_of(self.ctx.db, self.word.id)
