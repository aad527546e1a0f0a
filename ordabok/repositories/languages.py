"""
Language repository.
"""
import logging
import uuid
from typing import List

from sqlmodel import select, or_

from ordabok.core.database import Database
from ordabok.core.exceptions import NotFoundError, ValidationError
from ordabok.models import (
    Language,
    LangAndAgent,
    LangTranslatesTo,
    UserFollowLanguage,
    Word,
)
from ordabok.repositories.base import (
    add,
    fetch_all,
    fetch_one,
    get_by_id,
    translate_errors,
)

logger = logging.getLogger(__name__)


def find_by_id(db: Database, language_id: uuid.UUID) -> Language:
    return get_by_id(db, Language, language_id, f"retrieve language {language_id}")


def find_by_key(db: Database, name: str, owner: str) -> Language:
    """Language called ``name`` owned by ``owner``."""
    statement = select(Language).where(Language.name == name, Language.owner == owner)
    try:
        return fetch_one(db, statement, f"retrieve language {name!r} of {owner}")
    except NotFoundError as e:
        raise NotFoundError(f"Language {name!r} of user {owner} not found") from e


def all_languages(db: Database) -> List[Language]:
    return fetch_all(db, select(Language).order_by(Language.created), "retrieve languages")


def owned_by(db: Database, owner: str) -> List[Language]:
    statement = select(Language).where(Language.owner == owner).order_by(Language.created)
    return fetch_all(db, statement, f"retrieve languages owned by {owner}")


def search(db: Database, query: str) -> List[Language]:
    """Languages whose name contains ``query``, ignoring case."""
    statement = select(Language).where(
        Language.name.icontains(query, autoescape=True)  # type: ignore[attr-defined]
    ).order_by(Language.name)
    return fetch_all(db, statement, f"search languages matching {query!r}")


def insert(db: Database, language: Language) -> Language:
    """
    Insert a language then read it back by (name, owner).

    Raises:
        ValidationError: If the owner already has a language with this name
    """
    with translate_errors(f"check language {language.name!r} of {language.owner}"), db.session() as session:
        existing = session.exec(
            select(Language.id).where(
                Language.name == language.name,
                Language.owner == language.owner,
            )
        ).first()
    if existing is not None:
        raise ValidationError(f"Language {language.name!r} already exists for this owner")

    add(db, language, f"insert language {language.name!r}")
    logger.info(f"Created language {language.name!r} for user {language.owner}")
    return find_by_key(db, language.name, language.owner)


def delete(db: Database, language_id: uuid.UUID) -> None:
    """
    Delete a language and the join rows naming it.

    A language that still has words is never deleted; its words have to go
    first.

    Raises:
        NotFoundError: If no such language exists
        ValidationError: If the language still has words
    """
    with translate_errors(f"delete language {language_id}"), db.session() as session:
        language = session.get(Language, language_id)
        if language is None:
            raise NotFoundError(f"Language {language_id} not found")

        has_words = session.exec(select(Word.id).where(Word.language == language_id)).first()
        if has_words is not None:
            raise ValidationError("Language still has words, delete them first")

        followers = session.exec(
            select(UserFollowLanguage).where(UserFollowLanguage.lang == language_id)
        ).all()
        agents = session.exec(select(LangAndAgent).where(LangAndAgent.language == language_id)).all()
        translations = session.exec(
            select(LangTranslatesTo).where(
                or_(LangTranslatesTo.langfrom == language_id, LangTranslatesTo.langto == language_id)
            )
        ).all()

        for row in [*followers, *agents, *translations]:
            session.delete(row)
        session.flush()
        session.delete(language)
        session.commit()

    logger.info(
        f"Deleted language {language_id}: {len(followers)} followers, "
        f"{len(agents)} authors/publishers, {len(translations)} translation links"
    )
