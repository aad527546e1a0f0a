"""
Word repository.
"""
import logging
import uuid
from typing import List

from sqlmodel import select, or_

from ordabok.core.database import Database
from ordabok.core.exceptions import NotFoundError
from ordabok.models import Word, WordLearning, WordRelation
from ordabok.repositories.base import (
    add,
    count,
    fetch_all,
    get_by_id,
    translate_errors,
)

logger = logging.getLogger(__name__)


def find_by_id(db: Database, word_id: uuid.UUID) -> Word:
    return get_by_id(db, Word, word_id, f"retrieve word {word_id}")


def find_by_key(db: Database, language_id: uuid.UUID, norm: str) -> List[Word]:
    """
    Words of a language with the normal form ``norm``.

    Homographs share this key (e.g. a noun and a verb), hence a list; an
    empty list means no such word.
    """
    statement = select(Word).where(Word.language == language_id, Word.norm == norm)
    return fetch_all(db, statement, f"retrieve word {norm!r} in language {language_id}")


def search(db: Database, language_id: uuid.UUID, query: str) -> List[Word]:
    """Words of a language whose normal form contains ``query``, ignoring case."""
    statement = select(Word).where(
        Word.language == language_id,
        Word.norm.icontains(query, autoescape=True),  # type: ignore[attr-defined]
    ).order_by(Word.norm)
    return fetch_all(db, statement, f"search words matching {query!r} in language {language_id}")


def in_language(db: Database, language_id: uuid.UUID) -> List[Word]:
    statement = select(Word).where(Word.language == language_id).order_by(Word.norm)
    return fetch_all(db, statement, f"retrieve words of language {language_id}")


def count_in_language(db: Database, language_id: uuid.UUID) -> int:
    return count(db, Word, Word.language == language_id,
                 action=f"count words of language {language_id}")


def inflections_of(db: Database, word_id: uuid.UUID) -> List[Word]:
    """Words whose lemma is ``word_id``."""
    statement = select(Word).where(Word.lemma == word_id).order_by(Word.norm)
    return fetch_all(db, statement, f"retrieve inflections of word {word_id}")


def insert(db: Database, word: Word) -> Word:
    """
    Insert a word then read it back by its id.

    A lemma that does not point to an existing word is dropped rather than
    rejected.
    """
    if word.lemma is not None:
        try:
            find_by_id(db, word.lemma)
        except NotFoundError:
            logger.info(f"Dropping unknown lemma {word.lemma} of new word {word.norm!r}")
            word.lemma = None

    add(db, word, f"insert word {word.norm!r}")
    logger.info(f"Created word {word.norm!r} ({word.id}) in language {word.language}")
    return find_by_id(db, word.id)


def delete(db: Database, word_id: uuid.UUID) -> None:
    """
    Delete a word with its learning entries and the relations naming it.

    Words using it as their lemma are left as they are; their lemma then
    resolves to nothing.

    Raises:
        NotFoundError: If no such word exists
    """
    with translate_errors(f"delete word {word_id}"), db.session() as session:
        word = session.get(Word, word_id)
        if word is None:
            raise NotFoundError(f"Word {word_id} not found")

        learning = session.exec(select(WordLearning).where(WordLearning.word == word_id)).all()
        relations = session.exec(
            select(WordRelation).where(
                or_(WordRelation.wordsource == word_id, WordRelation.wordtarget == word_id)
            )
        ).all()

        for row in [*learning, *relations]:
            session.delete(row)
        session.flush()
        session.delete(word)
        session.commit()

    logger.info(
        f"Deleted word {word_id}: {len(learning)} learning entries, {len(relations)} relations"
    )
