"""
Word learning repository: a user's status for the words they study.
"""
import uuid
from typing import List, Optional

from sqlmodel import select

from ordabok.core.database import Database
from ordabok.core.exceptions import NotFoundError
from ordabok.models import WordLearning, WordLearningStatus
from ordabok.repositories.base import add, delete_where, fetch_all, translate_errors


def words_of(db: Database, user_id: str, status: Optional[WordLearningStatus] = None) -> List[WordLearning]:
    statement = select(WordLearning).where(WordLearning.userid == user_id)
    if status is not None:
        statement = statement.where(WordLearning.status == status)
    return fetch_all(db, statement, f"retrieve learning list of {user_id}")


def find(db: Database, user_id: str, word_id: uuid.UUID) -> List[WordLearning]:
    statement = select(WordLearning).where(
        WordLearning.userid == user_id,
        WordLearning.word == word_id,
    )
    return fetch_all(db, statement, f"retrieve learning status of word {word_id} for {user_id}")


def insert(db: Database, user_id: str, word_id: uuid.UUID, status: WordLearningStatus) -> WordLearning:
    return add(
        db,
        WordLearning(userid=user_id, word=word_id, status=status),
        f"insert learning status of word {word_id} for {user_id}",
    )


def update_status(db: Database, entry_id: int, status: WordLearningStatus) -> WordLearning:
    with translate_errors(f"update learning entry {entry_id}"), db.session() as session:
        entry = session.get(WordLearning, entry_id)
        if entry is None:
            raise NotFoundError(f"Learning entry {entry_id} not found")
        entry.status = status
        session.add(entry)
        session.commit()
        session.refresh(entry)
        return entry


def delete(db: Database, user_id: str, word_id: uuid.UUID) -> int:
    return delete_where(
        db, WordLearning,
        WordLearning.userid == user_id,
        WordLearning.word == word_id,
        action=f"delete learning status of word {word_id} for {user_id}",
    )
