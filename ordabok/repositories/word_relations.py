"""
Word relation repository: directed definition and related-form links.
"""
import uuid
from typing import List

from sqlmodel import select

from ordabok.core.database import Database
from ordabok.models import WordRelation, WordRelationship
from ordabok.repositories.base import add, delete_where, fetch_all


def relations_from(db: Database, word_id: uuid.UUID, relationship: WordRelationship) -> List[WordRelation]:
    statement = select(WordRelation).where(
        WordRelation.wordsource == word_id,
        WordRelation.relationship == relationship,
    )
    return fetch_all(db, statement, f"retrieve {relationship.value} relations of word {word_id}")


def find(
    db: Database,
    source: uuid.UUID,
    target: uuid.UUID,
    relationship: WordRelationship,
) -> List[WordRelation]:
    statement = select(WordRelation).where(
        WordRelation.wordsource == source,
        WordRelation.wordtarget == target,
        WordRelation.relationship == relationship,
    )
    return fetch_all(db, statement, f"retrieve {relationship.value} relation {source} -> {target}")


def insert(
    db: Database,
    source: uuid.UUID,
    target: uuid.UUID,
    relationship: WordRelationship,
) -> WordRelation:
    return add(
        db,
        WordRelation(wordsource=source, wordtarget=target, relationship=relationship),
        f"insert {relationship.value} relation {source} -> {target}",
    )


def delete(
    db: Database,
    source: uuid.UUID,
    target: uuid.UUID,
    relationship: WordRelationship,
) -> int:
    return delete_where(
        db, WordRelation,
        WordRelation.wordsource == source,
        WordRelation.wordtarget == target,
        WordRelation.relationship == relationship,
        action=f"delete {relationship.value} relation {source} -> {target}",
    )
