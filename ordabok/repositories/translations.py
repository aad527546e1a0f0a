"""
Language translation links repository. Links are directed: ``langfrom``
translates to ``langto``.
"""
import uuid
from typing import List

from sqlmodel import select

from ordabok.core.database import Database
from ordabok.models import LangTranslatesTo
from ordabok.repositories.base import add, delete_where, fetch_all


def translations_of(db: Database, language_id: uuid.UUID) -> List[LangTranslatesTo]:
    statement = select(LangTranslatesTo).where(LangTranslatesTo.langfrom == language_id)
    return fetch_all(db, statement, f"retrieve translations of language {language_id}")


def translated_from(db: Database, language_id: uuid.UUID) -> List[LangTranslatesTo]:
    statement = select(LangTranslatesTo).where(LangTranslatesTo.langto == language_id)
    return fetch_all(db, statement, f"retrieve languages translating to {language_id}")


def find(db: Database, langfrom: uuid.UUID, langto: uuid.UUID) -> List[LangTranslatesTo]:
    statement = select(LangTranslatesTo).where(
        LangTranslatesTo.langfrom == langfrom,
        LangTranslatesTo.langto == langto,
    )
    return fetch_all(db, statement, f"retrieve translation link {langfrom} -> {langto}")


def insert(db: Database, langfrom: uuid.UUID, langto: uuid.UUID) -> LangTranslatesTo:
    return add(
        db,
        LangTranslatesTo(langfrom=langfrom, langto=langto),
        f"insert translation link {langfrom} -> {langto}",
    )


def delete(db: Database, langfrom: uuid.UUID, langto: uuid.UUID) -> int:
    return delete_where(
        db, LangTranslatesTo,
        LangTranslatesTo.langfrom == langfrom,
        LangTranslatesTo.langto == langto,
        action=f"delete translation link {langfrom} -> {langto}",
    )
