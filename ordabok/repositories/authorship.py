"""
Language authorship repository: which users author or publish a language.
"""
import uuid
from typing import List, Optional

from sqlmodel import select

from ordabok.core.database import Database
from ordabok.models import AgentLanguageRelation, LangAndAgent
from ordabok.repositories.base import add, delete_where, fetch_all


def agents_of(
    db: Database,
    language_id: uuid.UUID,
    relationship: Optional[AgentLanguageRelation] = None,
) -> List[LangAndAgent]:
    """Authorship rows of a language, optionally only one kind of role."""
    statement = select(LangAndAgent).where(LangAndAgent.language == language_id)
    if relationship is not None:
        statement = statement.where(LangAndAgent.relationship == relationship)
    return fetch_all(db, statement, f"retrieve agents of language {language_id}")


def find(
    db: Database,
    language_id: uuid.UUID,
    agent: str,
    relationship: AgentLanguageRelation,
) -> List[LangAndAgent]:
    statement = select(LangAndAgent).where(
        LangAndAgent.language == language_id,
        LangAndAgent.agent == agent,
        LangAndAgent.relationship == relationship,
    )
    return fetch_all(db, statement, f"retrieve {relationship.value} {agent} of language {language_id}")


def insert(
    db: Database,
    language_id: uuid.UUID,
    agent: str,
    relationship: AgentLanguageRelation,
) -> LangAndAgent:
    return add(
        db,
        LangAndAgent(language=language_id, agent=agent, relationship=relationship),
        f"insert {relationship.value} {agent} of language {language_id}",
    )


def delete(
    db: Database,
    language_id: uuid.UUID,
    agent: str,
    relationship: AgentLanguageRelation,
) -> int:
    return delete_where(
        db, LangAndAgent,
        LangAndAgent.language == language_id,
        LangAndAgent.agent == agent,
        LangAndAgent.relationship == relationship,
        action=f"delete {relationship.value} {agent} of language {language_id}",
    )
