"""
Language model and the join tables hanging off it.
"""
from sqlmodel import SQLModel, Field
from typing import Optional, List
from datetime import datetime, timezone
import uuid
from sqlalchemy import Column, Text, UniqueConstraint
from ordabok.models.enums import Release, DictGenre, AgentLanguageRelation
from ordabok.models.types import EnumList


class Language(SQLModel, table=True):
    """Language table - a user-defined language and its dictionary metadata."""
    __tablename__ = "languages"
    __table_args__ = (
        UniqueConstraint("name", "owner", name="uq_languages_name_owner"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True)  # Name in the main target language, often English
    native: Optional[str] = None  # Native name of the language
    release: Release = Field(default=Release.PRIVATE)
    genre: List[DictGenre] = Field(
        default_factory=list,
        sa_column=Column(EnumList(DictGenre), nullable=False)
    )
    abstract: Optional[str] = Field(default=None, sa_column=Column("abstract", Text))
    created: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))  # Set once, UTC
    description: Optional[str] = Field(default=None, sa_column=Column(Text))  # Markdown
    rights: Optional[str] = Field(default=None, sa_column=Column(Text))
    license: Optional[str] = Field(default=None, sa_column=Column(Text))
    owner: str = Field(foreign_key="users.id", index=True)


class LangAndAgent(SQLModel, table=True):
    """LangAndAgent junction table - authors and publishers of a language."""
    __tablename__ = "langandagents"

    id: Optional[int] = Field(default=None, primary_key=True)
    agent: str = Field(foreign_key="users.id", index=True)
    language: uuid.UUID = Field(foreign_key="languages.id", index=True)
    relationship: AgentLanguageRelation


class LangTranslatesTo(SQLModel, table=True):
    """LangTranslatesTo table - directed link from a language to one it translates to."""
    __tablename__ = "langtranslatesto"

    id: Optional[int] = Field(default=None, primary_key=True)
    langfrom: uuid.UUID = Field(index=True)
    langto: uuid.UUID = Field(index=True)


class UserFollowLanguage(SQLModel, table=True):
    """UserFollowLanguage junction table - a user following a language."""
    __tablename__ = "userfollowlanguage"

    id: Optional[int] = Field(default=None, primary_key=True)
    lang: uuid.UUID = Field(foreign_key="languages.id", index=True)
    userid: str = Field(foreign_key="users.id", index=True)
