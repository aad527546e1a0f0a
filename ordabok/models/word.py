"""
Word model and the join tables hanging off it.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
import uuid
from sqlalchemy import Column, Text
from ordabok.models.enums import PartOfSpeech, WordRelationship, WordLearningStatus


class Word(SQLModel, table=True):
    """Word table - one entry in a language's vocabulary."""
    __tablename__ = "words"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    norm: str = Field(index=True)  # Normalized written form
    native: Optional[str] = None  # Spelling in the native script
    # Base form; deliberately not a foreign key so a deleted lemma leaves a stale id
    lemma: Optional[uuid.UUID] = Field(default=None, index=True)
    language: uuid.UUID = Field(foreign_key="languages.id", index=True)
    partofspeech: PartOfSpeech
    audio: Optional[str] = None
    video: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    etymology: Optional[str] = Field(default=None, sa_column=Column(Text))
    usage: Optional[str] = Field(default=None, sa_column=Column("lusage", Text))
    morphology: Optional[str] = Field(default=None, sa_column=Column(Text))


class WordRelation(SQLModel, table=True):
    """WordRelation table - directed definition or related-form link between words."""
    __tablename__ = "wordrelation"

    id: Optional[int] = Field(default=None, primary_key=True)
    wordsource: uuid.UUID = Field(index=True)
    wordtarget: uuid.UUID = Field(index=True)
    relationship: WordRelationship


class WordLearning(SQLModel, table=True):
    """WordLearning table - tracks which words a user is learning or has learned."""
    __tablename__ = "wordlearning"

    id: Optional[int] = Field(default=None, primary_key=True)
    word: uuid.UUID = Field(foreign_key="words.id", index=True)
    userid: str = Field(foreign_key="users.id", index=True)
    status: WordLearningStatus = Field(default=WordLearningStatus.LEARNING)
