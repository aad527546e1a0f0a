"""
Word request schemas.

Identifiers stay strings here; they are parsed, and rejected if malformed,
before any store access.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from ordabok.models.enums import PartOfSpeech, WordLearningStatus


class NewWord(BaseModel):
    """Request schema for creating a word in a language owned by the caller."""
    norm: str = Field(..., min_length=1, description="Normal written form")
    native: Optional[str] = Field(None, description="Spelling in the native script")
    lemma: Optional[str] = Field(None, description="Id of the word's base form")
    language: str = Field(..., description="Id of the language the word belongs to")
    partofspeech: PartOfSpeech
    audio: Optional[str] = None
    video: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    etymology: Optional[str] = None
    usage: Optional[str] = None
    morphology: Optional[str] = None

    @field_validator('norm')
    @classmethod
    def validate_norm(cls, v):
        """Validate norm field is not blank."""
        if not v or not v.strip():
            raise ValueError("norm cannot be missing or empty")
        return v


class WordLearningRequest(BaseModel):
    """Request schema for setting the caller's learning status of a word."""
    status: WordLearningStatus = WordLearningStatus.LEARNING

