"""
Language request schemas.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from ordabok.models.enums import Release, DictGenre


class NewLanguage(BaseModel):
    """Request schema for creating a language; the caller becomes its owner."""
    name: str = Field(..., min_length=1, max_length=255, description="Name in the main target language")
    native: Optional[str] = Field(None, description="Native name of the language")
    release: Release = Field(Release.PRIVATE, description="How the dictionary is released")
    genre: List[DictGenre] = Field(default_factory=list, description="What kind of dictionary this is")
    abstract: Optional[str] = Field(None, description="Short description of the language")
    description: Optional[str] = Field(None, description="Longer description, can be formatted as Markdown")
    rights: Optional[str] = Field(None, description="Copyrights held over the dictionary and its content")
    license: Optional[str] = Field(None, description="License under which the dictionary is released")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate name field is not blank."""
        if not v or not v.strip():
            raise ValueError("name cannot be missing or empty")
        return v.strip()

