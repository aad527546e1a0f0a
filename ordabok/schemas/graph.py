"""
Response graph schemas.

Scalar columns are always present. References are exposed as ids
(``owner_id``, ``language_id``, ``lemma_id``); relationship fields stay unset,
and out of the response, unless the request asked for them.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
import uuid

from ordabok.models import Language, User, Word
from ordabok.models.enums import Release, DictGenre, PartOfSpeech


class UserResponse(BaseModel):
    """User response schema."""
    id: str
    username: str

    languages: Optional[List["LanguageResponse"]] = None
    following: Optional[List["UserResponse"]] = None
    followers: Optional[List["UserResponse"]] = None
    followed_languages: Optional[List["LanguageResponse"]] = None
    learning: Optional[List["WordResponse"]] = None
    learned: Optional[List["WordResponse"]] = None

    @classmethod
    def from_model(cls, user: User) -> "UserResponse":
        return cls(id=user.id, username=user.username)


class LanguageResponse(BaseModel):
    """Language response schema."""
    id: uuid.UUID
    name: str
    native: Optional[str] = None
    release: Release
    genre: List[DictGenre]
    abstract: Optional[str] = None
    created: datetime
    description: Optional[str] = None
    rights: Optional[str] = None
    license: Optional[str] = None
    owner_id: str

    owner: Optional[UserResponse] = None
    authors: Optional[List[UserResponse]] = None
    publishers: Optional[List[UserResponse]] = None
    translations: Optional[List["LanguageResponse"]] = None
    translated_from: Optional[List["LanguageResponse"]] = None
    followers: Optional[List[UserResponse]] = None
    words: Optional[List["WordResponse"]] = None

    @classmethod
    def from_model(cls, language: Language) -> "LanguageResponse":
        return cls(
            id=language.id,
            name=language.name,
            native=language.native,
            release=language.release,
            genre=list(language.genre or []),
            abstract=language.abstract,
            created=language.created,
            description=language.description,
            rights=language.rights,
            license=language.license,
            owner_id=language.owner,
        )


class WordResponse(BaseModel):
    """Word response schema."""
    id: uuid.UUID
    norm: str
    native: Optional[str] = None
    lemma_id: Optional[uuid.UUID] = None
    language_id: uuid.UUID
    partofspeech: PartOfSpeech
    audio: Optional[str] = None
    video: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    etymology: Optional[str] = None
    usage: Optional[str] = None
    morphology: Optional[str] = None

    language: Optional[LanguageResponse] = None
    lemma: Optional["WordResponse"] = None
    definitions: Optional[List["WordResponse"]] = None
    related: Optional[List["WordResponse"]] = None
    inflections: Optional[List["WordResponse"]] = None

    @classmethod
    def from_model(cls, word: Word) -> "WordResponse":
        return cls(
            id=word.id,
            norm=word.norm,
            native=word.native,
            lemma_id=word.lemma,
            language_id=word.language,
            partofspeech=word.partofspeech,
            audio=word.audio,
            video=word.video,
            image=word.image,
            description=word.description,
            etymology=word.etymology,
            usage=word.usage,
            morphology=word.morphology,
        )


UserResponse.model_rebuild()
LanguageResponse.model_rebuild()
WordResponse.model_rebuild()
