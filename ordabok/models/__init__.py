"""
Models package - imports all models so they register with SQLModel.
"""
# Import enums first
from ordabok.models.enums import (
    Release,
    DictGenre,
    AgentLanguageRelation,
    PartOfSpeech,
    WordRelationship,
    WordLearningStatus,
)

# Import all models
from ordabok.models.user import User, UserFollow
from ordabok.models.language import Language, LangAndAgent, LangTranslatesTo, UserFollowLanguage
from ordabok.models.word import Word, WordRelation, WordLearning

__all__ = [
    'Release',
    'DictGenre',
    'AgentLanguageRelation',
    'PartOfSpeech',
    'WordRelationship',
    'WordLearningStatus',
    'User',
    'UserFollow',
    'Language',
    'LangAndAgent',
    'LangTranslatesTo',
    'UserFollowLanguage',
    'Word',
    'WordRelation',
    'WordLearning',
]
