"""
Model enums.

Each enum is a closed set stored by member name and exposed by value.
"""
from enum import Enum


class Release(str, Enum):
    """How a language's dictionary is released."""
    PUBLIC = "Public"
    NON_COMMERCIAL = "NonCommercial"
    RESEARCH = "Research"
    PRIVATE = "Private"


class DictGenre(str, Enum):
    """What kind of dictionary a language is."""
    GENERAL = "General"
    LEARNING = "Learning"
    ETYMOLOGY = "Etymology"
    SPECIALIZED = "Specialized"
    HISTORICAL = "Historical"
    ORTHOGRAPHY = "Orthography"
    TERMINOLOGY = "Terminology"


class AgentLanguageRelation(str, Enum):
    """Role of a user in the elaboration of a language."""
    PUBLISHER = "Publisher"
    AUTHOR = "Author"


class PartOfSpeech(str, Enum):
    """Universal part-of-speech tags."""
    ADJECTIVE = "Adjective"
    ADPOSITION = "Adposition"
    ADVERB = "Adverb"
    AUXILLIARY = "Auxilliary"
    COORD_CONJ = "CoordConj"
    DETERMINER = "Determiner"
    INTERJECTION = "Interjection"
    NOUN = "Noun"
    NUMERAL = "Numeral"
    PARTICLE = "Particle"
    PRONOUN = "Pronoun"
    PROPER_NOUN = "ProperNoun"
    PUNCTUATION = "Punctuation"
    SUBJ_CONJ = "SubjConj"
    SYMBOL = "Symbol"
    VERB = "Verb"
    OTHER = "Other"


class WordRelationship(str, Enum):
    """Directed relation from one word to another."""
    DEFINITION = "Definition"
    RELATED = "Related"


class WordLearningStatus(str, Enum):
    """Where a user stands with a word."""
    LEARNING = "Learning"
    LEARNED = "Learned"
