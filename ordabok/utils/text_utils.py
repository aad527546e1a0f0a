"""
Text utility functions.
"""
import unicodedata
import uuid
from typing import Optional

from ordabok.core.exceptions import ValidationError


def normalize_word_form(term: str) -> str:
    """
    Normalize a written form before it is stored as a word's ``norm``.

    Applies Unicode NFC composition, trims leading and trailing dots (.) and
    whitespace, and collapses inner runs of whitespace to one space. Other
    symbols like question marks, apostrophes or hyphens are preserved.

    Args:
        term: The written form to normalize

    Returns:
        Normalized form, possibly empty
    """
    if not term:
        return term

    normalized = unicodedata.normalize("NFC", term).strip()

    # Strip leading and trailing dots, then any whitespace they exposed
    normalized = normalized.strip(".").strip()

    return " ".join(normalized.split())


def parse_identifier(value: str, field: str = "id") -> uuid.UUID:
    """
    Parse an identifier passed as a string.

    Raises:
        ValidationError: If ``value`` is not a UUID
    """
    try:
        return uuid.UUID(str(value).strip())
    except (ValueError, AttributeError, TypeError) as e:
        raise ValidationError(f"Failed to convert {field} {value!r} to a proper UUID") from e


def blank_to_none(text: Optional[str]) -> Optional[str]:
    """Strip ``text``; empty strings become ``None``."""
    if text is None:
        return None
    stripped = text.strip()
    return stripped or None
