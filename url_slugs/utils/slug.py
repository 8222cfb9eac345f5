"""
Slug normalization utility
"""
import re
import unicodedata
from typing import Callable, Optional, Tuple


# Both a missing source value and an empty one end up as this literal text
EMPTY_SOURCE_TEXT = "undefined"

_NON_SLUG_CHARS = re.compile(r'[^a-z0-9]+')


def generate_slug(text: str, separator: str = "-") -> str:
    """
    Generate a URL-friendly slug from text

    Args:
        text: Text to convert to slug
        separator: String placed between alphanumeric runs

    Returns:
        URL-friendly slug, possibly empty
    """
    # Remove accents/diacritics
    text = unicodedata.normalize('NFKD', text)
    text = text.encode('ascii', 'ignore').decode('ascii')

    # Convert to lowercase
    text = text.lower()

    # Collapse every run of other characters into one separator
    text = _NON_SLUG_CHARS.sub(separator, text)

    # Remove leading/trailing separators
    return text.strip(separator)


def normalize(
    source_value: Optional[str],
    separator: str = "-",
    generator: Optional[Callable[[str, str], str]] = None,
) -> Tuple[str, bool]:
    """
    Turn a raw source value into a slug candidate

    Returns (candidate, is_empty). is_empty is only true for an empty
    string or text with nothing sluggable in it; an absent value is not
    empty, it simply slugs as "undefined".
    """
    if source_value is None:
        return EMPTY_SOURCE_TEXT, False

    text = str(source_value)
    if not text:
        return EMPTY_SOURCE_TEXT, True

    candidate = (generator or generate_slug)(text, separator)
    if not candidate:
        return EMPTY_SOURCE_TEXT, True

    return candidate, False


def truncate(text: str, length: Optional[int]) -> str:
    """Clip text to at most length characters (None means no limit)"""
    if length is None:
        return text
    return text[:max(length, 0)]
