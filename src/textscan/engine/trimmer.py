"""Fixed-count and locale-whitespace trimming."""

from ..core.errors import InvalidArgumentError
from ..locales.loader import LocaleLike
from .oracle import CharClassOracle

def trim_edges(text: str, count: int) -> str:
    """
    Remove ``count`` characters from both the start and the end of ``text``.
    
    Returns an empty string when nothing would be left in the middle.
    
    Raises:
        InvalidArgumentError: If count is negative
    """
    if count < 0:
        raise InvalidArgumentError(f"count must be non-negative, got {count}")
    if count * 2 >= len(text):
        return ""
    return text[count:len(text) - count]

def strip_whitespace_anywhere(text: str, locale: LocaleLike = None) -> str:
    """Remove every locale-whitespace character, keeping the rest in order."""
    oracle = CharClassOracle.for_locale(locale)
    table = {ord(ch): None for ch in oracle.whitespace_string()}
    return text.translate(table)

def trim_whitespace_edges(text: str, locale: LocaleLike = None) -> str:
    """
    Remove leading and trailing whitespace runs, leaving interior whitespace.
    
    Args:
        text: Text to trim
        locale: Locale deciding what counts as whitespace (default ``C``)
        
    Returns:
        str: Trimmed text, empty if ``text`` was empty or all whitespace
    """
    oracle = CharClassOracle.for_locale(locale)
    begin = 0
    end = len(text)
    while begin < end and oracle.is_whitespace(text[begin]):
        begin += 1
    while end > begin and oracle.is_whitespace(text[end - 1]):
        end -= 1
    return text[begin:end]

trim = trim_edges
remove_whitespace = strip_whitespace_anywhere
trim_whitespace = trim_whitespace_edges
