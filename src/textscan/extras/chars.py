"""Simple character-level string helpers."""

from ..core.errors import InvalidArgumentError
from ..engine.oracle import DIGITS

def cap_first_char(text: str) -> str:
    """Upper-case the first character; empty text is returned unchanged."""
    if not text:
        return text
    return text[0].upper() + text[1:]

def to_upper(text: str) -> str:
    return text.upper()

def char_to_string(ch: str) -> str:
    if len(ch) != 1:
        raise InvalidArgumentError(f"expected a single character, got {len(ch)} characters")
    return ch

def reverse(text: str) -> str:
    return text[::-1]

def is_palindrome(text: str) -> bool:
    """Exact character-for-character palindrome check; case and punctuation count."""
    return text == text[::-1]

def circular_index(text: str, index: int) -> str:
    """
    Index into ``text`` wrapping around past the end.
    
    ``circular_index("Hello world!", 13) == "e"``.
    
    Raises:
        InvalidArgumentError: If text is empty
    """
    if not text:
        raise InvalidArgumentError("cannot circularly index an empty string")
    return text[index % len(text)]

def erase_chars_from_end(text: str, n: int) -> str:
    """Drop the last ``n`` characters; ``n >= len(text)`` leaves nothing."""
    if n < 0:
        raise InvalidArgumentError(f"n must be non-negative, got {n}")
    if n >= len(text):
        return ""
    return text[:len(text) - n]

def erase_non_numeric_chars(text: str) -> str:
    """Keep only the ASCII digits of ``text``."""
    return "".join(ch for ch in text if ch in DIGITS)
