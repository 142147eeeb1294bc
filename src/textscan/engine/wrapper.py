"""Greedy fixed-width line wrapping and line counting."""

from typing import List
from ..core.abc import CharClassifier
from ..locales.loader import LocaleLike
from .oracle import CharClassOracle

def count_lines(text: str) -> int:
    """Count the newline characters in ``text``."""
    return text.count("\n")

def _split_lines(text: str) -> List[str]:
    # A trailing newline terminates the last line rather than opening a new one.
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines

def _wrap_line(line: str, width: int, oracle: CharClassifier) -> List[str]:
    pieces = []
    start = 0
    while len(line) - start > width:
        cut = -1
        for i in range(start + width, start - 1, -1):
            if oracle.is_whitespace(line[i]):
                cut = i
                break
        if cut == -1:
            pieces.append(line[start:start + width])
            start += width
        else:
            pieces.append(line[start:cut])
            start = cut + 1
    pieces.append(line[start:])
    return pieces

def wrap_to_width(text: str, width: int, locale: LocaleLike = None) -> str:
    """
    Wrap text so that no line is longer than ``width`` characters.
    
    Each existing line is wrapped on its own. A line is broken at the last
    whitespace character at or before ``width`` (that character is dropped);
    when there is none the line is cut after exactly ``width`` characters.
    Lines are re-joined with ``"\\n"`` and no newline is appended after the
    final line.
    
    Example:
        wrap_to_width("111222333", 3) -> "111\\n222\\n333"
    
    Args:
        text: Text to wrap
        width: Maximum line length; zero or less produces an empty string
        locale: Locale deciding what counts as a break opportunity
        
    Returns:
        str: Wrapped text
    """
    if width <= 0:
        return ""
    
    lines = _split_lines(text)
    if lines == [""]:
        # A lone newline is kept; dropping it would erase the only line break.
        return "\n"
    
    oracle = CharClassOracle.for_locale(locale)
    wrapped = ["\n".join(_wrap_line(line, width, oracle)) for line in lines]
    return "\n".join(wrapped)
