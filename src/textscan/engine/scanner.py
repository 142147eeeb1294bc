"""Substring search: containment, all occurrences, occurrence count."""

from typing import List

def contains(text: str, target: str) -> bool:
    """True if ``target`` occurs in ``text``. The empty target is in every text."""
    return target in text

def find_all(text: str, target: str) -> List[int]:
    """
    Find every offset at which ``target`` starts in ``text``.
    
    Matches may overlap: ``find_all("aaa", "aa") == [0, 1]``. An empty target
    matches once per character position, so it yields ``len(text)`` offsets
    (none for an empty text).
    
    Args:
        text: Text to search
        target: Substring to look for
        
    Returns:
        List[int]: Strictly increasing start offsets
    """
    if not target:
        return list(range(len(text)))
    
    positions = []
    pos = text.find(target)
    while pos != -1:
        positions.append(pos)
        pos = text.find(target, pos + 1)
    return positions

def count_occurrences(text: str, target: str) -> int:
    """Number of (possibly overlapping) occurrences of ``target``."""
    return len(find_all(text, target))
