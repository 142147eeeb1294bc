"""Delimiter-based segmentation of text into an ordered list of segments."""

from typing import List
from ..core.types import Span

def segment_spans(text: str, delimiter: str) -> List[Span]:
    """
    Locate every segment between occurrences of ``delimiter``.
    
    A single left-to-right cursor records where each segment starts and ends;
    nothing is copied until the caller slices. The tail after the last match
    is always included, so there are ``occurrences + 1`` spans. An empty
    delimiter gives one span per character.
    """
    if not delimiter:
        return [Span(i, i + 1) for i in range(len(text))]
    
    spans = []
    cursor = 0
    width = len(delimiter)
    match = text.find(delimiter, cursor)
    while match != -1:
        spans.append(Span(cursor, match))
        cursor = match + width
        match = text.find(delimiter, cursor)
    spans.append(Span(cursor, len(text)))
    return spans

def separate(text: str, delimiter: str = ",", omit_empty: bool = True) -> List[str]:
    """
    Split ``text`` on every occurrence of ``delimiter``.
    
    Example:
        separate("John,Gina,Sebastian,Nick", ",") -> ["John", "Gina", "Sebastian", "Nick"]
    
    Args:
        text: Text to split
        delimiter: Separator substring; empty splits between every character
        omit_empty: Drop zero-length segments wherever they occur
        
    Returns:
        List[str]: Segments in order of occurrence
    """
    if not delimiter:
        return list(text)
    
    if len(delimiter) == 1:
        segments = text.split(delimiter)
    else:
        segments = [span.slice(text) for span in segment_spans(text, delimiter)]
        
    if omit_empty:
        segments = [s for s in segments if s]
    return segments

sep = separate
