"""Data types and result structures for textscan operations."""

from dataclasses import dataclass
from typing import Optional, Union

@dataclass(frozen=True)
class Span:
    """Half-open [start, end) offsets of a segment within its source text."""
    start: int
    end: int

    @property
    def length(self) -> int:
        """Number of characters covered; zero-width spans are still truthy."""
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Return the part of ``text`` this span covers."""
        return text[self.start:self.end]

@dataclass
class LiteralCheck:
    """Result of validating a numeric literal."""
    valid: bool
    kind: str                               # "integer" | "float"
    reason: Optional[str] = None            # None | "malformed" | "out_of_range"
    value: Optional[Union[int, float]] = None

    def __bool__(self) -> bool:
        return self.valid
