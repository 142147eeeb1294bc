"""Locale-bound facade over the engine with optional structured logging."""

from typing import List, Optional
from ..core.abc import Logger
from ..core.errors import InvalidArgumentError
from ..core.types import LiteralCheck, Span
from ..locales.loader import LocaleLike, resolve_locale
from .. import engine

class TextToolkit:
    """
    Binds one locale configuration and an optional logger to the text engine.
    
    Every method is a thin wrapper around the matching engine function; the
    toolkit adds logging of boundary conditions and rejected input. The
    locale is resolved once, at construction, and is immutable afterwards.
    """
    
    def __init__(self, *, locale: LocaleLike = None, logger: Optional[Logger] = None):
        """
        Initialize the toolkit.
        
        Args:
            locale: Preset name, mapping, LocaleConfig, or None for ``C``
            logger: Optional structured logger
        """
        self.locale = resolve_locale(locale)
        self.log = logger

    # Scanner

    def contains(self, text: str, target: str) -> bool:
        return engine.contains(text, target)

    def find_all(self, text: str, target: str) -> List[int]:
        positions = engine.find_all(text, target)
        if self.log:
            self.log.info("find_all", target_length=len(target), matches=len(positions))
        return positions

    def count_occurrences(self, text: str, target: str) -> int:
        return engine.count_occurrences(text, target)

    # Splitter

    def separate(self, text: str, delimiter: str = ",", omit_empty: bool = True) -> List[str]:
        segments = engine.separate(text, delimiter, omit_empty)
        if self.log:
            self.log.info("separate",
                          delimiter=delimiter,
                          omit_empty=omit_empty,
                          segments=len(segments))
        return segments

    def segment_spans(self, text: str, delimiter: str) -> List[Span]:
        return engine.segment_spans(text, delimiter)

    # Trimmer

    def trim_edges(self, text: str, count: int) -> str:
        try:
            return engine.trim_edges(text, count)
        except InvalidArgumentError as e:
            if self.log:
                self.log.error("invalid_argument", operation="trim_edges", error=str(e))
            raise

    def strip_whitespace_anywhere(self, text: str) -> str:
        return engine.strip_whitespace_anywhere(text, self.locale)

    def trim_whitespace_edges(self, text: str) -> str:
        return engine.trim_whitespace_edges(text, self.locale)

    def get_whitespace_string(self) -> str:
        return engine.get_whitespace_string(self.locale)

    # Wrapper

    def wrap_to_width(self, text: str, width: int) -> str:
        if width <= 0:
            if self.log:
                self.log.warn("wrap_width_nonpositive", width=width, text_length=len(text))
            return ""
        return engine.wrap_to_width(text, width, self.locale)

    def count_lines(self, text: str) -> int:
        return engine.count_lines(text)

    # Numeric validator

    def check_integer_literal(self, text: str) -> LiteralCheck:
        return self._report(engine.check_integer_literal(text, self.locale), text)

    def check_float_literal(self, text: str) -> LiteralCheck:
        return self._report(engine.check_float_literal(text, self.locale), text)

    def is_integer_literal(self, text: str) -> bool:
        return self.check_integer_literal(text).valid

    def is_float_literal(self, text: str) -> bool:
        return self.check_float_literal(text).valid

    def is_number(self, text: str) -> bool:
        return self.is_integer_literal(text) or self.is_float_literal(text)

    def _report(self, check: LiteralCheck, text: str) -> LiteralCheck:
        """Log why a literal was rejected; out-of-range values warn."""
        if self.log and not check.valid:
            if check.reason == "out_of_range":
                self.log.warn("numeric_rejected", kind=check.kind, reason=check.reason,
                              text_length=len(text), locale=self.locale.name)
            else:
                self.log.info("numeric_rejected", kind=check.kind, reason=check.reason,
                              text_length=len(text))
        return check
