"""Character-class oracle bound to one locale configuration."""

from ..locales.loader import LocaleLike, resolve_locale
from ..locales.schema import LocaleConfig

DIGITS = "0123456789"

class CharClassOracle:
    """
    Answers whitespace and digit questions for a single LocaleConfig.
    
    Instances are cheap and hold no state beyond the (frozen) config they were
    built from, so build one per call rather than sharing a global.
    """
    
    def __init__(self, locale: LocaleConfig):
        self.locale = locale
        self._whitespace = frozenset(locale.whitespace)

    @classmethod
    def for_locale(cls, locale: LocaleLike = None) -> "CharClassOracle":
        """Resolve ``locale`` and build an oracle for it."""
        return cls(resolve_locale(locale))

    def is_whitespace(self, ch: str) -> bool:
        return ch in self._whitespace

    def is_digit(self, ch: str) -> bool:
        # ASCII digits only, whatever the locale.
        return len(ch) == 1 and ch in DIGITS

    def is_decimal_point(self, ch: str) -> bool:
        return ch == self.locale.decimal_point

    def whitespace_string(self) -> str:
        """All whitespace characters of the locale, ordered by code point."""
        return "".join(sorted(self._whitespace))

def get_whitespace_string(locale: LocaleLike = None) -> str:
    """
    Return every character the given locale classifies as whitespace.
    
    For the default ``C`` locale this is ``"\\t\\n\\v\\f\\r "``.
    """
    return CharClassOracle.for_locale(locale).whitespace_string()
