"""
textscan - Text segmentation and scanning toolkit.

Splitting, searching, wrapping, whitespace normalization and lightweight
numeric-format validation over fully materialized text. Locale behaviour is
passed in explicitly as a LocaleConfig; nothing is cached between calls.
"""

from .core.errors import TextscanError, InvalidArgumentError
from .core.types import Span, LiteralCheck
from .locales.schema import LocaleConfig
from .locales.loader import (
    LocaleLoadError,
    builtin_locale,
    load_locale,
    load_locale_from_string,
    resolve_locale,
)
from .engine import (
    contains,
    find_all,
    count_occurrences,
    separate,
    sep,
    segment_spans,
    trim_edges,
    trim,
    strip_whitespace_anywhere,
    remove_whitespace,
    trim_whitespace_edges,
    trim_whitespace,
    get_whitespace_string,
    wrap_to_width,
    count_lines,
    check_integer_literal,
    check_float_literal,
    is_integer_literal,
    is_integer,
    is_float_literal,
    is_float,
    is_number,
)
from .runtime.toolkit import TextToolkit

__version__ = "0.1.0"
