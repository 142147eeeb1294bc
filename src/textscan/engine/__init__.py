"""
textscan engine

Pure functions for scanning, splitting, trimming, wrapping and numeric
validation. Nothing here logs or keeps state; locale-dependent functions take
the locale as an argument.
"""

from .oracle import CharClassOracle, get_whitespace_string
from .scanner import contains, find_all, count_occurrences
from .splitter import separate, sep, segment_spans
from .trimmer import (
    trim_edges,
    trim,
    strip_whitespace_anywhere,
    remove_whitespace,
    trim_whitespace_edges,
    trim_whitespace,
)
from .wrapper import wrap_to_width, count_lines
from .numeric import (
    check_integer_literal,
    check_float_literal,
    is_integer_literal,
    is_integer,
    is_float_literal,
    is_float,
    is_number,
)

__all__ = [
    'CharClassOracle', 'get_whitespace_string',
    'contains', 'find_all', 'count_occurrences',
    'separate', 'sep', 'segment_spans',
    'trim_edges', 'trim', 'strip_whitespace_anywhere', 'remove_whitespace',
    'trim_whitespace_edges', 'trim_whitespace',
    'wrap_to_width', 'count_lines',
    'check_integer_literal', 'check_float_literal',
    'is_integer_literal', 'is_integer', 'is_float_literal', 'is_float', 'is_number',
]
