"""
textscan extras

Helpers composed from the engine: key/value map parsing, boolean coercion,
character utilities and file line counting.
"""

from .mapping import mapify_string, stringify_map
from .coerce import string_to_bool, bool_to_string
from .chars import (
    cap_first_char,
    to_upper,
    char_to_string,
    reverse,
    is_palindrome,
    circular_index,
    erase_chars_from_end,
    erase_non_numeric_chars,
)
from .files import FileLinesError, FileReadError, count_file_lines

__all__ = [
    'mapify_string', 'stringify_map',
    'string_to_bool', 'bool_to_string',
    'cap_first_char', 'to_upper', 'char_to_string', 'reverse', 'is_palindrome',
    'circular_index', 'erase_chars_from_end', 'erase_non_numeric_chars',
    'FileLinesError', 'FileReadError', 'count_file_lines',
]
