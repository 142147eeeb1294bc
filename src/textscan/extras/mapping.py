"""Key/value map parsing and stringification built on ``separate``."""

from typing import Dict, Mapping
from ..engine.splitter import separate
from ..engine.trimmer import strip_whitespace_anywhere
from ..locales.loader import LocaleLike

def mapify_string(text: str,
                  key_value_separator: str = ":",
                  pair_separator: str = ",",
                  ignore_whitespace: bool = True,
                  locale: LocaleLike = None) -> Dict[str, str]:
    """
    Parse ``"k1:v1,k2:v2"`` style text into a dict.
    
    Pairs are split first, then each pair is split into key and value. A key
    with no value maps to ``""``; anything after the first value is ignored.
    Later duplicates of a key overwrite earlier ones.
    
    Args:
        text: Flat text holding the pairs
        key_value_separator: Separator between a key and its value
        pair_separator: Separator between pairs
        ignore_whitespace: Strip all locale whitespace before parsing
        locale: Locale used when stripping whitespace
        
    Returns:
        Dict[str, str]: Parsed pairs in order of first appearance
    """
    if ignore_whitespace:
        text = strip_whitespace_anywhere(text, locale)
        
    mapped: Dict[str, str] = {}
    for pair in separate(text, pair_separator):
        key_and_value = separate(pair, key_value_separator)
        if not key_and_value:
            continue
        mapped[key_and_value[0]] = key_and_value[1] if len(key_and_value) > 1 else ""
    return mapped

def stringify_map(mapping: Mapping[str, str],
                  key_value_separator: str = ":",
                  pair_separator: str = ",") -> str:
    """Render a mapping as ``key<kv-sep>value`` pairs joined by ``pair_separator``."""
    return pair_separator.join(f"{key}{key_value_separator}{value}" for key, value in mapping.items())
