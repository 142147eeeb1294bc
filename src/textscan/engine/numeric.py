"""
Strict validators for integer and floating point literals.

The grammars are deliberately narrow: an optional leading ``-`` followed by
ASCII digits, with exactly one locale decimal point for floats. Exponents,
a leading ``+``, and bare integers (as floats) are all rejected. Values that
do not fit the locale's numpy integer or float type are reported as invalid
rather than raising.
"""

import math
from typing import Tuple
from ..core.abc import CharClassifier
from ..core.types import LiteralCheck
from ..locales.loader import LocaleLike
from .oracle import CharClassOracle

def _split_sign(text: str) -> Tuple[str, str]:
    if text.startswith("-"):
        return "-", text[1:]
    return "", text

def _all_digits(oracle: CharClassifier, chars: str) -> bool:
    return all(oracle.is_digit(ch) for ch in chars)

def check_integer_literal(text: str, locale: LocaleLike = None) -> LiteralCheck:
    """
    Validate ``text`` against ``'-'? digit+`` and the locale's integer range.
    
    Returns:
        LiteralCheck: ``valid`` plus the parsed value or the rejection reason
    """
    oracle = CharClassOracle.for_locale(locale)
    sign, body = _split_sign(text)
    if not body or not _all_digits(oracle, body):
        return LiteralCheck(valid=False, kind="integer", reason="malformed")
    
    low, high = oracle.locale.integer_bounds
    # Bail out on digit count first; int() refuses very long strings.
    significant = body.lstrip("0")
    if len(significant) > len(str(max(-low, high))):
        return LiteralCheck(valid=False, kind="integer", reason="out_of_range")
    
    value = int(sign + (significant or "0"))
    if not low <= value <= high:
        return LiteralCheck(valid=False, kind="integer", reason="out_of_range")
    return LiteralCheck(valid=True, kind="integer", value=value)

def check_float_literal(text: str, locale: LocaleLike = None) -> LiteralCheck:
    """
    Validate ``text`` against ``'-'? digit* point digit*``.
    
    Exactly one locale decimal point and at least one digit are required,
    so ``".2"`` and ``"1."`` pass while ``"."``, ``"7.0.0"`` and ``"1"`` do not.
    """
    oracle = CharClassOracle.for_locale(locale)
    point = oracle.locale.decimal_point
    sign, body = _split_sign(text)
    if body.count(point) != 1:
        return LiteralCheck(valid=False, kind="float", reason="malformed")
    
    whole, _, fraction = body.partition(point)
    if not (whole or fraction) or not _all_digits(oracle, whole + fraction):
        return LiteralCheck(valid=False, kind="float", reason="malformed")
    
    value = float(f"{sign}{whole or '0'}.{fraction or '0'}")
    if not math.isfinite(value) or abs(value) > oracle.locale.float_max:
        return LiteralCheck(valid=False, kind="float", reason="out_of_range")
    return LiteralCheck(valid=True, kind="float", value=value)

def is_integer_literal(text: str, locale: LocaleLike = None) -> bool:
    """True if ``text`` is a decimal integer that fits the locale's integer type."""
    return check_integer_literal(text, locale).valid

def is_float_literal(text: str, locale: LocaleLike = None) -> bool:
    """True if ``text`` is a plain decimal-point literal that fits the float type."""
    return check_float_literal(text, locale).valid

def is_number(text: str, locale: LocaleLike = None) -> bool:
    """True if ``text`` is an integer or float literal, written with digits only."""
    return is_integer_literal(text, locale) or is_float_literal(text, locale)

is_integer = is_integer_literal
is_float = is_float_literal
