"""Boolean/text coercion."""

from ..engine.numeric import check_float_literal, check_integer_literal
from ..locales.loader import LocaleLike

def string_to_bool(text: str, locale: LocaleLike = None) -> bool:
    """
    Interpret text as a boolean.
    
    ``"true"`` in any letter case is True. A number literal is True when its
    integer part is non-zero (``"9001"`` and ``"-2.5"`` are True, ``"0"`` and
    ``"0.7"`` are False). Everything else is False.
    """
    if text.upper() == "TRUE":
        return True
    check = check_integer_literal(text, locale)
    if not check.valid:
        check = check_float_literal(text, locale)
    if check.valid:
        return int(check.value) != 0
    return False

def bool_to_string(value: bool) -> str:
    return "true" if value else "false"
