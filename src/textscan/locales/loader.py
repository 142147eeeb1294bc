"""YAML locale profile loading, built-in presets and per-call resolution."""

import yaml
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
from pydantic import ValidationError
from .schema import ASCII_WHITESPACE, LocaleConfig
from ..core.errors import TextscanError

LocaleLike = Union[None, str, Mapping[str, Any], LocaleConfig]

class LocaleLoadError(TextscanError):
    """Exception raised when a locale profile cannot be found, read or validated."""
    pass

# Code points str.isspace() accepts.
UNICODE_WHITESPACE_CODEPOINTS = (
    *range(0x09, 0x0E), *range(0x1C, 0x21), 0x85, 0xA0, 0x1680,
    *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000,
)
UNICODE_WHITESPACE = "".join(map(chr, UNICODE_WHITESPACE_CODEPOINTS))

def _preset_data(key: str) -> Optional[Dict[str, Any]]:
    """Raw field values for a preset, built fresh on every call."""
    if key in ("c", "posix"):
        return {"name": key.upper(), "whitespace": ASCII_WHITESPACE, "decimal_point": "."}
    if key == "en_us":
        return {"name": "en_US", "whitespace": ASCII_WHITESPACE, "decimal_point": "."}
    if key == "de_de":
        return {"name": "de_DE", "whitespace": ASCII_WHITESPACE, "decimal_point": ","}
    if key == "fr_fr":
        return {"name": "fr_FR", "whitespace": ASCII_WHITESPACE + "\u00a0", "decimal_point": ","}
    if key == "unicode":
        return {"name": "unicode", "whitespace": UNICODE_WHITESPACE, "decimal_point": "."}
    return None

PRESET_NAMES = ("C", "POSIX", "en_US", "de_DE", "fr_FR", "unicode")

def builtin_locale(name: str) -> LocaleConfig:
    """
    Look up a built-in locale preset.
    
    Names match case-insensitively and any ``.encoding`` or ``@modifier``
    suffix is ignored, so ``"de_DE.UTF-8"`` resolves to ``de_DE``.
    
    Raises:
        LocaleLoadError: If no preset has that name
    """
    key = name.split(".", 1)[0].split("@", 1)[0].strip().lower()
    data = _preset_data(key)
    if data is None:
        raise LocaleLoadError(f"Unknown locale preset {name!r}; available: {', '.join(PRESET_NAMES)}")
    return LocaleConfig.model_validate(data)

def _build(data: Any, source: str) -> LocaleConfig:
    if not isinstance(data, dict):
        raise LocaleLoadError(f"Locale profile {source} must contain a YAML mapping, got {type(data)}")
    
    data = dict(data)
    base = data.pop("base", None)
    if base is not None:
        merged = builtin_locale(str(base)).model_dump()
        merged.update(data)
        data = merged
        
    try:
        return LocaleConfig.model_validate(data)
    except ValidationError as e:
        raise LocaleLoadError(f"Locale validation failed for {source}: {e}")

def load_locale(path: Union[str, Path]) -> LocaleConfig:
    """
    Load and validate a locale profile from a YAML file.
    
    Args:
        path: Path to YAML locale file
        
    Returns:
        LocaleConfig: Validated, immutable locale configuration
        
    Raises:
        LocaleLoadError: If file cannot be read or the profile is invalid
    """
    path = Path(path)
    
    if not path.exists():
        raise LocaleLoadError(f"Locale file not found: {path}")
        
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LocaleLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise LocaleLoadError(f"Cannot read locale file {path}: {e}")
        
    return _build(data, str(path))

def load_locale_from_string(yaml_content: str) -> LocaleConfig:
    """
    Load and validate a locale profile from a YAML string.
    
    Raises:
        LocaleLoadError: If YAML is invalid or validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise LocaleLoadError(f"Invalid YAML content: {e}")
        
    return _build(data, "<string>")

def resolve_locale(locale: LocaleLike = None) -> LocaleConfig:
    """
    Turn whatever the caller passed into a LocaleConfig.
    
    Accepts None (the ``C`` preset), a preset name, a mapping of fields, or
    an existing LocaleConfig, which is returned as is.
    """
    if locale is None:
        return builtin_locale("C")
    if isinstance(locale, LocaleConfig):
        return locale
    if isinstance(locale, str):
        return builtin_locale(locale)
    if isinstance(locale, Mapping):
        return _build(dict(locale), "<mapping>")
    raise LocaleLoadError(f"Cannot resolve a locale from {type(locale).__name__}")
