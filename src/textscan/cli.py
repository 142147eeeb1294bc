"""Command-line interface for textscan."""

import argparse
import sys
from pathlib import Path

from textscan.core.util import to_json
from textscan.engine import (
    check_float_literal,
    check_integer_literal,
    find_all,
    separate,
    wrap_to_width,
)
from textscan.extras.files import FileLinesError, FileReadError, count_file_lines
from textscan.locales.loader import (
    PRESET_NAMES,
    LocaleLoadError,
    builtin_locale,
    load_locale,
)


def _locale_from_args(args):
    """Preset name or path to a YAML profile."""
    value = getattr(args, "locale", None)
    if value is None:
        return builtin_locale("C")
    if Path(value).suffix.lower() in (".yaml", ".yml"):
        return load_locale(value)
    return builtin_locale(value)


def validate_locale_command(args):
    """Validate a locale profile file."""
    try:
        locale_path = Path(args.locale_file)
        if not locale_path.exists():
            print(f"Error: Locale file not found: {locale_path}")
            return 1
        
        print(f"Validating locale: {locale_path}")
        locale = load_locale(locale_path)
        
        print("✅ Locale validation successful!")
        print(f"   Name: {locale.name}")
        print(f"   Decimal point: {locale.decimal_point!r}")
        print(f"   Whitespace characters: {len(locale.whitespace)}")
        
        if args.verbose:
            low, high = locale.integer_bounds
            print(f"   Integer type: {locale.integer_type} [{low}, {high}]")
            print(f"   Float type: {locale.float_type} (max {locale.float_max:g})")
            print(f"   Whitespace: {locale.whitespace!r}")
        
        return 0
        
    except LocaleLoadError as e:
        print(f"❌ Locale validation failed: {e}")
        return 1


def split_command(args):
    """Split text by a delimiter and print the segments."""
    print(to_json(separate(args.text, args.delimiter, not args.keep_empty)))
    return 0


def find_command(args):
    """Print every offset at which the target occurs."""
    print(to_json(find_all(args.text, args.target)))
    return 0


def wrap_command(args):
    """Wrap text to a width."""
    try:
        locale = _locale_from_args(args)
    except LocaleLoadError as e:
        print(f"Error: {e}")
        return 1
    print(wrap_to_width(args.text, args.width, locale))
    return 0


def check_command(args):
    """Report whether text is an integer or float literal."""
    try:
        locale = _locale_from_args(args)
    except LocaleLoadError as e:
        print(f"Error: {e}")
        return 1
    result = {
        "integer": check_integer_literal(args.text, locale),
        "float": check_float_literal(args.text, locale),
    }
    print(to_json(result))
    return 0 if (result["integer"].valid or result["float"].valid) else 1


def lines_command(args):
    """Count newline characters in a file."""
    try:
        print(count_file_lines(args.path))
        return 0
    except (FileLinesError, FileReadError) as e:
        print(f"Error: {e}")
        return 1


def info_command(args):
    """Display textscan version and available locale presets."""
    print("textscan CLI")
    print("=" * 50)
    
    try:
        import importlib.metadata
        version = importlib.metadata.version("textscan")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")
    
    print(f"Python: {sys.version.split()[0]}")
    
    print("\nLocale presets:")
    for name in PRESET_NAMES:
        locale = builtin_locale(name)
        print(f"   {name}: decimal_point={locale.decimal_point!r} "
              f"whitespace={len(locale.whitespace)} chars")
    
    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="textscan",
        description="Text splitting, searching, wrapping and numeric validation"
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a locale profile file"
    )
    validate_parser.add_argument(
        "locale_file",
        help="Path to the locale YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show numeric limits and the whitespace set"
    )
    
    # Split command
    split_parser = subparsers.add_parser("split", help="Split text by a delimiter")
    split_parser.add_argument("text", help="Text to split")
    split_parser.add_argument(
        "-d", "--delimiter",
        default=",",
        help="Delimiter substring (default: ',')"
    )
    split_parser.add_argument(
        "--keep-empty",
        action="store_true",
        help="Keep zero-length segments"
    )
    
    # Find command
    find_parser = subparsers.add_parser("find", help="List offsets of a substring")
    find_parser.add_argument("text", help="Text to search")
    find_parser.add_argument("target", help="Substring to find")
    
    # Wrap command
    wrap_parser = subparsers.add_parser("wrap", help="Wrap text to a width")
    wrap_parser.add_argument("text", help="Text to wrap")
    wrap_parser.add_argument(
        "-w", "--width",
        type=int,
        required=True,
        help="Maximum line width"
    )
    wrap_parser.add_argument("--locale", help="Preset name or YAML profile path")
    
    # Check command
    check_parser = subparsers.add_parser("check", help="Validate a numeric literal")
    check_parser.add_argument("text", help="Literal to check")
    check_parser.add_argument("--locale", help="Preset name or YAML profile path")
    
    # Lines command
    lines_parser = subparsers.add_parser("lines", help="Count lines in a file")
    lines_parser.add_argument("path", help="Path to a text file")
    
    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and locale presets"
    )
    
    return parser


COMMANDS = {
    "validate": validate_locale_command,
    "split": split_command,
    "find": find_command,
    "wrap": wrap_command,
    "check": check_command,
    "lines": lines_command,
    "info": info_command,
}


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
