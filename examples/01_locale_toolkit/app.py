"""
Example 1: Locale-bound toolkit with an injected logger

Loads a German-style locale profile, binds it to a TextToolkit together with
a standard library logger, and runs splitting, trimming, wrapping and numeric
validation over a small price list.
"""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from textscan import TextToolkit, load_locale_from_string
from textscan.adapters import StdlibLogger
from textscan.extras import mapify_string

LOCALE_YAML = """
name: de_DE_prices
base: de_DE
integer_type: int64
"""

PRICE_LIST = """
  Brot: 2,49 ; Milch: 1,09 ; Butter: 2,2,9 ; Eier: 3
"""

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    
    print("🧾 textscan Price List Example")
    print("=" * 40)
    
    locale = load_locale_from_string(LOCALE_YAML)
    toolkit = TextToolkit(locale=locale, logger=StdlibLogger())
    
    cleaned = toolkit.trim_whitespace_edges(PRICE_LIST)
    prices = mapify_string(cleaned, ":", ";", locale=locale)
    
    for item, price in prices.items():
        if toolkit.is_float_literal(price):
            print(f"   ✅ {item}: {price} (decimal)")
        elif toolkit.is_integer_literal(price):
            print(f"   ✅ {item}: {price} (whole)")
        else:
            print(f"   ⚠️  {item}: {price!r} is not a number")
    
    print("\nWrapped to 16 columns:")
    print(toolkit.wrap_to_width("Brot Milch Butter Eier Sauerteigbrot", 16))
    
    print("\nItems:", toolkit.separate(cleaned, ";"))

if __name__ == "__main__":
    main()
