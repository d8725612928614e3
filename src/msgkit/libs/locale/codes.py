"""
Validation of language codes, country codes and character encodings.

Language and country codes are checked against the CLDR data shipped with
Babel; encodings against the codecs known to the running interpreter.
"""

from __future__ import annotations

import codecs
from functools import cache

from babel import Locale

# Display locale used only to enumerate the CLDR code tables
_REGISTRY_LOCALE = "en"

# CLDR pseudo and grouping codes that are not real languages or countries
_SPECIAL_LANGUAGES = frozenset({"und", "mul", "zxx", "mis"})
_SPECIAL_COUNTRIES = frozenset({"ZZ", "EU", "EZ", "UN", "QO", "XA", "XB"})


@cache
def _language_codes() -> frozenset[str]:
    names = Locale.parse(_REGISTRY_LOCALE).languages
    codes = frozenset(code.lower() for code in names if code.isalpha())
    return codes - _SPECIAL_LANGUAGES


@cache
def _country_codes() -> frozenset[str]:
    names = Locale.parse(_REGISTRY_LOCALE).territories
    codes = frozenset(
        code.upper() for code in names if code.isalpha() and len(code) == 2
    )
    return codes - _SPECIAL_COUNTRIES


def is_language_code(code: str) -> bool:
    """Return True if `code` is a known ISO 639 language code.

    The check is case-insensitive: ``"fr"`` and ``"FR"`` are both accepted.
    """
    return bool(code) and code.lower() in _language_codes()


def is_country_code(code: str) -> bool:
    """Return True if `code` is a known two-letter ISO 3166 country code."""
    return bool(code) and code.upper() in _country_codes()


def is_encoding(name: str) -> bool:
    """Return True if `name` is a character encoding Python can handle."""
    if not name:
        return False
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True
