"""
Locale utilities: language, country and encoding validation.
"""

__all__ = [
    "is_country_code",
    "is_encoding",
    "is_language_code",
]

from .codes import is_country_code, is_encoding, is_language_code
