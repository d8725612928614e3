"""
Data contracts and type definitions.
"""

__all__ = [
    "DEFAULT_KEYWORDS",
    "DistConfig",
    "LocaleTextDomainConfig",
    "LanguageRequest",
    "MsgInitOptions",
    "RawMsgInitOptions",
]

from .config import DEFAULT_KEYWORDS, DistConfig, LocaleTextDomainConfig
from .options import LanguageRequest, MsgInitOptions, RawMsgInitOptions
