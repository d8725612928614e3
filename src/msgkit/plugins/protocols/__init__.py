"""
Protocol exports for plugin components.

This module aggregates the protocol interfaces used by the plugin ecosystem:
catalog configuration providers and commands.
"""

__all__ = [
    "CatalogConfigProvider",
    "CommandProtocol",
]

from .command import CommandProtocol
from .provider import CatalogConfigProvider
