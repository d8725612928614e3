"""
Unified interface for loading and adapting configuration files.
"""

__all__ = [
    "load_dist_config",
    "load_user_config",
    "ConfigAdapter",
]

from .adapter import ConfigAdapter
from .file_io import (
    load_dist_config,
    load_user_config,
)
