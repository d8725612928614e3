"""
The distribution being worked on, and access to its configured plugins.
"""

from __future__ import annotations

import logging
from email.utils import parseaddr
from pathlib import Path
from typing import Any

from msgkit.errors import ConfigError
from msgkit.infra.config import ConfigAdapter, load_dist_config, load_user_config
from msgkit.plugins.registry import hub
from msgkit.schemas import DistConfig

logger = logging.getLogger(__name__)


class Dist:
    """A distribution and its plugin configuration.

    Plugins are only available when the distribution configures them (an
    entry under ``plugins``). Instances are created on first use and shared.
    """

    def __init__(self, adapter: ConfigAdapter) -> None:
        self.adapter = adapter
        self.config: DistConfig = adapter.get_dist_config()
        self._plugins: dict[str, Any] = {}

    @classmethod
    def from_files(
        cls,
        config_path: str | Path | None = None,
        user_config_path: str | Path | None = None,
    ) -> Dist:
        """Load the distribution from its configuration files.

        Raises:
            ConfigError: If the configuration is missing or malformed.
        """
        try:
            config = load_dist_config(config_path)
            user_config = load_user_config(user_config_path)
        except (FileNotFoundError, ValueError) as e:
            raise ConfigError(str(e)) from e
        return cls(ConfigAdapter(config, user_config))

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def version(self) -> str:
        return self.config.version

    @property
    def root(self) -> Path:
        return self.config.root

    @property
    def copyright_holder(self) -> str | None:
        return self.config.copyright_holder

    @property
    def authors(self) -> tuple[str, ...]:
        return self.config.authors

    @property
    def author_email(self) -> str | None:
        """E-mail address of the first author, if one is given."""
        if not self.authors:
            return None
        _, email = parseaddr(self.authors[0])
        return email if "@" in email else None

    def plugin_named(self, name: str) -> Any | None:
        """Return the configured plugin called `name`, or None."""
        if name not in self.config.plugins:
            return None
        if name not in self._plugins:
            logger.debug("Loading plugin %s", name)
            self._plugins[name] = hub.build_provider(name, self)
        return self._plugins[name]
