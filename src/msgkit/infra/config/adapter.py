from __future__ import annotations

from pathlib import Path
from typing import Any

from msgkit.errors import ConfigError
from msgkit.schemas import DEFAULT_KEYWORDS, DistConfig, LocaleTextDomainConfig


class ConfigAdapter:
    """High-level accessor for distribution and plugin configuration.

    All configuration resolution follows the order:

    **distribution -> user-wide defaults -> built-in defaults**

    Args:
        config (dict[str, Any]): Loaded distribution configuration mapping,
            optionally holding a ``plugins`` table keyed by plugin name.
        user_config (dict[str, Any] | None): User-wide defaults.

    Attributes:
        _config (dict[str, Any]): Internal stored configuration mapping.
        _user (dict[str, Any]): Internal stored user defaults.
    """

    def __init__(
        self,
        config: dict[str, Any],
        user_config: dict[str, Any] | None = None,
    ) -> None:
        self._config: dict[str, Any] = dict(config)
        self._user: dict[str, Any] = dict(user_config or {})

    def get_dist_config(self) -> DistConfig:
        """Build a DistConfig by merging distribution and user settings.

        Returns:
            DistConfig: Resolved distribution configuration.

        Raises:
            ConfigError: If the distribution has no name.
        """
        cfg = {**self._user, **self._config}
        name = cfg.get("name")
        if not name:
            raise ConfigError("Distribution configuration must define a name")

        authors = cfg.get("authors") or ()
        if isinstance(authors, str):
            authors = (authors,)

        return DistConfig(
            name=str(name),
            version=str(cfg.get("version", "0.0.0")),
            root=Path(cfg.get("root") or Path.cwd()),
            copyright_holder=cfg.get("copyright_holder"),
            authors=tuple(authors),
            plugins=self._plugins_cfg(),
        )

    def get_locale_textdomain_config(self) -> LocaleTextDomainConfig:
        """Build the settings of the ``LocaleTextDomain`` plugin.

        Relative directories are resolved against the distribution root.

        Returns:
            LocaleTextDomainConfig: Resolved plugin settings.
        """
        dist = self.get_dist_config()
        cfg = self._plugins_cfg().get("LocaleTextDomain") or {}

        source_dirs = cfg.get("source_dirs") or ["src"]
        if isinstance(source_dirs, str):
            source_dirs = [source_dirs]
        keywords = cfg.get("keywords") or DEFAULT_KEYWORDS
        if isinstance(keywords, str):
            keywords = keywords.split()

        return LocaleTextDomainConfig(
            textdomain=cfg.get("textdomain", dist.name),
            lang_dir=dist.root / cfg.get("lang_dir", "po"),
            lang_file_suffix=str(cfg.get("lang_file_suffix", "po")).lstrip("."),
            source_dirs=tuple(dist.root / d for d in source_dirs),
            keywords=tuple(keywords),
        )

    def _plugins_cfg(self) -> dict[str, dict[str, Any]]:
        plugins = self._config.get("plugins") or {}
        if not isinstance(plugins, dict):
            raise ConfigError("'plugins' must be a table keyed by plugin name")
        return plugins
