"""
The ``LocaleTextDomain`` plugin: where a distribution keeps its catalogs.

Configured in ``dist.toml``::

    [plugins.LocaleTextDomain]
    textdomain = "My-App"
    lang_dir = "po"
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from msgkit.plugins.mixins import PotWriterMixin
from msgkit.plugins.registry import hub

if TYPE_CHECKING:
    from msgkit.dist import Dist
    from msgkit.schemas import LocaleTextDomainConfig


@hub.register_provider("LocaleTextDomain")
class LocaleTextDomain(PotWriterMixin):
    """Catalog configuration provider backed by the distribution config."""

    def __init__(
        self,
        dist: Dist,
        config: LocaleTextDomainConfig | None = None,
    ) -> None:
        self.dist = dist
        self._config = config or dist.adapter.get_locale_textdomain_config()

    @property
    def textdomain(self) -> str:
        return self._config.textdomain

    @property
    def lang_dir(self) -> Path:
        return self._config.lang_dir

    @property
    def lang_file_suffix(self) -> str:
        return self._config.lang_file_suffix

    @property
    def source_dirs(self) -> tuple[Path, ...]:
        return self._config.source_dirs

    @property
    def keywords(self) -> tuple[str, ...]:
        return self._config.keywords
