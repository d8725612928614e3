"""
Shared behaviour of the gettext catalog commands.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, ClassVar

from msgkit.dist import Dist
from msgkit.errors import PluginNotFoundError
from msgkit.plugins.protocols import CatalogConfigProvider
from msgkit.schemas import RawMsgInitOptions


class BaseCommand:
    """Base class for commands working on a distribution's catalogs.

    Subclasses set :attr:`command_name` and :attr:`abstract`, declare their
    options in :meth:`add_arguments` and implement :meth:`run`.
    """

    command_name: ClassVar[str] = ""
    abstract: ClassVar[str] = ""
    usage_desc: ClassVar[str | None] = None

    # Plugin supplying lang_dir, lang_file_suffix and write_pot()
    provider_name: ClassVar[str] = "LocaleTextDomain"

    def __init__(self, dist: Dist, **kwargs: Any) -> None:
        self.dist = dist
        self._plugin: CatalogConfigProvider | None = None

    @property
    def plugin(self) -> CatalogConfigProvider:
        """The catalog configuration provider of the distribution.

        Raises:
            PluginNotFoundError: If the distribution does not configure it.
        """
        if self._plugin is None:
            plugin = self.dist.plugin_named(self.provider_name)
            if plugin is None:
                raise PluginNotFoundError(self.provider_name)
            self._plugin = plugin
        return self._plugin

    def default_pot_path(self) -> Path:
        """Conventional template location: ``<lang_dir>/<dist name>.pot``."""
        return self.plugin.lang_dir / f"{self.dist.name}.pot"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        pass

    @staticmethod
    def add_template_arguments(parser: argparse.ArgumentParser) -> None:
        """Options shared by every command that may write a template."""
        parser.add_argument(
            "--xgettext", metavar="PATH", help="location of xgettext utility"
        )
        parser.add_argument(
            "--encoding", "-e", metavar="NAME", help="character encoding to be used"
        )
        parser.add_argument(
            "--pot-file",
            "--pot",
            "-p",
            dest="pot_file",
            metavar="PATH",
            type=Path,
            help="pot file location",
        )
        parser.add_argument(
            "--copyright-holder",
            "-c",
            metavar="STRING",
            help="name of the copyright holder",
        )
        parser.add_argument(
            "--bugs-email",
            "-b",
            metavar="STRING",
            help="email address for reporting bugs",
        )

    @staticmethod
    def raw_options(args: argparse.Namespace) -> RawMsgInitOptions:
        """Collect the gettext options from parsed arguments."""
        return RawMsgInitOptions(
            xgettext=getattr(args, "xgettext", None),
            msginit=getattr(args, "msginit", None),
            encoding=getattr(args, "encoding", None),
            pot_file=getattr(args, "pot_file", None),
            copyright_holder=getattr(args, "copyright_holder", None),
            bugs_email=getattr(args, "bugs_email", None),
        )

    def run(self, args: argparse.Namespace) -> None:
        raise NotImplementedError
