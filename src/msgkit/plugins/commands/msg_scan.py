"""
``msg-scan``: extract translatable strings into the distribution's template.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from msgkit.plugins.base.command import BaseCommand
from msgkit.plugins.registry import hub
from msgkit.plugins.utils.options import resolve_encoding, resolve_tool

logger = logging.getLogger(__name__)


@hub.register_command("msg-scan")
class MsgScanCommand(BaseCommand):
    command_name = "msg-scan"
    abstract = "scan distribution files for translatable strings"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        cls.add_template_arguments(parser)

    def run(self, args: argparse.Namespace) -> None:
        raw = self.raw_options(args)
        xgettext = resolve_tool("xgettext", raw.xgettext)
        encoding = resolve_encoding(raw.encoding)
        self.execute(
            pot_file=raw.pot_file,
            xgettext=xgettext,
            encoding=encoding,
            copyright_holder=raw.copyright_holder,
            bugs_email=raw.bugs_email,
        )

    def execute(
        self,
        *,
        pot_file: Path | None,
        xgettext: str,
        encoding: str,
        copyright_holder: str | None = None,
        bugs_email: str | None = None,
    ) -> Path:
        """Write the template, replacing any previous version of it."""
        dest = Path(pot_file) if pot_file else self.default_pot_path()
        dest.parent.mkdir(parents=True, exist_ok=True)
        logger.info("extracting gettext strings into %s", dest)
        return self.plugin.write_pot(
            to=dest,
            xgettext=xgettext,
            encoding=encoding,
            copyright_holder=copyright_holder,
            bugs_email=bugs_email,
        )
