"""
``msg-init``: add language translation catalogs to a distribution.

Each argument names a language as ``language[-region][.encoding]``, e.g.
``fr``, ``pt-BR`` or ``ja_JP.EUC-JP``. For every one of them a catalog
``<lang_dir>/<language[-region]>.<suffix>`` is created with ``msginit``
from a template file, which is:

1. the file given with ``--pot-file``, or
2. ``<lang_dir>/<dist name>.pot`` if it exists (see ``msg-scan``), or
3. a temporary template extracted from the sources with ``xgettext`` and
   deleted once the command is done.

Existing catalogs are never overwritten.
"""

from __future__ import annotations

import argparse
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from msgkit.dist import Dist
from msgkit.errors import (
    CatalogAlreadyExistsError,
    CatalogGenerationError,
    TemplateNotFoundError,
)
from msgkit.infra.process import run_command
from msgkit.plugins.base.command import BaseCommand
from msgkit.plugins.registry import hub
from msgkit.plugins.utils.options import resolve_options
from msgkit.schemas import MsgInitOptions

logger = logging.getLogger(__name__)


@hub.register_command("msg-init")
class MsgInitCommand(BaseCommand):
    command_name = "msg-init"
    abstract = "add language translation files to a distribution"
    usage_desc = "%(prog)s [options] <language_code> [<language_code> ...]"

    def __init__(self, dist: Dist, **kwargs: Any) -> None:
        super().__init__(dist, **kwargs)
        self._pot_file: Path | None = None
        self._tmp_pot: Path | None = None

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--msginit", metavar="PATH", help="location of msginit utility"
        )
        cls.add_template_arguments(parser)
        parser.add_argument(
            "languages",
            nargs="*",
            metavar="language_code",
            help="language[-region][.encoding], e.g. fr or pt_BR.UTF-8",
        )

    def run(self, args: argparse.Namespace) -> None:
        opts = resolve_options(self.raw_options(args), args.languages)
        self.execute(opts)

    def pot_file(self, opts: MsgInitOptions) -> Path:
        """Locate the template to initialize catalogs from.

        The result is remembered for the lifetime of the command.

        Raises:
            TemplateNotFoundError: If an explicit template does not exist.
            TemplateGenerationError: If a temporary template cannot be written.
        """
        if self._pot_file is not None:
            return self._pot_file

        if opts.pot_file:
            if not opts.pot_file.exists():
                raise TemplateNotFoundError(opts.pot_file)
            self._pot_file = opts.pot_file
            return self._pot_file

        # Template written by msg-scan
        pot = self.default_pot_path()
        if pot.exists():
            self._pot_file = pot
            return pot

        fd, name = tempfile.mkstemp(suffix=".pot")
        os.close(fd)
        self._tmp_pot = Path(name)
        logger.info("extracting gettext strings")
        self.plugin.write_pot(
            to=self._tmp_pot,
            xgettext=opts.xgettext,
            encoding=opts.encoding,
            copyright_holder=opts.copyright_holder,
            bugs_email=opts.bugs_email,
        )
        self._pot_file = self._tmp_pot
        return self._pot_file

    def execute(self, opts: MsgInitOptions) -> list[Path]:
        """Create one catalog per requested language.

        Stops at the first failure; catalogs created before it are kept.

        Returns:
            Paths of the created catalogs, in argument order.

        Raises:
            CatalogAlreadyExistsError: If a destination catalog exists.
            CatalogGenerationError: If msginit fails for a language.
        """
        try:
            return self._generate(opts)
        finally:
            self.cleanup()

    def _generate(self, opts: MsgInitOptions) -> list[Path]:
        lang_dir = self.plugin.lang_dir
        lang_ext = f".{self.plugin.lang_file_suffix}"
        pot_file = self.pot_file(opts)

        cmd = [
            opts.msginit,
            f"--input={pot_file}",
            "--no-translator",
        ]

        lang_dir.mkdir(parents=True, exist_ok=True)
        created: list[Path] = []
        for lang in opts.languages:
            dest = lang_dir / f"{lang.name}{lang_ext}"
            if dest.exists():
                raise CatalogAlreadyExistsError(dest)
            argv = [*cmd, f"--locale={lang.token}", f"--output-file={dest}"]
            if run_command(argv) != 0:
                raise CatalogGenerationError(dest)
            logger.info("created %s", dest)
            created.append(dest)
        return created

    def cleanup(self) -> None:
        """Remove the temporary template, if one was written."""
        if self._tmp_pot is None:
            return
        try:
            self._tmp_pot.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(
                "Could not remove temporary template %s: %s", self._tmp_pot, e
            )
        else:
            if self._pot_file == self._tmp_pot:
                self._pot_file = None
            self._tmp_pot = None
