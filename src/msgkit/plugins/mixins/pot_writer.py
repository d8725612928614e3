from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from msgkit.errors import TemplateGenerationError
from msgkit.infra.process import run_command

logger = logging.getLogger(__name__)

# Directory names never scanned for sources
_SKIP_DIRS = frozenset(
    {"build", "dist", "site-packages", "node_modules", "venv", "env", "__pycache__"}
)


def _is_skipped_dir(name: str) -> bool:
    return name.startswith(".") or name in _SKIP_DIRS or name.endswith(".egg-info")


if TYPE_CHECKING:
    from msgkit.dist import Dist

    class PotWriterContext(Protocol):
        """"""

        dist: Dist

        @property
        def textdomain(self) -> str: ...

        @property
        def source_dirs(self) -> tuple[Path, ...]: ...

        @property
        def keywords(self) -> tuple[str, ...]: ...

        def source_files(self) -> list[Path]: ...


class PotWriterMixin:
    """Mixin writing gettext templates with ``xgettext``."""

    def source_files(self: PotWriterContext) -> list[Path]:
        """
        Collect the Python sources to scan, sorted for stable output.

        Configured source directories that do not exist are skipped; when none
        exist the whole distribution root is scanned. Hidden directories and
        build or virtualenv directories are never descended into.
        """
        dirs = [d for d in self.source_dirs if d.is_dir()]
        if not dirs:
            dirs = [self.dist.root]

        files: set[Path] = set()
        for d in dirs:
            for parent, subdirs, names in os.walk(d):
                subdirs[:] = [s for s in subdirs if not _is_skipped_dir(s)]
                files.update(
                    Path(parent) / name for name in names if name.endswith(".py")
                )
        return sorted(files)

    def write_pot(
        self: PotWriterContext,
        *,
        to: Path,
        xgettext: str,
        encoding: str = "UTF-8",
        copyright_holder: str | None = None,
        bugs_email: str | None = None,
    ) -> Path:
        """
        Extract translatable strings from the distribution into `to`.

        `copyright_holder` defaults to the distribution's copyright holder and
        `bugs_email` to the first author's e-mail address. The source list is
        handed to xgettext through ``--files-from`` so large trees do not
        overflow the command line.

        Raises:
            TemplateGenerationError: If there is nothing to scan or xgettext
                exits with a non-zero status.
        """
        files = self.source_files()
        if not files:
            raise TemplateGenerationError(to, "no Python sources found")

        holder = copyright_holder or self.dist.copyright_holder
        email = bugs_email or self.dist.author_email

        with tempfile.NamedTemporaryFile(
            "w", suffix=".txt", encoding="utf-8", delete=False
        ) as f:
            f.writelines(f"{path}\n" for path in files)
        files_from = Path(f.name)

        cmd = [
            xgettext,
            "--language=Python",
            f"--from-code={encoding}",
            "--add-comments=TRANSLATORS:",
            f"--package-name={self.textdomain}",
            f"--package-version={self.dist.version}",
        ]
        if holder:
            cmd.append(f"--copyright-holder={holder}")
        if email:
            cmd.append(f"--msgid-bugs-address={email}")
        cmd.extend(f"--keyword={kw}" for kw in self.keywords)
        cmd.append(f"--output={to}")
        cmd.append(f"--files-from={files_from}")

        logger.debug("Scanning %d source files", len(files))
        try:
            status = run_command(cmd)
        finally:
            files_from.unlink(missing_ok=True)
        if status != 0:
            raise TemplateGenerationError(to, "xgettext failed")
        return to
