"""
Protocol for plugins that describe where message catalogs live.

This module defines :class:`CatalogConfigProvider`, the capability the
gettext commands depend on: a catalog directory, a catalog file suffix and
the ability to write a fresh message template.
"""

from pathlib import Path
from typing import Protocol


class CatalogConfigProvider(Protocol):
    """Protocol for a catalog configuration provider.

    Attributes:
        lang_dir: Directory holding the ``.pot`` template and catalogs.
        lang_file_suffix: Catalog file suffix without the dot (e.g. ``"po"``).
    """

    @property
    def lang_dir(self) -> Path: ...

    @property
    def lang_file_suffix(self) -> str: ...

    def write_pot(
        self,
        *,
        to: Path,
        xgettext: str,
        encoding: str,
        copyright_holder: str | None = None,
        bugs_email: str | None = None,
    ) -> Path:
        """Extracts translatable strings into a template file.

        Args:
            to: Destination of the template file.
            xgettext: Path or name of the ``xgettext`` executable.
            encoding: Encoding of the scanned source files.
            copyright_holder: Copyright holder recorded in the template.
            bugs_email: Address for translation bug reports.

        Returns:
            The path of the written template.
        """
        ...
