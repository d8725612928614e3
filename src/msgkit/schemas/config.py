"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_KEYWORDS: tuple[str, ...] = (
    "_",
    "gettext",
    "ngettext:1,2",
    "pgettext:1c,2",
    "npgettext:1c,2,3",
    "N_",
)


@dataclass(frozen=True, slots=True)
class DistConfig:
    """Configuration describing the distribution being packaged.

    Attributes:
        name: Distribution name, also used to name the default template.
        version: Distribution version string.
        root: Root directory of the distribution.
        copyright_holder: Name of the copyright holder, if any.
        authors: Authors in ``Name <email>`` form.
        plugins: Raw per-plugin settings keyed by plugin name.
    """

    name: str
    version: str = "0.0.0"
    root: Path = field(default_factory=Path.cwd)
    copyright_holder: str | None = None
    authors: tuple[str, ...] = ()
    plugins: dict[str, dict[str, Any]] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class LocaleTextDomainConfig:
    """Settings of the ``LocaleTextDomain`` catalog plugin.

    Attributes:
        textdomain: Gettext text domain; defaults to the distribution name.
        lang_dir: Directory holding the template and catalogs.
        lang_file_suffix: Suffix of catalog files, without the dot.
        source_dirs: Directories scanned for translatable strings.
        keywords: Keyword specs passed to ``xgettext --keyword``.
    """

    textdomain: str
    lang_dir: Path
    lang_file_suffix: str = "po"
    source_dirs: tuple[Path, ...] = ()
    keywords: tuple[str, ...] = DEFAULT_KEYWORDS
