"""
Option records for the gettext catalog commands.
"""

import re
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class LanguageRequest:
    """A single ``language[-region][.encoding]`` command argument.

    Attributes:
        token: The argument exactly as given on the command line.
        language: Language code (e.g. ``"fr"``).
        region: Optional country code (e.g. ``"CA"``).
        encoding: Optional character encoding (e.g. ``"UTF-8"``).
    """

    token: str
    language: str
    region: str | None = None
    encoding: str | None = None

    @property
    def name(self) -> str:
        """The token without its encoding suffix, used to name the catalog."""
        return re.sub(r"[.].+$", "", self.token)


@dataclass(slots=True)
class RawMsgInitOptions:
    """Options as parsed from the command line, before defaults are applied."""

    xgettext: str | None = None
    msginit: str | None = None
    encoding: str | None = None
    pot_file: Path | None = None
    copyright_holder: str | None = None
    bugs_email: str | None = None


@dataclass(frozen=True, slots=True)
class MsgInitOptions:
    """Fully resolved and validated options for ``msg-init``.

    Attributes:
        xgettext: Path or name of the ``xgettext`` executable.
        msginit: Path or name of the ``msginit`` executable.
        encoding: Source encoding passed to ``xgettext``.
        pot_file: Explicit template file, if any.
        copyright_holder: Copyright holder for a generated template.
        bugs_email: Bug report address for a generated template.
        languages: Validated language requests, in argument order.
    """

    xgettext: str
    msginit: str
    encoding: str = "UTF-8"
    pot_file: Path | None = None
    copyright_holder: str | None = None
    bugs_email: str | None = None
    languages: tuple[LanguageRequest, ...] = ()
