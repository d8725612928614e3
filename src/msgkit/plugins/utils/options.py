"""
Resolution and validation of gettext command options.

:func:`resolve_options` turns raw command-line options and language
arguments into an immutable :class:`~msgkit.schemas.MsgInitOptions`,
or raises the first validation error it meets.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from pathlib import Path

from msgkit.errors import (
    InvalidCountryCodeError,
    InvalidEncodingError,
    InvalidLanguageCodeError,
    ToolNotFoundError,
    UsageError,
)
from msgkit.infra.process import can_run
from msgkit.libs.locale import is_country_code, is_encoding, is_language_code
from msgkit.schemas import LanguageRequest, MsgInitOptions, RawMsgInitOptions

DEFAULT_ENCODING = "UTF-8"


def default_tool_name(tool: str, platform: str | None = None) -> str:
    """Return the executable name of a gettext tool on `platform`.

    >>> default_tool_name("msginit", "win32")
    'msginit.exe'
    """
    platform = sys.platform if platform is None else platform
    return f"{tool}.exe" if platform == "win32" else tool


def resolve_tool(
    tool: str,
    path: str | None = None,
    platform: str | None = None,
) -> str:
    """Default an unset tool path and check that it can be run.

    Raises:
        ToolNotFoundError: If the resolved program is not found.
    """
    program = path or default_tool_name(tool, platform)
    if not can_run(program):
        raise ToolNotFoundError(program)
    return program


def resolve_encoding(encoding: str | None = None) -> str:
    """Default an unset encoding to UTF-8, or validate the given one.

    Raises:
        InvalidEncodingError: If the encoding is unknown.
    """
    if not encoding:
        return DEFAULT_ENCODING
    if not is_encoding(encoding):
        raise InvalidEncodingError(encoding)
    return encoding


def parse_language(token: str) -> LanguageRequest:
    """Split and validate a ``language[-region][.encoding]`` argument.

    The encoding is checked first, then the language, then the region.

    Raises:
        InvalidEncodingError: If the encoding suffix is unknown.
        InvalidLanguageCodeError: If the language code is unknown.
        InvalidCountryCodeError: If the region code is unknown.
    """
    name, _, encoding = token.partition(".")
    if encoding and not is_encoding(encoding):
        raise InvalidEncodingError(encoding)

    # Components past the region are ignored
    parts = re.split(r"[-_]", name)
    language = parts[0]
    region = parts[1] if len(parts) > 1 and parts[1] else None

    if not is_language_code(language):
        raise InvalidLanguageCodeError(language)
    if region and not is_country_code(region):
        raise InvalidCountryCodeError(region)

    return LanguageRequest(
        token=token,
        language=language,
        region=region,
        encoding=encoding or None,
    )


def resolve_options(
    raw: RawMsgInitOptions,
    args: Sequence[str],
    platform: str | None = None,
) -> MsgInitOptions:
    """Apply defaults to `raw` and validate it along with `args`.

    Checks run in order: xgettext, msginit, encoding, argument count, then
    each language argument in turn. The first failure is raised.

    Args:
        raw: Options as parsed from the command line.
        args: Language arguments.
        platform: Platform name used to pick tool defaults; defaults to
            ``sys.platform``.

    Returns:
        Immutable, fully resolved options.

    Raises:
        MsgkitError: The first validation failure encountered.
    """
    xgettext = resolve_tool("xgettext", raw.xgettext, platform)
    msginit = resolve_tool("msginit", raw.msginit, platform)
    encoding = resolve_encoding(raw.encoding)

    if len(args) < 1:
        raise UsageError("msg-init takes one or more arguments")

    languages = tuple(parse_language(token) for token in args)

    return MsgInitOptions(
        xgettext=xgettext,
        msginit=msginit,
        encoding=encoding,
        pot_file=Path(raw.pot_file) if raw.pot_file else None,
        copyright_holder=raw.copyright_holder,
        bugs_email=raw.bugs_email,
        languages=languages,
    )
