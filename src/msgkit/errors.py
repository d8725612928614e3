"""
Exception types raised by msgkit commands and plugins.

Every error is fatal for the running command. The CLI reports the message
and exits with a non-zero status.
"""

from __future__ import annotations

from pathlib import Path


class MsgkitError(Exception):
    """Base class for all msgkit failures."""


class ConfigError(MsgkitError):
    """The distribution configuration is missing or malformed."""


class PluginNotFoundError(MsgkitError):
    """A required plugin or command is not available."""

    def __init__(self, name: str, where: str = "the configuration") -> None:
        super().__init__(f"{name} plugin not found in {where}!")
        self.name = name


class UsageError(MsgkitError):
    """A command was invoked with the wrong arguments."""


class ToolNotFoundError(MsgkitError):
    """An external gettext utility cannot be found on PATH."""

    def __init__(self, tool: str) -> None:
        super().__init__(
            f'Cannot find "{tool}": Are the GNU gettext utilities installed?'
        )
        self.tool = tool


class InvalidEncodingError(MsgkitError):
    def __init__(self, encoding: str) -> None:
        super().__init__(f'"{encoding}" is not a valid encoding')
        self.encoding = encoding


class InvalidLanguageCodeError(MsgkitError):
    def __init__(self, code: str) -> None:
        super().__init__(f'"{code}" is not a valid language code')
        self.code = code


class InvalidCountryCodeError(MsgkitError):
    def __init__(self, code: str) -> None:
        super().__init__(f'"{code}" is not a valid country code')
        self.code = code


class TemplateNotFoundError(MsgkitError):
    """An explicitly requested template file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Cannot initialize language file: Template file {path} does not exist"
        )
        self.path = path


class TemplateGenerationError(MsgkitError):
    """xgettext failed to produce a template file."""

    def __init__(self, path: Path, detail: str = "") -> None:
        msg = f"Cannot generate template {path}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.path = path


class CatalogAlreadyExistsError(MsgkitError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} already exists")
        self.path = path


class CatalogGenerationError(MsgkitError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Cannot generate {path}")
        self.path = path
