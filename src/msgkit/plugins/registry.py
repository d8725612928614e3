"""
This module provides dynamic registration and discovery of plugin components,
including catalog configuration providers and commands.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from importlib import import_module
from typing import TYPE_CHECKING, Any, TypeVar

from msgkit.errors import PluginNotFoundError

if TYPE_CHECKING:
    from msgkit.dist import Dist
    from msgkit.plugins.protocols import CommandProtocol

    C = TypeVar("C", bound=CommandProtocol)

T = TypeVar("T")

_PLUGINS_PKG = "msgkit.plugins"


class PluginHub:
    """Central registry for plugin components.

    The ``PluginHub`` tracks provider plugins (configured per distribution,
    such as ``LocaleTextDomain``) and commands (such as ``msg-init``).
    Components may be registered explicitly via decorators or imported on
    demand from their conventional module path:

        msgkit.plugins.providers.<snake_case_name>
        msgkit.plugins.commands.<snake_case_name>
    """

    def __init__(self) -> None:
        self._providers: dict[str, type[Any]] = {}
        self._commands: dict[str, type[CommandProtocol]] = {}

        # Namespaces to search for plugin modules
        self._sources: list[str] = [_PLUGINS_PKG]

    def register_provider(
        self,
        name: str | None = None,
    ) -> Callable[[type[T]], type[T]]:
        """Decorator for registering a provider plugin class."""

        def deco(cls: type[T]) -> type[T]:
            self._providers[name or cls.__name__] = cls
            return cls

        return deco

    def register_command(
        self,
        name: str | None = None,
    ) -> Callable[[type[C]], type[C]]:
        """Decorator for registering a command class."""

        def deco(cls: type[C]) -> type[C]:
            key = (name or cls.__module__.split(".")[-1]).replace("_", "-")
            self._commands[key.lower()] = cls
            return cls

        return deco

    def build_provider(self, name: str, dist: Dist, **kwargs: Any) -> Any:
        """Instantiate a provider plugin by its configured name."""
        cls = self._providers.get(name)
        if cls is None:
            self._try_import("providers", name)
            cls = self._providers.get(name)

        if cls is None:
            raise PluginNotFoundError(name, "the installed plugins")

        return cls(dist=dist, **kwargs)

    def build_command(self, name: str, dist: Dist, **kwargs: Any) -> CommandProtocol:
        """Instantiate a command by its command-line name."""
        key = name.strip().lower()
        cls = self._commands.get(key)
        if cls is None:
            self._try_import("commands", key)
            cls = self._commands.get(key)

        if cls is None:
            raise ValueError(f"Unsupported command: {name!r}")

        return cls(dist=dist, **kwargs)

    def list_commands(self, *, load_all: bool = False) -> list[type[CommandProtocol]]:
        """Return registered command classes, sorted by name."""
        if load_all:
            self._load_all("commands")
        return [self._commands[k] for k in sorted(self._commands)]

    @staticmethod
    def _module_name(name: str) -> str:
        """Convert a plugin or command name into a module name.

        ``LocaleTextDomain`` -> ``locale_text_domain``,
        ``msg-init`` -> ``msg_init``.
        """
        key = name.strip()
        if not key:
            raise ValueError("Plugin name cannot be empty")
        key = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", key)
        return key.replace("-", "_").lower()

    def _try_import(self, kind: str, name: str) -> None:
        """Attempt to import the module conventionally defining `name`."""
        for base in self._sources:
            modname = f"{base}.{kind}.{self._module_name(name)}"
            try:
                import_module(modname)
                return
            except ModuleNotFoundError as e:
                if e.name and modname.startswith(e.name):
                    continue
                raise

    def _load_all(self, kind: str) -> None:
        """Load every plugin module of a given kind."""
        import pkgutil

        for base in self._sources:
            try:
                pkg = import_module(f"{base}.{kind}")
            except ModuleNotFoundError:
                continue

            for info in pkgutil.iter_modules(pkg.__path__):
                if info.name.startswith("_"):
                    continue
                import_module(f"{pkg.__name__}.{info.name}")


hub = PluginHub()
