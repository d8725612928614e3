"""
Protocol for commands run from the ``msgkit`` command line.
"""

import argparse
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

if TYPE_CHECKING:
    from msgkit.dist import Dist


class CommandProtocol(Protocol):
    """Protocol for a distribution command.

    Attributes:
        command_name: Name used on the command line (e.g. ``"msg-init"``).
        abstract: One-line description shown in ``--help``.
    """

    command_name: ClassVar[str]
    abstract: ClassVar[str]

    def __init__(self, dist: "Dist", **kwargs: Any) -> None: ...

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Declares the command's options and positional arguments."""
        ...

    def run(self, args: argparse.Namespace) -> None:
        """Validates the parsed arguments and executes the command.

        Raises:
            MsgkitError: On any validation or execution failure.
        """
        ...
