"""
Thin wrappers around external program lookup and execution.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def can_run(program: str) -> bool:
    """Return True if `program` resolves to an executable on this system."""
    return shutil.which(program) is not None


def run_command(cmd: Sequence[str]) -> int:
    """
    Run a command to completion and return its exit status.

    Output is captured; on failure it is logged so the user can see what the
    tool complained about.

    Args:
        cmd: Program followed by its arguments. No shell is involved.

    Returns:
        The process exit status.
    """
    logger.debug("Running: %s", " ".join(cmd))
    result = subprocess.run(
        list(cmd), text=True, errors="replace", capture_output=True
    )
    if result.returncode == 0:
        if result.stderr:
            logger.debug(result.stderr.rstrip())
        return 0

    logger.warning("Command failed (exit %d): %s", result.returncode, " ".join(cmd))
    if result.stdout:
        logger.warning(result.stdout.rstrip())
    if result.stderr:
        logger.warning(result.stderr.rstrip())
    return result.returncode
