from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from msgkit.infra.paths import (
    DIST_CONFIG_FILENAMES,
    PYPROJECT_TABLE,
    USER_CONFIG_PATH,
)

logger = logging.getLogger(__name__)


def _resolve_file_path(
    user_path: str | Path | None,
    local_filename: list[str],
) -> Path | None:
    """
    Resolve the distribution config file based on a prioritized lookup order.

    Lookup order:
        1. User-specified path (must exist)
        2. A file in the working directory matching any of `local_filename`,
           in order

    Args:
        user_path: Optional file path explicitly provided by the user.
        local_filename: List of file names to check in the working directory.

    Returns:
        A resolved `Path` instance if found, otherwise None.

    Raises:
        FileNotFoundError: If `user_path` is given but does not exist.
    """
    if user_path:
        path = Path(user_path).expanduser().resolve()
        if path.is_file():
            return path
        raise FileNotFoundError(f"Specified config file not found: {path}")

    for name in local_filename:
        local_path = (Path.cwd() / name).resolve()
        if local_path.is_file():
            logger.debug("Using local file: %s", local_path)
            return local_path

    return None


def _load_by_extension(path: Path) -> dict[str, Any]:
    """
    Load a configuration file by its file extension.

    Supports `.json` and `.toml` files. Raises informative errors when parsing
    fails or if the root structure is not a dictionary.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed configuration data as a dictionary.

    Raises:
        ValueError: If the file extension is unsupported, if parsing fails, or
            if the root element is not a dictionary.
    """
    ext = path.suffix.lower()

    if ext == ".json":
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except Exception as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    elif ext == ".toml":
        try:
            import tomllib

            with path.open("rb") as f:
                data = tomllib.load(f)
        except Exception as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

    else:
        raise ValueError(f"Unsupported config file extension: {ext}")

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")

    return data


def _format_author(author: Any) -> str:
    """Render a ``[project] authors`` entry as ``Name <email>``."""
    if isinstance(author, str):
        return author
    name = author.get("name", "")
    email = author.get("email", "")
    if name and email:
        return f"{name} <{email}>"
    return name or email


def _from_pyproject(data: dict[str, Any]) -> dict[str, Any]:
    """
    Extract msgkit settings from a parsed ``pyproject.toml``.

    Values under ``[tool.msgkit]`` win over the standard ``[project]`` fields.
    """
    section: Any = data
    for key in PYPROJECT_TABLE:
        section = section.get(key) or {}
    project = data.get("project") or {}

    cfg: dict[str, Any] = {}
    if "name" in project:
        cfg["name"] = project["name"]
    if "version" in project:
        cfg["version"] = project["version"]
    if project.get("authors"):
        cfg["authors"] = [_format_author(a) for a in project["authors"]]
    cfg.update(section)
    return cfg


def load_dist_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load the distribution configuration.

    Resolution order:
        - Explicit `config_path` (if provided)
        - `dist.toml`, `dist.json` or `pyproject.toml` in the working directory

    The returned mapping carries a ``root`` entry pointing at the directory
    holding the configuration file, unless the file sets one itself.

    Args:
        config_path: Optional explicit configuration file path.

    Returns:
        Parsed configuration as a dictionary.

    Raises:
        FileNotFoundError: If no valid configuration file is found.
        ValueError: If the file cannot be parsed or contains invalid structure.
    """
    path = _resolve_file_path(
        user_path=config_path,
        local_filename=DIST_CONFIG_FILENAMES,
    )

    if not path:
        raise FileNotFoundError("No dist.toml, dist.json or pyproject.toml found.")

    logger.debug("Loading distribution configuration from: %s", path)
    data = _load_by_extension(path)
    if path.name == "pyproject.toml":
        data = _from_pyproject(data)

    root = Path(data.get("root") or path.parent)
    if not root.is_absolute():
        root = path.parent / root
    data["root"] = root
    return data


def load_user_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load user-wide defaults shared by every distribution.

    Args:
        config_path: Override for the user config file location.

    Returns:
        Parsed configuration, or an empty dict when the file does not exist.

    Raises:
        ValueError: If the file exists but cannot be parsed.
    """
    path = Path(config_path) if config_path else USER_CONFIG_PATH
    if not path.is_file():
        return {}
    logger.debug("Loading user configuration from: %s", path)
    return _load_by_extension(path)
