from platformdirs import user_config_path

PACKAGE_NAME = "msgkit"  # Python package name

# -----------------------------------------------------------------------------
# User-writable directories & files
# -----------------------------------------------------------------------------

# Base config directory (e.g. ~/.config/msgkit/)
USER_CONFIG_DIR = user_config_path(PACKAGE_NAME, appauthor=False)

# User-wide defaults shared by every distribution (author, copyright holder)
USER_CONFIG_PATH = USER_CONFIG_DIR / "config.toml"

# -----------------------------------------------------------------------------
# Per-distribution files
# -----------------------------------------------------------------------------

# Looked up in the working directory, in this order
DIST_CONFIG_FILENAMES = ["dist.toml", "dist.json", "pyproject.toml"]

# Table holding msgkit settings inside pyproject.toml
PYPROJECT_TABLE = ("tool", "msgkit")
