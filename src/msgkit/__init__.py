from .version import __version__ as __version__

__title__ = "msgkit"
__description__ = "Distribution commands for managing gettext message catalogs."
__url__ = "https://github.com/msgkit/msgkit"
__author__ = "msgkit developers"
__license__ = "Apache-2.0"
