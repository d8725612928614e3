__all__ = [
    "PotWriterMixin",
]

from .pot_writer import PotWriterMixin
