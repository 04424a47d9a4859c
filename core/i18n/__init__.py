"""UI string lookup."""

from .strings import tr

__all__ = ['tr']
