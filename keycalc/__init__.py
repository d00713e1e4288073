"""KeyCalc — keypad calculator with a single pending operation."""

from keycalc.__version__ import __version__

__all__ = ["__version__"]
