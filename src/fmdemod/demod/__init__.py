"""Demodulators"""

from .fm import FmDemod, DeviationError

__all__ = ["FmDemod", "DeviationError"]
