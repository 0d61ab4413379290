"""Phase difference FM demodulation for software radio I/Q streams"""

from .demod.fm import FmDemod, DeviationError

__all__ = ["FmDemod", "DeviationError"]
