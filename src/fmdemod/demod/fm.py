"""FM demodulation by phase difference approximation.

An FM signal carries the modulating signal x(t) in its phase:

    s(t) = a(t) cos(w_c t + phi(t)),   phi(t) = w_dev * integral(x)

so x(t) = dphi/dt / w_dev. In discrete time the derivative becomes a
backward difference over one (normalized) sample period:

    x[t] ~= (phi[t] - phi[t-1]) / w_dev

With complex baseband samples p[t] = a[t] * exp(j phi[t]) the phase step
is the argument of p[t] * conj(p[t-1]), wrapped to (-pi, pi]. No unwrapping
and no per-sample phase tracking is needed, and a(t) drops out entirely:

    x[t] = arg(p[t] * conj(p[t-1])) / w_dev,   w_dev = 2 pi f_dev / f_s

Reference: J.M. Shima, "FM demodulation using a digital radio and digital
signal processing", 1995.
"""
import logging
from typing import Mapping

import numpy as np

logger = logging.getLogger(__name__)


def _unit(z):
    """Scale z to unit magnitude so products cannot overflow or underflow; 0 stays 0."""
    mag = np.abs(z)
    return np.where(mag == 0, 0, z / np.where(mag == 0, 1, mag))


def _arg(z):
    """Complex argument in (-pi, pi], with arg(0) == 0 regardless of signed zeros."""
    return np.where(z == 0, 0, np.angle(z))


def _phase_step(cur, prev):
    """Wrapped phase difference arg(cur * conj(prev)), independent of amplitude."""
    return _arg(_unit(cur) * np.conj(_unit(prev)))


class DeviationError(ValueError):
    """Frequency deviation and sample rate are mutually inconsistent."""


class FmDemod:
    """Demodulates an FM signal one I/Q sample at a time.

    deviation: maximum frequency excursion f_dev of the carrier (Hz)
    sample_rate: sampling frequency f_s of the complex stream (Hz)

    The deviation must satisfy the Nyquist limit f_dev <= f_s / 2.

    An instance holds the previous sample and is not thread safe; use one
    per channel. The first output after construction is taken against a zero
    previous sample, is always 0.0 and is normally discarded.
    """

    def __init__(self, deviation: float, sample_rate: float):
        if not (np.isfinite(sample_rate) and sample_rate > 0):
            raise DeviationError(f"sample rate must be positive, got {sample_rate} Hz")
        if not (np.isfinite(deviation) and deviation > 0):
            raise DeviationError(f"deviation must be positive, got {deviation} Hz")
        if deviation > sample_rate / 2:
            raise DeviationError(
                f"deviation {deviation} Hz exceeds the Nyquist limit for sample rate "
                f"{sample_rate} Hz (max {sample_rate / 2} Hz)"
            )

        # reciprocal of angular deviation in rad/sample
        with np.errstate(over="ignore", divide="ignore"):
            self._gain = np.float64(sample_rate) / (2.0 * np.pi * np.float64(deviation))
        if not (np.isfinite(self._gain) and self._gain > 0):
            raise DeviationError(
                f"deviation {deviation} Hz is too small for sample rate {sample_rate} Hz; "
                f"gain overflows"
            )
        self._prev = np.complex128(0.0)
        logger.debug(f"FmDemod: deviation={deviation} Hz fs={sample_rate} Hz gain={self._gain:.6f}")

    @classmethod
    def from_config(cls, cfg: Mapping) -> "FmDemod":
        """Build a demodulator from a mapping with 'deviation' and 'sample_rate' keys."""
        return cls(cfg["deviation"], cfg["sample_rate"])

    @property
    def gain(self) -> float:
        return float(self._gain)

    @property
    def previous_sample(self) -> complex:
        return complex(self._prev)

    def feed(self, sample) -> float:
        """Feed in the next I/Q sample and return the next demodulated value."""
        sample = np.complex128(sample)
        out = _phase_step(sample, self._prev) * self._gain
        self._prev = sample
        return float(out)

    def feed_block(self, samples) -> np.ndarray:
        """Demodulate a block of samples, continuing from the previous call.

        Returns one float32 value per input sample.
        """
        iq = np.asarray(samples, dtype=np.complex128).ravel()
        if iq.size == 0:
            return np.zeros(0, dtype=np.float32)

        prev = np.empty_like(iq)
        prev[0] = self._prev
        prev[1:] = iq[:-1]

        out = _phase_step(iq, prev) * self._gain
        self._prev = iq[-1]
        return out.astype(np.float32, copy=False)

    def __repr__(self):
        return f"FmDemod(gain={self.gain:.6f}, prev={self.previous_sample})"
