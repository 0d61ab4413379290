"""Synthetic FM I/Q generation for tests and demos."""
from typing import Sequence

import numpy as np


def fm_modulate(
    symbols: Sequence[float],
    deviation: float,
    sample_rate: float,
    samples_per_symbol: int = 1,
) -> np.ndarray:
    """FM modulate a symbol sequence onto unit-amplitude complex baseband.

    Each symbol is held for samples_per_symbol samples. Phase is the
    Riemann sum of the angular deviation scaled by the current symbol, so
    the first sample already carries one phase step.
    """
    if samples_per_symbol < 1:
        raise ValueError("samples_per_symbol must be >= 1")

    angdev = 2.0 * np.pi * deviation / sample_rate
    x = np.repeat(np.asarray(symbols, dtype=np.float64), samples_per_symbol)
    phase = np.cumsum(angdev * x)
    return (np.cos(phase) + 1j * np.sin(phase)).astype(np.complex64)


def synth_tone(
    duration_s: float = 2.0,
    sample_rate: float = 48000,
    tone_hz: float = 1000,
    deviation: float = 2000.0,
    amplitude: float = 0.5,
):
    """Return (iq, audio) for a sine tone FM modulated at the given deviation."""
    t = np.arange(0, duration_s, 1 / sample_rate)
    audio = amplitude * np.sin(2 * np.pi * tone_hz * t)
    return fm_modulate(audio, deviation, sample_rate), audio.astype(np.float32)
