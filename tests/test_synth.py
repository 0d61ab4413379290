import numpy as np
import pytest

from fmdemod.synth import fm_modulate, synth_tone


def test_fm_modulate_holds_symbols():
    iq = fm_modulate([1, -1], deviation=4000, sample_rate=48000, samples_per_symbol=3)
    assert iq.shape == (6,)
    assert iq.dtype == np.complex64
    np.testing.assert_allclose(np.abs(iq), 1.0, atol=1e-6)
    # phase climbs for three samples then falls back
    assert np.angle(iq[2]) == pytest.approx(3 * np.pi / 6, abs=1e-5)
    assert np.angle(iq[5]) == pytest.approx(0.0, abs=1e-5)


def test_fm_modulate_rejects_bad_rate():
    with pytest.raises(ValueError):
        fm_modulate([1], 4000, 48000, samples_per_symbol=0)


def test_synth_tone_lengths():
    iq, audio = synth_tone(duration_s=0.01, sample_rate=48000)
    assert iq.shape == audio.shape
