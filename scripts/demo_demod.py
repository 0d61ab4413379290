"""Generate a synthetic FM signal, demodulate (FM) and write audio to a WAV file."""
import logging

import numpy as np
from scipy.io import wavfile
from scipy.signal import resample_poly

from fmdemod import FmDemod
from fmdemod.config import load_config
from fmdemod.logger import setup_logging
from fmdemod.synth import synth_tone

logger = logging.getLogger("demo_demod")


def main(fs_audio: int = 48000):
    setup_logging()
    cfg = load_config()
    fs = int(cfg["sample_rate"])

    iq, _ = synth_tone(duration_s=2.0, sample_rate=fs, tone_hz=1000, deviation=cfg["deviation"])
    demod = FmDemod.from_config(cfg)
    # first output is against the zero initial sample
    audio = demod.feed_block(iq)[1:]
    audio = resample_poly(audio, fs_audio, fs)

    audio = audio / (np.max(np.abs(audio)) + 1e-12)
    audio16 = (audio * 0.9 * 32767).astype(np.int16)
    wavfile.write("demo_out.wav", fs_audio, audio16)
    logger.info("Wrote demo_out.wav (%d samples @ %d Hz)", audio16.size, fs_audio)


if __name__ == "__main__":
    main()
