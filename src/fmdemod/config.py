"""Simple config persistence for demodulator settings."""
import json
import os
from typing import Dict, Optional

_CONFIG_PATH = os.path.expanduser("~/.fmdemod_config.json")

# broadcast WBFM
DEFAULTS = {"deviation": 75_000, "sample_rate": 240_000}


def load_config(path: Optional[str] = None) -> Dict:
    path = path or _CONFIG_PATH
    cfg = dict(DEFAULTS)
    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                cfg.update(json.load(f))
        except Exception:
            return dict(DEFAULTS)
    return cfg


def save_config(cfg: Dict, path: Optional[str] = None) -> None:
    path = path or _CONFIG_PATH
    d = os.path.dirname(path)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)
    with open(path, "w") as f:
        json.dump(cfg, f, indent=2)
