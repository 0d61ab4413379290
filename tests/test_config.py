from fmdemod.config import load_config, save_config, DEFAULTS


def test_load_missing_returns_defaults(tmp_path):
    assert load_config(str(tmp_path / "missing.json")) == DEFAULTS


def test_save_then_load(tmp_path):
    path = tmp_path / "sub" / "cfg.json"
    save_config({"deviation": 5000, "sample_rate": 48000}, str(path))
    cfg = load_config(str(path))
    assert cfg["deviation"] == 5000
    assert cfg["sample_rate"] == 48000


def test_partial_config_keeps_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    save_config({"deviation": 12500}, str(path))
    cfg = load_config(str(path))
    assert cfg["deviation"] == 12500
    assert cfg["sample_rate"] == DEFAULTS["sample_rate"]


def test_corrupt_config_falls_back(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{not json")
    assert load_config(str(path)) == DEFAULTS
