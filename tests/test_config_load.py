import pathlib

import pytest

from common.settings import load_settings

ROOT = pathlib.Path(__file__).resolve().parents[1]


def test_repo_config_loads():
    cfg = ROOT / "config.yaml"
    assert cfg.exists(), "config.yaml missing at project root"
    st = load_settings(str(cfg))
    assert st.input.output_columns == ["output"]
    assert st.input.population_column == "population"
    assert st.output.precision == 4
    assert st.logging.level == "INFO"


def test_missing_file_gives_defaults(tmp_path):
    st = load_settings(str(tmp_path / "nope.yaml"))
    assert st.input.path == "data/regions.csv"
    assert st.output.path is None


def test_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv("HOOVER_INPUT_OVERRIDE", "/tmp/other.csv")
    st = load_settings(str(ROOT / "config.yaml"))
    assert st.input.path == "/tmp/other.csv"


def test_bad_values_raise(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("logging:\n  level: LOUD\n")
    with pytest.raises(RuntimeError):
        load_settings(str(cfg))

    cfg.write_text("input:\n  output_columns: []\n")
    with pytest.raises(RuntimeError):
        load_settings(str(cfg))


def test_level_is_normalised(tmp_path):
    cfg = tmp_path / "lvl.yaml"
    cfg.write_text("logging:\n  level: debug\n")
    assert load_settings(str(cfg)).logging.level == "DEBUG"
