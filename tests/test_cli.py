# tests/test_cli.py
import pandas as pd
import pytest

from hoover.cli import main


@pytest.fixture
def table(tmp_path):
    p = tmp_path / "regions.csv"
    p.write_text(
        "region,ind,other,pop\n"
        "R1,0,0,10\nR2,10,0,15\nR3,10,0,20\nR4,30,0,25\nR5,50,0,30\n"
    )
    return p


@pytest.fixture
def cfg(tmp_path):
    c = tmp_path / "config.yaml"
    c.write_text(
        "input:\n  output_columns: [ind]\n  population_column: pop\n"
        "output:\n  precision: 2\n"
    )
    return c


def test_cli_prints_coordinates(table, cfg, capsys):
    rc = main(["--config", str(cfg), "--csv", str(table)])
    assert rc == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].split() == ["cum_pop", "cum_out"]
    assert lines[1].split() == ["0.00", "0.00"]
    assert lines[5].split() == ["0.70", "0.50"]
    assert lines[-1].split() == ["1.00", "1.00"]


def test_cli_writes_csv(table, cfg, tmp_path):
    out = tmp_path / "curve.csv"
    rc = main(["--config", str(cfg), "--csv", str(table), "--out", str(out)])
    assert rc == 0
    df = pd.read_csv(out)
    assert list(df.columns) == ["cum_pop", "cum_out"]
    assert len(df) == 6
    assert df["cum_out"].iloc[-1] == 1.0


def test_cli_zero_output_exits_2(table, cfg):
    rc = main(["--config", str(cfg), "--csv", str(table), "--output-col", "other"])
    assert rc == 2


def test_cli_missing_csv_exits_2(cfg, tmp_path):
    rc = main(["--config", str(cfg), "--csv", str(tmp_path / "absent.csv")])
    assert rc == 2


def test_cli_rejects_unknown_log_level(table, cfg):
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(cfg), "--csv", str(table), "--log-level", "loud"])
    assert exc.value.code == 2


def test_cli_log_level_is_case_insensitive(table, cfg):
    assert main(["--config", str(cfg), "--csv", str(table), "--log-level", "debug"]) == 0
