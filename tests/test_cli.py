import json

import pandas as pd
import pytest

from simva.cli import explicit_options, main


class TestHeadless:

    def test_writes_csv(self, tmp_path, capsys):
        output = tmp_path / "uptake.csv"
        main(["--total-time", "1", "--output", str(output), "--print-every", "5"])

        df = pd.read_csv(output)
        assert list(df.columns) == ["time", "pinsp", "palv", "part", "pvrg", "pmus", "pfat", "pcv"]
        assert len(df) == 10
        assert df["pinsp"].iloc[0] == pytest.approx(12.0)

        out = capsys.readouterr().out
        assert "Simulation completed: 10 steps" in out
        assert out.count("Time:") == 2

    def test_humidification_in_mmhg(self, tmp_path):
        output = tmp_path / "uptake.csv"
        main([
            "--total-time", "1", "--output", str(output), "--print-every", "0",
            "--humidification", "--pressure-unit", "mmhg", "--pambient", "760", "--pwater", "47",
        ])
        df = pd.read_csv(output)
        assert df["pinsp"].iloc[0] == pytest.approx(12.0 * 760.0 / 807.0)

    def test_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"agent": "halothane", "pinsp": 1.0, "cardiac_output": 5.0}))
        output = tmp_path / "uptake.csv"
        main(["--config", str(config), "--total-time", "1", "--output", str(output), "--print-every", "0"])
        df = pd.read_csv(output)
        assert df["pinsp"].iloc[0] == pytest.approx(1.0)

    def test_explicit_option_beats_config(self, tmp_path, capsys):
        # Explicit values equal to the parser defaults still win.
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"agent": "halothane", "pinsp": 1.0}))
        output = tmp_path / "uptake.csv"
        main([
            "--config", str(config), "--agent", "diethyl-ether", "--pinsp", "12",
            "--total-time", "1", "--output", str(output), "--print-every", "0",
        ])
        assert "Starting Uptake Simulation (diethyl-ether, pinsp 12.0" in capsys.readouterr().out
        assert pd.read_csv(output)["pinsp"].iloc[0] == pytest.approx(12.0)

    def test_config_fills_missing_options(self, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"agent": "halothane", "pinsp": 1.0}))
        main(["--config", str(config), "--pinsp", "2", "--total-time", "1", "--print-every", "0"])
        assert "Starting Uptake Simulation (halothane, pinsp 2.0" in capsys.readouterr().out

    def test_invalid_shunt_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--shunt-frac", "2", "--print-every", "0"])
        assert exc.value.code == 1
        assert "between 0 and 1" in capsys.readouterr().out

    def test_missing_config_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(tmp_path / "missing.json")])
        assert exc.value.code == 1
        assert "Error loading config" in capsys.readouterr().out


def test_explicit_options():
    assert explicit_options(["--agent", "diethyl-ether", "--humidification"]) == {"agent", "humidification"}
    assert explicit_options([]) == set()
