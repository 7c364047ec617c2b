"""Tests for the command line entry point."""

import json
from gravity_sim.cli.main import main


def test_cli_runs_headless(capsys):
    """Test a short run with a diagnostics report."""
    assert main(["--steps", "20", "--report-every", "10"]) == 0
    
    out = capsys.readouterr().out
    assert "Running simulation: sun_planets with 3 bodies" in out
    assert "semi_implicit_euler" in out
    assert "Simulation complete!" in out
    # Header, initial row and two report rows
    rows = [line for line in out.splitlines() if line[:1].isdigit()]
    assert [row.split()[0] for row in rows] == ["0", "10", "20"]


def test_cli_options(capsys):
    """Test preset, force method and clamp flags."""
    assert main(["--preset", "binary", "--steps", "5", "--report-every", "5",
                 "--force-method", "vectorized", "--min-distance", "1.0", "--dt", "0.5"]) == 0
    
    out = capsys.readouterr().out
    assert "binary with 2 bodies" in out
    assert "Forces: vectorized, dt: 0.5, min distance: 1" in out


def test_cli_extended_scene(capsys):
    """Test the four-body scene."""
    assert main(["--extended", "--steps", "1"]) == 0
    assert "sun_planets with 4 bodies" in capsys.readouterr().out


def test_cli_config_file(tmp_path, capsys):
    """Test that config file values apply and flags override them."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"preset": "single", "n_steps": 3, "report_every": 1, "dt": 2.0}))
    
    assert main(["--config", str(path), "--dt", "1.0"]) == 0
    
    out = capsys.readouterr().out
    assert "single with 1 bodies" in out
    assert "dt: 1.0" in out


def test_cli_list_options(capsys):
    """Test the listing flags."""
    assert main(["--list-presets"]) == 0
    assert "sun_planets" in capsys.readouterr().out
    assert main(["--list-backends"]) == 0
    assert "numpy" in capsys.readouterr().out


def test_cli_reports_errors(capsys):
    """Test that invalid values produce an error exit code."""
    assert main(["--dt", "-1"]) == 1
    assert "Error:" in capsys.readouterr().err
    assert main(["--backend", "cupy", "--steps", "1"]) == 1


def test_cli_reports_bad_config_keys(tmp_path, capsys):
    """Test that an unknown config key is an error exit, not a traceback."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"preset": "single", "bogus": 1}))
    
    assert main(["--config", str(path)]) == 1
    assert "bogus" in capsys.readouterr().err
