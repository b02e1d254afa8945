from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from effectconf.cli import app

runner = CliRunner()


@pytest.fixture
def settings_file(values_file: Path, write_yaml: Callable[[str, str], Path]) -> Path:
    return write_yaml("effectconf.yaml", f"load_paths:\n  - {values_file.name}\n")


def test_odds_lists_every_effect(settings_file: Path) -> None:
    result = runner.invoke(app, ["odds", "--config", str(settings_file)])
    assert result.exit_code == 0
    assert "POWER_OF_4" in result.output
    assert "0.30 0.60 1.00 1.00" in result.output
    assert "SWAP" in result.output


def test_odds_single_effect(settings_file: Path) -> None:
    result = runner.invoke(app, ["odds", "-c", str(settings_file), "--effect", "hyper_punch"])
    assert result.exit_code == 0
    lines = [line for line in result.output.splitlines() if line.startswith("HYPER_PUNCH")]
    assert [line.split() for line in lines] == [["HYPER_PUNCH", "0.50", "1.00", "1.00", "1.00"]]
    assert "POWER_OF_4" not in result.output


def test_odds_unknown_effect(settings_file: Path) -> None:
    result = runner.invoke(app, ["odds", "-c", str(settings_file), "-e", "NOPE"])
    assert result.exit_code == 1


def test_mega(settings_file: Path) -> None:
    result = runner.invoke(app, ["mega", "Mega Gengar", "-c", str(settings_file)])
    assert result.exit_code == 0
    assert "speedup cap: 5" in result.output
    assert "threshold:   20" in result.output


def test_config_validate(settings_file: Path) -> None:
    result = runner.invoke(app, ["config", "validate", str(settings_file)])
    assert result.exit_code == 0
    assert "Config valid" in result.output


def test_config_validate_bad_values(write_yaml: Callable[[str, str], Path]) -> None:
    write_yaml("broken.yaml", "- not a mapping\n")
    settings = write_yaml("effectconf.yaml", "load_paths:\n  - broken.yaml\n")
    result = runner.invoke(app, ["config", "validate", str(settings)])
    assert result.exit_code == 1


def test_missing_settings_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["odds", "-c", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
