"""Tests for the validate and field commands."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from charcheck.cli import cli

VALID_ARGS = [
    "--firstname",
    "Ada",
    "--lastname",
    "Lovelace",
    "--nationality",
    "British",
    "--gender",
    "female",
    "--date",
    "1990-12-10",
]


@pytest.fixture
def configured(tmp_path: Path, wordlist_file: Path) -> Path:
    config = tmp_path / "charcheck.toml"
    config.write_text(f'[profanity]\nwordlist = "{wordlist_file.name}"\n')
    return config


class TestValidate:
    def test_valid_character(self, cli_runner: CliRunner, configured: Path) -> None:
        result = cli_runner.invoke(cli, ["validate", *VALID_ARGS])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"isValid": True}

    def test_first_error_reported(self, cli_runner: CliRunner, configured: Path) -> None:
        args = [*VALID_ARGS, "--firstname", "", "--date", "garbage"]
        result = cli_runner.invoke(cli, ["validate", *args])
        assert result.exit_code == 1
        assert json.loads(result.output) == {
            "isValid": False,
            "field": "firstname",
            "message": "forgotten_field",
        }

    def test_missing_options_are_forgotten(self, cli_runner: CliRunner, configured: Path) -> None:
        result = cli_runner.invoke(cli, ["validate", "--firstname", "Ada"])
        assert result.exit_code == 1
        assert json.loads(result.output)["field"] == "lastname"

    def test_profanity_from_configured_wordlist(
        self, cli_runner: CliRunner, configured: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["validate", *VALID_ARGS, "--nationality", "heck"])
        assert result.exit_code == 1
        assert json.loads(result.output)["message"] == "profanity"

    def test_too_young_against_real_today(self, cli_runner: CliRunner, configured: Path) -> None:
        born = date.today().replace(year=date.today().year - 1, month=1, day=1).isoformat()
        result = cli_runner.invoke(cli, ["validate", *VALID_ARGS, "--date", born])
        assert result.exit_code == 1
        assert json.loads(result.output)["message"] == "age_too_young"


class TestField:
    def test_valid_field(self, cli_runner: CliRunner, configured: Path) -> None:
        result = cli_runner.invoke(cli, ["field", "firstname", "Ada"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"isValid": True}

    def test_invalid_field(self, cli_runner: CliRunner, configured: Path) -> None:
        result = cli_runner.invoke(cli, ["field", "date", "2023-02-29"])
        assert result.exit_code == 1
        assert json.loads(result.output) == {
            "isValid": False,
            "field": "date",
            "message": "invalid_date",
        }

    def test_value_defaults_to_empty(self, cli_runner: CliRunner, configured: Path) -> None:
        result = cli_runner.invoke(cli, ["field", "gender"])
        assert result.exit_code == 1
        assert json.loads(result.output)["message"] == "forgotten_field"

    def test_unknown_field_passes(self, cli_runner: CliRunner, configured: Path) -> None:
        result = cli_runner.invoke(cli, ["field", "eye_colour", ""])
        assert result.exit_code == 0

    def test_rules_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "charcheck.toml").write_text(
            "[rules]\nname_max_length = 4\n[profanity]\nenabled = false\n"
        )
        result = cli_runner.invoke(cli, ["field", "lastname", "Smith"])
        assert result.exit_code == 1
        assert json.loads(result.output)["message"] == "lastname_too_long"
