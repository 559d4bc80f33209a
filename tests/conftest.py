"""Shared pytest fixtures and test helpers for charcheck tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from charcheck.domain.profanity import ForbiddenTermMatcher
from charcheck.services.validator import CharacterValidator

FIXED_TODAY = date(2024, 6, 15)

FORBIDDEN_TERMS = ["darn", "heck", "blast it"]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolate_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None]:
    """Keep tests away from real config files and CHARCHECK_* env vars.

    Also restores root logger state, since the CLI configures logging.
    """
    for var in (
        "CHARCHECK_CONFIG",
        "CHARCHECK_VERBOSE",
        "CHARCHECK_LOG_JSON",
        "CHARCHECK_RULES__MIN_AGE_YEARS",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("charcheck")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def matcher() -> ForbiddenTermMatcher:
    return ForbiddenTermMatcher.from_terms(FORBIDDEN_TERMS)


@pytest.fixture
def validator(matcher: ForbiddenTermMatcher) -> CharacterValidator:
    """Validator with a small term list and today pinned to 2024-06-15."""
    return CharacterValidator(matcher, clock=lambda: FIXED_TODAY)


@pytest.fixture
def valid_record() -> dict[str, str]:
    return {
        "firstname": "Ada",
        "lastname": "Lovelace",
        "nationality": "British",
        "gender": "female",
        "date": "1990-12-10",
    }


@pytest.fixture
def wordlist_file(tmp_path: Path) -> Path:
    path = tmp_path / "forbidden.txt"
    path.write_text("# forbidden terms\ndarn\n\nheck\n", encoding="utf-8")
    return path
