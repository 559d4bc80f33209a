"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``CHARCHECK_*`` prefix
  3. TOML file    — ``-c`` path, ``CHARCHECK_CONFIG``, or ``charcheck.toml``
                    found by walking up from the working directory
  4. Code defaults — baked into the section models

Every configuration problem (unreadable TOML, a ``-c`` path that does not
exist, bounds or env values that fail validation) surfaces as
:class:`~charcheck.errors.ConfigError`.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from charcheck.config.models import ProfanityConfig, RulesConfig
from charcheck.errors import ConfigError

CONFIG_FILENAME = "charcheck.toml"
CONFIG_ENV_VAR = "CHARCHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file for a run started in *start* (default: cwd).

    ``CHARCHECK_CONFIG`` wins when it names an existing file; otherwise
    the nearest ``charcheck.toml`` in *start* or any parent is used.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings read from one TOML file.

    A relative ``[profanity] wordlist`` is resolved against the file's
    directory, so a game can ship the list next to its config.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None:
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise ConfigError(msg) from exc
        except OSError as exc:
            msg = f"Cannot read config {toml_path}: {exc.strerror or exc}"
            raise ConfigError(msg) from exc

        profanity = self._data.get("profanity")
        if isinstance(profanity, dict):
            wordlist = profanity.get("wordlist")
            if isinstance(wordlist, str) and not Path(wordlist).is_absolute():
                profanity["wordlist"] = str(toml_path.parent / wordlist)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class CharcheckSettings(BaseSettings):
    """Unified settings for the validator and its CLI.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Enable DEBUG logging for the ``charcheck`` namespace.
        log_json: Render log events as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CHARCHECK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    rules: RulesConfig = Field(default_factory=RulesConfig)
    profanity: ProfanityConfig = Field(default_factory=ProfanityConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> CharcheckSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* must exist; without one,
        ``charcheck.toml`` is discovered from *start*.

        Raises:
            ConfigError: Missing ``-c`` file, bad TOML, or values that
                fail validation (from TOML or ``CHARCHECK_*`` env vars).
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise ConfigError(msg)
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            msg = f"Invalid configuration ({source}): {exc}"
            raise ConfigError(msg) from exc
        finally:
            _tls.toml_path = None
