"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy validator construction and result
emission (JSON to stdout + exit codes).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from charcheck.config.settings import CharcheckSettings
    from charcheck.services.result import ValidationResult
    from charcheck.services.validator import CharacterValidator


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The validator is built on first use so ``--help`` and ``--version``
    never read the word list.
    """

    def __init__(self, settings: CharcheckSettings) -> None:
        self.settings = settings
        self._validator: CharacterValidator | None = None

        from charcheck.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def validator(self) -> CharacterValidator:
        """The validator instance (created lazily on first access)."""
        if self._validator is None:
            from charcheck.services.validator import create_validator

            self._validator = create_validator(self.settings)
        return self._validator

    def echo_json(self, payload: dict[str, Any]) -> None:
        click.echo(json.dumps(payload, indent=2))

    def emit(self, result: ValidationResult) -> None:
        """Print the result payload; exit with code 1 when invalid."""
        self.echo_json(result.to_payload())
        if not result.is_valid:
            raise SystemExit(1)
