"""Commands: validate a whole character form or a single field."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from charcheck.commands._base import CharcheckCommand

if TYPE_CHECKING:
    from charcheck.commands._context import AppContext


@click.command(
    cls=CharcheckCommand,
    examples="""\
  charcheck validate --firstname Ada --lastname Lovelace \\
      --nationality British --gender female --date 1990-12-10
  charcheck -c game/charcheck.toml validate --firstname A""",
)
@click.option("--firstname", default=None, help="First name.")
@click.option("--lastname", default=None, help="Last name.")
@click.option("--nationality", default=None, help="Nationality.")
@click.option("--gender", default=None, help="Gender.")
@click.option("--date", "date_of_birth", default=None, help="Date of birth (YYYY-MM-DD).")
@click.pass_obj
def validate(
    app: AppContext,
    firstname: str | None,
    lastname: str | None,
    nationality: str | None,
    gender: str | None,
    date_of_birth: str | None,
) -> None:
    """Validate a full character; report the first failing field."""
    record = {
        "firstname": firstname,
        "lastname": lastname,
        "nationality": nationality,
        "gender": gender,
        "date": date_of_birth,
    }
    app.emit(app.validator.validate_character(record))


@click.command(
    cls=CharcheckCommand,
    examples="""\
  charcheck field firstname Ada
  charcheck field date 2024-02-29""",
)
@click.argument("name")
@click.argument("value", required=False, default="")
@click.pass_obj
def field(app: AppContext, name: str, value: str) -> None:
    """Validate a single field NAME with VALUE."""
    app.emit(app.validator.validate_field(name, value))
