"""Command: inspect how a date of birth is judged."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from charcheck.commands._base import CharcheckCommand

if TYPE_CHECKING:
    from charcheck.commands._context import AppContext


def _parse_today(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}") from exc


@click.command(
    "check-date",
    cls=CharcheckCommand,
    examples="""\
  charcheck check-date 2016-06-15
  charcheck check-date 2016-06-16 --today 2024-06-15""",
)
@click.argument("text")
@click.option(
    "--today",
    callback=_parse_today,
    default=None,
    help="Evaluate as of this UTC date (YYYY-MM-DD).",
)
@click.pass_obj
def check_date(app: AppContext, text: str, today: date | None) -> None:
    """Report calendar validity and age bounds for TEXT."""
    from charcheck.domain.dates import (
        is_too_old,
        is_too_young,
        is_valid_calendar_date,
        parse_calendar_date,
        today_utc,
    )

    rules = app.settings.rules
    as_of = today or today_utc()
    parsed = parse_calendar_date(text)
    app.echo_json(
        {
            "text": text,
            "today": as_of.isoformat(),
            "parsed": parsed.isoformat() if parsed else None,
            "valid_calendar_date": is_valid_calendar_date(text),
            "too_young": is_too_young(text, rules.min_age_years, today=as_of),
            "too_old": is_too_old(text, rules.max_age_years, today=as_of),
        }
    )
