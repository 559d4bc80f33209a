"""Subcommand modules for charcheck.

Provides register_commands() which uses deferred imports to keep
``charcheck --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from charcheck.commands.check_date import check_date
    from charcheck.commands.validate import field, validate

    cli.add_command(validate)
    cli.add_command(field)
    cli.add_command(check_date)
