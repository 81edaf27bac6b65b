#!/usr/bin/env python3
"""Operator CLI for Community Market.

Provides maintenance commands for the database and for re-synchronizing the
community product projection.
"""

import typer

from community_market.api.utils.app_startup import configure_logging

from .db_commands import db_app
from .sync_commands import sync_app

app = typer.Typer(
    name="community-market",
    help="Community Market maintenance CLI",
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(sync_app, name="sync")


@app.callback()
def main(
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Skip logging setup"),
) -> None:
    if not quiet:
        configure_logging()


if __name__ == "__main__":
    app()
