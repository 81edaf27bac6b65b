"""Database management commands."""

import typer

from community_market.runtime.init_db import init_db

from .utils import console, get_database_service

db_app = typer.Typer(help="Database management commands")


@db_app.command("init")
def init() -> None:
    """Create all tables that do not exist yet."""
    init_db(get_database_service())
    console.print("[green]Database tables created[/green]")
