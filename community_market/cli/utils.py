"""Shared utilities for CLI commands."""

from functools import lru_cache

from rich.console import Console

from community_market.core.services import DbSessionService

# Initialize Rich console for colored output
console = Console()


@lru_cache(maxsize=1)
def get_database_service() -> DbSessionService:
    """Database service shared by the commands of one CLI invocation."""
    return DbSessionService()
