"""Database initialization script."""

from community_market.core.services.database.db_manage import DbManageService
from community_market.core.services.database.db_session import DbSessionService


def init_db(db_service: DbSessionService | None = None) -> None:
    """Create all database tables."""
    db_service = db_service or DbSessionService()
    DbManageService(db_service.engine).create_all()


if __name__ == "__main__":
    init_db()
