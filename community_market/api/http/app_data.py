from dataclasses import dataclass

from community_market.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
