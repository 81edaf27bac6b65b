from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from community_market.core.errors import (
    DuplicateSlugError,
    InvalidRequestError,
    NotFoundError,
)
from community_market.core.models.requests import CommunityInput
from community_market.entities.catalog.store import StoreRepository
from community_market.entities.community.community import Community, CommunityRepository
from community_market.entities.community.membership import (
    CommunityStore,
    CommunityStoreRepository,
)


class CommunityService:
    """Community records and their store memberships."""

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._community_repo = CommunityRepository(db_session)
        self._membership_repo = CommunityStoreRepository(db_session)
        self._store_repo = StoreRepository(db_session)

    def get_by_community_id(self, community_id: str) -> Community:
        community = self._community_repo.get_by_community_id(community_id)
        if community is None:
            raise NotFoundError("Community", community_id)
        return community

    def list_communities(self, scope: str = "all") -> list[Community]:
        """List communities by name; ``scope`` is ``all``, ``active`` or ``visible``."""
        if scope == "active":
            return self._community_repo.list_active()
        if scope == "visible":
            return self._community_repo.list_visible()
        if scope == "all":
            return self._community_repo.list_all()
        raise InvalidRequestError(f"Unknown community scope '{scope}'")

    def create(self, data: CommunityInput) -> Community:
        if self._community_repo.get_by_community_id(data.community_id) is not None:
            raise DuplicateSlugError(data.community_id, kind="Community")

        try:
            community = self._community_repo.create(Community(**data.model_dump()))
            self._db_session.commit()
        except IntegrityError as e:
            self._db_session.rollback()
            raise DuplicateSlugError(data.community_id, kind="Community") from e
        logger.info("Community {} created", community.community_id)
        return community

    def set_membership(
        self, community_id: str, store_id: str, status: bool = True
    ) -> CommunityStore:
        """Add a store to a community, or toggle an existing membership."""
        community = self.get_by_community_id(community_id)
        if self._store_repo.get(store_id) is None:
            raise NotFoundError("Store", store_id)

        membership = self._membership_repo.set_membership(community.id, store_id, status)
        self._db_session.commit()
        logger.info(
            "Store {} membership in community {} set to {}",
            store_id,
            community_id,
            "active" if status else "inactive",
        )
        return membership
