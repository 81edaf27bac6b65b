from loguru import logger
from sqlmodel import Session

from community_market.entities.community.community import CommunityRepository
from community_market.entities.community.membership import CommunityStoreRepository


class MembershipResolver:
    """Resolves a community's public identifier to its active member stores."""

    def __init__(self, db_session: Session):
        self._community_repo = CommunityRepository(db_session)
        self._membership_repo = CommunityStoreRepository(db_session)

    def resolve_community_internal_id(self, community_id: str) -> str | None:
        community = self._community_repo.get_by_community_id(community_id)
        if community is None:
            return None
        return community.id

    def resolve_active_store_ids(self, community_id: str) -> set[str]:
        """Return the ids of stores with an active membership in the community.

        An unknown community resolves to an empty set.
        """
        internal_id = self.resolve_community_internal_id(community_id)
        if internal_id is None:
            logger.debug("Community {} not found; no member stores", community_id)
            return set()
        return self._membership_repo.list_active_store_ids(internal_id)
