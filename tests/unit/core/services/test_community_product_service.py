"""Tests for membership resolution and community listings."""

import pytest

from community_market.core.errors import InvalidRequestError
from community_market.core.services import (
    CommunityProductService,
    MembershipResolver,
    ProductReconciler,
    ProductSynchronizer,
)
from community_market.entities import CommunityProductRepository, StoreRepository


@pytest.fixture
def community_setup(session, make_community, make_store, make_product, add_member):
    """Community with S1, S2 active members and S3 inactive, all synchronized."""
    community = make_community("barrio-norte")
    s1 = make_store(name="S1")
    s2 = make_store(name="S2")
    s3 = make_store(name="S3")
    add_member(community, s1)
    add_member(community, s2)
    add_member(community, s3, status=False)

    products = {
        "s1_home": make_product(s1.id, category="home"),
        "s2_toys": make_product(s2.id, category="toys"),
        "s3_home": make_product(s3.id, category="home"),
        "s1_inactive": make_product(s1.id, category="home", active=False),
    }
    synchronizer = ProductSynchronizer(session)
    for product in products.values():
        synchronizer.sync_product(product.id)

    return community, (s1, s2, s3), products


class TestMembershipResolver:
    def test_resolves_only_active_members(self, session, community_setup):
        _, (s1, s2, _), _ = community_setup

        store_ids = MembershipResolver(session).resolve_active_store_ids("barrio-norte")

        assert store_ids == {s1.id, s2.id}

    def test_unknown_community_resolves_to_empty_set(self, session):
        resolver = MembershipResolver(session)

        assert resolver.resolve_community_internal_id("nowhere") is None
        assert resolver.resolve_active_store_ids("nowhere") == set()

    def test_internal_id_lookup(self, session, make_community):
        community = make_community("barrio-sur")

        assert (
            MembershipResolver(session).resolve_community_internal_id("barrio-sur")
            == community.id
        )


class TestCommunityProductService:
    @pytest.fixture
    def service(self, session) -> CommunityProductService:
        return CommunityProductService(session)

    def test_lists_active_member_products_newest_first(self, service, community_setup):
        _, _, products = community_setup

        result = service.list_by_community("barrio-norte")

        assert [item.product_id for item in result] == [
            products["s2_toys"].id,
            products["s1_home"].id,
        ]

    def test_category_filter(self, service, community_setup):
        _, _, products = community_setup

        home = service.list_by_category("barrio-norte", "home")
        missing = service.list_by_category("barrio-norte", "garden")

        assert [item.product_id for item in home] == [products["s1_home"].id]
        assert missing == []

    def test_deactivated_membership_hides_products_on_next_read(
        self, service, session, community_setup, add_member
    ):
        community, (s1, _, _), products = community_setup

        add_member(community, s1, status=False)

        result = service.list_by_community("barrio-norte")
        assert [item.product_id for item in result] == [products["s2_toys"].id]

    def test_inactive_store_is_hidden_after_resync(
        self, service, session, community_setup
    ):
        _, (_, s2, _), products = community_setup

        StoreRepository(session).update(s2.model_copy(update={"active": False}))
        session.commit()
        ProductReconciler(session, max_workers=1).sync_products_by_store(s2.id)

        result = service.list_by_community("barrio-norte")
        assert [item.product_id for item in result] == [products["s1_home"].id]

    def test_unknown_community_returns_empty_without_querying_projection(
        self, service, monkeypatch
    ):
        def fail(*args, **kwargs):
            raise AssertionError("projection should not be queried")

        monkeypatch.setattr(CommunityProductRepository, "find_by_community_stores", fail)

        assert service.list_by_community("nowhere") == []
        page = service.list_by_community_paginated("nowhere", 1, 10)
        assert page.data == []
        assert page.total_count == 0

    def test_pages_cover_full_listing(
        self, service, session, community_setup, make_product
    ):
        _, (s1, s2, _), _ = community_setup
        synchronizer = ProductSynchronizer(session)
        for store in (s1, s2, s1, s2, s1):
            synchronizer.sync_product(make_product(store.id).id)

        full = service.list_by_community("barrio-norte")
        pages = [
            service.list_by_community_paginated("barrio-norte", number, 3)
            for number in (1, 2, 3)
        ]

        assert len(full) == 7
        assert all(page.total_count == 7 for page in pages)
        assert pages[0].total_pages == 3
        assert [len(page.data) for page in pages] == [3, 3, 1]
        assert [item.id for page in pages for item in page.data] == [item.id for item in full]

    def test_page_past_end_is_empty_with_total(self, service, community_setup):
        page = service.list_by_community_paginated("barrio-norte", 5, 10)

        assert page.data == []
        assert page.total_count == 2

    def test_paginated_category_filter(self, service, community_setup):
        _, _, products = community_setup

        page = service.list_by_community_paginated("barrio-norte", 1, 10, category="toys")

        assert page.total_count == 1
        assert [item.product_id for item in page.data] == [products["s2_toys"].id]

    @pytest.mark.parametrize("page_number,page_size", [(0, 10), (1, 0), (-1, -1)])
    def test_invalid_page_is_rejected(self, service, page_number, page_size):
        with pytest.raises(InvalidRequestError):
            service.list_by_community_paginated("barrio-norte", page_number, page_size)

    def test_get_by_id(self, service, session, community_setup):
        _, _, products = community_setup
        projection = CommunityProductRepository(session).get_by_product_id(
            products["s1_home"].id
        )

        assert service.get_by_id(projection.id) == projection
        assert service.get_by_id("missing") is None
