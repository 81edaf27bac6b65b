"""Tests for product, store and community mutations."""

from decimal import Decimal

import pytest

from community_market.core.errors import (
    DuplicateSlugError,
    InvalidRequestError,
    NotFoundError,
)
from community_market.core.models.requests import (
    CommunityInput,
    ProductInput,
    StoreInput,
)
from community_market.core.services import (
    CommunityService,
    MembershipResolver,
    ProductService,
    StoreService,
)
from community_market.entities import (
    CommunityProductRepository,
    CommunityRepository,
    ProductRepository,
    StoreRepository,
)


class TestProductService:
    @pytest.fixture
    def service(self, session) -> ProductService:
        return ProductService(session, sync_on_mutation=True)

    def test_create_synchronizes_immediately(self, service, session, make_store):
        store = make_store()

        product = service.create(
            ProductInput(store_id=store.id, title="Chair", price=Decimal("10000"))
        )

        assert product.synchronized is True
        projection = CommunityProductRepository(session).get_by_product_id(product.id)
        assert projection.title == "Chair"

    def test_create_without_store_stays_pending(self, service, session):
        product = service.create(ProductInput(store_id="ghost", title="Chair"))

        assert product.synchronized is False
        assert CommunityProductRepository(session).get_by_product_id(product.id) is None

    def test_create_without_sync_on_mutation(self, session, make_store):
        store = make_store()
        service = ProductService(session, sync_on_mutation=False)

        product = service.create(ProductInput(store_id=store.id, title="Chair"))

        assert product.synchronized is False
        assert ProductRepository(session).list_active_unsynchronized()[0].id == product.id

    def test_update_refreshes_projection(self, service, session, make_store, make_product):
        store = make_store()
        product = make_product(store.id, title="Chair")

        updated = service.update(
            product.id, ProductInput(store_id=store.id, title="Armchair", price="15.50")
        )

        assert updated.title == "Armchair"
        projection = CommunityProductRepository(session).get_by_product_id(product.id)
        assert projection.title == "Armchair"
        assert projection.price == Decimal("15.50")

    def test_update_unknown_product(self, service):
        with pytest.raises(NotFoundError):
            service.update("missing", ProductInput(store_id="s1", title="Chair"))

    def test_image_operations_keep_projection_order(
        self, service, session, make_store, make_product
    ):
        store = make_store()
        product = make_product(store.id, images=["a.jpg"])
        repo = CommunityProductRepository(session)

        service.add_image(product.id, "b.jpg")
        assert repo.get_by_product_id(product.id).images == ["a.jpg", "b.jpg"]

        service.reorder_images(product.id, ["b.jpg", "a.jpg"])
        assert repo.get_by_product_id(product.id).images == ["b.jpg", "a.jpg"]

        result = service.remove_image(product.id, "b.jpg")
        assert result.images == ["a.jpg"]
        assert repo.get_by_product_id(product.id).images == ["a.jpg"]

    def test_remove_unknown_image(self, service, make_store, make_product):
        product = make_product(make_store().id, images=["a.jpg"])

        with pytest.raises(NotFoundError):
            service.remove_image(product.id, "z.jpg")

    def test_reorder_must_be_permutation(self, service, make_store, make_product):
        product = make_product(make_store().id, images=["a.jpg", "b.jpg"])

        with pytest.raises(InvalidRequestError):
            service.reorder_images(product.id, ["a.jpg", "c.jpg"])

    def test_global_listing_pages_active_products(
        self, service, make_store, make_product
    ):
        first_store = make_store()
        second_store = make_store()
        newest = [
            make_product(first_store.id, category="home"),
            make_product(second_store.id, category="toys"),
            make_product(first_store.id, category="home"),
        ][::-1]
        make_product(second_store.id, category="home", active=False)

        first_page = service.list_paginated(1, 2)
        second_page = service.list_paginated(2, 2)

        assert first_page.total_count == 3
        assert first_page.total_pages == 2
        assert [p.id for p in first_page.data + second_page.data] == [p.id for p in newest]

        home = service.list_paginated(1, 10, category="home")
        assert home.total_count == 2
        assert {p.store_id for p in home.data} == {first_store.id}

    @pytest.mark.parametrize("page_number,page_size", [(0, 10), (1, 0)])
    def test_global_listing_rejects_invalid_page(self, service, page_number, page_size):
        with pytest.raises(InvalidRequestError):
            service.list_paginated(page_number, page_size)


class TestStoreService:
    @pytest.fixture
    def service(self, session) -> StoreService:
        return StoreService(session)

    def test_create_normalizes_slug(self, service):
        store = service.create(StoreInput(name="WoodCraft", slug="WoodCraft"))

        assert store.slug == "woodcraft"
        assert service.get_by_slug("WOODCRAFT").id == store.id

    def test_create_rejects_duplicate_slug(self, service, make_store):
        make_store(slug="woodcraft")

        with pytest.raises(DuplicateSlugError):
            service.create(StoreInput(name="Other", slug="WoodCraft"))

    def test_update_resyncs_store_products(
        self, service, session, make_store, make_product
    ):
        store = make_store(name="WoodCraft", slug="woodcraft")
        first = make_product(store.id)
        second = make_product(store.id)

        updated, synced = service.update(
            store.id,
            StoreInput(name="WoodCraft & Co", slug="woodcraft", logo="new.png"),
        )

        assert updated.name == "WoodCraft & Co"
        assert synced == 2
        repo = CommunityProductRepository(session)
        for product in (first, second):
            projection = repo.get_by_product_id(product.id)
            assert projection.store_name == "WoodCraft & Co"
            assert projection.store_logo == "new.png"

    def test_create_race_on_slug_is_reported_as_duplicate(
        self, service, make_store, monkeypatch
    ):
        make_store(slug="woodcraft")
        # The pre-insert check misses a slug a concurrent request just stored
        monkeypatch.setattr(StoreRepository, "get_by_slug", lambda self, slug: None)

        with pytest.raises(DuplicateSlugError):
            service.create(StoreInput(name="Other", slug="woodcraft"))

        monkeypatch.undo()
        assert service.get_by_slug("woodcraft").name != "Other"

    def test_update_rejects_slug_of_other_store(self, service, make_store):
        make_store(slug="taken")
        store = make_store(slug="mine")

        with pytest.raises(DuplicateSlugError):
            service.update(store.id, StoreInput(name="Mine", slug="Taken"))

    def test_get_unknown_store(self, service):
        with pytest.raises(NotFoundError):
            service.get("missing")


class TestCommunityService:
    @pytest.fixture
    def service(self, session) -> CommunityService:
        return CommunityService(session)

    def test_create_and_lookup(self, service):
        created = service.create(CommunityInput(community_id="barrio-norte", name="Norte"))

        assert service.get_by_community_id("barrio-norte").id == created.id

    def test_create_rejects_duplicate_id(self, service, make_community):
        make_community("barrio-norte")

        with pytest.raises(DuplicateSlugError):
            service.create(CommunityInput(community_id="barrio-norte", name="Again"))

    def test_list_communities_by_scope(self, service, make_community):
        make_community("alpha", name="Alpha")
        make_community("bravo", name="Bravo", active=False)
        make_community("charlie", name="Charlie", visible=False)

        def ids(scope):
            return [c.community_id for c in service.list_communities(scope)]

        assert ids("all") == ["alpha", "bravo", "charlie"]
        assert ids("active") == ["alpha", "charlie"]
        assert ids("visible") == ["alpha", "bravo"]

        with pytest.raises(InvalidRequestError):
            service.list_communities("hidden")

    def test_create_race_on_community_id_is_reported_as_duplicate(
        self, service, make_community, monkeypatch
    ):
        make_community("barrio-norte")
        monkeypatch.setattr(
            CommunityRepository, "get_by_community_id", lambda self, community_id: None
        )

        with pytest.raises(DuplicateSlugError):
            service.create(CommunityInput(community_id="barrio-norte", name="Again"))

    def test_set_membership_toggles_visibility(self, service, session, make_community, make_store):
        make_community("barrio-norte")
        store = make_store()
        resolver = MembershipResolver(session)

        service.set_membership("barrio-norte", store.id)
        assert resolver.resolve_active_store_ids("barrio-norte") == {store.id}

        membership = service.set_membership("barrio-norte", store.id, status=False)
        assert membership.status is False
        assert resolver.resolve_active_store_ids("barrio-norte") == set()

    def test_set_membership_requires_known_records(self, service, make_community, make_store):
        make_community("barrio-norte")

        with pytest.raises(NotFoundError):
            service.set_membership("barrio-norte", "missing-store")
        with pytest.raises(NotFoundError):
            service.set_membership("nowhere", make_store().id)
