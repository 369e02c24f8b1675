"""Tests for the SQLAlchemy category gateway."""

import time

import pytest
from sqlalchemy.orm import Session

from admin_catalog import models
from admin_catalog.application.common import SearchQuery
from admin_catalog.domain.category.entities.category import Category
from admin_catalog.domain.common.value_objects.ids import CategoryId
from admin_catalog.infrastructure.category.gateways.category_gateway import CategoryGateway


@pytest.fixture
def gateway(db_session: Session) -> CategoryGateway:
    return CategoryGateway(db_session)


def _seed(gateway: CategoryGateway, *names_and_descriptions: tuple[str, str]) -> list[Category]:
    return [
        gateway.create(Category.new_category(name, description, True))
        for name, description in names_and_descriptions
    ]


class TestCategoryGatewayWrites:
    """Test suite for create, update and delete."""

    def test_create_persists_every_field(self, gateway: CategoryGateway, db_session: Session) -> None:
        category = Category.new_category("Filmes", "A mais assistida", False)

        created = gateway.create(category)

        assert created == category
        row = db_session.get(models.Category, category.id.value)
        assert row is not None
        assert row.name == "Filmes"
        assert row.description == "A mais assistida"
        assert row.active is False
        assert row.deleted_at is not None

    def test_roundtrip_keeps_timestamps(self, gateway: CategoryGateway) -> None:
        category = Category.new_category("Filmes", None, False)
        gateway.create(category)

        found = gateway.find_by_id(category.id)

        assert found is not None
        assert found.created_at == category.created_at
        assert found.updated_at == category.updated_at
        assert found.deleted_at == category.deleted_at
        assert found.created_at.tzinfo is not None

    def test_update_persists_changes(self, gateway: CategoryGateway) -> None:
        category = gateway.create(Category.new_category("Film", None, True))
        time.sleep(0.001)

        gateway.update(category.clone().update("Filmes", "Nova", False))

        found = gateway.find_by_id(category.id)
        assert found is not None
        assert found.name == "Filmes"
        assert found.description == "Nova"
        assert found.active is False
        assert found.deleted_at is not None
        assert found.created_at == category.created_at
        assert found.updated_at > category.updated_at

    def test_delete_removes_row(self, gateway: CategoryGateway) -> None:
        category = gateway.create(Category.new_category("Filmes", None, True))

        gateway.delete_by_id(category.id)

        assert gateway.find_by_id(category.id) is None

    def test_delete_unknown_id_is_a_noop(self, gateway: CategoryGateway) -> None:
        gateway.delete_by_id(CategoryId("does-not-exist"))

    def test_find_unknown_id_returns_none(self, gateway: CategoryGateway) -> None:
        assert gateway.find_by_id(CategoryId("does-not-exist")) is None


class TestCategoryGatewayFindAll:
    """Test suite for search, sort and paging."""

    def test_empty_table(self, gateway: CategoryGateway) -> None:
        page = gateway.find_all(SearchQuery())

        assert page.total == 0
        assert page.items == []

    def test_pages_sorted_by_name(self, gateway: CategoryGateway) -> None:
        _seed(gateway, ("Filmes", ""), ("Documentarios", ""), ("Series", ""))

        first = gateway.find_all(SearchQuery(page=0, per_page=2))
        second = gateway.find_all(SearchQuery(page=1, per_page=2))

        assert first.total == 3
        assert [c.name for c in first.items] == ["Documentarios", "Filmes"]
        assert second.current_page == 1
        assert [c.name for c in second.items] == ["Series"]

    def test_search_matches_name_or_description_ignoring_case(
        self, gateway: CategoryGateway
    ) -> None:
        _seed(
            gateway,
            ("Filmes", "Longas"),
            ("Documentarios", "Os mais premiados"),
            ("Series", "Temporadas"),
        )

        by_name = gateway.find_all(SearchQuery(terms="doc"))
        by_description = gateway.find_all(SearchQuery(terms="PREMIADOS"))

        assert [c.name for c in by_name.items] == ["Documentarios"]
        assert by_name.total == 1
        assert [c.name for c in by_description.items] == ["Documentarios"]

    def test_blank_terms_do_not_filter(self, gateway: CategoryGateway) -> None:
        _seed(gateway, ("Filmes", ""), ("Series", ""))

        assert gateway.find_all(SearchQuery(terms="   ")).total == 2

    def test_sort_descending_by_description(self, gateway: CategoryGateway) -> None:
        _seed(gateway, ("Filmes", "b"), ("Series", "c"), ("Documentarios", "a"))

        page = gateway.find_all(SearchQuery(sort="description", direction="desc"))

        assert [c.description for c in page.items] == ["c", "b", "a"]

    def test_sort_by_creation_time(self, gateway: CategoryGateway) -> None:
        _seed(gateway, ("Series", ""))
        time.sleep(0.001)
        _seed(gateway, ("Filmes", ""))

        page = gateway.find_all(SearchQuery(sort="createdAt", direction="asc"))

        assert [c.name for c in page.items] == ["Series", "Filmes"]

    def test_unknown_sort_falls_back_to_name(self, gateway: CategoryGateway) -> None:
        _seed(gateway, ("Series", ""), ("Filmes", ""))

        page = gateway.find_all(SearchQuery(sort="id; drop table categories"))

        assert [c.name for c in page.items] == ["Filmes", "Series"]


class TestCategoryGatewayExistsByIds:
    def test_returns_only_existing_ids(self, gateway: CategoryGateway) -> None:
        filmes, series = _seed(gateway, ("Filmes", ""), ("Series", ""))

        existing = gateway.exists_by_ids([filmes.id, CategoryId("missing"), series.id])

        assert set(existing) == {filmes.id, series.id}

    def test_empty_input(self, gateway: CategoryGateway) -> None:
        assert gateway.exists_by_ids([]) == []
