"""Tests for the SQLAlchemy genre gateway."""

import time

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from admin_catalog import models
from admin_catalog.application.common import SearchQuery
from admin_catalog.domain.category.entities.category import Category
from admin_catalog.domain.common.value_objects.ids import CategoryId, GenreId
from admin_catalog.domain.genre.entities.genre import Genre
from admin_catalog.infrastructure.category.gateways.category_gateway import CategoryGateway
from admin_catalog.infrastructure.genre.gateways.genre_gateway import GenreGateway


@pytest.fixture
def gateway(db_session: Session) -> GenreGateway:
    return GenreGateway(db_session)


@pytest.fixture
def category_ids(db_session: Session) -> list[CategoryId]:
    categories = CategoryGateway(db_session)
    return [
        categories.create(Category.new_category(name, None, True)).id
        for name in ("Filmes", "Series", "Documentarios")
    ]


def _links(db_session: Session, genre_id: GenreId) -> list[str]:
    stmt = (
        select(models.GenreCategory.category_id)
        .where(models.GenreCategory.genre_id == genre_id.value)
        .order_by(models.GenreCategory.position)
    )
    return list(db_session.execute(stmt).scalars().all())


class TestGenreGatewayWrites:
    """Test suite for create, update and delete."""

    def test_create_with_categories(
        self, gateway: GenreGateway, db_session: Session, category_ids: list[CategoryId]
    ) -> None:
        genre = Genre.new_genre("Ação", True).add_categories(category_ids[:2])

        gateway.create(genre)

        found = gateway.find_by_id(genre.id)
        assert found is not None
        assert found.name == "Ação"
        assert found.categories == category_ids[:2]
        assert _links(db_session, genre.id) == [c.value for c in category_ids[:2]]

    def test_category_order_survives_round_trip(
        self, gateway: GenreGateway, db_session: Session, category_ids: list[CategoryId]
    ) -> None:
        reversed_ids = list(reversed(category_ids))
        genre = gateway.create(Genre.new_genre("Ação", True).add_categories(reversed_ids))
        db_session.expire_all()

        found = gateway.find_by_id(genre.id)

        assert found is not None
        assert found.categories == reversed_ids

    def test_repeated_category_is_stored_at_each_position(
        self, gateway: GenreGateway, db_session: Session, category_ids: list[CategoryId]
    ) -> None:
        genre = Genre.new_genre("Ação", True).add_categories(
            [category_ids[0], category_ids[1], category_ids[0]]
        )

        gateway.create(genre)
        db_session.expire_all()

        found = gateway.find_by_id(genre.id)
        assert found is not None
        assert found.categories == [category_ids[0], category_ids[1], category_ids[0]]
        assert _links(db_session, genre.id) == [
            category_ids[0].value,
            category_ids[1].value,
            category_ids[0].value,
        ]

    def test_update_replaces_category_links(
        self, gateway: GenreGateway, db_session: Session, category_ids: list[CategoryId]
    ) -> None:
        genre = gateway.create(Genre.new_genre("Ação", True).add_categories(category_ids[:2]))
        time.sleep(0.001)

        gateway.update(genre.clone().update("Drama", False, category_ids[1:]))

        found = gateway.find_by_id(genre.id)
        assert found is not None
        assert found.name == "Drama"
        assert found.active is False
        assert found.deleted_at is not None
        assert found.updated_at > genre.updated_at
        assert _links(db_session, genre.id) == [c.value for c in category_ids[1:]]

    def test_update_grows_and_shrinks_category_list(
        self, gateway: GenreGateway, db_session: Session, category_ids: list[CategoryId]
    ) -> None:
        first, second, third = category_ids
        genre = gateway.create(Genre.new_genre("Ação", True).add_categories([first]))

        gateway.update(genre.clone().update("Ação", True, [third, first, second]))
        assert _links(db_session, genre.id) == [third.value, first.value, second.value]

        gateway.update(genre.clone().update("Ação", True, [second]))
        assert _links(db_session, genre.id) == [second.value]

    def test_update_to_no_categories(
        self, gateway: GenreGateway, db_session: Session, category_ids: list[CategoryId]
    ) -> None:
        genre = gateway.create(Genre.new_genre("Ação", True).add_categories(category_ids))

        gateway.update(genre.clone().update("Ação", True, []))

        assert _links(db_session, genre.id) == []

    def test_delete_removes_genre_and_links(
        self, gateway: GenreGateway, db_session: Session, category_ids: list[CategoryId]
    ) -> None:
        genre = gateway.create(Genre.new_genre("Ação", True).add_categories(category_ids))

        gateway.delete_by_id(genre.id)

        assert gateway.find_by_id(genre.id) is None
        assert _links(db_session, genre.id) == []
        assert db_session.get(models.Category, category_ids[0].value) is not None

    def test_delete_unknown_id_is_a_noop(self, gateway: GenreGateway) -> None:
        gateway.delete_by_id(GenreId("does-not-exist"))


class TestGenreGatewayFindAll:
    def test_search_and_paging(self, gateway: GenreGateway) -> None:
        for name in ("Drama", "Ação", "Comédia", "Comédia romântica"):
            gateway.create(Genre.new_genre(name, True))

        page = gateway.find_all(SearchQuery(terms="com", page=0, per_page=1))

        assert page.total == 2
        assert [g.name for g in page.items] == ["Comédia"]

    def test_sort_descending(self, gateway: GenreGateway) -> None:
        for name in ("Drama", "Ação", "Terror"):
            gateway.create(Genre.new_genre(name, True))

        page = gateway.find_all(SearchQuery(direction="desc"))

        assert [g.name for g in page.items] == ["Terror", "Drama", "Ação"]
