from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest
from dependency_injector import providers
from sqlalchemy.orm import Session

from admin_catalog.application.category.use_cases import ListCategoriesUseCase
from admin_catalog.application.genre.use_cases import CreateGenreUseCase
from admin_catalog.core import container
from admin_catalog.infrastructure.common.di import inject_use_case


def _session() -> MagicMock:
    return MagicMock(spec=Session)


def test_use_case_gets_the_request_session() -> None:
    dependency = inject_use_case(container.list_categories_use_case)
    session = _session()

    use_case = dependency(session)

    assert isinstance(use_case, ListCategoriesUseCase)
    assert use_case.category_gateway.db is session


def test_gateways_of_one_request_share_its_session() -> None:
    dependency = inject_use_case(container.create_genre_use_case)
    session = _session()

    use_case = dependency(session)

    assert isinstance(use_case, CreateGenreUseCase)
    assert use_case.category_gateway.db is session
    assert use_case.genre_gateway.db is session


def test_sequential_requests_keep_their_own_sessions() -> None:
    dependency = inject_use_case(container.list_categories_use_case)
    first, second = _session(), _session()

    first_use_case = dependency(first)
    second_use_case = dependency(second)

    assert first_use_case.category_gateway.db is first
    assert second_use_case.category_gateway.db is second


def test_concurrent_requests_keep_their_own_sessions() -> None:
    dependency = inject_use_case(container.create_genre_use_case)
    sessions = [_session() for _ in range(200)]

    def resolve(session: MagicMock) -> tuple[MagicMock, Session, Session]:
        use_case = dependency(session)
        return session, use_case.category_gateway.db, use_case.genre_gateway.db

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(resolve, sessions))

    for session, category_db, genre_db in results:
        assert category_db is session
        assert genre_db is session


def test_shared_container_is_never_overridden() -> None:
    dependency = inject_use_case(container.get_genre_by_id_use_case)

    dependency(_session())

    assert container.db.overridden == ()


def test_unregistered_provider_is_rejected() -> None:
    with pytest.raises(ValueError, match="not registered"):
        inject_use_case(providers.Factory(ListCategoriesUseCase))
