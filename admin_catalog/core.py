from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from admin_catalog.application.category.use_cases import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryByIdUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from admin_catalog.application.genre.use_cases import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)
from admin_catalog.infrastructure.category.gateways.category_gateway import CategoryGateway
from admin_catalog.infrastructure.genre.gateways.genre_gateway import GenreGateway


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Gateways
    category_gateway = providers.Factory(CategoryGateway, db=db)
    genre_gateway = providers.Factory(GenreGateway, db=db)

    # Category use cases
    create_category_use_case = providers.Factory(
        CreateCategoryUseCase,
        category_gateway=category_gateway,
    )
    update_category_use_case = providers.Factory(
        UpdateCategoryUseCase,
        category_gateway=category_gateway,
    )
    get_category_by_id_use_case = providers.Factory(
        GetCategoryByIdUseCase,
        category_gateway=category_gateway,
    )
    delete_category_use_case = providers.Factory(
        DeleteCategoryUseCase,
        category_gateway=category_gateway,
    )
    list_categories_use_case = providers.Factory(
        ListCategoriesUseCase,
        category_gateway=category_gateway,
    )

    # Genre use cases
    create_genre_use_case = providers.Factory(
        CreateGenreUseCase,
        category_gateway=category_gateway,
        genre_gateway=genre_gateway,
    )
    update_genre_use_case = providers.Factory(
        UpdateGenreUseCase,
        category_gateway=category_gateway,
        genre_gateway=genre_gateway,
    )
    get_genre_by_id_use_case = providers.Factory(
        GetGenreByIdUseCase,
        genre_gateway=genre_gateway,
    )
    delete_genre_use_case = providers.Factory(
        DeleteGenreUseCase,
        genre_gateway=genre_gateway,
    )
    list_genres_use_case = providers.Factory(
        ListGenresUseCase,
        genre_gateway=genre_gateway,
    )


container = Container()
