from fastapi import APIRouter, Depends, Query, Request, Response
from starlette import status

from admin_catalog.application.common.pagination import MAX_PER_PAGE, SearchQuery
from admin_catalog.application.genre.use_cases import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)
from admin_catalog.application.genre.use_cases.dtos import (
    CreateGenreCommand,
    GenreListOutput,
    GenreOutput,
    UpdateGenreCommand,
)
from admin_catalog.core import container
from admin_catalog.infrastructure.common.di import inject_use_case
from admin_catalog.infrastructure.common.schemas import ERROR_RESPONSES, PaginatedResponse
from admin_catalog.infrastructure.genre.schemas import (
    CreateGenreRequest,
    GenreIdResponse,
    GenreListResponse,
    GenreResponse,
    UpdateGenreRequest,
)

router = APIRouter(prefix="/genres", tags=["genres"])


def _to_genre_response(output: GenreOutput) -> GenreResponse:
    return GenreResponse(
        id=output.id,
        name=output.name,
        is_active=output.is_active,
        categories_id=output.categories,
        created_at=output.created_at,
        updated_at=output.updated_at,
        deleted_at=output.deleted_at,
    )


def _to_genre_list_response(output: GenreListOutput) -> GenreListResponse:
    return GenreListResponse(
        id=output.id,
        name=output.name,
        is_active=output.is_active,
        categories_id=output.categories,
        created_at=output.created_at,
        deleted_at=output.deleted_at,
    )


@router.post(
    "",
    response_model=GenreIdResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_genre(
    request: CreateGenreRequest,
    http_request: Request,
    response: Response,
    use_case: CreateGenreUseCase = Depends(inject_use_case(container.create_genre_use_case)),
) -> GenreIdResponse:
    """
    Create a genre linked to existing categories.

    Raises:
        NotificationError: If categories are missing or the name breaks a rule (422)
    """
    output = use_case.execute(
        CreateGenreCommand(
            name=request.name,
            is_active=request.is_active,
            categories=request.categories_id,
        )
    )
    response.headers["Location"] = str(http_request.url_for("get_genre", genre_id=output.id))
    return GenreIdResponse(id=output.id)


@router.get("", response_model=PaginatedResponse[GenreListResponse])
def list_genres(
    use_case: ListGenresUseCase = Depends(inject_use_case(container.list_genres_use_case)),
    search: str = Query("", description="Text matched against the name"),
    page: int = Query(0, ge=0, description="Page number, starting at 0"),
    per_page: int = Query(10, ge=1, le=MAX_PER_PAGE, alias="perPage"),
    sort: str = Query("name", description="Field to sort by"),
    direction: str = Query("asc", alias="dir", description="asc or desc"),
) -> PaginatedResponse[GenreListResponse]:
    result = use_case.execute(
        SearchQuery(page=page, per_page=per_page, terms=search, sort=sort, direction=direction)
    )
    return PaginatedResponse[GenreListResponse](
        current_page=result.current_page,
        per_page=result.per_page,
        total=result.total,
        items=[_to_genre_list_response(item) for item in result.items],
    )


@router.get("/{genre_id}", response_model=GenreResponse, responses=ERROR_RESPONSES)
def get_genre(
    genre_id: str,
    use_case: GetGenreByIdUseCase = Depends(inject_use_case(container.get_genre_by_id_use_case)),
) -> GenreResponse:
    return _to_genre_response(use_case.execute(genre_id))


@router.put("/{genre_id}", response_model=GenreIdResponse, responses=ERROR_RESPONSES)
def update_genre(
    genre_id: str,
    request: UpdateGenreRequest,
    use_case: UpdateGenreUseCase = Depends(inject_use_case(container.update_genre_use_case)),
) -> GenreIdResponse:
    output = use_case.execute(
        UpdateGenreCommand(
            id=genre_id,
            name=request.name,
            is_active=request.is_active,
            categories=request.categories_id,
        )
    )
    return GenreIdResponse(id=output.id)


@router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_genre(
    genre_id: str,
    use_case: DeleteGenreUseCase = Depends(inject_use_case(container.delete_genre_use_case)),
) -> Response:
    use_case.execute(genre_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
