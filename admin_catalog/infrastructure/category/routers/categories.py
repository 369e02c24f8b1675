from fastapi import APIRouter, Depends, Query, Request, Response
from starlette import status

from admin_catalog.application.category.use_cases import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryByIdUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from admin_catalog.application.category.use_cases.dtos import (
    CreateCategoryCommand,
    UpdateCategoryCommand,
)
from admin_catalog.application.common.pagination import MAX_PER_PAGE, SearchQuery
from admin_catalog.core import container
from admin_catalog.domain.common.exceptions import NotificationError
from admin_catalog.infrastructure.category.schemas import (
    CategoryIdResponse,
    CategoryListResponse,
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from admin_catalog.infrastructure.common.di import inject_use_case
from admin_catalog.infrastructure.common.schemas import ERROR_RESPONSES, PaginatedResponse

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post(
    "",
    response_model=CategoryIdResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_category(
    request: CreateCategoryRequest,
    http_request: Request,
    response: Response,
    use_case: CreateCategoryUseCase = Depends(inject_use_case(container.create_category_use_case)),
) -> CategoryIdResponse:
    """
    Create a category.

    Raises:
        NotificationError: If the name breaks any rule (422)
    """
    output = use_case.execute(
        CreateCategoryCommand(
            name=request.name,
            description=request.description,
            is_active=request.is_active,
        )
    )
    response.headers["Location"] = str(
        http_request.url_for("get_category", category_id=output.id)
    )
    return CategoryIdResponse(id=output.id)


@router.get("", response_model=PaginatedResponse[CategoryListResponse])
def list_categories(
    use_case: ListCategoriesUseCase = Depends(inject_use_case(container.list_categories_use_case)),
    search: str = Query("", description="Text matched against name and description"),
    page: int = Query(0, ge=0, description="Page number, starting at 0"),
    per_page: int = Query(10, ge=1, le=MAX_PER_PAGE, alias="perPage"),
    sort: str = Query("name", description="Field to sort by"),
    direction: str = Query("asc", alias="dir", description="asc or desc"),
) -> PaginatedResponse[CategoryListResponse]:
    result = use_case.execute(
        SearchQuery(page=page, per_page=per_page, terms=search, sort=sort, direction=direction)
    )
    return PaginatedResponse[CategoryListResponse](
        current_page=result.current_page,
        per_page=result.per_page,
        total=result.total,
        items=[CategoryListResponse.model_validate(item) for item in result.items],
    )


@router.get("/{category_id}", response_model=CategoryResponse, responses=ERROR_RESPONSES)
def get_category(
    category_id: str,
    use_case: GetCategoryByIdUseCase = Depends(
        inject_use_case(container.get_category_by_id_use_case)
    ),
) -> CategoryResponse:
    return CategoryResponse.model_validate(use_case.execute(category_id))


@router.put("/{category_id}", response_model=CategoryIdResponse, responses=ERROR_RESPONSES)
def update_category(
    category_id: str,
    request: UpdateCategoryRequest,
    use_case: UpdateCategoryUseCase = Depends(inject_use_case(container.update_category_use_case)),
) -> CategoryIdResponse:
    """
    Replace name, description and active state of a category.

    A Failure from the use case is answered with 422 and every error it holds.
    """
    result = use_case.execute(
        UpdateCategoryCommand(
            id=category_id,
            name=request.name,
            description=request.description,
            is_active=request.is_active,
        )
    )
    if result.is_failure:
        raise NotificationError("Could not update Aggregate Category", result.unwrap_error())

    return CategoryIdResponse(id=result.unwrap().id)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: str,
    use_case: DeleteCategoryUseCase = Depends(inject_use_case(container.delete_category_use_case)),
) -> Response:
    use_case.execute(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
