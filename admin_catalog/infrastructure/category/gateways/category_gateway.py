"""SQLAlchemy gateway for the Category aggregate."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from admin_catalog.application.common.pagination import Pagination, SearchQuery
from admin_catalog.domain.category.entities.category import Category
from admin_catalog.domain.common.value_objects.ids import CategoryId
from admin_catalog.infrastructure.category.mappers.category_mapper import CategoryMapper
from admin_catalog.models import Category as CategoryORM

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    "name": CategoryORM.name,
    "description": CategoryORM.description,
    "created_at": CategoryORM.created_at,
    "createdAt": CategoryORM.created_at,
    "updated_at": CategoryORM.updated_at,
    "updatedAt": CategoryORM.updated_at,
}


class CategoryGateway:
    """Stores categories in the `categories` table."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CategoryMapper()

    def create(self, category: Category) -> Category:
        orm_model = self.mapper.to_orm(category)
        self.db.add(orm_model)
        return self._commit(orm_model)

    def update(self, category: Category) -> Category:
        orm_model = self.db.get(CategoryORM, category.id.value)
        orm_model = self.mapper.to_orm(category, orm_model)
        self.db.add(orm_model)
        return self._commit(orm_model)

    def _commit(self, orm_model: CategoryORM) -> Category:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to save category {orm_model.id}")
            raise
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete_by_id(self, category_id: CategoryId) -> None:
        orm_model = self.db.get(CategoryORM, category_id.value)
        if orm_model is None:
            return

        self.db.delete(orm_model)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        orm_model = self.db.get(CategoryORM, category_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self, query: SearchQuery) -> Pagination[Category]:
        """
        Search categories by name or description.

        Matching is case-insensitive and partial. Unknown sort fields fall back
        to the name; the id breaks ties so pages never overlap.
        """
        filters = []
        terms = query.terms.strip()
        if terms:
            search_pattern = f"%{terms}%"
            filters.append(
                CategoryORM.name.ilike(search_pattern)
                | CategoryORM.description.ilike(search_pattern)
            )

        total_stmt = select(func.count(CategoryORM.id)).where(*filters)
        total = self.db.execute(total_stmt).scalar() or 0

        column = SORTABLE_COLUMNS.get(query.sort.strip(), CategoryORM.name)
        order = column.desc() if query.is_descending else column.asc()
        stmt = (
            select(CategoryORM)
            .where(*filters)
            .order_by(order, CategoryORM.id)
            .offset(query.offset)
            .limit(query.per_page)
        )
        orm_models = self.db.execute(stmt).scalars().all()

        return Pagination(
            current_page=query.page,
            per_page=query.per_page,
            total=total,
            items=[self.mapper.to_domain(orm) for orm in orm_models],
        )

    def exists_by_ids(self, category_ids: list[CategoryId]) -> list[CategoryId]:
        if not category_ids:
            return []

        stmt = select(CategoryORM.id).where(
            CategoryORM.id.in_({category_id.value for category_id in category_ids})
        )
        return [CategoryId(value) for value in self.db.execute(stmt).scalars().all()]
