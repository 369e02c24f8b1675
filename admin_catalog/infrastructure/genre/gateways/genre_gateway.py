"""SQLAlchemy gateway for the Genre aggregate."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from admin_catalog.application.common.pagination import Pagination, SearchQuery
from admin_catalog.domain.common.value_objects.ids import GenreId
from admin_catalog.domain.genre.entities.genre import Genre
from admin_catalog.infrastructure.genre.mappers.genre_mapper import GenreMapper
from admin_catalog.models import Genre as GenreORM

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    "name": GenreORM.name,
    "created_at": GenreORM.created_at,
    "createdAt": GenreORM.created_at,
    "updated_at": GenreORM.updated_at,
    "updatedAt": GenreORM.updated_at,
}


class GenreGateway:
    """Stores genres in `genres` and their category links in `genres_categories`."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GenreMapper()

    def create(self, genre: Genre) -> Genre:
        orm_model = self.mapper.to_orm(genre)
        self.db.add(orm_model)
        return self._commit(orm_model)

    def update(self, genre: Genre) -> Genre:
        orm_model = self.db.get(GenreORM, genre.id.value)
        orm_model = self.mapper.to_orm(genre, orm_model)
        self.db.add(orm_model)
        return self._commit(orm_model)

    def _commit(self, orm_model: GenreORM) -> Genre:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to save genre {orm_model.id}")
            raise
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete_by_id(self, genre_id: GenreId) -> None:
        """Delete a genre; its category links go with it."""
        orm_model = self.db.get(GenreORM, genre_id.value)
        if orm_model is None:
            return

        self.db.delete(orm_model)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def find_by_id(self, genre_id: GenreId) -> Genre | None:
        orm_model = self.db.get(GenreORM, genre_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self, query: SearchQuery) -> Pagination[Genre]:
        filters = []
        terms = query.terms.strip()
        if terms:
            filters.append(GenreORM.name.ilike(f"%{terms}%"))

        total_stmt = select(func.count(GenreORM.id)).where(*filters)
        total = self.db.execute(total_stmt).scalar() or 0

        column = SORTABLE_COLUMNS.get(query.sort.strip(), GenreORM.name)
        order = column.desc() if query.is_descending else column.asc()
        stmt = (
            select(GenreORM)
            .where(*filters)
            .order_by(order, GenreORM.id)
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
