"""Mapper for Genre ORM ↔ Domain conversion."""

from admin_catalog.domain.common.value_objects.ids import CategoryId, GenreId
from admin_catalog.domain.genre.entities.genre import Genre
from admin_catalog.infrastructure.common.timestamps import as_utc, as_utc_or_none
from admin_catalog.models import Genre as GenreORM
from admin_catalog.models import GenreCategory as GenreCategoryORM


class GenreMapper:
    """Mapper for Genre ORM ↔ Domain conversion, including category links."""

    def to_domain(self, orm_model: GenreORM) -> Genre:
        """Convert ORM model to domain entity."""
        return Genre.with_(
            id=GenreId(orm_model.id),
            name=orm_model.name,
            active=orm_model.active,
            categories=[CategoryId(link.category_id) for link in orm_model.categories],
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
            deleted_at=as_utc_or_none(orm_model.deleted_at),
        )

    def to_orm(self, domain_entity: Genre, orm_model: GenreORM | None = None) -> GenreORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.active = domain_entity.active
            orm_model.updated_at = domain_entity.updated_at
            orm_model.deleted_at = domain_entity.deleted_at
            orm_model.categories = self._links(domain_entity, orm_model.categories)
            return orm_model

        # Create new
        return GenreORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            active=domain_entity.active,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            deleted_at=domain_entity.deleted_at,
            categories=self._links(domain_entity, []),
        )

    def _links(
        self, domain_entity: Genre, existing: list[GenreCategoryORM]
    ) -> list[GenreCategoryORM]:
        """
        Build the association rows for a genre, one per list position.

        Existing rows are reused by position so an update rewrites category ids
        in place; rows past the end of the new list are left out and deleted
        as orphans.
        """
        links: list[GenreCategoryORM] = []
        for position, category_id in enumerate(domain_entity.categories):
            if position < len(existing):
                link = existing[position]
                link.category_id = category_id.value
            else:
                link = GenreCategoryORM(position=position, category_id=category_id.value)
            links.append(link)
        return links
