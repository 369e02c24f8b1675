"""Mapper for Category ORM ↔ Domain conversion."""

from admin_catalog.domain.category.entities.category import Category
from admin_catalog.domain.common.value_objects.ids import CategoryId
from admin_catalog.infrastructure.common.timestamps import as_utc, as_utc_or_none
from admin_catalog.models import Category as CategoryORM


class CategoryMapper:
    """Mapper for Category ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CategoryORM) -> Category:
        """Convert ORM model to domain entity."""
        return Category.with_(
            id=CategoryId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description,
            active=orm_model.active,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
            deleted_at=as_utc_or_none(orm_model.deleted_at),
        )

    def to_orm(self, domain_entity: Category, orm_model: CategoryORM | None = None) -> CategoryORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            orm_model.active = domain_entity.active
            orm_model.updated_at = domain_entity.updated_at
            orm_model.deleted_at = domain_entity.deleted_at
            return orm_model

        # Create new
        return CategoryORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            description=domain_entity.description,
            active=domain_entity.active,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            deleted_at=domain_entity.deleted_at,
        )
