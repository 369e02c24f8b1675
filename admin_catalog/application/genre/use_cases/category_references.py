"""Checks that the categories referenced by a genre exist."""

from admin_catalog.application.category.protocols.category_gateway import (
    CategoryGatewayProtocol,
)
from admin_catalog.domain.common.error import Error
from admin_catalog.domain.common.validation import Notification
from admin_catalog.domain.common.value_objects.ids import CategoryId


def to_category_ids(values: list[str] | None) -> list[CategoryId]:
    return [CategoryId(value) for value in values or []]


def validate_category_references(
    category_gateway: CategoryGatewayProtocol, category_ids: list[CategoryId]
) -> Notification:
    """
    Report the referenced categories that are not stored.

    All missing ids are listed in a single error, in the order they were
    given.

    Returns:
        Empty notification when every id exists
    """
    notification = Notification.create()
    if not category_ids:
        return notification

    existing = set(category_gateway.exists_by_ids(category_ids))
    missing = [category_id.value for category_id in category_ids if category_id not in existing]
    if missing:
        notification.append(
            Error(f"Some categories could not be found: {', '.join(missing)}")
        )
    return notification
