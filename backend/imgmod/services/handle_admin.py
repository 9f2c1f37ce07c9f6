"""Admin Handlers — get_pending_images, get_all_users.

Invariants:
    - Each handler issues exactly one store call and returns its result unchanged
    - get_pending_images filters on status == "pending" and expands the owner
    - get_all_users always projects the password field away
    - A failing query raises; it never degrades into an empty list
"""

import logging

from imgmod.core.domain_types import (
    Collection, ImageStatus, IMAGE_OWNER_FIELDS, SECRET_ACCOUNT_FIELDS,
)
from imgmod.core.repository_protocols import RecordStore

logger = logging.getLogger(__name__)


async def get_pending_images(store: RecordStore) -> dict:
    """List images awaiting moderation, each with its owner's email."""
    images = await store.find_by_filter_expanded(
        Collection.IMAGES,
        {"status": ImageStatus.PENDING.value},
        relation="owner",
        fields=IMAGE_OWNER_FIELDS,
    )
    logger.debug(
        "Listed pending images",
        extra={"collection": Collection.IMAGES.value, "count": len(images)},
    )
    return {"images": images}


async def get_all_users(store: RecordStore) -> dict:
    """List every account without its password."""
    users = await store.find_all_projected(
        Collection.ACCOUNTS, exclude=SECRET_ACCOUNT_FIELDS,
    )
    logger.debug(
        "Listed accounts",
        extra={"collection": Collection.ACCOUNTS.value, "count": len(users)},
    )
    return {"users": users}
