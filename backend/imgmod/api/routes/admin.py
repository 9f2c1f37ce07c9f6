"""Admin Routes — moderation queue and account listing.

Invariants:
    - Every route depends on require_admin (403 for non-admin tokens)
    - Store failures are not caught here; the global handler renders them
"""

from fastapi import APIRouter, Depends

from imgmod.core.repository_protocols import RecordStore
from imgmod.infrastructure.auth import require_admin
from imgmod.infrastructure.record_store import get_record_store
from imgmod.schemas.account import UsersResponse
from imgmod.schemas.image import PendingImagesResponse
from imgmod.services import handle_admin

router = APIRouter(
    prefix="/api/v1/admin", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/images/pending", response_model=PendingImagesResponse)
async def get_pending_images(store: RecordStore = Depends(get_record_store)):
    """List images awaiting moderation."""
    return await handle_admin.get_pending_images(store)


@router.get("/users", response_model=UsersResponse)
async def get_all_users(store: RecordStore = Depends(get_record_store)):
    """List all accounts (passwords excluded)."""
    return await handle_admin.get_all_users(store)
