"""Account Routes — the authenticated caller's own profile and account deletion.

Invariants:
    - Both routes require a valid bearer token (get_current_identity)
    - Routes only wire dependencies into services/handle_account
"""

from fastapi import APIRouter, Depends

from imgmod.core.domain_types import AuthenticatedIdentity
from imgmod.core.repository_protocols import RecordStore
from imgmod.infrastructure.auth import get_current_identity
from imgmod.infrastructure.record_store import get_record_store
from imgmod.schemas.account import MessageResponse, ProfileResponse
from imgmod.services import handle_account

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/me", response_model=ProfileResponse)
async def get_profile(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
):
    """Return the caller's identity."""
    return await handle_account.get_profile(identity)


@router.delete("/me", response_model=MessageResponse)
async def delete_account(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store),
):
    """Delete the caller's account."""
    return await handle_account.delete_account(identity, store)
