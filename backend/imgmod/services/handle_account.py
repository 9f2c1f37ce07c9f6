"""Account Handlers — get_profile, delete_account for the authenticated caller.

Invariants:
    - get_profile performs no store access and returns the identity verbatim
    - delete_account issues exactly one delete_by_id with the caller's own id
    - Store failures propagate unchanged (no retry, no fallback response)
    - Deleting an already-absent account still reports success
"""

import logging

from imgmod.core.domain_types import AuthenticatedIdentity, Collection
from imgmod.core.repository_protocols import RecordStore

logger = logging.getLogger(__name__)

ACCOUNT_DELETED_MESSAGE = "User Deleted!"


async def get_profile(identity: AuthenticatedIdentity) -> dict:
    """Return the caller's identity under the `user` key."""
    return {"user": identity}


async def delete_account(
    identity: AuthenticatedIdentity, store: RecordStore,
) -> dict:
    """Delete the caller's own account record."""
    deleted = await store.delete_by_id(Collection.ACCOUNTS, identity.id)
    if deleted is None:
        logger.warning(
            "Account already absent on delete",
            extra={"account_id": identity.id},
        )
    else:
        logger.info("Account deleted", extra={"account_id": identity.id})
    return {"message": ACCOUNT_DELETED_MESSAGE}
