"""Domain Types — identifiers, enums and the request-scoped caller identity.

Invariants:
    - AccountId wraps str; records are keyed by opaque string ids
    - Collection names are the only valid first argument to RecordStore methods
    - AuthenticatedIdentity is immutable for the lifetime of a request
    - Fields listed in SECRET_ACCOUNT_FIELDS never appear in a response body

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost
    - str Enums: serialize to JSON and compare equal to their raw values
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", str)

# A stored record as returned by a RecordStore (document-shaped)
Record = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class Collection(str, Enum):
    """Record collections held by the store."""
    ACCOUNTS = "accounts"
    IMAGES = "images"


class ImageStatus(str, Enum):
    """Moderation state of an uploaded image."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AccountRole(str, Enum):
    """Account role, carried as the `role` claim of access tokens."""
    USER = "user"
    ADMIN = "admin"


SECRET_ACCOUNT_FIELDS: tuple[str, ...] = ("password",)

# Owner fields embedded into image records on expansion
IMAGE_OWNER_FIELDS: tuple[str, ...] = ("id", "email")


# ─── Request Context ─────────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Caller identity attached to a request by the auth dependency."""
    id: AccountId
    email: str
