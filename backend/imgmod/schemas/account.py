"""Account Schemas — response contracts for profile, listing and deletion.

Invariants:
    - No schema here declares a password field; response_model filtering
      drops it even if a record were to carry one
"""

from datetime import datetime

from pydantic import BaseModel


class IdentityOut(BaseModel):
    """The caller as resolved from the access token."""
    id: str
    email: str


class AccountOut(BaseModel):
    """Public view of an account record."""
    id: str
    email: str
    role: str
    created_at: datetime | None = None


class ProfileResponse(BaseModel):
    user: IdentityOut


class UsersResponse(BaseModel):
    users: list[AccountOut]


class MessageResponse(BaseModel):
    message: str
