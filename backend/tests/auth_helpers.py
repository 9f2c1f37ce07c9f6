"""Auth helpers for tests — bearer headers minted with the app's own secret."""

from imgmod.core.domain_types import AccountRole
from imgmod.infrastructure.auth import create_access_token


def auth_header(
    account_id: str, email: str, role: AccountRole = AccountRole.USER,
) -> dict:
    token = create_access_token(account_id, email, role)
    return {"Authorization": f"Bearer {token}"}
