"""Authentication Context — token issue/verify and identity dependencies.

Tests cover:
    - create/decode round trip keeps sub, email, role
    - expired, forged and malformed tokens raise AuthenticationError
    - header parsing rejects missing or non-Bearer values
    - require_admin refuses non-admin roles with AuthorizationError
"""

from datetime import timedelta

import jwt
import pytest

from imgmod.config import get_settings
from imgmod.core.domain_types import AccountRole, AuthenticatedIdentity
from imgmod.core.errors import AuthenticationError, AuthorizationError
from imgmod.infrastructure.auth import (
    create_access_token, decode_access_token, get_current_identity,
    get_token_claims, require_admin,
)


def test_token_round_trip_keeps_claims():
    token = create_access_token("123", "test@example.com", AccountRole.ADMIN)

    claims = decode_access_token(token)

    assert claims["sub"] == "123"
    assert claims["email"] == "test@example.com"
    assert claims["role"] == "admin"


def test_expired_token_rejected():
    token = create_access_token(
        "123", "test@example.com", expires_delta=timedelta(seconds=-1),
    )

    with pytest.raises(AuthenticationError, match="expired"):
        decode_access_token(token)


def test_token_signed_with_other_secret_rejected():
    forged = jwt.encode(
        {"sub": "123", "email": "test@example.com", "exp": 9999999999},
        "some-other-secret", algorithm="HS256",
    )

    with pytest.raises(AuthenticationError, match="Invalid access token"):
        decode_access_token(forged)


def test_token_without_email_rejected():
    settings = get_settings()
    token = jwt.encode(
        {"sub": "123", "exp": 9999999999},
        settings.jwt_secret_key, algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(AuthenticationError, match="email"):
        decode_access_token(token)


async def test_missing_header_rejected():
    with pytest.raises(AuthenticationError, match="Missing"):
        await get_token_claims(None)


async def test_non_bearer_header_rejected():
    with pytest.raises(AuthenticationError, match="Bearer"):
        await get_token_claims("Basic dXNlcjpwYXNz")


async def test_garbage_bearer_token_rejected():
    with pytest.raises(AuthenticationError):
        await get_token_claims("Bearer not-a-jwt")


async def test_current_identity_has_only_id_and_email():
    token = create_access_token("123", "test@example.com", AccountRole.ADMIN)
    claims = await get_token_claims(f"Bearer {token}")

    identity = await get_current_identity(claims)

    assert identity == AuthenticatedIdentity(id="123", email="test@example.com")


async def test_require_admin_accepts_admin():
    token = create_access_token("a1", "admin@example.com", AccountRole.ADMIN)
    claims = await get_token_claims(f"Bearer {token}")

    identity = await require_admin(claims)

    assert identity.id == "a1"


async def test_require_admin_refuses_user():
    token = create_access_token("u1", "user@example.com", AccountRole.USER)
    claims = await get_token_claims(f"Bearer {token}")

    with pytest.raises(AuthorizationError):
        await require_admin(claims)
