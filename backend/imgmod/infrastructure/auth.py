"""Authentication Context — bearer-token identity resolution as FastAPI dependencies.

Invariants:
    - Tokens are HS256 JWTs carrying sub (account id), email, role and exp
    - get_current_identity returns AuthenticatedIdentity(id, email) and nothing else
    - require_admin rejects any token whose role claim is not "admin"
    - Failures raise AuthenticationError (401) / AuthorizationError (403);
      the global ImgmodError handler renders them

Design Decisions:
    - Stateless check: identity comes from the token alone, the store is not consulted
    - Secret, algorithm and lifetime read from Settings on every call (lru_cached)
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Depends, Header

from imgmod.config import get_settings
from imgmod.core.domain_types import AccountId, AccountRole, AuthenticatedIdentity
from imgmod.core.errors import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "


def create_access_token(
    account_id: str,
    email: str,
    role: AccountRole = AccountRole.USER,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed access token for an account."""
    settings = get_settings()
    lifetime = expires_delta or timedelta(
        minutes=settings.access_token_expire_minutes,
    )
    now = datetime.now(timezone.utc)
    payload = {
        "sub": account_id,
        "email": email,
        "role": AccountRole(role).value,
        "iat": now,
        "exp": now + lifetime,
    }
    return jwt.encode(
        payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> dict:
    """Verify signature and expiry; return the claims."""
    settings = get_settings()
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Access token has expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected access token: {e}")
        raise AuthenticationError("Invalid access token")
    if not claims.get("email"):
        raise AuthenticationError("Access token carries no email claim")
    return claims


async def get_token_claims(
    authorization: str | None = Header(None),
) -> dict:
    """FastAPI dependency: decoded claims of the request's bearer token."""
    if not authorization:
        raise AuthenticationError("Missing Authorization header")
    if not authorization.startswith(_BEARER_PREFIX):
        raise AuthenticationError(
            "Invalid authorization header format. Expected 'Bearer <token>'",
        )
    return decode_access_token(authorization[len(_BEARER_PREFIX):].strip())


async def get_current_identity(
    claims: dict = Depends(get_token_claims),
) -> AuthenticatedIdentity:
    """FastAPI dependency: the authenticated caller."""
    return AuthenticatedIdentity(
        id=AccountId(str(claims["sub"])), email=claims["email"],
    )


async def require_admin(
    claims: dict = Depends(get_token_claims),
) -> AuthenticatedIdentity:
    """FastAPI dependency: the caller, provided it holds the admin role."""
    if claims.get("role") != AccountRole.ADMIN.value:
        logger.warning(
            "Non-admin caller refused", extra={"account_id": claims["sub"]},
        )
        raise AuthorizationError(AccountRole.ADMIN.value)
    return AuthenticatedIdentity(
        id=AccountId(str(claims["sub"])), email=claims["email"],
    )
