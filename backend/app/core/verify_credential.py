"""Credential Verification — decodes a bearer JWT into an AuthenticatedUser.

Invariants:
    - Pure: no IO, no logging, no request access
    - Signature and exp are always checked; a token without exp is rejected
    - Any failure raises InvalidCredentialError carrying the underlying reason
    - The id claim must be an integer (booleans rejected)
"""

import jwt

from app.core.domain_types import AuthenticatedUser, UserId
from app.core.errors import InvalidCredentialError

REQUIRED_CLAIMS = ["exp", "id"]


def decode_identity(
    token: str,
    secret: str,
    algorithm: str = "HS256",
    leeway_seconds: int = 0,
) -> AuthenticatedUser:
    """Verify token and return the identity it carries."""
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            leeway=leeway_seconds,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.PyJWTError as e:
        raise InvalidCredentialError(f"{type(e).__name__}: {e}") from e

    return _identity_from_claims(claims)


def _identity_from_claims(claims: dict) -> AuthenticatedUser:
    user_id = claims.get("id")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise InvalidCredentialError(
            f"id claim must be an integer, got {type(user_id).__name__}",
        )
    username = claims.get("username")
    if username is not None and not isinstance(username, str):
        username = str(username)
    return AuthenticatedUser(user_id=UserId(user_id), username=username)
