"""Authentication Gate — FastAPI dependency that turns a bearer token into an identity.

Invariants:
    - No Authorization header, a non-Bearer scheme, or an empty token → MissingCredentialError (401)
    - Verification failure → InvalidCredentialError (403); the reason is logged, never returned
    - The secret is read from the immutable Settings on app.state
    - Nothing is written to request state; the identity is returned to the caller

Design Decisions:
    - HTTPBearer(auto_error=False): we raise our own errors to keep the {"error": ...}
      envelope, while OpenAPI still advertises the bearer scheme
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import Settings
from app.core.domain_types import AuthenticatedUser
from app.core.errors import InvalidCredentialError, MissingCredentialError
from app.core.verify_credential import decode_identity

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the Settings the app was built with."""
    return request.app.state.settings


def require_identity(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthenticatedUser:
    """Verify the bearer token and return the identity it carries."""
    if credentials is None or not credentials.credentials:
        raise MissingCredentialError()

    try:
        return decode_identity(
            credentials.credentials,
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            leeway_seconds=settings.jwt_leeway_seconds,
        )
    except InvalidCredentialError as e:
        logger.warning(
            f"Token verification failed: {e.reason}",
            extra={"path": request.url.path, "error_code": e.code},
        )
        raise


CurrentUser = Annotated[AuthenticatedUser, Depends(require_identity)]
