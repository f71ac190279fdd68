"""
FastAPI dependencies for authentication and authorization.

Authentication is stateless: the token payload is trusted once its signature
and expiry check out, no database lookup is made.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import decode_token

logger = logging.getLogger(__name__)

# Missing credentials are not an error at this level
security = HTTPBearer(auto_error=False)


def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[dict]:
    """
    Return the verified JWT payload, or None.

    A missing or invalid token is not an error here; routes that need a
    user depend on get_current_user / get_admin_user instead.
    """
    if not credentials:
        return None

    try:
        return decode_token(credentials.credentials)
    except JWTError as e:
        logger.info(f"Ignoring invalid token: {e}")
        return None


def get_current_user(payload: Optional[dict] = Depends(get_token_payload)) -> dict:
    """
    Require a logged-in user.

    Raises:
        UnauthorizedError: If no valid token was presented
    """
    if not payload or not payload.get("username"):
        raise UnauthorizedError()
    return payload


def get_admin_user(user: dict = Depends(get_current_user)) -> dict:
    """
    Require a logged-in admin.

    Raises:
        UnauthorizedError: If no valid token was presented
        ForbiddenError: If the user is not an admin
    """
    if user.get("isAdmin") is not True:
        raise ForbiddenError()
    return user
