"""
Authentication endpoints.

- POST /token: exchange username/password for a JWT
- POST /register: create a (non-admin) user and return a JWT
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import create_token
from app.crud import user as user_crud
from app.schemas.user import TokenResponse, UserLoginRequest, UserRegisterRequest

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
def login(
    request: UserLoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate and receive a JWT usable for further requests.
    """
    user = user_crud.authenticate(db, request.username, request.password)
    logger.info(f"Issued token for {user.username}")
    return TokenResponse(token=create_token(user.username, user.is_admin))


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account and return a JWT for immediate use.

    Self-registered users are never admins.
    """
    new_user = user_crud.register(db, request)
    logger.info(f"New user registered: {new_user.username}")
    return TokenResponse(token=create_token(new_user.username, new_user.is_admin))
