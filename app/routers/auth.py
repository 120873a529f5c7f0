from typing import Annotated
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from app.database.database import get_session
from app.core.security import (
    authenticate_user,
    create_access_token,
    create_refresh_token,
    decode_token,
)
from app.exceptions import InvalidCredentialsError, InvalidTokenError
from app.models.token import Token, TokenRefreshRequest
from app.services import user as user_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    session: Annotated[Session, Depends(get_session)],
) -> Token:
    """
    Exchange a username and password for an access and a refresh token.

    Raises:
        `401 InvalidCredentialsError`: If the username or password is wrong.
    """
    user = authenticate_user(session, form_data.username, form_data.password)
    if not user:
        raise InvalidCredentialsError()

    return Token(
        access_token=create_access_token(data={"sub": user.username}),
        refresh_token=create_refresh_token(data={"sub": user.username}),
        token_type="bearer",
    )


# TODO rate limit on refresh token to prevent bruteforce
@router.post("/refresh", response_model=Token)
def refresh_token(
    request_data: TokenRefreshRequest,
    session: Annotated[Session, Depends(get_session)],
) -> Token:
    """
    Issue a new access token from a refresh token.

    Expects JSON: {"refresh_token": "..."}. The refresh token is returned
    unchanged.

    Raises:
        `401 InvalidTokenError`: If the token is invalid, expired, not a refresh
            token, or its user no longer exists.
    """
    payload = decode_token(request_data.refresh_token, "refresh")
    username = payload["sub"]
    if not user_service.get_user_by_username(session, username):
        raise InvalidTokenError()

    return Token(
        access_token=create_access_token(data={"sub": username}),
        refresh_token=request_data.refresh_token,
        token_type="bearer",
    )
