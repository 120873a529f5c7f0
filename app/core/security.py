from typing import Literal
from datetime import datetime, timedelta, timezone

import jwt
from jwt.exceptions import PyJWTError, ExpiredSignatureError
from sqlmodel import Session, select

from app.core.config import get_settings
from app.core.password import verify_password, DUMMY_HASH
from app.exceptions import AppException, InvalidTokenError, TokenExpiredError
from app.models.user import User
from app.models.admin import Admin

TokenType = Literal["access", "refresh"]


def authenticate_user(session: Session, username: str, password: str) -> User | None:
    """
    Authenticate a user by username and password.

    A dummy hash is verified when the username is unknown so response time
    does not reveal which usernames exist.

    Returns:
        User if authentication succeeds, `None` otherwise.
    """
    user = session.exec(select(User).where(User.username == username)).first()
    hash_to_verify = user.hashed_password if user else DUMMY_HASH
    if verify_password(password, hash_to_verify) and user:
        return user
    return None


def authenticate_admin(session: Session, username: str, password: str) -> Admin | None:
    """
    Authenticate an admin by username and password.

    Returns:
        Admin: The matching Admin if credentials are valid, `None` otherwise.
    """
    admin = session.exec(select(Admin).where(Admin.username == username)).first()
    hash_to_verify = admin.hashed_password if admin else DUMMY_HASH
    if verify_password(password, hash_to_verify) and admin:
        return admin
    return None


def create_token(data: dict, expires_delta: timedelta, type: TokenType) -> str:
    """
    Encode a JWT with the given claims, expiration and token type.

    Parameters:
        data (dict): Claims to include (typically `sub`, optionally `mode`).
        expires_delta (timedelta): Lifetime of the token from now.
        type ("access" | "refresh"): Stored in the `type` claim.

    Returns:
        str: The encoded token.

    Raises:
        AppException: If the token cannot be encoded.
    """
    settings = get_settings()
    to_encode = data.copy()
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta, "type": type})
    try:
        return jwt.encode(
            to_encode,
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )
    except PyJWTError as e:
        raise AppException("Could not generate authentication token.") from e


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """
    Create an access token; lifetime defaults to ACCESS_TOKEN_EXPIRE_MINUTES.
    """
    expires_delta = expires_delta or timedelta(
        minutes=get_settings().ACCESS_TOKEN_EXPIRE_MINUTES
    )
    return create_token(data, expires_delta=expires_delta, type="access")


def create_refresh_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """
    Create a refresh token; lifetime defaults to REFRESH_TOKEN_EXPIRE_DAYS.
    """
    expires_delta = expires_delta or timedelta(
        days=get_settings().REFRESH_TOKEN_EXPIRE_DAYS
    )
    return create_token(data, expires_delta=expires_delta, type="refresh")


def decode_token(token: str, expected_type: TokenType) -> dict:
    """
    Decode and check a JWT.

    Parameters:
        token (str): Encoded JWT.
        expected_type ("access" | "refresh"): Required value of the `type` claim.

    Returns:
        dict: The token payload; `sub` is guaranteed to be present.

    Raises:
        TokenExpiredError: If the token is expired.
        InvalidTokenError: If the token is malformed, badly signed, of the wrong type, or lacks a subject.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredError(expected_type) from e
    except PyJWTError as e:
        raise InvalidTokenError() from e

    if payload.get("sub") is None or payload.get("type") != expected_type:
        raise InvalidTokenError()
    return payload
