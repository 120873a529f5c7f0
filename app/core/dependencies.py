from typing import Annotated
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session, select

from app.core.security import decode_token
from app.database.database import get_session
from app.exceptions import InvalidTokenError, NotFoundError
from app.models.user import User
from app.models.admin import Admin
from app.models.volunteer import Volunteer


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    session: Annotated[Session, Depends(get_session)],
) -> User:
    """
    Resolve the authenticated user from an access JWT.

    Returns:
        User: The user whose username matches the token's subject.

    Raises:
        InvalidTokenError: If the token is invalid, not an access token, an admin token, or names an unknown user.
    """
    payload = decode_token(token, "access")
    if payload.get("mode") == "admin":
        raise InvalidTokenError()

    user = session.exec(select(User).where(User.username == payload["sub"])).first()
    if user is None:
        raise InvalidTokenError()
    return user


def get_current_volunteer(
    user: Annotated[User, Depends(get_current_user)],
    session: Annotated[Session, Depends(get_session)],
) -> Volunteer:
    """
    Resolve the acting volunteer for the authenticated user.

    Raises:
        NotFoundError: If the user has no volunteer profile.
    """
    volunteer = session.exec(
        select(Volunteer).where(Volunteer.id_user == user.id_user)
    ).first()
    if volunteer is None:
        raise NotFoundError("Volunteer", f"user_{user.id_user}")
    return volunteer


def get_current_admin(
    token: Annotated[str, Depends(oauth2_scheme)],
    session: Annotated[Session, Depends(get_session)],
) -> Admin:
    """
    Validate an admin access JWT and return the corresponding Admin.

    The token must carry `mode == "admin"` and `type == "access"`; refresh
    tokens and volunteer tokens are refused.

    Raises:
        InvalidTokenError: If the token is invalid, lacks admin mode, or names an unknown admin.
    """
    payload = decode_token(token, "access")
    if payload.get("mode") != "admin":
        raise InvalidTokenError("Could not validate admin credentials")

    admin = session.exec(select(Admin).where(Admin.username == payload["sub"])).first()
    if admin is None:
        raise InvalidTokenError("Could not validate admin credentials")
    return admin
