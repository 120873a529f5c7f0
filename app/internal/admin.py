from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from app.database.database import get_session
from app.core.security import authenticate_admin, create_access_token
from app.core.dependencies import get_current_admin
from app.exceptions import InvalidCredentialsError
from app.models.admin import AdminCreate, AdminPublic
from app.models.token import Token
from app.services import admin as admin_service

router = APIRouter(
    prefix="/internal/admin", tags=["Internal Admin"], include_in_schema=False
)


@router.post("/login", response_model=Token)
def login_admin(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    session: Annotated[Session, Depends(get_session)],
) -> Token:
    """
    Exchange admin credentials for an access token with `mode: admin`.

    Admin sessions get no refresh token.
    """
    admin = authenticate_admin(session, form_data.username, form_data.password)
    if not admin:
        raise InvalidCredentialsError("Incorrect admin username or password")

    access_token = create_access_token(data={"sub": admin.username, "mode": "admin"})
    return Token(access_token=access_token, token_type="bearer")


@router.post(
    "/",
    response_model=AdminPublic,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
def create_new_admin(
    *,
    session: Annotated[Session, Depends(get_session)],
    admin_in: AdminCreate,
) -> AdminPublic:
    db_admin = admin_service.create_admin(session, admin_in)
    return AdminPublic.model_validate(db_admin)
