"""Admin service module."""

from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError
from loguru import logger

from app.models.admin import Admin, AdminCreate
from app.core.password import get_password_hash
from app.exceptions import AlreadyExistsError


def create_admin(session: Session, admin_in: AdminCreate) -> Admin:
    """
    Create a new admin and persist it with a hashed password.

    Parameters:
        session (Session): Database session.
        admin_in (AdminCreate): Admin creation data; must include plaintext `password`.

    Returns:
        Admin: The created admin record.

    Raises:
        AlreadyExistsError: If the username is already taken.
    """
    if get_admin_by_username(session, admin_in.username):
        raise AlreadyExistsError("Admin", "username", admin_in.username)

    db_admin = Admin.model_validate(
        admin_in, update={"hashed_password": get_password_hash(admin_in.password)}
    )
    session.add(db_admin)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise AlreadyExistsError("Admin", "username", admin_in.username)
    session.refresh(db_admin)
    logger.info(f"Admin '{db_admin.username}' created")
    return db_admin


def get_admin_by_username(session: Session, username: str) -> Admin | None:
    statement = select(Admin).where(Admin.username == username)
    return session.exec(statement).first()
