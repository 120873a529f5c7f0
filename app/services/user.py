"""User service module for account operations."""

from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError

from app.models.user import User, UserCreate, UserUpdate
from app.core.password import get_password_hash
from app.exceptions import NotFoundError, AlreadyExistsError


def create_user(session: Session, user_in: UserCreate) -> User:
    """
    Create and flush a new user with a hashed password.

    The caller owns the transaction: nothing is committed here so the user
    can be created together with its volunteer profile.

    Parameters:
        user_in (UserCreate): Account data including the plaintext `password`.

    Returns:
        User: The flushed User with `id_user` set.

    Raises:
        AlreadyExistsError: If the username or email is already taken.
    """
    hashed_password = get_password_hash(user_in.password)
    db_user = User.model_validate(user_in, update={"hashed_password": hashed_password})

    session.add(db_user)
    try:
        session.flush()
    except IntegrityError:
        session.rollback()
        raise AlreadyExistsError("User", "unique field", "username or email")
    session.refresh(db_user)
    return db_user


def get_user(session: Session, user_id: int) -> User | None:
    return session.get(User, user_id)


def get_user_by_username(session: Session, username: str) -> User | None:
    """
    Retrieve a user by username.

    Returns:
        User | None: The matching user, or None.
    """
    return session.exec(select(User).where(User.username == username)).first()


def update_user(session: Session, user_id: int, user_update: UserUpdate) -> User:
    """
    Apply a partial update to a user; a new password is hashed before storage.

    Flushes but does not commit.

    Raises:
        NotFoundError: If no user exists with `user_id`.
        AlreadyExistsError: If the new email is already used by another account.
    """
    db_user = get_user(session, user_id)
    if not db_user:
        raise NotFoundError("User", user_id)

    user_data = user_update.model_dump(exclude_unset=True)
    password = user_data.pop("password", None)
    if password is not None:
        db_user.hashed_password = get_password_hash(password)

    for key, value in user_data.items():
        if value is not None:
            setattr(db_user, key, value)

    session.add(db_user)
    try:
        session.flush()
    except IntegrityError:
        session.rollback()
        raise AlreadyExistsError("User", "email", str(user_data.get("email")))
    return db_user


def delete_user(session: Session, user_id: int) -> None:
    """
    Delete a user account. Flushes but does not commit.

    Raises:
        NotFoundError: If no user exists with `user_id`.
    """
    db_user = get_user(session, user_id)
    if not db_user:
        raise NotFoundError("User", user_id)
    session.delete(db_user)
    session.flush()
