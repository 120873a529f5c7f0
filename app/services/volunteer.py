"""Volunteer service module for CRUD operations."""

from sqlmodel import Session, select, or_
from sqlalchemy.orm import selectinload
from loguru import logger

from app.models.volunteer import (
    Volunteer,
    VolunteerCreate,
    VolunteerUpdate,
    VolunteerPublic,
)
from app.models.user import UserCreate, UserUpdate, UserPublic
from app.models.project import Project
from app.models.project_member import ProjectMember
from app.models.volunteer_request import VolunteerRequest
from app.exceptions import NotFoundError
from app.services import user as user_service
from app.services import project as project_service


def to_volunteer_public(volunteer: Volunteer) -> VolunteerPublic:
    """
    Convert a Volunteer into its public form with the embedded user account.

    Parameters:
        volunteer (Volunteer): Persisted volunteer; its `user` relationship is converted to `UserPublic` when loaded.

    Returns:
        VolunteerPublic: Profile fields, reputation and user details.
    """
    user_public = None
    if volunteer.user:
        user_public = UserPublic.model_validate(volunteer.user)

    return VolunteerPublic(
        **volunteer.model_dump(exclude={"user"}),
        user=user_public,
    )


def create_volunteer(
    session: Session, user_in: UserCreate, volunteer_in: VolunteerCreate
) -> Volunteer:
    """
    Create a user account and its volunteer profile in one transaction.

    Parameters:
        session: Database session.
        user_in: Account data (username, email, password).
        volunteer_in: Profile data (name, surname, birth date, contact, skills, interests).

    Returns:
        Volunteer: The committed volunteer with its user loaded.

    Raises:
        AlreadyExistsError: If the username or email is already taken.
    """
    db_user = user_service.create_user(session, user_in)

    db_volunteer = Volunteer.model_validate(
        volunteer_in, update={"id_user": db_user.id_user}
    )
    session.add(db_volunteer)
    session.commit()
    session.refresh(db_volunteer)
    logger.info(f"Volunteer {db_volunteer.id_volunteer} registered")
    return db_volunteer


def get_volunteer(session: Session, volunteer_id: int) -> Volunteer | None:
    """
    Retrieve a volunteer by ID with the user relationship loaded.

    Returns:
        Volunteer | None: The volunteer, or None if not found.
    """
    statement = (
        select(Volunteer)
        .where(Volunteer.id_volunteer == volunteer_id)
        .options(selectinload(Volunteer.user))  # type: ignore
    )
    return session.exec(statement).first()


def get_volunteer_by_user_id(session: Session, user_id: int) -> Volunteer | None:
    statement = (
        select(Volunteer)
        .where(Volunteer.id_user == user_id)
        .options(selectinload(Volunteer.user))  # type: ignore
    )
    return session.exec(statement).first()


def get_volunteers(
    session: Session, *, offset: int = 0, limit: int = 100
) -> list[Volunteer]:
    """
    Retrieve a page of volunteers with their users loaded.

    Parameters:
        offset: Number of records to skip.
        limit: Maximum number of records to return.
    """
    statement = (
        select(Volunteer)
        .options(selectinload(Volunteer.user))  # type: ignore
        .order_by(Volunteer.id_volunteer)
        .offset(offset)
        .limit(limit)
    )
    return list(session.exec(statement).all())


def _get_or_raise(session: Session, volunteer_id: int) -> Volunteer:
    volunteer = get_volunteer(session, volunteer_id)
    if not volunteer:
        raise NotFoundError("Volunteer", volunteer_id)
    return volunteer


def update_volunteer(
    session: Session, volunteer_id: int, volunteer_update: VolunteerUpdate
) -> Volunteer:
    """
    Apply a partial update to a volunteer profile and its user account.

    `email` and `password` are forwarded to the user service; every other
    field is set on the profile. Omitted fields are left unchanged.

    Raises:
        NotFoundError: If no volunteer exists with `volunteer_id`.
        AlreadyExistsError: If the new email is already in use.
    """
    db_volunteer = _get_or_raise(session, volunteer_id)

    update_data = volunteer_update.model_dump(exclude_unset=True)

    user_fields = {"email", "password"}
    user_data = {k: v for k, v in update_data.items() if k in user_fields}
    volunteer_data = {k: v for k, v in update_data.items() if k not in user_fields}

    for key, value in volunteer_data.items():
        if value is not None:
            setattr(db_volunteer, key, value)

    if user_data:
        user_service.update_user(
            session, db_volunteer.id_user, UserUpdate.model_validate(user_data)
        )

    session.add(db_volunteer)
    session.commit()
    session.refresh(db_volunteer)
    return db_volunteer


def delete_volunteer(session: Session, volunteer_id: int) -> None:
    """
    Delete a volunteer, everything that depends on them, and their user account.

    Removed in order: the projects they own (with those projects' rosters
    and requests), their memberships in other projects, every request they
    sent or received, the profile and finally the user.

    Raises:
        NotFoundError: If no volunteer exists with `volunteer_id`.
    """
    db_volunteer = _get_or_raise(session, volunteer_id)
    user_id = db_volunteer.id_user

    owned = session.exec(select(Project).where(Project.id_owner == volunteer_id)).all()
    for project in owned:
        project_service.purge_project(session, project)

    for membership in session.exec(
        select(ProjectMember).where(ProjectMember.id_volunteer == volunteer_id)
    ).all():
        session.delete(membership)

    for request in session.exec(
        select(VolunteerRequest).where(
            or_(
                VolunteerRequest.id_sender == volunteer_id,
                VolunteerRequest.id_receiver == volunteer_id,
            )
        )
    ).all():
        session.delete(request)

    session.flush()
    session.delete(db_volunteer)
    session.flush()
    user_service.delete_user(session, user_id)
    session.commit()
    logger.info(
        f"Volunteer {volunteer_id} deleted with {len(owned)} owned project(s)"
    )


def get_skills(session: Session, volunteer_id: int) -> list[str]:
    return list(_get_or_raise(session, volunteer_id).skills)


def get_interests(session: Session, volunteer_id: int) -> list[str]:
    return list(_get_or_raise(session, volunteer_id).interests)
