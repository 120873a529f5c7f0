"""Volunteer router module for CRUD endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.database.database import get_session
from app.core.dependencies import get_current_user, get_current_volunteer
from app.models.user import User, UserCreate
from app.models.project import ProjectPublic
from app.models.volunteer import (
    Volunteer,
    VolunteerCreate,
    VolunteerPublic,
    VolunteerUpdate,
)
from app.services import volunteer as volunteer_service
from app.services import project as project_service
from app.exceptions import NotFoundError, InsufficientPermissionsError

router = APIRouter(prefix="/volunteers", tags=["volunteers"])


def _get_owned_profile(session: Session, volunteer_id: int, user: User) -> Volunteer:
    volunteer = volunteer_service.get_volunteer(session, volunteer_id)
    if not volunteer:
        raise NotFoundError("Volunteer", volunteer_id)
    if volunteer.id_user != user.id_user:
        raise InsufficientPermissionsError(
            "Only the profile owner can modify this volunteer profile"
        )
    return volunteer


@router.post(
    "/", response_model=VolunteerPublic, status_code=status.HTTP_201_CREATED
)
def create_volunteer(
    *,
    session: Annotated[Session, Depends(get_session)],
    user_in: UserCreate,
    volunteer_in: VolunteerCreate,
) -> VolunteerPublic:
    """
    Register a new volunteer with user account.

    Creates both a User account and the associated Volunteer profile in a
    single atomic operation.

    ### What Gets Created:
    - User account with authentication credentials
    - Volunteer profile with name, contact, skills and interests
    - Reputation starting at 0

    Args:
        `user_in`: User account data including username, email, and password.
        `volunteer_in`: Volunteer profile data including name, surname, birth date,
            contact, skills and interests.
        `session`: Database session (automatically injected).

    Returns:
        `VolunteerPublic`: The newly created volunteer profile with user information.

    Raises:
        `409 AlreadyExistsError`: If the username or email already exists in the system.
    """
    volunteer = volunteer_service.create_volunteer(session, user_in, volunteer_in)
    return volunteer_service.to_volunteer_public(volunteer)


@router.get("/", response_model=list[VolunteerPublic])
def read_volunteers(
    session: Annotated[Session, Depends(get_session)],
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=100)] = 100,
) -> list[VolunteerPublic]:
    """
    Retrieve a paginated list of all volunteers.

    ### Pagination:
    - Default: Returns first 100 volunteers
    - Maximum limit: 100 volunteers per request
    - Use offset to skip records for subsequent pages

    Args:
        `offset`: Number of records to skip (default: 0, minimum: 0).
        `limit`: Maximum number of records to return (default: 100, range: 1-100).

    Returns:
        `list[VolunteerPublic]`: Volunteer profiles with their user details.
    """
    volunteers = volunteer_service.get_volunteers(session, offset=offset, limit=limit)
    return [volunteer_service.to_volunteer_public(v) for v in volunteers]


@router.get("/me", response_model=VolunteerPublic)
def read_current_volunteer(
    volunteer: Annotated[Volunteer, Depends(get_current_volunteer)],
) -> VolunteerPublic:
    """
    Retrieve the authenticated user's volunteer profile.

    ### Authentication Required:
    This endpoint requires a valid authentication token.

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `404 NotFoundError`: If no volunteer profile exists for the authenticated user.
    """
    return volunteer_service.to_volunteer_public(volunteer)


@router.get("/{volunteer_id}", response_model=VolunteerPublic)
def read_volunteer(
    volunteer_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> VolunteerPublic:
    """
    Retrieve a volunteer profile by ID.

    Args:
        `volunteer_id`: The unique identifier of the volunteer to retrieve.

    Returns:
        `VolunteerPublic`: The volunteer's public profile and linked user account.

    Raises:
        `404 NotFoundError`: If no volunteer exists with the given ID.
    """
    volunteer = volunteer_service.get_volunteer(session, volunteer_id)
    if not volunteer:
        raise NotFoundError("Volunteer", volunteer_id)
    return volunteer_service.to_volunteer_public(volunteer)


@router.patch("/{volunteer_id}", response_model=VolunteerPublic)
def update_volunteer(
    volunteer_id: int,
    volunteer_update: VolunteerUpdate,
    session: Annotated[Session, Depends(get_session)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> VolunteerPublic:
    """
    Update the authenticated user's volunteer profile information.

    Allows partial updates. Only the fields included in the request body are
    updated; omitted fields remain unchanged.

    ### Authorization:
    - **Authentication required**: Must provide valid authentication token
    - **Owner only**: Only the profile owner can perform updates

    ### Updatable Fields:
    - Personal info: name, surname, birth_date, contact
    - Profile: skills, interests
    - Account: email, password

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `403 InsufficientPermissionsError`: If the authenticated user is not the profile owner.
        `404 NotFoundError`: If no volunteer exists with the given ID.
        `409 AlreadyExistsError`: If the new email is already in use.
    """
    _get_owned_profile(session, volunteer_id, current_user)
    updated = volunteer_service.update_volunteer(
        session, volunteer_id, volunteer_update
    )
    return volunteer_service.to_volunteer_public(updated)


@router.delete("/{volunteer_id}", status_code=204)
def delete_volunteer(
    volunteer_id: int,
    session: Annotated[Session, Depends(get_session)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> None:
    """
    Delete the volunteer profile and associated user account permanently.

    **Warning**: This action is irreversible and will permanently delete:
    - The volunteer profile and user account
    - Every project the volunteer owns, with its roster and join requests
    - The volunteer's memberships in other projects
    - Every join request the volunteer sent or received

    ### Authorization:
    - **Owner only**: Only the profile owner can perform deletion

    Returns:
        `None`: Returns 204 No Content on successful deletion.

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `403 InsufficientPermissionsError`: If the authenticated user is not the profile owner.
        `404 NotFoundError`: If no volunteer exists with the given ID.
    """
    _get_owned_profile(session, volunteer_id, current_user)
    volunteer_service.delete_volunteer(session, volunteer_id)


@router.get("/{volunteer_id}/skills", response_model=list[str])
def read_volunteer_skills(
    volunteer_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> list[str]:
    """
    Retrieve a volunteer's skills.

    Raises:
        `404 NotFoundError`: If no volunteer exists with the given ID.
    """
    return volunteer_service.get_skills(session, volunteer_id)


@router.get("/{volunteer_id}/interests", response_model=list[str])
def read_volunteer_interests(
    volunteer_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> list[str]:
    """
    Retrieve a volunteer's interests.

    Raises:
        `404 NotFoundError`: If no volunteer exists with the given ID.
    """
    return volunteer_service.get_interests(session, volunteer_id)


@router.get("/{volunteer_id}/projects", response_model=list[ProjectPublic])
def read_volunteer_projects(
    volunteer_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> list[ProjectPublic]:
    """
    Retrieve the projects whose roster includes the volunteer.

    Raises:
        `404 NotFoundError`: If no volunteer exists with the given ID.
    """
    projects = project_service.get_participating_projects(session, volunteer_id)
    return project_service.to_project_public_batch(session, projects)


@router.get("/{volunteer_id}/owned-projects", response_model=list[ProjectPublic])
def read_volunteer_owned_projects(
    volunteer_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> list[ProjectPublic]:
    """
    Retrieve the projects the volunteer owns.

    Raises:
        `404 NotFoundError`: If no volunteer exists with the given ID.
    """
    projects = project_service.get_owned_projects(session, volunteer_id)
    return project_service.to_project_public_batch(session, projects)
