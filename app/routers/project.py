"""Project router: CRUD, roster and ownership endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.database.database import get_session
from app.core.dependencies import get_current_volunteer
from app.models.project import (
    OwnershipTransfer,
    Project,
    ProjectCreate,
    ProjectPublic,
    ProjectUpdate,
)
from app.models.category import CategoryPublic
from app.models.volunteer import Volunteer, VolunteerPublic
from app.services import project as project_service
from app.services import category as category_service
from app.services import volunteer as volunteer_service
from app.services.utils import get_or_404
from app.exceptions import NotFoundError
from app.utils.validation import ensure_id

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("/", response_model=ProjectPublic, status_code=status.HTTP_201_CREATED)
def create_project(
    project_in: ProjectCreate,
    session: Annotated[Session, Depends(get_session)],
    current_volunteer: Annotated[Volunteer, Depends(get_current_volunteer)],
) -> ProjectPublic:
    """
    Create a project owned by the authenticated volunteer.

    The owner is not added to the roster; the roster only holds volunteers
    whose join request was accepted.

    ### Authentication Required:
    This endpoint requires a valid authentication token.

    Args:
        `project_in`: Name, description and the ids of the categories to tag it with.

    Returns:
        `ProjectPublic`: The created project with its categories and (empty) roster.

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `404 NotFoundError`: If a category id doesn't exist.
    """
    owner_id = ensure_id(current_volunteer.id_volunteer, "Volunteer")
    project = project_service.create_project(session, project_in, owner_id)
    return project_service.to_project_public(session, project)


@router.get("/", response_model=list[ProjectPublic])
def read_projects(
    session: Annotated[Session, Depends(get_session)],
    category_id: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=100)] = 100,
) -> list[ProjectPublic]:
    """
    Retrieve a paginated list of projects.

    ### Filters:
    - **category_id**: only projects tagged with this category

    Returns:
        `list[ProjectPublic]`: Projects with categories and member ids.
    """
    projects = project_service.get_projects(
        session, category_id=category_id, offset=offset, limit=limit
    )
    return project_service.to_project_public_batch(session, projects)


@router.get("/{project_id}", response_model=ProjectPublic)
def read_project(
    project_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> ProjectPublic:
    """
    Retrieve a project by ID.

    Raises:
        `404 NotFoundError`: If the project doesn't exist.
    """
    project = project_service.get_project(session, project_id)
    if not project:
        raise NotFoundError("Project", project_id)
    return project_service.to_project_public(session, project)


@router.patch("/{project_id}", response_model=ProjectPublic)
def update_project(
    project_id: int,
    project_update: ProjectUpdate,
    session: Annotated[Session, Depends(get_session)],
    current_volunteer: Annotated[Volunteer, Depends(get_current_volunteer)],
) -> ProjectPublic:
    """
    Update a project's name, description or categories.

    Sending `category_ids` replaces the whole category set.

    ### Authorization:
    - **Owner only**: Only the current project owner can update it

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `403 InsufficientPermissionsError`: If the caller doesn't own the project.
        `404 NotFoundError`: If the project or a category doesn't exist.
    """
    project = project_service.update_project(
        session,
        project_id,
        project_update,
        ensure_id(current_volunteer.id_volunteer, "Volunteer"),
    )
    return project_service.to_project_public(session, project)


@router.delete("/{project_id}", status_code=204)
def delete_project(
    project_id: int,
    session: Annotated[Session, Depends(get_session)],
    current_volunteer: Annotated[Volunteer, Depends(get_current_volunteer)],
) -> None:
    """
    Delete a project, its roster and every join request targeting it.

    ### Authorization:
    - **Owner only**

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `403 InsufficientPermissionsError`: If the caller doesn't own the project.
        `404 NotFoundError`: If the project doesn't exist.
    """
    project_service.delete_project(
        session, project_id, ensure_id(current_volunteer.id_volunteer, "Volunteer")
    )


@router.get("/{project_id}/owner", response_model=VolunteerPublic)
def read_project_owner(
    project_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> VolunteerPublic:
    """
    Retrieve the volunteer who currently owns the project.

    Raises:
        `404 NotFoundError`: If the project doesn't exist.
    """
    owner = project_service.get_project_owner(session, project_id)
    return volunteer_service.to_volunteer_public(owner)


@router.put("/{project_id}/owner", response_model=ProjectPublic)
def transfer_project_ownership(
    project_id: int,
    transfer: OwnershipTransfer,
    session: Annotated[Session, Depends(get_session)],
    current_volunteer: Annotated[Volunteer, Depends(get_current_volunteer)],
) -> ProjectPublic:
    """
    Hand the project over to another volunteer.

    Join requests created before the transfer keep their original receiver,
    so pending ones can no longer be accepted or declined. New requests are
    addressed to the new owner.

    ### Authorization:
    - **Owner only**

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `403 InsufficientPermissionsError`: If the caller doesn't own the project.
        `404 NotFoundError`: If the project or the new owner doesn't exist.
    """
    project = project_service.transfer_ownership(
        session,
        project_id,
        transfer.id_volunteer,
        ensure_id(current_volunteer.id_volunteer, "Volunteer"),
    )
    return project_service.to_project_public(session, project)


@router.get("/{project_id}/members", response_model=list[VolunteerPublic])
def read_project_members(
    project_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> list[VolunteerPublic]:
    """
    Retrieve the project's roster, oldest member first.

    Raises:
        `404 NotFoundError`: If the project doesn't exist.
    """
    members = project_service.get_project_members(session, project_id)
    return [volunteer_service.to_volunteer_public(m) for m in members]


@router.delete("/{project_id}/members/{volunteer_id}", status_code=204)
def remove_project_member(
    project_id: int,
    volunteer_id: int,
    session: Annotated[Session, Depends(get_session)],
    current_volunteer: Annotated[Volunteer, Depends(get_current_volunteer)],
) -> None:
    """
    Take a volunteer off the roster.

    ### Authorization:
    - The project owner may remove anyone
    - A member may remove themself

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `403 InsufficientPermissionsError`: If the caller is neither the owner nor that member.
        `404 NotFoundError`: If the project doesn't exist or the volunteer isn't a member.
    """
    project_service.remove_member(
        session,
        project_id,
        volunteer_id,
        ensure_id(current_volunteer.id_volunteer, "Volunteer"),
    )


@router.get("/{project_id}/categories", response_model=list[CategoryPublic])
def read_project_categories(
    project_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> list[CategoryPublic]:
    """
    Retrieve the categories the project is tagged with.

    Raises:
        `404 NotFoundError`: If the project doesn't exist.
    """
    project = get_or_404(session, Project, project_id)
    return category_service.to_category_public_batch(session, list(project.categories))
