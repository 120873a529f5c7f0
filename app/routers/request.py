"""Join request router: create, inspect, accept, decline and delete requests."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.database.database import get_session
from app.core.dependencies import (
    get_current_admin,
    get_current_user,
    get_current_volunteer,
)
from app.models.enums import RequestStatus
from app.models.project import ProjectPublic
from app.models.volunteer import Volunteer, VolunteerPublic
from app.models.volunteer_request import VolunteerRequestPublic
from app.services import request as request_service
from app.services import project as project_service
from app.services import volunteer as volunteer_service

router = APIRouter(prefix="/requests", tags=["requests"])

# Reads are open to any signed-in volunteer
authenticated = [Depends(get_current_user)]


@router.post(
    "",
    response_model=VolunteerRequestPublic,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "/",
    response_model=VolunteerRequestPublic,
    status_code=status.HTTP_201_CREATED,
)
def create_request(
    project_id: Annotated[int, Query(alias="projectId", ge=1)],
    session: Annotated[Session, Depends(get_session)],
    current_volunteer: Annotated[Volunteer, Depends(get_current_volunteer)],
) -> VolunteerRequestPublic:
    """
    Ask to join a project.

    The request is addressed to the project's current owner and starts in
    the `pending` state. Any volunteer may ask to join any project.

    ### Authentication Required:
    This endpoint requires a valid authentication token.

    Args:
        `projectId`: The project the authenticated volunteer wants to join.

    Returns:
        `VolunteerRequestPublic`: The created request, with `id_receiver` set to the project owner.

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `404 NotFoundError`: If the project or the caller's volunteer profile doesn't exist.
    """
    request = request_service.create_request(session, project_id, current_volunteer)
    return VolunteerRequestPublic.model_validate(request)


@router.get(
    "",
    response_model=list[VolunteerRequestPublic],
    dependencies=authenticated,
    include_in_schema=False,
)
@router.get(
    "/", response_model=list[VolunteerRequestPublic], dependencies=authenticated
)
def read_requests(
    session: Annotated[Session, Depends(get_session)],
    request_status: Annotated[RequestStatus | None, Query(alias="status")] = None,
    sender_id: Annotated[int | None, Query(ge=1)] = None,
    receiver_id: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=100)] = 100,
) -> list[VolunteerRequestPublic]:
    """
    List join requests, newest first.

    ### Filters:
    - **status**: `pending`, `accepted` or `declined`
    - **sender_id**: requests sent by this volunteer
    - **receiver_id**: requests addressed to this volunteer

    Returns:
        `list[VolunteerRequestPublic]`: The requested page.
    """
    requests = request_service.get_requests(
        session,
        status=request_status,
        sender_id=sender_id,
        receiver_id=receiver_id,
        offset=offset,
        limit=limit,
    )
    return [VolunteerRequestPublic.model_validate(r) for r in requests]


@router.get(
    "/{request_id}", response_model=VolunteerRequestPublic, dependencies=authenticated
)
def read_request(
    request_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> VolunteerRequestPublic:
    """
    Retrieve one join request.

    Raises:
        `404 NotFoundError`: If the request doesn't exist.
    """
    request = request_service.get_request(session, request_id)
    return VolunteerRequestPublic.model_validate(request)


@router.delete(
    "/{request_id}",
    response_model=VolunteerRequestPublic,
    dependencies=[Depends(get_current_admin)],
)
def delete_request(
    request_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> VolunteerRequestPublic:
    """
    Delete a join request regardless of its state.

    Administrative endpoint. Deleting an accepted request does not remove the
    sender from the project roster.

    ### Authorization:
    - **Admin token required** (issued by `/internal/admin/login`)

    Returns:
        `VolunteerRequestPublic`: The request as it was before deletion.

    Raises:
        `401 Unauthorized`: If the token is missing or not an admin token.
        `404 NotFoundError`: If the request doesn't exist.
    """
    return request_service.delete_request(session, request_id)


@router.get(
    "/{request_id}/sender", response_model=VolunteerPublic, dependencies=authenticated
)
def read_request_sender(
    request_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> VolunteerPublic:
    """
    Retrieve the volunteer who sent the request.

    Raises:
        `404 NotFoundError`: If the request doesn't exist.
    """
    sender = request_service.get_request_sender(session, request_id)
    return volunteer_service.to_volunteer_public(sender)


@router.get(
    "/{request_id}/receiver",
    response_model=VolunteerPublic,
    dependencies=authenticated,
)
def read_request_receiver(
    request_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> VolunteerPublic:
    """
    Retrieve the volunteer the request is addressed to.

    This is the project owner at the time the request was created, even if
    ownership has changed since.

    Raises:
        `404 NotFoundError`: If the request doesn't exist.
    """
    receiver = request_service.get_request_receiver(session, request_id)
    return volunteer_service.to_volunteer_public(receiver)


@router.get(
    "/{request_id}/project", response_model=ProjectPublic, dependencies=authenticated
)
def read_request_project(
    request_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> ProjectPublic:
    """
    Retrieve the project the request asks to join.

    Raises:
        `404 NotFoundError`: If the request doesn't exist.
    """
    project = request_service.get_request_project(session, request_id)
    return project_service.to_project_public(session, project)


@router.patch("/{request_id}/accept", response_model=VolunteerRequestPublic)
def accept_request(
    request_id: int,
    session: Annotated[Session, Depends(get_session)],
    current_volunteer: Annotated[Volunteer, Depends(get_current_volunteer)],
) -> VolunteerRequestPublic:
    """
    Accept a pending join request.

    The sender is added to the project roster and the request becomes
    `accepted`, both in one transaction.

    ### Authorization:
    - **Receiver only**: the caller must be the request's receiver
    - **Current owner only**: the caller must still own the project

    Returns:
        `VolunteerRequestPublic`: The accepted request.

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `403 NotAuthorizedError`: If the caller is not the receiver and current owner.
        `404 NotFoundError`: If the request doesn't exist.
        `409 InvalidStateError`: If the request is no longer pending.
    """
    request = request_service.accept_request(session, request_id, current_volunteer)
    return VolunteerRequestPublic.model_validate(request)


@router.patch("/{request_id}/decline", response_model=VolunteerRequestPublic)
def decline_request(
    request_id: int,
    session: Annotated[Session, Depends(get_session)],
    current_volunteer: Annotated[Volunteer, Depends(get_current_volunteer)],
) -> VolunteerRequestPublic:
    """
    Decline a pending join request. The roster is not changed.

    ### Authorization:
    Same as accept: receiver and current owner only.

    Raises:
        `401 Unauthorized`: If no valid authentication token is provided.
        `403 NotAuthorizedError`: If the caller is not the receiver and current owner.
        `404 NotFoundError`: If the request doesn't exist.
        `409 InvalidStateError`: If the request is no longer pending.
    """
    request = request_service.decline_request(session, request_id, current_volunteer)
    return VolunteerRequestPublic.model_validate(request)
