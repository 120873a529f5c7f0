"""Join request workflow.

A volunteer asks to join a project; the request is addressed to whoever owns
the project at that moment (the receiver). The receiver, while still owning
the project, may accept it (the sender joins the roster) or decline it.
PENDING is the only state a request can leave; ACCEPTED and DECLINED are
final.
"""

from datetime import datetime, timezone

from sqlmodel import Session, select
from sqlalchemy.exc import SQLAlchemyError
from loguru import logger

from app.models.enums import RequestStatus
from app.models.project import Project
from app.models.volunteer import Volunteer
from app.models.volunteer_request import VolunteerRequest, VolunteerRequestPublic
from app.exceptions import NotFoundError, NotAuthorizedError, InvalidStateError
from app.services import project as project_service
from app.services.utils import get_or_404
from app.utils.validation import ensure_id

RESOURCE = "VolunteerRequest"


def create_request(
    session: Session, project_id: int, sender: Volunteer
) -> VolunteerRequest:
    """
    Create a PENDING request from `sender` to join a project.

    Any volunteer may ask to join any project. The receiver is fixed to the
    project's owner at this point and is never rewritten afterwards.

    Parameters:
        session: Database session.
        project_id: Project the sender wants to join.
        sender: The acting volunteer.

    Returns:
        VolunteerRequest: The committed request.

    Raises:
        NotFoundError: If the project does not exist.
    """
    project = get_or_404(session, Project, project_id)
    request = VolunteerRequest(
        id_sender=ensure_id(sender.id_volunteer, "Volunteer"),
        id_receiver=project.id_owner,
        id_project=ensure_id(project.id_project, "Project"),
        status=RequestStatus.PENDING,
    )
    session.add(request)
    session.commit()
    session.refresh(request)
    logger.info(
        f"Request {request.id_request} created: volunteer {request.id_sender} "
        f"-> project {request.id_project} (receiver {request.id_receiver})"
    )
    return request


def get_request(session: Session, request_id: int) -> VolunteerRequest:
    """
    Raises:
        NotFoundError: If the request does not exist.
    """
    return get_or_404(session, VolunteerRequest, request_id, RESOURCE)


def get_requests(
    session: Session,
    *,
    status: RequestStatus | None = None,
    sender_id: int | None = None,
    receiver_id: int | None = None,
    offset: int = 0,
    limit: int = 100,
) -> list[VolunteerRequest]:
    """
    List requests, newest first, with optional filters.

    Parameters:
        status: Keep only requests in this state.
        sender_id: Keep only requests sent by this volunteer.
        receiver_id: Keep only requests addressed to this volunteer.
        offset: Number of records to skip.
        limit: Maximum number of records to return.
    """
    statement = select(VolunteerRequest)
    if status is not None:
        statement = statement.where(VolunteerRequest.status == status)
    if sender_id is not None:
        statement = statement.where(VolunteerRequest.id_sender == sender_id)
    if receiver_id is not None:
        statement = statement.where(VolunteerRequest.id_receiver == receiver_id)
    statement = (
        statement.order_by(VolunteerRequest.id_request.desc())  # type: ignore
        .offset(offset)
        .limit(limit)
    )
    return list(session.exec(statement).all())


def get_request_sender(session: Session, request_id: int) -> Volunteer:
    request = get_request(session, request_id)
    return get_or_404(session, Volunteer, request.id_sender)


def get_request_receiver(session: Session, request_id: int) -> Volunteer:
    request = get_request(session, request_id)
    return get_or_404(session, Volunteer, request.id_receiver)


def get_request_project(session: Session, request_id: int) -> Project:
    request = get_request(session, request_id)
    return get_or_404(session, Project, request.id_project)


def delete_request(session: Session, request_id: int) -> VolunteerRequestPublic:
    """
    Remove a request whatever its state.

    Intended for administrators; has no effect on rosters even for an
    ACCEPTED request.

    Returns:
        VolunteerRequestPublic: Snapshot of the request as it was before deletion.

    Raises:
        NotFoundError: If the request does not exist.
    """
    request = get_request(session, request_id)
    snapshot = VolunteerRequestPublic.model_validate(request)
    session.delete(request)
    session.commit()
    logger.info(f"Request {request_id} deleted (was {snapshot.status.value})")
    return snapshot


def _lock_request(session: Session, request_id: int) -> VolunteerRequest:
    """
    Load a request with a row lock, refreshing any copy in the identity map.

    Concurrent transitions of the same request serialize on the lock, so the
    second one sees the first one's status.
    """
    request = session.exec(
        select(VolunteerRequest)
        .where(VolunteerRequest.id_request == request_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).first()
    if request is None:
        raise NotFoundError(RESOURCE, request_id)
    return request


def _guard_transition(
    session: Session, request: VolunteerRequest, acting: Volunteer, action: str
) -> Project:
    """
    Check that `acting` may move `request` out of PENDING.

    The acting volunteer must be the request's receiver and must still own
    the project. Authorization is checked before state.

    Raises:
        NotAuthorizedError: If the acting volunteer is not receiver and current owner.
        InvalidStateError: If the request is no longer PENDING.
    """
    project = get_or_404(session, Project, request.id_project)
    if (
        acting.id_volunteer != request.id_receiver
        or acting.id_volunteer != project.id_owner
    ):
        logger.warning(
            f"Volunteer {acting.id_volunteer} refused to {action} request "
            f"{request.id_request} (receiver {request.id_receiver}, "
            f"owner {project.id_owner})"
        )
        raise NotAuthorizedError(action, ensure_id(request.id_request, RESOURCE))

    if request.status != RequestStatus.PENDING:
        logger.warning(
            f"Cannot {action} request {request.id_request} in "
            f"state {request.status.value}"
        )
        raise InvalidStateError(RESOURCE, request.status.value, action)

    return project


def _finish(session: Session, request: VolunteerRequest, status: RequestStatus) -> None:
    request.status = status
    request.decided_at = datetime.now(timezone.utc)
    session.add(request)


def accept_request(
    session: Session, request_id: int, acting_volunteer: Volunteer
) -> VolunteerRequest:
    """
    Accept a PENDING request and add its sender to the project's roster.

    The roster insert and the status change are committed in one
    transaction; if either fails both are rolled back. A sender who is
    already on the roster is not added twice.

    Parameters:
        session: Database session.
        request_id: The request to accept.
        acting_volunteer: The volunteer performing the action.

    Returns:
        VolunteerRequest: The request, now ACCEPTED.

    Raises:
        NotFoundError: If the request or its project does not exist.
        NotAuthorizedError: If the acting volunteer is not the receiver and current owner.
        InvalidStateError: If the request is not PENDING.
    """
    request = _lock_request(session, request_id)
    project = _guard_transition(session, request, acting_volunteer, "accept")

    try:
        added = project_service.add_member(
            session, ensure_id(project.id_project, "Project"), request.id_sender
        )
        _finish(session, request, RequestStatus.ACCEPTED)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception(f"Accepting request {request_id} failed; rolled back")
        raise

    session.refresh(request)
    logger.info(
        f"Request {request_id} accepted by volunteer {acting_volunteer.id_volunteer}; "
        f"volunteer {request.id_sender} "
        f"{'joined' if added else 'already on'} project {request.id_project}"
    )
    return request


def decline_request(
    session: Session, request_id: int, acting_volunteer: Volunteer
) -> VolunteerRequest:
    """
    Decline a PENDING request. The roster is left untouched.

    Same guard as `accept_request`.

    Returns:
        VolunteerRequest: The request, now DECLINED.

    Raises:
        NotFoundError: If the request or its project does not exist.
        NotAuthorizedError: If the acting volunteer is not the receiver and current owner.
        InvalidStateError: If the request is not PENDING.
    """
    request = _lock_request(session, request_id)
    _guard_transition(session, request, acting_volunteer, "decline")

    _finish(session, request, RequestStatus.DECLINED)
    session.commit()
    session.refresh(request)
    logger.info(
        f"Request {request_id} declined by volunteer {acting_volunteer.id_volunteer}"
    )
    return request
