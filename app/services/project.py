"""Project service module: CRUD, roster and ownership operations."""

from sqlmodel import Session, select
from loguru import logger

from app.models.project import Project, ProjectCreate, ProjectPublic, ProjectUpdate
from app.models.project_category import ProjectCategory
from app.models.project_member import ProjectMember
from app.models.volunteer import Volunteer
from app.models.volunteer_request import VolunteerRequest
from app.exceptions import NotFoundError, InsufficientPermissionsError
from app.services import category as category_service
from app.services.utils import get_or_404


def _member_ids_batch(session: Session, project_ids: list[int]) -> dict[int, list[int]]:
    """
    Read the rosters of several projects in one query.

    Returns:
        dict[int, list[int]]: project id -> member volunteer ids, in join order.
    """
    if not project_ids:
        return {}
    rows = session.exec(
        select(ProjectMember)
        .where(ProjectMember.id_project.in_(project_ids))  # type: ignore
        .order_by(ProjectMember.joined_at)  # type: ignore
    ).all()
    members: dict[int, list[int]] = {pid: [] for pid in project_ids}
    for row in rows:
        members[row.id_project].append(row.id_volunteer)
    return members


def to_project_public_batch(
    session: Session, projects: list[Project]
) -> list[ProjectPublic]:
    """
    Convert projects to their public form with categories and member ids.

    Rosters are loaded with a single query for the whole page.
    """
    ids = [p.id_project for p in projects if p.id_project is not None]
    members_map = _member_ids_batch(session, ids)
    results = []
    for project in projects:
        assert project.id_project is not None
        results.append(
            ProjectPublic(
                **project.model_dump(exclude={"categories"}),
                categories=category_service.to_category_public_batch(
                    session, list(project.categories)
                ),
                member_ids=members_map.get(project.id_project, []),
            )
        )
    return results


def to_project_public(session: Session, project: Project) -> ProjectPublic:
    return to_project_public_batch(session, [project])[0]


def _ensure_owner(project: Project, volunteer_id: int, action: str) -> None:
    if project.id_owner != volunteer_id:
        raise InsufficientPermissionsError(
            f"Only the project owner can {action} this project"
        )


def create_project(
    session: Session, project_in: ProjectCreate, owner_id: int
) -> Project:
    """
    Create a project owned by the given volunteer.

    Parameters:
        session: Database session.
        project_in: Project data including `category_ids`.
        owner_id: Volunteer id of the owner (the acting volunteer).

    Returns:
        Project: The committed project.

    Raises:
        NotFoundError: If the owner or any category id does not exist.
    """
    get_or_404(session, Volunteer, owner_id)
    categories = category_service.resolve_categories(session, project_in.category_ids)

    project = Project.model_validate(
        project_in.model_dump(exclude={"category_ids"}), update={"id_owner": owner_id}
    )
    project.categories = categories

    session.add(project)
    session.commit()
    session.refresh(project)
    logger.info(f"Project {project.id_project} created by volunteer {owner_id}")
    return project


def get_project(session: Session, project_id: int) -> Project | None:
    return session.get(Project, project_id)


def get_projects(
    session: Session,
    *,
    category_id: int | None = None,
    offset: int = 0,
    limit: int = 100,
) -> list[Project]:
    """
    Retrieve a page of projects, optionally restricted to one category.
    """
    statement = select(Project)
    if category_id is not None:
        statement = statement.join(
            ProjectCategory, ProjectCategory.id_project == Project.id_project  # type: ignore
        ).where(ProjectCategory.id_categ == category_id)
    statement = statement.order_by(Project.id_project).offset(offset).limit(limit)
    return list(session.exec(statement).all())


def update_project(
    session: Session,
    project_id: int,
    project_update: ProjectUpdate,
    acting_volunteer_id: int,
) -> Project:
    """
    Update a project's details and, when given, replace its categories.

    Raises:
        NotFoundError: If the project or a category does not exist.
        InsufficientPermissionsError: If the acting volunteer is not the owner.
    """
    project = get_or_404(session, Project, project_id)
    _ensure_owner(project, acting_volunteer_id, "update")

    update_data = project_update.model_dump(exclude_unset=True)
    category_ids = update_data.pop("category_ids", None)
    if category_ids is not None:
        project.categories = category_service.resolve_categories(session, category_ids)

    for key, value in update_data.items():
        if value is not None:
            setattr(project, key, value)

    session.add(project)
    session.commit()
    session.refresh(project)
    return project


def purge_project(session: Session, project: Project) -> None:
    """Delete a project with its roster, requests and category links. Flushes, no commit."""
    for member in session.exec(
        select(ProjectMember).where(ProjectMember.id_project == project.id_project)
    ).all():
        session.delete(member)
    for request in session.exec(
        select(VolunteerRequest).where(
            VolunteerRequest.id_project == project.id_project
        )
    ).all():
        session.delete(request)
    project.categories = []
    session.flush()
    session.delete(project)
    session.flush()


def delete_project(session: Session, project_id: int, acting_volunteer_id: int) -> None:
    """
    Delete a project together with its roster and the join requests targeting it.

    Raises:
        NotFoundError: If the project does not exist.
        InsufficientPermissionsError: If the acting volunteer is not the owner.
    """
    project = get_or_404(session, Project, project_id)
    _ensure_owner(project, acting_volunteer_id, "delete")
    purge_project(session, project)
    session.commit()
    logger.info(f"Project {project_id} deleted by volunteer {acting_volunteer_id}")


def get_project_owner(session: Session, project_id: int) -> Volunteer:
    """
    Raises:
        NotFoundError: If the project does not exist.
    """
    project = get_or_404(session, Project, project_id)
    return get_or_404(session, Volunteer, project.id_owner)


def get_project_members(session: Session, project_id: int) -> list[Volunteer]:
    """
    List the volunteers on a project's roster, oldest member first.

    Raises:
        NotFoundError: If the project does not exist.
    """
    get_or_404(session, Project, project_id)
    statement = (
        select(Volunteer)
        .join(ProjectMember, ProjectMember.id_volunteer == Volunteer.id_volunteer)  # type: ignore
        .where(ProjectMember.id_project == project_id)
        .order_by(ProjectMember.joined_at)  # type: ignore
    )
    return list(session.exec(statement).all())


def is_member(session: Session, project_id: int, volunteer_id: int) -> bool:
    return session.get(ProjectMember, (volunteer_id, project_id)) is not None


def add_member(session: Session, project_id: int, volunteer_id: int) -> bool:
    """
    Put a volunteer on a project's roster unless already there.

    Only stages the row; the caller commits.

    Returns:
        bool: True if a membership row was added, False if the volunteer was already a member.
    """
    if is_member(session, project_id, volunteer_id):
        return False
    session.add(ProjectMember(id_volunteer=volunteer_id, id_project=project_id))
    return True


def remove_member(
    session: Session, project_id: int, volunteer_id: int, acting_volunteer_id: int
) -> None:
    """
    Take a volunteer off a project's roster.

    Allowed for the project owner and for the member leaving on their own.

    Raises:
        NotFoundError: If the project does not exist or the volunteer is not a member.
        InsufficientPermissionsError: If the acting volunteer is neither owner nor that member.
    """
    project = get_or_404(session, Project, project_id)
    if acting_volunteer_id not in (project.id_owner, volunteer_id):
        raise InsufficientPermissionsError(
            "Only the project owner or the member can remove this membership"
        )

    membership = session.get(ProjectMember, (volunteer_id, project_id))
    if not membership:
        raise NotFoundError(
            "ProjectMember", f"volunteer_{volunteer_id}_project_{project_id}"
        )

    session.delete(membership)
    session.commit()
    logger.info(f"Volunteer {volunteer_id} removed from project {project_id}")


def transfer_ownership(
    session: Session, project_id: int, new_owner_id: int, acting_volunteer_id: int
) -> Project:
    """
    Hand a project over to another volunteer.

    Existing join requests keep their original receiver; only the new owner
    can decide requests created from now on, and pending requests addressed
    to the previous owner can no longer be accepted by anyone.

    Raises:
        NotFoundError: If the project or the new owner does not exist.
        InsufficientPermissionsError: If the acting volunteer is not the current owner.
    """
    project = get_or_404(session, Project, project_id)
    _ensure_owner(project, acting_volunteer_id, "transfer")
    get_or_404(session, Volunteer, new_owner_id)

    project.id_owner = new_owner_id
    session.add(project)
    session.commit()
    session.refresh(project)
    logger.info(
        f"Project {project_id} ownership moved from volunteer {acting_volunteer_id} "
        f"to volunteer {new_owner_id}"
    )
    return project


def get_owned_projects(session: Session, volunteer_id: int) -> list[Project]:
    """
    Raises:
        NotFoundError: If the volunteer does not exist.
    """
    get_or_404(session, Volunteer, volunteer_id)
    statement = (
        select(Project)
        .where(Project.id_owner == volunteer_id)
        .order_by(Project.id_project)
    )
    return list(session.exec(statement).all())


def get_participating_projects(session: Session, volunteer_id: int) -> list[Project]:
    """
    List the projects whose roster includes the volunteer.

    Raises:
        NotFoundError: If the volunteer does not exist.
    """
    get_or_404(session, Volunteer, volunteer_id)
    statement = (
        select(Project)
        .join(ProjectMember, ProjectMember.id_project == Project.id_project)  # type: ignore
        .where(ProjectMember.id_volunteer == volunteer_id)
        .order_by(Project.id_project)
    )
    return list(session.exec(statement).all())
