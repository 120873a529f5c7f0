"""Category router: public browsing, admin-only management."""

from typing import Annotated
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.database.database import get_session
from app.core.dependencies import get_current_admin
from app.models.category import CategoryCreate, CategoryPublic, CategoryUpdate
from app.models.project import ProjectPublic
from app.services import category as category_service
from app.services import project as project_service
from app.exceptions import NotFoundError

router = APIRouter(prefix="/categories", tags=["categories"])

admin_only = [Depends(get_current_admin)]


@router.get("/", response_model=list[CategoryPublic])
def get_all_categories(
    session: Annotated[Session, Depends(get_session)],
) -> list[CategoryPublic]:
    """
    Retrieve all project categories.

    Public endpoint - no authentication required. Categories are returned
    alphabetically by name; `popularity` is the number of projects tagged
    with the category.

    Returns:
        `list[CategoryPublic]`: All available categories sorted alphabetically.

    Example response:
        [
            {"id_categ": 8, "name": "Animals", "description": "...", "popularity": 0},
            {"id_categ": 5, "name": "Community", "description": "...", "popularity": 3},
            ...
        ]
    """
    categories = category_service.get_all_categories(session)
    return category_service.to_category_public_batch(session, categories)


@router.get("/{category_id}", response_model=CategoryPublic)
def get_category(
    category_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> CategoryPublic:
    """
    Retrieve a category by ID.

    Raises:
        `404 NotFoundError`: If the category doesn't exist.
    """
    category = category_service.get_category(session, category_id)
    if not category:
        raise NotFoundError("Category", category_id)
    return category_service.to_category_public(session, category)


@router.get("/{category_id}/projects", response_model=list[ProjectPublic])
def get_category_projects(
    category_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> list[ProjectPublic]:
    """
    Retrieve the projects tagged with a category.

    Raises:
        `404 NotFoundError`: If the category doesn't exist.
    """
    projects = category_service.get_category_projects(session, category_id)
    return project_service.to_project_public_batch(session, projects)


@router.post(
    "/",
    response_model=CategoryPublic,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
)
def create_category(
    category_in: CategoryCreate,
    session: Annotated[Session, Depends(get_session)],
) -> CategoryPublic:
    """
    Create a category.

    ### Authorization:
    - **Admin token required**

    Raises:
        `401 Unauthorized`: If the token is missing or not an admin token.
        `409 AlreadyExistsError`: If a category with this name already exists.
    """
    category = category_service.create_category(session, category_in)
    return category_service.to_category_public(session, category)


@router.patch("/{category_id}", response_model=CategoryPublic, dependencies=admin_only)
def update_category(
    category_id: int,
    category_update: CategoryUpdate,
    session: Annotated[Session, Depends(get_session)],
) -> CategoryPublic:
    """
    Rename a category or change its description.

    ### Authorization:
    - **Admin token required**

    Raises:
        `401 Unauthorized`: If the token is missing or not an admin token.
        `404 NotFoundError`: If the category doesn't exist.
        `409 AlreadyExistsError`: If another category already uses the new name.
    """
    category = category_service.update_category(session, category_id, category_update)
    return category_service.to_category_public(session, category)


@router.delete("/{category_id}", status_code=204, dependencies=admin_only)
def delete_category(
    category_id: int,
    session: Annotated[Session, Depends(get_session)],
) -> None:
    """
    Delete a category. Projects that carried it simply lose the tag.

    ### Authorization:
    - **Admin token required**

    Raises:
        `401 Unauthorized`: If the token is missing or not an admin token.
        `404 NotFoundError`: If the category doesn't exist.
    """
    category_service.delete_category(session, category_id)
