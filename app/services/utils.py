"""Shared service layer utilities."""

from typing import TypeVar, Type
from sqlmodel import Session

from app.exceptions.crud import NotFoundError

T = TypeVar("T")


def get_or_404(
    session: Session,
    model_class: Type[T],
    entity_id: int,
    entity_name: str | None = None,
) -> T:
    """
    Retrieve an entity by primary key or raise NotFoundError.

    Uses `session.get()`, which checks the identity map before querying.

    Parameters:
        session: Database session.
        model_class: SQLModel table class to look up.
        entity_id: Primary key value.
        entity_name: Name used in the error message (defaults to the class name).

    Raises:
        NotFoundError: If no row has that key.

    Example:
        project = get_or_404(session, Project, project_id)
    """
    entity = session.get(model_class, entity_id)
    if not entity:
        raise NotFoundError(entity_name or model_class.__name__, entity_id)
    return entity
