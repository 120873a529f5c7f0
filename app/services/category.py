"""Category service module for CRUD operations."""

from sqlmodel import Session, select, func

from app.models.category import Category, CategoryCreate, CategoryPublic, CategoryUpdate
from app.models.project import Project
from app.models.project_category import ProjectCategory
from app.exceptions import NotFoundError, AlreadyExistsError
from app.services.utils import get_or_404


def _popularity_map(session: Session, category_ids: list[int]) -> dict[int, int]:
    """
    Count tagged projects for each of the given categories in one query.

    Returns:
        dict[int, int]: category id -> number of projects; missing ids count 0.
    """
    if not category_ids:
        return {}
    rows = session.exec(
        select(ProjectCategory.id_categ, func.count())
        .where(ProjectCategory.id_categ.in_(category_ids))  # type: ignore
        .group_by(ProjectCategory.id_categ)
    ).all()
    return {categ_id: count for categ_id, count in rows}


def to_category_public(session: Session, category: Category) -> CategoryPublic:
    """Convert a Category into its public form with computed popularity."""
    return to_category_public_batch(session, [category])[0]


def to_category_public_batch(
    session: Session, categories: list[Category]
) -> list[CategoryPublic]:
    """
    Convert categories into public forms, computing popularity with a single query.
    """
    ids = [c.id_categ for c in categories if c.id_categ is not None]
    popularity = _popularity_map(session, ids)
    return [
        CategoryPublic(
            **c.model_dump(exclude={"projects"}),
            popularity=popularity.get(c.id_categ, 0),  # type: ignore[arg-type]
        )
        for c in categories
    ]


def get_all_categories(session: Session) -> list[Category]:
    """
    Retrieve all categories ordered alphabetically by name.
    """
    return list(session.exec(select(Category).order_by(Category.name)).all())


def get_category(session: Session, category_id: int) -> Category | None:
    return session.get(Category, category_id)


def create_category(session: Session, category_in: CategoryCreate) -> Category:
    """
    Create a new category.

    Raises:
        AlreadyExistsError: If a category with the same name already exists.
    """
    existing = session.exec(
        select(Category).where(Category.name == category_in.name)
    ).first()
    if existing:
        raise AlreadyExistsError("Category", "name", category_in.name)

    category = Category.model_validate(category_in)
    session.add(category)
    session.commit()
    session.refresh(category)
    return category


def update_category(
    session: Session, category_id: int, category_update: CategoryUpdate
) -> Category:
    """
    Update a category.

    Raises:
        NotFoundError: If the category doesn't exist.
        AlreadyExistsError: If renaming to a name another category already uses.
    """
    category = get_or_404(session, Category, category_id)

    if category_update.name:
        existing = session.exec(
            select(Category).where(
                Category.name == category_update.name,
                Category.id_categ != category_id,
            )
        ).first()
        if existing:
            raise AlreadyExistsError("Category", "name", category_update.name)

    for key, value in category_update.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(category, key, value)

    session.add(category)
    session.commit()
    session.refresh(category)
    return category


def delete_category(session: Session, category_id: int) -> None:
    """
    Delete a category and untag every project that carried it.

    Raises:
        NotFoundError: If the category doesn't exist.
    """
    category = get_or_404(session, Category, category_id)

    links = session.exec(
        select(ProjectCategory).where(ProjectCategory.id_categ == category_id)
    ).all()
    for link in links:
        session.delete(link)

    session.delete(category)
    session.commit()


def get_category_projects(session: Session, category_id: int) -> list[Project]:
    """
    List projects tagged with a category.

    Raises:
        NotFoundError: If the category doesn't exist.
    """
    get_or_404(session, Category, category_id)
    statement = (
        select(Project)
        .join(ProjectCategory, ProjectCategory.id_project == Project.id_project)  # type: ignore
        .where(ProjectCategory.id_categ == category_id)
        .order_by(Project.id_project)
    )
    return list(session.exec(statement).all())


def resolve_categories(session: Session, category_ids: list[int]) -> list[Category]:
    """
    Load categories by id, preserving order and dropping duplicates.

    Raises:
        NotFoundError: If any id does not exist.
    """
    categories = []
    for categ_id in dict.fromkeys(category_ids):
        category = session.get(Category, categ_id)
        if not category:
            raise NotFoundError("Category", categ_id)
        categories.append(category)
    return categories
