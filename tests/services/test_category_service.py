"""Tests for category service operations."""

import pytest
from sqlmodel import Session, select

from app.models.category import Category, CategoryCreate, CategoryUpdate
from app.models.project import Project
from app.models.project_category import ProjectCategory
from app.services import category as category_service
from app.exceptions import NotFoundError, AlreadyExistsError

NONEXISTENT_ID = 99999


class TestCreateCategory:
    def test_create_category_success(self, session: Session):
        category = category_service.create_category(
            session, CategoryCreate(name="Education", description="Tutoring")
        )
        assert category.id_categ is not None
        assert category.name == "Education"

    def test_create_duplicate_name(self, session: Session, category: Category):
        with pytest.raises(AlreadyExistsError) as exc_info:
            category_service.create_category(
                session, CategoryCreate(name="Environment")
            )
        assert exc_info.value.field == "name"


class TestReadCategories:
    def test_get_all_sorted_by_name(self, session: Session):
        for name in ["Health", "Animals", "Culture"]:
            category_service.create_category(session, CategoryCreate(name=name))

        names = [c.name for c in category_service.get_all_categories(session)]
        assert names == ["Animals", "Culture", "Health"]

    def test_popularity_counts_tagged_projects(
        self, session: Session, category: Category, project: Project
    ):
        unused = category_service.create_category(
            session, CategoryCreate(name="Unused")
        )

        publics = category_service.to_category_public_batch(session, [category, unused])

        assert [p.popularity for p in publics] == [1, 0]

    def test_get_category_projects(
        self, session: Session, category: Category, project: Project
    ):
        projects = category_service.get_category_projects(session, category.id_categ)
        assert [p.id_project for p in projects] == [project.id_project]

    def test_get_category_projects_not_found(self, session: Session):
        with pytest.raises(NotFoundError):
            category_service.get_category_projects(session, NONEXISTENT_ID)

    def test_resolve_categories_missing_id(self, session: Session, category: Category):
        with pytest.raises(NotFoundError) as exc_info:
            category_service.resolve_categories(
                session, [category.id_categ, NONEXISTENT_ID]
            )
        assert exc_info.value.identifier == NONEXISTENT_ID


class TestUpdateCategory:
    def test_update_description(self, session: Session, category: Category):
        updated = category_service.update_category(
            session, category.id_categ, CategoryUpdate(description="Nature")
        )
        assert updated.name == "Environment"
        assert updated.description == "Nature"

    def test_rename_to_existing_name(self, session: Session, category: Category):
        other = category_service.create_category(session, CategoryCreate(name="Health"))
        with pytest.raises(AlreadyExistsError):
            category_service.update_category(
                session, other.id_categ, CategoryUpdate(name="Environment")
            )

    def test_update_not_found(self, session: Session):
        with pytest.raises(NotFoundError):
            category_service.update_category(
                session, NONEXISTENT_ID, CategoryUpdate(name="X")
            )


class TestDeleteCategory:
    def test_delete_untags_projects(
        self, session: Session, category: Category, project: Project
    ):
        category_id = category.id_categ

        category_service.delete_category(session, category_id)

        assert session.get(Category, category_id) is None
        assert session.get(Project, project.id_project) is not None
        assert session.exec(select(ProjectCategory)).all() == []
