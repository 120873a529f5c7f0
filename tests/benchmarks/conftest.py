"""Shared fixtures for benchmark tests."""

import uuid
from datetime import date

import pytest
from sqlmodel import Session, create_engine, SQLModel
from sqlmodel.pool import StaticPool

from app.models.category import CategoryCreate
from app.models.project import ProjectCreate
from app.models.user import UserCreate
from app.models.volunteer import VolunteerCreate
from app.services import category as category_service
from app.services import project as project_service
from app.services import volunteer as volunteer_service


@pytest.fixture(name="session")
def session_fixture():
    """
    Create and yield a Session bound to a fresh in-memory SQLite database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="bench_volunteer_factory")
def bench_volunteer_factory_fixture(session: Session):
    """
    Create a factory registering volunteers with unique usernames.

    Returns:
        Callable[[], Volunteer]: Each call commits a new volunteer.
    """

    def create():
        unique = uuid.uuid4().hex[:8]
        return volunteer_service.create_volunteer(
            session,
            UserCreate(
                username=f"bench_{unique}",
                email=f"bench_{unique}@example.com",
                password="BenchPass123",
            ),
            VolunteerCreate(
                name="Bench",
                surname=unique,
                birth_date=date(1995, 1, 1),
                contact="0601020304",
                skills=["benchmarking"],
            ),
        )

    return create


@pytest.fixture(name="bench_project")
def bench_project_fixture(session: Session, bench_volunteer_factory):
    """A project owned by a fresh volunteer, tagged with one category."""
    owner = bench_volunteer_factory()
    category = category_service.create_category(
        session, CategoryCreate(name=f"Bench {uuid.uuid4().hex[:8]}")
    )
    return project_service.create_project(
        session,
        ProjectCreate(
            name="Bench Project",
            description="Benchmark project",
            category_ids=[category.id_categ],
        ),
        owner_id=owner.id_volunteer,
    )
