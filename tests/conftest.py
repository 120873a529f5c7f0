import os

# The engine is built when app.database.database is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-only-min-32-chars")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.database.database import get_session  # noqa: E402
from app.core.password import get_password_hash  # noqa: E402
from app.core.security import create_access_token  # noqa: E402
from app.models.admin import Admin  # noqa: E402
from app.models.category import Category, CategoryCreate  # noqa: E402
from app.models.project import Project, ProjectCreate  # noqa: E402
from app.models.user import UserCreate  # noqa: E402
from app.models.volunteer import Volunteer, VolunteerCreate  # noqa: E402
from app.services import category as category_service  # noqa: E402
from app.services import project as project_service  # noqa: E402
from app.services import volunteer as volunteer_service  # noqa: E402

PASSWORD = "Password123"


def make_volunteer(session: Session, username: str, **profile) -> Volunteer:
    """Register a volunteer whose email is derived from the username."""
    volunteer_in = VolunteerCreate(
        name=profile.pop("name", username.capitalize()),
        surname=profile.pop("surname", "Test"),
        birth_date=profile.pop("birth_date", date(1990, 1, 1)),
        contact=profile.pop("contact", "0601020304"),
        **profile,
    )
    user_in = UserCreate(
        username=username, email=f"{username}@example.com", password=PASSWORD
    )
    return volunteer_service.create_volunteer(session, user_in, volunteer_in)


def auth_headers(username: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(data={'sub': username})}"}


@pytest.fixture(name="volunteer_factory")
def volunteer_factory_fixture(session: Session):
    """Callable registering a volunteer: `volunteer_factory("alice", skills=[...])`."""

    def create(username: str, **profile) -> Volunteer:
        return make_volunteer(session, username, **profile)

    return create


@pytest.fixture(name="token_headers")
def token_headers_fixture():
    """Callable building bearer headers for a username."""
    return auth_headers


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Provide a test database session."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """TestClient whose requests share the test session."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="owner")
def owner_fixture(session: Session) -> Volunteer:
    """Volunteer who owns `project`."""
    return make_volunteer(
        session, "owner", skills=["planning"], interests=["environment"]
    )


@pytest.fixture(name="sender")
def sender_fixture(session: Session) -> Volunteer:
    """Volunteer who asks to join `project`."""
    return make_volunteer(session, "sender", skills=["cooking"])


@pytest.fixture(name="outsider")
def outsider_fixture(session: Session) -> Volunteer:
    """Volunteer with no relation to `project`."""
    return make_volunteer(session, "outsider")


@pytest.fixture(name="category")
def category_fixture(session: Session) -> Category:
    return category_service.create_category(
        session, CategoryCreate(name="Environment", description="Green projects")
    )


@pytest.fixture(name="project")
def project_fixture(session: Session, owner: Volunteer, category: Category) -> Project:
    return project_service.create_project(
        session,
        ProjectCreate(
            name="Community Garden",
            description="Shared vegetable garden",
            category_ids=[category.id_categ],
        ),
        owner_id=owner.id_volunteer,
    )


@pytest.fixture(name="test_admin")
def test_admin_fixture(session: Session) -> Admin:
    """Create a test admin in the database."""
    admin = Admin(
        first_name="Test",
        last_name="Admin",
        email="admin@example.com",
        username="testadmin",
        hashed_password=get_password_hash("adminpassword123"),
    )
    session.add(admin)
    session.commit()
    session.refresh(admin)
    return admin


@pytest.fixture(name="admin_headers")
def admin_headers_fixture(test_admin: Admin) -> dict[str, str]:
    token = create_access_token(data={"sub": test_admin.username, "mode": "admin"})
    return {"Authorization": f"Bearer {token}"}
