"""Sample data initialization script for non-production environments.

This module seeds the database with a small, coherent data set for
development and staging. Run automatically when ENVIRONMENT is 'development'
or 'staging' during database initialization.

Features:
- Creates three volunteers with skills and interests
- Sets up projects tagged with seeded categories
- Walks join requests through every state (pending, accepted, declined)
- Idempotent: Safe to run multiple times

Safety:
- Raises error if attempted in production
- Checks if data already exists before creating
"""

from datetime import date
from typing import Any, cast
from sqlmodel import Session, select
from loguru import logger

from app.core.config import get_settings
from app.models.user import UserCreate, User
from app.models.volunteer import VolunteerCreate
from app.models.project import ProjectCreate
from app.models.category import Category
from app.services import volunteer as volunteer_service
from app.services import project as project_service
from app.services import request as request_service
from app.utils.validation import ensure_id


def init_sample_data(session: Session) -> None:
    """
    Initialize sample data for non-production environments.

    Args:
        session: Database session for data creation

    Raises:
        RuntimeError: If attempted to run in production environment
    """
    settings = get_settings()
    if settings.ENVIRONMENT == "production":
        raise RuntimeError(
            "Sample data initialization cannot run in production environment! "
            "This is a safety measure to prevent accidental data seeding in production."
        )

    if session.exec(select(User).where(User.email == "alice@example.com")).first():
        logger.info("Sample data already exists. Skipping initialization.")
        return

    logger.info(f"Initializing sample data for {settings.ENVIRONMENT} environment...")

    pwd = "password"

    # --- 1. Volunteers ---
    volunteers_config: list[dict[str, Any]] = [
        {
            "key": "alice",
            "user": {"username": "alice", "email": "alice@example.com", "password": pwd},
            "profile": {
                "name": "Alice",
                "surname": "Johnson",
                "birth_date": date(1990, 1, 1),
                "contact": "0601010101",
                "skills": ["gardening", "first aid"],
                "interests": ["environment"],
            },
        },
        {
            "key": "bob",
            "user": {"username": "bob", "email": "bob@example.com", "password": pwd},
            "profile": {
                "name": "Bob",
                "surname": "Smith",
                "birth_date": date(1985, 5, 20),
                "contact": "0602020202",
                "skills": ["construction", "driving"],
                "interests": ["housing", "environment"],
            },
        },
        {
            "key": "charlie",
            "user": {
                "username": "charlie",
                "email": "charlie@example.com",
                "password": pwd,
            },
            "profile": {
                "name": "Charlie",
                "surname": "Brown",
                "birth_date": date(1995, 8, 15),
                "contact": "0603030303",
                "skills": ["cooking"],
                "interests": ["food banks"],
            },
        },
    ]

    volunteers = {}
    logger.info(f"Creating {len(volunteers_config)} Volunteers...")
    for v_conf in volunteers_config:
        vol = volunteer_service.create_volunteer(
            session,
            UserCreate(**cast(dict[str, Any], v_conf["user"])),
            VolunteerCreate(**cast(dict[str, Any], v_conf["profile"])),
        )
        volunteers[v_conf["key"]] = vol

    # --- 2. Projects ---
    categories = {c.name: c.id_categ for c in session.exec(select(Category)).all()}

    def categ_ids(*names: str) -> list[int]:
        return [cast(int, categories[n]) for n in names if n in categories]

    garden = project_service.create_project(
        session,
        ProjectCreate(
            name="Community Garden",
            description="Turning an empty lot into a shared vegetable garden.",
            category_ids=categ_ids("Environment", "Community"),
        ),
        owner_id=ensure_id(volunteers["alice"].id_volunteer, "Volunteer"),
    )
    pantry = project_service.create_project(
        session,
        ProjectCreate(
            name="Neighbourhood Pantry",
            description="Weekly food collection and distribution.",
            category_ids=categ_ids("Food Aid"),
        ),
        owner_id=ensure_id(volunteers["bob"].id_volunteer, "Volunteer"),
    )
    logger.info("Created 2 Projects")

    # --- 3. Join requests ---
    garden_id = ensure_id(garden.id_project, "Project")
    pantry_id = ensure_id(pantry.id_project, "Project")

    accepted = request_service.create_request(session, garden_id, volunteers["bob"])
    request_service.accept_request(
        session, ensure_id(accepted.id_request, "VolunteerRequest"), volunteers["alice"]
    )

    declined = request_service.create_request(session, pantry_id, volunteers["alice"])
    request_service.decline_request(
        session, ensure_id(declined.id_request, "VolunteerRequest"), volunteers["bob"]
    )

    request_service.create_request(session, garden_id, volunteers["charlie"])
    logger.info("Created 3 Requests (accepted, declined, pending)")

    logger.info("Sample data initialization complete")
