from sqlmodel import Session, select
from loguru import logger
from sqlalchemy.exc import IntegrityError

from app.core.config import get_settings
from app.models.admin import Admin
from app.models.category import Category
from app.core.password import get_password_hash
from app.exceptions import AlreadyExistsError
from app.database.init_sample_data import init_sample_data

DEFAULT_CATEGORIES = {
    "Environment": "Nature, biodiversity and climate projects",
    "Education": "Tutoring, mentoring and workshops",
    "Food Aid": "Food banks, pantries and shared meals",
    "Health": "Prevention, care support and wellbeing",
    "Community": "Neighbourhood life and local events",
    "Technology": "Software, websites and digital literacy",
    "Culture": "Arts, heritage and music",
    "Animals": "Shelters and animal welfare",
}


def init_db(session: Session) -> None:
    """
    Ensure the configured initial superuser and default categories exist.

    If FIRST_SUPERUSER_EMAIL or FIRST_SUPERUSER_PASSWORD is not set, admin
    creation is skipped with a warning. Sample data is seeded afterwards in
    development and staging.

    Raises:
        AlreadyExistsError: If a unique constraint prevents creating the admin.
    """
    settings = get_settings()
    if (
        not settings.FIRST_SUPERUSER_EMAIL
        or not settings.FIRST_SUPERUSER_PASSWORD.get_secret_value()
        or not settings.FIRST_SUPERUSER_USERNAME
    ):
        logger.warning("First superuser not configured. Skipping creation.")
    else:
        _init_superuser(session)

    init_categories(session)

    if settings.ENVIRONMENT in ("development", "staging"):
        init_sample_data(session)


def _init_superuser(session: Session) -> None:
    settings = get_settings()
    admin = session.exec(
        select(Admin).where(Admin.username == settings.FIRST_SUPERUSER_USERNAME)
    ).first()
    if admin:
        logger.info("First superuser already exists")
        return

    admin = Admin(
        email=settings.FIRST_SUPERUSER_EMAIL,
        username=settings.FIRST_SUPERUSER_USERNAME,
        hashed_password=get_password_hash(
            settings.FIRST_SUPERUSER_PASSWORD.get_secret_value()
        ),
        first_name="Initial",
        last_name="Admin",
    )
    try:
        session.add(admin)
        session.commit()
        logger.info("First superuser created successfully")
    except IntegrityError:
        session.rollback()
        logger.error("First superuser already exists (constraint violation)")
        raise AlreadyExistsError(
            "Admin", "username", settings.FIRST_SUPERUSER_USERNAME
        )


def init_categories(session: Session) -> None:
    """
    Ensure the default categories exist. Idempotent.
    """
    created_count = 0
    for name, description in DEFAULT_CATEGORIES.items():
        existing = session.exec(select(Category).where(Category.name == name)).first()
        if not existing:
            session.add(Category(name=name, description=description))
            created_count += 1

    if created_count > 0:
        session.commit()
        logger.info(f"Created {created_count} new categories")
    else:
        logger.info("All categories already exist")
