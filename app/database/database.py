from app.core.config import get_settings
from sqlmodel import Session, SQLModel, create_engine

engine = create_engine(
    get_settings().DATABASE_URL,
    pool_pre_ping=True,
)


def create_db_and_tables():
    """
    Create all tables registered on `SQLModel.metadata` using the module-level engine.

    Importing `app.models` first makes sure every table class is registered.
    """
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    """
    Yield a SQLModel session bound to the module-level engine.

    One session is opened per HTTP request; anything not committed when the
    generator exits is rolled back as the session closes.
    """
    with Session(engine) as session:
        yield session
