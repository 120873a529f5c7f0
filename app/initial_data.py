from loguru import logger
from sqlmodel import Session

from app.database.database import engine, create_db_and_tables
from app.database.init_db import init_db
from app.utils.logger import setup_logging


def init() -> None:
    """
    Create the database schema and seed the superuser, categories and, outside
    production, the sample data.
    """
    create_db_and_tables()
    with Session(engine) as session:
        init_db(session)


def main() -> None:
    setup_logging()
    logger.info("Creating initial data")
    init()
    logger.info("Initial data created")


if __name__ == "__main__":
    main()
