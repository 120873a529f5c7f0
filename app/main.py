from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.database.database import create_db_and_tables
from app.utils.logger import setup_logging
from app.core.config import get_settings, parse_comma_separated_origins
from app.core.error_handlers import register_exception_handlers
from app.core.telemetry import setup_telemetry
from app.internal import admin
from app.routers import auth, category, project, request, volunteer


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Set up logging, create the tables and start telemetry before serving.
    """
    setup_logging()
    create_db_and_tables()
    setup_telemetry(app)
    yield


app = FastAPI(
    title="Volunteer Matchmaking API",
    description="RESTful API matching volunteers with projects through join requests",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        str(origin)
        for origin in parse_comma_separated_origins(get_settings().BACKEND_CORS_ORIGINS)
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health", include_in_schema=False)
def health_check():
    """
    Liveness probe.

    Returns:
        dict: `{"status": "ok"}`.
    """
    return {"status": "ok"}


app.include_router(auth.router)
app.include_router(volunteer.router)
app.include_router(project.router)
app.include_router(category.router)
app.include_router(request.router)
app.include_router(admin.router)
