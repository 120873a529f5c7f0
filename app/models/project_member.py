"""Project roster: explicit volunteer-project membership relation."""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class ProjectMember(SQLModel, table=True):
    """
    One row per (volunteer, project) membership.

    The composite primary key keeps a volunteer on a project's roster at most
    once. Volunteer and Project hold no object lists of each other; rosters
    and participations are read by querying this table.
    """

    id_volunteer: int = Field(foreign_key="volunteer.id_volunteer", primary_key=True)
    id_project: int = Field(foreign_key="project.id_project", primary_key=True)
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
