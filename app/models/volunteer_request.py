from datetime import datetime, timezone
from sqlmodel import SQLModel, Field
from .enums import RequestStatus


class VolunteerRequestBase(SQLModel):
    id_sender: int = Field(foreign_key="volunteer.id_volunteer", index=True)
    id_receiver: int = Field(foreign_key="volunteer.id_volunteer", index=True)
    id_project: int = Field(foreign_key="project.id_project", index=True)
    status: RequestStatus = Field(default=RequestStatus.PENDING, index=True)


class VolunteerRequest(VolunteerRequestBase, table=True):
    id_request: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    decided_at: datetime | None = None


class VolunteerRequestPublic(VolunteerRequestBase):
    id_request: int
    created_at: datetime
    decided_at: datetime | None = None
