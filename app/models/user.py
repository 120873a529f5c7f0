from datetime import datetime, timezone
from typing import TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from app.models.volunteer import Volunteer


class UserBase(SQLModel):
    username: str = Field(unique=True, index=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=255)


class User(UserBase, table=True):
    id_user: int | None = Field(default=None, primary_key=True)
    hashed_password: str
    date_creation: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    volunteer_profile: "Volunteer" = Relationship(
        back_populates="user", sa_relationship_kwargs={"uselist": False}
    )


class UserCreate(UserBase):
    password: str = Field(min_length=8)


class UserPublic(UserBase):
    id_user: int
    date_creation: datetime


class UserUpdate(SQLModel):
    email: str | None = None
    password: str | None = Field(default=None, min_length=8)
