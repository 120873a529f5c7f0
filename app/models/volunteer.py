from datetime import date
from typing import TYPE_CHECKING
from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field, Relationship
from app.models.user import UserPublic

if TYPE_CHECKING:
    from app.models.user import User


class VolunteerBase(SQLModel):
    name: str = Field(max_length=50)
    surname: str = Field(max_length=50)
    birth_date: date
    contact: str = Field(max_length=50)
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)


class Volunteer(VolunteerBase, table=True):
    id_volunteer: int | None = Field(default=None, primary_key=True)
    id_user: int = Field(foreign_key="user.id_user", unique=True)
    skills: list[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    interests: list[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    reputation: int = Field(default=0)
    user: "User" = Relationship(back_populates="volunteer_profile")


class VolunteerCreate(VolunteerBase):
    pass


class VolunteerPublic(VolunteerBase):
    id_volunteer: int
    id_user: int
    reputation: int
    user: UserPublic | None = None


class VolunteerUpdate(SQLModel):
    email: str | None = None
    password: str | None = Field(default=None, min_length=8)
    name: str | None = Field(default=None, max_length=50)
    surname: str | None = Field(default=None, max_length=50)
    birth_date: date | None = None
    contact: str | None = Field(default=None, max_length=50)
    skills: list[str] | None = None
    interests: list[str] | None = None
    # reputation is maintained server side
