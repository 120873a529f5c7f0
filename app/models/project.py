from typing import TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship
from app.models.project_category import ProjectCategory
from app.models.category import CategoryPublic

if TYPE_CHECKING:
    from app.models.category import Category


class ProjectBase(SQLModel):
    name: str = Field(max_length=100)
    description: str = Field(default="", max_length=3000)


class Project(ProjectBase, table=True):
    id_project: int | None = Field(default=None, primary_key=True)
    id_owner: int = Field(foreign_key="volunteer.id_volunteer", index=True)
    categories: list["Category"] = Relationship(
        back_populates="projects", link_model=ProjectCategory
    )


class ProjectCreate(ProjectBase):
    category_ids: list[int] = Field(default_factory=list)


class ProjectPublic(ProjectBase):
    id_project: int
    id_owner: int
    categories: list[CategoryPublic] = Field(default_factory=list)
    member_ids: list[int] = Field(default_factory=list)


class ProjectUpdate(SQLModel):
    name: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=3000)
    category_ids: list[int] | None = None


class OwnershipTransfer(SQLModel):
    id_volunteer: int
