from typing import TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship
from app.models.project_category import ProjectCategory

if TYPE_CHECKING:
    from app.models.project import Project


class CategoryBase(SQLModel):
    name: str = Field(max_length=50)
    description: str = Field(default="", max_length=500)


class Category(CategoryBase, table=True):
    id_categ: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=50, unique=True, index=True)
    projects: list["Project"] = Relationship(
        back_populates="categories", link_model=ProjectCategory
    )


class CategoryCreate(CategoryBase):
    pass


class CategoryPublic(CategoryBase):
    id_categ: int
    popularity: int = 0


class CategoryUpdate(SQLModel):
    name: str | None = Field(default=None, max_length=50)
    description: str | None = Field(default=None, max_length=500)
