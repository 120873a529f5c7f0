"""Project-Category junction table for many-to-many relationship."""

from sqlmodel import SQLModel, Field


class ProjectCategory(SQLModel, table=True):
    id_project: int = Field(foreign_key="project.id_project", primary_key=True)
    id_categ: int = Field(foreign_key="category.id_categ", primary_key=True)
