"""SQLModel tables and API schemas.

Importing this package registers every table on `SQLModel.metadata`.
"""

from app.models.enums import RequestStatus
from app.models.user import User, UserCreate, UserPublic, UserUpdate
from app.models.admin import Admin, AdminCreate, AdminPublic
from app.models.volunteer import (
    Volunteer,
    VolunteerCreate,
    VolunteerPublic,
    VolunteerUpdate,
)
from app.models.project_category import ProjectCategory
from app.models.project_member import ProjectMember
from app.models.category import Category, CategoryCreate, CategoryPublic, CategoryUpdate
from app.models.project import (
    Project,
    ProjectCreate,
    ProjectPublic,
    ProjectUpdate,
    OwnershipTransfer,
)
from app.models.volunteer_request import VolunteerRequest, VolunteerRequestPublic

__all__ = [
    "RequestStatus",
    "User",
    "UserCreate",
    "UserPublic",
    "UserUpdate",
    "Admin",
    "AdminCreate",
    "AdminPublic",
    "Volunteer",
    "VolunteerCreate",
    "VolunteerPublic",
    "VolunteerUpdate",
    "ProjectCategory",
    "ProjectMember",
    "Category",
    "CategoryCreate",
    "CategoryPublic",
    "CategoryUpdate",
    "Project",
    "ProjectCreate",
    "ProjectPublic",
    "ProjectUpdate",
    "OwnershipTransfer",
    "VolunteerRequest",
    "VolunteerRequestPublic",
]
