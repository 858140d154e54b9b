# backend/ledger/schemas/project.py
from typing import List, Optional

from pydantic import Field

from .base import BaseSchema, TimestampMixin, SuccessResponse
from .section import Section
from .file import ProjectFile
from .todo import Todo
from .hours import HoursEntry
from ..models.project import ProjectStatus


class ProjectBase(BaseSchema):
    name: str
    client_name: Optional[str] = None


class ProjectCreate(BaseSchema):
    # Emptiness is checked by the store so it can report a ValidationError
    name: Optional[str] = None
    client_name: Optional[str] = None


class ProjectUpdate(BaseSchema):
    name: Optional[str] = None
    client_name: Optional[str] = None
    status: Optional[ProjectStatus] = None


class Project(ProjectBase, TimestampMixin):
    id: int
    status: str


class ProjectSummary(Project):
    thumbnail: Optional[str] = None


class ProjectDetail(Project):
    sections: List[Section] = []
    todos: List[Todo] = []
    hours: List[HoursEntry] = []
    files: List[ProjectFile] = []
    total_hours: float = 0


class ProjectDeleted(SuccessResponse):
    changes: int = Field(ge=0)
