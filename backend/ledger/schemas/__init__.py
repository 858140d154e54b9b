# backend/ledger/schemas/__init__.py
from .base import SuccessResponse, CreatedResponse
from .project import (
    Project, ProjectCreate, ProjectUpdate, ProjectSummary, ProjectDetail, ProjectDeleted
)
from .section import Section, SectionUpsert
from .file import ProjectFile, FileCreated
from .todo import Todo, TodoCreate, TodoStatusUpdate
from .hours import HoursEntry, HoursEntryCreate

__all__ = [
    "SuccessResponse", "CreatedResponse",
    "Project", "ProjectCreate", "ProjectUpdate", "ProjectSummary", "ProjectDetail", "ProjectDeleted",
    "Section", "SectionUpsert",
    "ProjectFile", "FileCreated",
    "Todo", "TodoCreate", "TodoStatusUpdate",
    "HoursEntry", "HoursEntryCreate"
]
