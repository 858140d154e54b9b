# backend/ledger/models/__init__.py
from ..database import Base
from .project import Project, ProjectStatus
from .section import Section, SECTION_TYPES
from .file import ProjectFile
from .todo import Todo, TodoStatus, TodoPriority
from .hours import HoursEntry

__all__ = [
    "Base",
    "Project",
    "ProjectStatus",
    "Section",
    "SECTION_TYPES",
    "ProjectFile",
    "Todo",
    "TodoStatus",
    "TodoPriority",
    "HoursEntry"
]
