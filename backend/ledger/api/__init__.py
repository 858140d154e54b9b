# backend/ledger/api/__init__.py
from .projects import router as projects_router
from .files import router as files_router
from .todos import router as todos_router
from .hours import router as hours_router

__all__ = ["projects_router", "files_router", "todos_router", "hours_router"]
