# backend/ledger/services/store.py
import math
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from ..exceptions import NotFoundError, PersistenceError, ValidationError
from ..models import HoursEntry, Project, ProjectFile, ProjectStatus, Section, Todo, TodoPriority, TodoStatus
from ..schemas.project import ProjectDetail, ProjectSummary
from ..utils.logging import db_logger
from .cleanup import CleanupService

UPDATABLE_PROJECT_FIELDS = ("name", "client_name", "status")


def _enum_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


class ProjectStore:
    """CRUD over projects and the rows they own.

    One store wraps one session; the API layer builds a store per request.
    Every write commits on its own. Database failures on reads and writes
    roll back and surface as PersistenceError.
    """

    def __init__(self, db: Session, cleanup: CleanupService):
        self.db = db
        self.cleanup = cleanup

    @contextmanager
    def _query(self, operation: str, **context):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            db_logger.error(f"Database error during {operation}", extra={**context, "error": str(e)})
            raise PersistenceError(f"Database error during {operation}") from e

    @contextmanager
    def _transaction(self, operation: str, **context):
        with self._query(operation, **context):
            yield
            self.db.commit()

    def _require_project(self, project_id: int) -> Project:
        with self._query("project lookup", project_id=project_id):
            project = self.db.get(Project, project_id)
        if project is None:
            raise NotFoundError("project", project_id)
        return project

    # Projects

    def list_projects(self) -> List[ProjectSummary]:
        """All projects, newest first, each with its derived thumbnail"""
        thumbnail = (
            select(ProjectFile.filename)
            .where(ProjectFile.project_id == Project.id)
            .where(ProjectFile.mime_type.like("image/%"))
            .order_by(ProjectFile.id)
            .limit(1)
            .correlate(Project)
            .scalar_subquery()
        )
        with self._query("project listing"):
            rows = self.db.execute(
                select(Project, thumbnail.label("thumbnail"))
                .order_by(Project.created_at.desc(), Project.id.desc())
            ).all()

        result = []
        for project, thumb in rows:
            summary = ProjectSummary.model_validate(project)
            summary.thumbnail = thumb
            result.append(summary)
        return result

    def get_thumbnail(self, project_id: int) -> Optional[str]:
        with self._query("thumbnail lookup", project_id=project_id):
            return self.db.scalar(
                select(ProjectFile.filename)
                .where(ProjectFile.project_id == project_id)
                .where(ProjectFile.mime_type.like("image/%"))
                .order_by(ProjectFile.id)
                .limit(1)
            )

    def create_project(self, name: Optional[str], client_name: Optional[str] = None) -> int:
        if not name or not name.strip():
            raise ValidationError("Project name is required")

        project = Project(name=name, client_name=client_name)
        with self._transaction("project creation", project_name=name):
            self.db.add(project)
            self.db.flush()
        db_logger.info("Project created", extra={"project_id": project.id})
        return project.id

    def update_project(self, project_id: int, changes: Dict[str, Any]) -> int:
        """Apply a partial update and return the number of rows changed.

        An unknown id changes nothing and is not an error.
        """
        values = {k: _enum_value(v) for k, v in changes.items() if k in UPDATABLE_PROJECT_FIELDS}
        if not values:
            raise ValidationError("No updates provided")
        if "name" in values and (not values["name"] or not str(values["name"]).strip()):
            raise ValidationError("Project name cannot be empty")
        if "status" in values and values["status"] not in {s.value for s in ProjectStatus}:
            raise ValidationError(f"Invalid project status: {values['status']}")

        with self._transaction("project update", project_id=project_id):
            result = self.db.execute(
                update(Project).where(Project.id == project_id).values(**values)
            )
        return result.rowcount

    def delete_project(self, project_id: int) -> int:
        """Remove stored binaries, then the project row and everything it owns.

        Disk cleanup is best effort and never changes the outcome of the row
        delete. Raises NotFoundError when no project row was deleted.
        """
        with self._query("project file listing", project_id=project_id):
            filenames = self.db.scalars(
                select(ProjectFile.filename).where(ProjectFile.project_id == project_id)
            ).all()
        db_logger.info(f"Found {len(filenames)} files to clean up", extra={"project_id": project_id})
        self.cleanup.delete_stored_files(filenames)

        with self._transaction("project deletion", project_id=project_id):
            result = self.db.execute(delete(Project).where(Project.id == project_id))

        if result.rowcount == 0:
            db_logger.warning("No project found for deletion", extra={"project_id": project_id})
            raise NotFoundError("project", project_id)
        return result.rowcount

    def get_project_detail(self, project_id: int) -> ProjectDetail:
        with self._query("project detail", project_id=project_id):
            project = self.db.scalar(
                select(Project)
                .options(
                    selectinload(Project.sections),
                    selectinload(Project.todos),
                    selectinload(Project.hours),
                    selectinload(Project.files),
                )
                .where(Project.id == project_id)
            )
        if project is None:
            raise NotFoundError("project", project_id)

        detail = ProjectDetail.model_validate(project)
        detail.total_hours = math.fsum(entry.duration for entry in detail.hours)
        return detail

    # Sections

    def _insert_for_dialect(self):
        if self.db.get_bind().dialect.name == "postgresql":
            return postgresql.insert
        return sqlite.insert

    def upsert_section(self, project_id: int, section_type: str, content: Optional[str]) -> None:
        """Insert or replace the section of this type in one statement"""
        if not section_type:
            raise ValidationError("section_type is required")
        self._require_project(project_id)

        insert = self._insert_for_dialect()
        stmt = insert(Section).values(
            project_id=project_id,
            section_type=section_type,
            content=content
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Section.project_id, Section.section_type],
            set_={"content": stmt.excluded.content, "updated_at": func.now()}
        )
        with self._transaction("section upsert", project_id=project_id, section_type=section_type):
            self.db.execute(stmt)

    # Files

    def add_file(self, project_id: int, section_type: str, filename: str,
                 original_name: str, mime_type: Optional[str]) -> Tuple[int, str]:
        """Record an already persisted binary against a project"""
        self._require_project(project_id)

        project_file = ProjectFile(
            project_id=project_id,
            section_type=section_type,
            filename=filename,
            original_name=original_name,
            mime_type=mime_type
        )
        with self._transaction("file registration", project_id=project_id, storage_name=filename):
            self.db.add(project_file)
            self.db.flush()
        return project_file.id, project_file.filename

    def delete_file(self, file_id: int) -> bool:
        """Delete the binary and its row; an unknown id is a no-op"""
        project_file = self.db.get(ProjectFile, file_id)
        if project_file is None:
            db_logger.debug("File not found, nothing to delete", extra={"file_id": file_id})
            return False

        self.cleanup.delete_stored_file(project_file.filename)
        with self._transaction("file deletion", file_id=file_id):
            self.db.delete(project_file)
        return True

    # Todos

    def add_todo(self, project_id: int, task: str, priority: str = TodoPriority.MEDIUM.value) -> int:
        priority = _enum_value(priority)
        if priority not in {p.value for p in TodoPriority}:
            raise ValidationError(f"Invalid todo priority: {priority}")
        self._require_project(project_id)

        todo = Todo(project_id=project_id, task=task, priority=priority)
        with self._transaction("todo creation", project_id=project_id):
            self.db.add(todo)
            self.db.flush()
        return todo.id

    def set_todo_status(self, todo_id: int, status: str) -> int:
        status = _enum_value(status)
        if status not in {s.value for s in TodoStatus}:
            raise ValidationError(f"Invalid todo status: {status}")

        with self._transaction("todo status update", todo_id=todo_id):
            result = self.db.execute(update(Todo).where(Todo.id == todo_id).values(status=status))
        return result.rowcount

    # Hours

    def add_hours(self, project_id: int, date: str, duration: float,
                  description: Optional[str] = None) -> int:
        if duration is None or not math.isfinite(duration) or duration <= 0:
            raise ValidationError("Duration must be a positive number of hours")
        self._require_project(project_id)

        entry = HoursEntry(project_id=project_id, date=date, duration=duration, description=description)
        with self._transaction("hours entry creation", project_id=project_id):
            self.db.add(entry)
            self.db.flush()
        return entry.id
