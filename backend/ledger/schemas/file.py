# backend/ledger/schemas/file.py
from .base import BaseSchema, TimestampMixin
from typing import Optional


class ProjectFile(BaseSchema, TimestampMixin):
    id: int
    project_id: int
    section_type: str
    filename: str
    original_name: str
    mime_type: Optional[str] = None


class FileCreated(BaseSchema):
    id: int
    filename: str
