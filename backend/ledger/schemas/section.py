# backend/ledger/schemas/section.py
from datetime import datetime
from typing import Optional

from .base import BaseSchema


class SectionUpsert(BaseSchema):
    section_type: str
    content: Optional[str] = None


class Section(SectionUpsert):
    id: int
    project_id: int
    updated_at: Optional[datetime] = None
