# backend/ledger/schemas/hours.py
from typing import Optional

from .base import BaseSchema


class HoursEntryCreate(BaseSchema):
    date: str
    duration: float
    description: Optional[str] = None


class HoursEntry(HoursEntryCreate):
    id: int
    project_id: int
