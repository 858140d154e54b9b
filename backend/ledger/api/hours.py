# backend/ledger/api/hours.py
from fastapi import APIRouter, Depends

from ..schemas import CreatedResponse, HoursEntryCreate
from ..services.store import ProjectStore
from ..utils.logging import api_logger
from .dependencies import get_store

router = APIRouter(prefix="/api/projects", tags=["hours"])


@router.post("/{project_id}/hours", response_model=CreatedResponse)
async def add_hours(project_id: int, entry: HoursEntryCreate, store: ProjectStore = Depends(get_store)):
    entry_id = store.add_hours(project_id, entry.date, entry.duration, entry.description)
    api_logger.info("Hours logged", extra={
        "project_id": project_id,
        "entry_id": entry_id,
        "duration": entry.duration
    })
    return {"id": entry_id}
