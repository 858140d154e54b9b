# backend/ledger/api/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db
from ..services.cleanup import CleanupService
from ..services.store import ProjectStore


def get_cleanup_service() -> CleanupService:
    return CleanupService(settings.UPLOADS_PATH)


def get_store(
    db: Session = Depends(get_db),
    cleanup: CleanupService = Depends(get_cleanup_service),
) -> ProjectStore:
    return ProjectStore(db, cleanup)
