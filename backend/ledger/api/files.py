# backend/ledger/api/files.py
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ..config import settings
from ..exceptions import LedgerError, ValidationError
from ..schemas import FileCreated, SuccessResponse
from ..services.store import ProjectStore
from ..utils.files import detect_mime_type, save_upload_file
from ..utils.logging import api_logger
from .dependencies import get_store

router = APIRouter(prefix="/api", tags=["files"])


@router.post("/projects/{project_id}/files", response_model=FileCreated)
async def upload_file(
        project_id: int,
        section_type: str = Form(...),
        file: Optional[UploadFile] = File(None),
        store: ProjectStore = Depends(get_store)
):
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")

    api_logger.info("Uploading file", extra={
        "project_id": project_id,
        "section_type": section_type,
        "original_name": file.filename
    })

    stored_path = await save_upload_file(file, settings.UPLOADS_PATH)
    try:
        file_id, filename = store.add_file(
            project_id,
            section_type,
            stored_path.name,
            file.filename,
            detect_mime_type(file)
        )
    except LedgerError:
        # The row was never written, so the binary has no owner
        store.cleanup.delete_stored_file(stored_path.name)
        raise

    api_logger.info("File stored", extra={"file_id": file_id, "storage_name": filename})
    return {"id": file_id, "filename": filename}


@router.delete("/files/{file_id}", response_model=SuccessResponse)
async def delete_file(file_id: int, store: ProjectStore = Depends(get_store)):
    api_logger.info("Deleting file", extra={"file_id": file_id})
    store.delete_file(file_id)
    return {"success": True}
