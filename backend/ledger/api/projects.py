# backend/ledger/api/projects.py
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from ..exceptions import LedgerError
from ..schemas import (
    CreatedResponse, ProjectCreate, ProjectDeleted, ProjectDetail, ProjectSummary,
    ProjectUpdate, SectionUpsert, SuccessResponse
)
from ..services.handover import handover_exporter, handover_filename
from ..services.store import ProjectStore
from ..utils.logging import api_logger
from .dependencies import get_store

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=List[ProjectSummary])
async def list_projects(store: ProjectStore = Depends(get_store)):
    """List all projects, newest first"""
    api_logger.info("Starting projects list operation", extra={
        "endpoint": "/api/projects",
        "method": "GET"
    })
    projects = store.list_projects()
    api_logger.info(f"Found {len(projects)} projects")
    return projects


@router.post("", response_model=CreatedResponse)
async def create_project(project: ProjectCreate, store: ProjectStore = Depends(get_store)):
    api_logger.info("Creating new project", extra={"project_name": project.name})

    project_id = store.create_project(project.name, project.client_name)

    api_logger.info("Project created successfully", extra={
        "project_id": project_id,
        "project_name": project.name
    })
    return {"id": project_id}


@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(project_id: int, store: ProjectStore = Depends(get_store)):
    api_logger.info("Fetching project", extra={"project_id": project_id})

    try:
        detail = store.get_project_detail(project_id)
    except LedgerError as e:
        api_logger.warning("Failed to get project", extra={
            "project_id": project_id,
            "error": e.message
        })
        raise

    api_logger.info("Project retrieved successfully", extra={
        "project_id": project_id,
        "todo_count": len(detail.todos),
        "file_count": len(detail.files)
    })
    return detail


@router.patch("/{project_id}", response_model=SuccessResponse)
async def update_project(project_id: int, project: ProjectUpdate, store: ProjectStore = Depends(get_store)):
    api_logger.info("Updating project", extra={"project_id": project_id})

    changes = store.update_project(project_id, project.model_dump(exclude_unset=True))
    if changes == 0:
        api_logger.warning("Project update matched no rows", extra={"project_id": project_id})

    return {"success": True}


@router.delete("/{project_id}", response_model=ProjectDeleted)
async def delete_project(project_id: int, store: ProjectStore = Depends(get_store)):
    api_logger.info(f"Attempting to delete project {project_id}")

    try:
        changes = store.delete_project(project_id)
    except LedgerError as e:
        api_logger.error(f"Failed to delete project: {e.message}", extra={"project_id": project_id})
        raise

    api_logger.info(f"Successfully deleted project {project_id}")
    return {"success": True, "changes": changes}


@router.patch("/{project_id}/section", response_model=SuccessResponse)
async def upsert_section(project_id: int, section: SectionUpsert, store: ProjectStore = Depends(get_store)):
    api_logger.info("Saving section", extra={
        "project_id": project_id,
        "section_type": section.section_type
    })
    store.upsert_section(project_id, section.section_type, section.content)
    return {"success": True}


@router.get("/{project_id}/export", response_class=HTMLResponse)
async def export_handover(project_id: int, store: ProjectStore = Depends(get_store)):
    """Render the client handover document as a downloadable HTML file"""
    detail = store.get_project_detail(project_id)
    document = handover_exporter.render(detail, detail.sections, detail.todos, detail.hours)
    filename = handover_filename(detail.name)

    api_logger.info("Exported handover document", extra={
        "project_id": project_id,
        "export_filename": filename
    })
    return HTMLResponse(
        content=document,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
