# backend/ledger/api/todos.py
from fastapi import APIRouter, Depends

from ..schemas import CreatedResponse, SuccessResponse, TodoCreate, TodoStatusUpdate
from ..services.store import ProjectStore
from ..utils.logging import api_logger
from .dependencies import get_store

router = APIRouter(prefix="/api", tags=["todos"])


@router.post("/projects/{project_id}/todos", response_model=CreatedResponse)
async def add_todo(project_id: int, todo: TodoCreate, store: ProjectStore = Depends(get_store)):
    todo_id = store.add_todo(project_id, todo.task, todo.priority)
    api_logger.info("Todo added", extra={"project_id": project_id, "todo_id": todo_id})
    return {"id": todo_id}


@router.patch("/todos/{todo_id}", response_model=SuccessResponse)
async def set_todo_status(todo_id: int, update: TodoStatusUpdate, store: ProjectStore = Depends(get_store)):
    changes = store.set_todo_status(todo_id, update.status)
    api_logger.info("Todo status set", extra={
        "todo_id": todo_id,
        "status": update.status,
        "changes": changes
    })
    return {"success": True}
