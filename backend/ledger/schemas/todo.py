# backend/ledger/schemas/todo.py
from .base import BaseSchema
from ..models.todo import TodoPriority


class TodoCreate(BaseSchema):
    task: str
    priority: TodoPriority = TodoPriority.MEDIUM


class TodoStatusUpdate(BaseSchema):
    # Checked against TodoStatus by the store
    status: str


class Todo(BaseSchema):
    id: int
    project_id: int
    task: str
    status: str
    priority: str
