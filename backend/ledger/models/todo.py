# backend/ledger/models/todo.py
import enum

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from ..database import Base


class TodoStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class TodoPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    task = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, server_default=TodoStatus.PENDING.value)
    priority = Column(String(20), nullable=False, server_default=TodoPriority.MEDIUM.value)

    project = relationship("Project", back_populates="todos")
