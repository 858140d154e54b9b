# backend/ledger/models/project.py
import enum

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class ProjectStatus(str, enum.Enum):
    ACTIVE = "active"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    client_name = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, server_default=ProjectStatus.ACTIVE.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Rows are removed by ON DELETE CASCADE, the ORM does not load them first
    sections = relationship("Section", back_populates="project",
                            cascade="all, delete-orphan", passive_deletes=True)
    files = relationship("ProjectFile", back_populates="project",
                         cascade="all, delete-orphan", passive_deletes=True,
                         order_by="ProjectFile.id")
    todos = relationship("Todo", back_populates="project",
                         cascade="all, delete-orphan", passive_deletes=True,
                         order_by="Todo.id")
    hours = relationship("HoursEntry", back_populates="project",
                         cascade="all, delete-orphan", passive_deletes=True,
                         order_by="HoursEntry.id")
