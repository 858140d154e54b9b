# backend/ledger/models/file.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base


class ProjectFile(Base):
    __tablename__ = "project_files"
    __table_args__ = (
        Index("ix_project_files_project_mime", "project_id", "mime_type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    section_type = Column(String(50), nullable=False)
    filename = Column(String(255), nullable=False, unique=True)  # storage name on disk
    original_name = Column(String(255), nullable=False)
    mime_type = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    project = relationship("Project", back_populates="files")
