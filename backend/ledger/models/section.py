# backend/ledger/models/section.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base

# Section vocabulary used by the UI; the column itself accepts any label
SECTION_TYPES = (
    "overview",
    "requirements",
    "todo",
    "hours",
    "scope",
    "billing",
    "comms",
    "qa",
    "assets",
    "progress",
)


class Section(Base):
    __tablename__ = "project_sections"
    __table_args__ = (
        UniqueConstraint("project_id", "section_type", name="uq_section_project_type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    section_type = Column(String(50), nullable=False)
    content = Column(Text, nullable=True)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now()
    )

    project = relationship("Project", back_populates="sections")
