# backend/ledger/models/hours.py
from sqlalchemy import Column, Integer, String, Text, Float, ForeignKey
from sqlalchemy.orm import relationship

from ..database import Base


class HoursEntry(Base):
    __tablename__ = "hours_log"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    date = Column(String(32), nullable=False)  # caller-supplied, not parsed
    duration = Column(Float, nullable=False)
    description = Column(Text, nullable=True)

    project = relationship("Project", back_populates="hours")
