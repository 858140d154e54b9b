# backend/ledger/services/__init__.py
from .cleanup import CleanupService
from .store import ProjectStore
from .handover import handover_exporter, handover_filename

__all__ = ["CleanupService", "ProjectStore", "handover_exporter", "handover_filename"]
