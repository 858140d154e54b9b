# backend/ledger/__init__.py
from .config import settings
from .database import Base, Database, get_db
from . import models
from . import schemas
from . import api
from . import services

__version__ = "0.1.0"
