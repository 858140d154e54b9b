# backend/ledger/schemas/base.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

class TimestampMixin(BaseModel):
    created_at: Optional[datetime] = None

class SuccessResponse(BaseModel):
    success: bool = True

class CreatedResponse(BaseModel):
    id: int
