from pydantic import BaseModel, Field, model_validator
from datetime import date, datetime
from enum import Enum
from typing import Optional


class MaintenanceStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class MaintenanceBase(BaseModel):
    room_id: str = Field(..., description="Room ID")
    start_date: date
    end_date: date
    reason: str = Field(..., min_length=1, max_length=500)
    notes: Optional[str] = None
    status: MaintenanceStatus = MaintenanceStatus.SCHEDULED

class MaintenanceCreate(MaintenanceBase):
    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("End date must not be before start date")
        return self

class MaintenanceUpdate(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reason: Optional[str] = Field(None, min_length=1, max_length=500)
    notes: Optional[str] = None
    status: Optional[MaintenanceStatus] = None

class MaintenanceResponse(MaintenanceBase):
    id: str = Field(alias="_id")
    created_at: datetime
    updated_at: datetime

    class Config:
        populate_by_name = True
