"""
Staff member model and schemas
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Literal
from datetime import datetime

from hotel_admin.models.permissions import StoredPermissions

StaffRole = Literal["admin", "staff"]
StaffStatus = Literal["active", "inactive"]
Department = Literal["housekeeping", "maintenance", "frontdesk"]
Shift = Literal["day", "night"]

class StaffBase(BaseModel):
    email: EmailStr
    display_name: str = Field(..., min_length=1, max_length=200)
    role: StaffRole = "staff"
    department: Department = "frontdesk"
    shift: Shift = "day"
    phone_number: str = ""
    notes: str = ""
    permissions: StoredPermissions = Field(default_factory=StoredPermissions)

class StaffCreate(StaffBase):
    password: str = Field(..., min_length=6)

class StaffUpdate(BaseModel):
    email: Optional[EmailStr] = None
    display_name: Optional[str] = Field(None, min_length=1, max_length=200)
    department: Optional[Department] = None
    shift: Optional[Shift] = None
    phone_number: Optional[str] = None
    notes: Optional[str] = None
    permissions: Optional[StoredPermissions] = None
    password: Optional[str] = Field(None, min_length=6)

class StaffRoleUpdate(BaseModel):
    role: StaffRole

class StaffResponse(StaffBase):
    email: str
    id: str = Field(alias="_id")
    status: StaffStatus
    created_at: datetime
    updated_at: datetime
    last_login: Optional[datetime] = None

    class Config:
        populate_by_name = True
