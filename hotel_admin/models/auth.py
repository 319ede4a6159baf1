"""
Authentication schemas
"""
from pydantic import BaseModel, Field
from typing import Optional

from hotel_admin.models.permissions import Permissions, StoredPermissions
from hotel_admin.models.staff import StaffRole


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class SessionProfile(BaseModel):
    """The signed-in admin or staff member"""
    id: str = Field(alias="_id")
    email: str
    display_name: str
    role: StaffRole
    permissions: StoredPermissions = Field(default_factory=StoredPermissions)

    class Config:
        populate_by_name = True

class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    profile: SessionProfile
    permissions: Permissions

class MeResponse(BaseModel):
    profile: SessionProfile
    permissions: Permissions

class PermissionCheckResponse(BaseModel):
    permission: str
    allowed: bool
    user_id: Optional[str] = None
