"""
Guest user model and schemas
"""
from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional, Literal
from datetime import datetime

UserStatus = Literal["active", "disabled"]

class UserBase(BaseModel):
    email: EmailStr
    display_name: str = Field(..., min_length=1, max_length=200)
    phone_number: Optional[str] = None

class UserCreate(UserBase):
    password: str = Field(..., min_length=6)

class UserUpdate(BaseModel):
    display_name: Optional[str] = Field(None, min_length=1, max_length=200)
    phone_number: Optional[str] = None

class UserResponse(UserBase):
    email: str
    id: str = Field(alias="_id")
    status: UserStatus
    bookings: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    last_login: Optional[datetime] = None

    class Config:
        populate_by_name = True

class AccountStatusUpdate(BaseModel):
    """Enable or disable a staff or guest account"""
    is_active: bool
