from pydantic import BaseModel, EmailStr, Field, model_validator
from datetime import date, datetime
from enum import Enum
from typing import Optional, Literal

from hotel_admin.models.room import RoomStatus


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class BookingBase(BaseModel):
    room_id: str = Field(..., description="Room ID")

    # Guest contact
    guest_name: str = Field(..., min_length=1)
    guest_email: EmailStr
    guest_phone: str = Field(..., min_length=1, max_length=30)

    # Stay
    check_in: date
    check_out: date

    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    special_requests: Optional[str] = None
    total_price: float = Field(..., ge=0)

class BookingCreate(BookingBase):
    @model_validator(mode="after")
    def check_dates(self):
        if self.check_out <= self.check_in:
            raise ValueError("Check-out must be after check-in")
        return self

class BookingUpdate(BaseModel):
    guest_name: Optional[str] = Field(None, min_length=1)
    guest_email: Optional[EmailStr] = None
    guest_phone: Optional[str] = Field(None, min_length=1, max_length=30)
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None
    special_requests: Optional[str] = None
    total_price: Optional[float] = Field(None, ge=0)

class BookingResponse(BookingBase):
    guest_email: str
    id: str = Field(alias="_id")
    created_at: datetime
    updated_at: datetime

    class Config:
        populate_by_name = True


RoomSyncState = Literal["not_required", "applied", "failed"]

class BookingUpdateResult(BaseModel):
    """Outcome of a booking write plus its dependent room-status write"""
    booking: BookingResponse
    room_id: str
    room_status: Optional[RoomStatus] = None
    room_sync: RoomSyncState = "not_required"
    room_sync_error: Optional[str] = None
