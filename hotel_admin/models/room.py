from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from enum import Enum
from typing import List, Optional, Literal

from hotel_admin.utils.amenities import AMENITY_IDS


class RoomStatus(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    CLEANING = "cleaning"
    DO_NOT_DISTURB = "do-not-disturb"


RoomType = Literal["standard", "deluxe", "suite"]


def _normalize_amenities(amenities: Optional[List[str]]) -> Optional[List[str]]:
    if amenities is None:
        return None
    unknown = [a for a in amenities if a not in AMENITY_IDS]
    if unknown:
        raise ValueError(f"Unknown amenities: {', '.join(unknown)}")
    # amenities are a set; keep first-seen order for display
    return list(dict.fromkeys(amenities))


class RoomBase(BaseModel):
    number: str = Field(..., min_length=1, description="Room number (e.g. '101')")
    type: RoomType
    price: float = Field(..., ge=0, description="Price per night")
    status: RoomStatus = RoomStatus.AVAILABLE
    description: str = ""
    capacity: int = Field(..., gt=0, description="Maximum number of guests")
    amenities: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)

    @field_validator('amenities')
    @classmethod
    def validate_amenities(cls, v):
        return _normalize_amenities(v)

class RoomCreate(RoomBase):
    pass

class RoomUpdate(BaseModel):
    number: Optional[str] = Field(None, min_length=1)
    type: Optional[RoomType] = None
    price: Optional[float] = Field(None, ge=0)
    status: Optional[RoomStatus] = None
    description: Optional[str] = None
    capacity: Optional[int] = Field(None, gt=0)
    amenities: Optional[List[str]] = None

    @field_validator('amenities')
    @classmethod
    def validate_amenities(cls, v):
        return _normalize_amenities(v)

class RoomImagesUpdate(BaseModel):
    images: List[str]

class RoomResponse(RoomBase):
    id: str = Field(alias="_id")
    created_at: datetime
    updated_at: datetime
    last_updated: Optional[datetime] = None
    updated_by: Optional[str] = None

    class Config:
        populate_by_name = True
