from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional
from datetime import date
from hotel_admin.config.settings import settings
from hotel_admin.database.db_operations import DBOperations, get_db
from hotel_admin.models.booking import BookingCreate, BookingResponse, BookingUpdate, BookingUpdateResult
from hotel_admin.services.booking_service import BookingService
from hotel_admin.utils.auth import require_permission

router = APIRouter(prefix="/bookings", tags=["Bookings"])

def get_booking_service(db: DBOperations = Depends(get_db)) -> BookingService:
    return BookingService(db)

def _sync_status_code(result: BookingUpdateResult, response: Response) -> BookingUpdateResult:
    # 207: the booking was written but the room status was not
    if result.room_sync == "failed":
        response.status_code = status.HTTP_207_MULTI_STATUS
    return result

@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking: BookingCreate,
    current_user: dict = Depends(require_permission("can_manage_bookings")),
    bookings: BookingService = Depends(get_booking_service),
):
    """Create a new booking (pending / pending unless given)"""
    # No overlap check: the front desk resolves double bookings manually
    return await bookings.create_booking(booking)

@router.get("/", response_model=List[BookingResponse])
async def get_bookings(
    room_id: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    limit: int = Query(settings.MAX_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    current_user: dict = Depends(require_permission("can_view_bookings")),
    bookings: BookingService = Depends(get_booking_service),
):
    """Get bookings, newest first, optionally for one room and/or overlapping [start, end]"""
    return await bookings.list_bookings(room_id=room_id, start=start, end=end, limit=limit)

@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    current_user: dict = Depends(require_permission("can_view_bookings")),
    bookings: BookingService = Depends(get_booking_service),
):
    """Get booking by ID"""
    return await bookings.get_booking(booking_id)

@router.put("/{booking_id}", response_model=BookingUpdateResult)
async def update_booking(
    booking_id: str,
    booking_update: BookingUpdate,
    response: Response,
    current_user: dict = Depends(require_permission("can_edit_bookings")),
    bookings: BookingService = Depends(get_booking_service),
):
    """Update booking details; status or payment changes also update the room"""
    result = await bookings.update_booking_with_room(booking_id, booking_update)
    return _sync_status_code(result, response)

@router.post("/{booking_id}/sync-room", response_model=BookingUpdateResult)
async def sync_room_status(
    booking_id: str,
    response: Response,
    current_user: dict = Depends(require_permission("can_edit_bookings")),
    bookings: BookingService = Depends(get_booking_service),
):
    """Recompute and write the room status from the booking as stored"""
    result = await bookings.sync_room_status(booking_id)
    return _sync_status_code(result, response)

@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_booking(
    booking_id: str,
    current_user: dict = Depends(require_permission("can_delete_bookings")),
    bookings: BookingService = Depends(get_booking_service),
):
    """Delete booking"""
    await bookings.delete_booking(booking_id)
