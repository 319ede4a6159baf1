from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from typing import List, Optional
from hotel_admin.database.db_operations import DBOperations, get_db
from hotel_admin.models.room import RoomCreate, RoomImagesUpdate, RoomResponse, RoomStatus, RoomUpdate
from hotel_admin.services.room_service import RoomService
from hotel_admin.services.storage_service import ALLOWED_IMAGE_TYPES
from hotel_admin.utils.amenities import amenity_catalog
from hotel_admin.utils.auth import actor, get_current_user, require_permission

router = APIRouter(prefix="/rooms", tags=["Rooms"])

def get_room_service(db: DBOperations = Depends(get_db)) -> RoomService:
    return RoomService(db)

@router.get("/amenities")
async def get_amenities(current_user: dict = Depends(get_current_user)):
    """Predefined amenities grouped by category"""
    return amenity_catalog()

@router.post("/", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    room: RoomCreate,
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    rooms: RoomService = Depends(get_room_service),
):
    """Create new room"""
    return await rooms.create_room(room, created_by=actor(current_user))

@router.get("/", response_model=List[RoomResponse])
async def get_rooms(
    status_filter: Optional[RoomStatus] = Query(None, alias="status"),
    current_user: dict = Depends(get_current_user),
    rooms: RoomService = Depends(get_room_service),
):
    """Get all rooms ordered by room number, optionally filtered by status"""
    return await rooms.list_rooms(status=status_filter)

@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: str,
    current_user: dict = Depends(get_current_user),
    rooms: RoomService = Depends(get_room_service),
):
    """Get room by ID"""
    return await rooms.get_room(room_id)

@router.put("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: str,
    room_update: RoomUpdate,
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    rooms: RoomService = Depends(get_room_service),
):
    """Update room details or status"""
    update_data = room_update.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No fields to update")
    return await rooms.update_room(room_id, update_data, updated_by=actor(current_user))

@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(
    room_id: str,
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    rooms: RoomService = Depends(get_room_service),
):
    """Delete room"""
    # Bookings and maintenance records referencing the room are kept
    await rooms.delete_room(room_id)

@router.post("/{room_id}/images", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def upload_room_image(
    room_id: str,
    file: UploadFile = File(...),
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    rooms: RoomService = Depends(get_room_service),
):
    """Upload an image and append it to the room's gallery"""
    if file.content_type not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(status_code=400, detail="Only JPEG, PNG or WebP images allowed")
    return await rooms.add_room_image(room_id, file.file, file.filename, updated_by=actor(current_user))

@router.put("/{room_id}/images", response_model=RoomResponse)
async def replace_room_images(
    room_id: str,
    payload: RoomImagesUpdate,
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    rooms: RoomService = Depends(get_room_service),
):
    """Reorder or remove images; removed uploads are deleted from storage"""
    return await rooms.update_room_images(room_id, payload.images, updated_by=actor(current_user))
