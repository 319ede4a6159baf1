from fastapi import APIRouter, Depends, status
from typing import List, Optional
from datetime import date
from hotel_admin.database.db_operations import DBOperations, get_db
from hotel_admin.models.maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceUpdate
from hotel_admin.services.maintenance_service import MaintenanceService
from hotel_admin.utils.auth import actor, require_permission

router = APIRouter(prefix="/maintenance", tags=["Maintenance"])

def get_maintenance_service(db: DBOperations = Depends(get_db)) -> MaintenanceService:
    return MaintenanceService(db)

@router.post("/", response_model=MaintenanceResponse, status_code=status.HTTP_201_CREATED)
async def schedule_maintenance(
    maintenance: MaintenanceCreate,
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    """Schedule maintenance and set the room's status to maintenance"""
    return await service.schedule_maintenance(maintenance, scheduled_by=actor(current_user))

@router.get("/", response_model=List[MaintenanceResponse])
async def get_maintenance_records(
    room_id: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    """Get maintenance records, optionally for one room and/or overlapping [start, end]"""
    return await service.list_maintenance(room_id=room_id, start=start, end=end)

@router.get("/{maintenance_id}", response_model=MaintenanceResponse)
async def get_maintenance(
    maintenance_id: str,
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    return await service.get_maintenance(maintenance_id)

@router.put("/{maintenance_id}", response_model=MaintenanceResponse)
async def update_maintenance(
    maintenance_id: str,
    maintenance_update: MaintenanceUpdate,
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    """Update dates, reason or status (the room status is not changed)"""
    return await service.update_maintenance(maintenance_id, maintenance_update)

@router.delete("/{maintenance_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_maintenance(
    maintenance_id: str,
    current_user: dict = Depends(require_permission("can_manage_rooms")),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    await service.delete_maintenance(maintenance_id)
