"""
Staff routes
"""
from fastapi import APIRouter, Depends, status
from typing import List, Optional
from hotel_admin.database.db_operations import DBOperations, get_db
from hotel_admin.models.staff import StaffCreate, StaffResponse, StaffRole, StaffRoleUpdate, StaffUpdate
from hotel_admin.models.user import AccountStatusUpdate
from hotel_admin.services.staff_service import StaffService
from hotel_admin.utils.auth import require_permission

router = APIRouter(prefix="/staff", tags=["Staff"])

def get_staff_service(db: DBOperations = Depends(get_db)) -> StaffService:
    return StaffService(db)


@router.post("/", response_model=StaffResponse, status_code=status.HTTP_201_CREATED)
async def create_staff(
    staff: StaffCreate,
    current_user: dict = Depends(require_permission("can_manage_staff")),
    service: StaffService = Depends(get_staff_service),
):
    """Create a staff account (admin accounts need can_manage_roles)"""
    return await service.create_staff(staff, caller=current_user)


@router.get("/", response_model=List[StaffResponse])
async def get_staff_members(
    role: Optional[StaffRole] = None,
    current_user: dict = Depends(require_permission("can_manage_staff")),
    service: StaffService = Depends(get_staff_service),
):
    """Get all admins and staff, or only one role"""
    return await service.list_staff(role=role)


@router.get("/{staff_id}", response_model=StaffResponse)
async def get_staff_member(
    staff_id: str,
    current_user: dict = Depends(require_permission("can_manage_staff")),
    service: StaffService = Depends(get_staff_service),
):
    return await service.get_staff(staff_id)


@router.put("/{staff_id}", response_model=StaffResponse)
async def update_staff_member(
    staff_id: str,
    staff_update: StaffUpdate,
    current_user: dict = Depends(require_permission("can_manage_staff")),
    service: StaffService = Depends(get_staff_service),
):
    """Update profile fields, permission grants or password; admin targets need can_manage_roles"""
    return await service.update_staff(staff_id, staff_update, caller=current_user)


@router.patch("/{staff_id}/role", response_model=StaffResponse)
async def change_staff_role(
    staff_id: str,
    payload: StaffRoleUpdate,
    current_user: dict = Depends(require_permission("can_manage_roles")),
    service: StaffService = Depends(get_staff_service),
):
    """Promote or demote between admin and staff"""
    return await service.change_role(staff_id, payload.role)


@router.patch("/{staff_id}/status", response_model=StaffResponse)
async def set_staff_status(
    staff_id: str,
    payload: AccountStatusUpdate,
    current_user: dict = Depends(require_permission("can_toggle_user_status")),
    service: StaffService = Depends(get_staff_service),
):
    """Activate or deactivate a staff account"""
    return await service.set_status(staff_id, payload.is_active, caller=current_user)


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_staff_member(
    staff_id: str,
    current_user: dict = Depends(require_permission("can_manage_staff")),
    service: StaffService = Depends(get_staff_service),
):
    """Delete a staff account (admin accounts cannot be deleted)"""
    await service.delete_staff(staff_id)
