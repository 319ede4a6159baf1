"""
Guest user routes
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from hotel_admin.database.db_operations import DBOperations, get_db
from hotel_admin.models.user import AccountStatusUpdate, UserCreate, UserResponse, UserStatus, UserUpdate
from hotel_admin.services.user_service import UserService
from hotel_admin.utils.auth import require_permission

router = APIRouter(prefix="/users", tags=["Users"])

def get_user_service(db: DBOperations = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserCreate,
    current_user: dict = Depends(require_permission("can_edit_users")),
    service: UserService = Depends(get_user_service),
):
    return await service.create_user(user)


@router.get("/", response_model=List[UserResponse])
async def get_users(
    status_filter: Optional[UserStatus] = Query(None, alias="status"),
    current_user: dict = Depends(require_permission("can_view_users")),
    service: UserService = Depends(get_user_service),
):
    """Get guest users (staff and admins are listed under /staff)"""
    return await service.list_users(status=status_filter)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    current_user: dict = Depends(require_permission("can_view_users")),
    service: UserService = Depends(get_user_service),
):
    return await service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    user_update: UserUpdate,
    current_user: dict = Depends(require_permission("can_edit_users")),
    service: UserService = Depends(get_user_service),
):
    return await service.update_user(user_id, user_update)


@router.patch("/{user_id}/status", response_model=UserResponse)
async def set_user_status(
    user_id: str,
    payload: AccountStatusUpdate,
    current_user: dict = Depends(require_permission("can_toggle_user_status")),
    service: UserService = Depends(get_user_service),
):
    """Enable or disable a guest account"""
    return await service.set_status(user_id, payload.is_active)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    current_user: dict = Depends(require_permission("can_delete_users")),
    service: UserService = Depends(get_user_service),
):
    await service.delete_user(user_id)
