"""
Authentication routes
"""
from fastapi import APIRouter, Depends
from hotel_admin.database.db_operations import DBOperations, get_db
from hotel_admin.models.auth import LoginRequest, LoginResponse, MeResponse, PermissionCheckResponse
from hotel_admin.models.permissions import PermissionFlag
from hotel_admin.services.auth_service import AuthService
from hotel_admin.utils.auth import get_current_user

router = APIRouter(prefix="/auth", tags=["Auth"])

def get_auth_service(db: DBOperations = Depends(get_db)) -> AuthService:
    return AuthService(db)


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Sign in an admin or staff member and return a bearer token"""
    return await service.sign_in(credentials.email, credentials.password)


@router.get("/me", response_model=MeResponse)
async def get_me(
    current_user: dict = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """Signed-in profile with its resolved capability flags"""
    return service.describe_session(current_user)


@router.get("/permissions/{flag}", response_model=PermissionCheckResponse)
async def check_permission(
    flag: PermissionFlag,
    current_user: dict = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    user_id = str(current_user["_id"])
    allowed = await service.check_permission(user_id, flag)
    return PermissionCheckResponse(permission=flag, allowed=allowed, user_id=user_id)
