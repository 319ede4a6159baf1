"""
Authentication utilities - JWT, password hashing, and permission checks
"""
import logging
from datetime import datetime, timedelta
from typing import Dict, Optional
import bcrypt
from jose import JWTError, jwt
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from hotel_admin.config.settings import settings
from hotel_admin.config.database import Collections
from hotel_admin.database.db_operations import DBOperations, get_db
from hotel_admin.models.permissions import Permissions, PermissionFlag
from hotel_admin.services.permissions import permissions_for_profile

logger = logging.getLogger(__name__)

# JWT Bearer token
security = HTTPBearer()

DASHBOARD_ROLES = ("admin", "staff")

def hash_password(password: str) -> str:
    """Hash a password using bcrypt directly"""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its bcrypt hash"""
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        # malformed or missing hash
        return False

def create_access_token(data: Dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt

def decode_access_token(token: str) -> Dict:
    """Decode and verify a JWT token"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError as e:
        logger.warning("JWT verification failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

async def get_user_from_token(token: str, db: DBOperations) -> Dict:
    """Resolve a bearer token to the signed-in admin or staff profile"""
    payload = decode_access_token(token)
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Permissions are read from the stored profile on every request, so grant
    # changes apply without a new login
    profile = await db.get_by_id(Collections.USER_PROFILES, user_id)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User profile not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if profile.get("role") not in DASHBOARD_ROLES:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is not authorized as staff or admin"
        )
    if profile.get("status", "active") != "active":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account is deactivated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return profile

async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: DBOperations = Depends(get_db),
) -> Dict:
    """Get current authenticated user from JWT token"""
    return await get_user_from_token(credentials.credentials, db)

async def get_current_permissions(current_user: Dict = Depends(get_current_user)) -> Permissions:
    return permissions_for_profile(current_user)

def require_permission(flag: PermissionFlag):
    """Dependency factory: allow the request only when the caller holds `flag`"""
    if flag not in Permissions.model_fields:
        raise ValueError(f"Unknown permission flag: {flag}")

    async def permission_checker(
        current_user: Dict = Depends(get_current_user),
        permissions: Permissions = Depends(get_current_permissions),
    ) -> Dict:
        if not getattr(permissions, flag):
            logger.info("Access denied: %s lacks %s", current_user.get("email"), flag)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied"
            )
        return current_user
    return permission_checker

def actor(current_user: Dict) -> Optional[str]:
    """Identifier recorded in updated_by / created_by fields"""
    return current_user.get("email")
