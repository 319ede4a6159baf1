"""
Auth service - dashboard sign-in and permission lookups
"""
import logging
from datetime import datetime
from typing import Dict

from hotel_admin.config.database import Collections
from hotel_admin.database.db_operations import DBOperations
from hotel_admin.models.auth import LoginResponse, MeResponse, SessionProfile
from hotel_admin.models.permissions import PermissionFlag, StoredPermissions
from hotel_admin.services.permissions import permissions_for_profile, stored_permissions_from
from hotel_admin.utils.auth import DASHBOARD_ROLES, create_access_token, verify_password
from hotel_admin.utils.exceptions import AuthenticationError, PermissionDeniedError
from hotel_admin.utils.helpers import serialize_doc

logger = logging.getLogger(__name__)


def session_profile(profile: Dict) -> SessionProfile:
    """Public view of a signed-in profile.

    Profiles without stored grants fall back to full grants for admins and
    none for staff.
    """
    raw = profile.get("permissions")
    if isinstance(raw, dict):
        grants = stored_permissions_from(raw)
    else:
        is_admin = profile.get("role") == "admin"
        grants = StoredPermissions(**{name: is_admin for name in StoredPermissions.model_fields})
    return SessionProfile(
        _id=str(profile["_id"]),
        email=profile["email"],
        display_name=profile.get("display_name") or profile["email"],
        role=profile["role"],
        permissions=grants,
    )


class AuthService:

    def __init__(self, db: DBOperations):
        self.db = db

    async def sign_in(self, email: str, password: str) -> LoginResponse:
        profile = await self.db.get_one(Collections.USER_PROFILES, {"email": email.lower()})
        if not profile or not verify_password(password, profile.get("hashed_password", "")):
            logger.info("Failed sign-in for %s", email)
            raise AuthenticationError("Invalid email or password")

        if profile.get("role") not in DASHBOARD_ROLES:
            raise PermissionDeniedError("User is not authorized as staff or admin")
        if profile.get("status", "active") != "active":
            raise PermissionDeniedError("Account is deactivated")

        await self.db.update(Collections.USER_PROFILES, str(profile["_id"]), {"last_login": datetime.utcnow()})

        access_token = create_access_token({
            "sub": str(profile["_id"]),
            "email": profile["email"],
            "role": profile["role"],
        })
        logger.info("%s signed in as %s", profile["email"], profile["role"])
        return LoginResponse(
            access_token=access_token,
            profile=session_profile(profile),
            permissions=permissions_for_profile(profile),
        )

    def describe_session(self, profile: Dict) -> MeResponse:
        return MeResponse(
            profile=session_profile(profile),
            permissions=permissions_for_profile(profile),
        )

    async def check_permission(self, user_id: str, flag: PermissionFlag) -> bool:
        """Resolve a single capability for any stored profile; unknown users have none"""
        profile = await self.db.get_by_id(Collections.USER_PROFILES, user_id)
        if not profile:
            return False
        return getattr(permissions_for_profile(serialize_doc(profile)), flag)
