"""
Staff service - admin and staff accounts with their permission grants
"""
import logging
from typing import Dict, List, Optional

from hotel_admin.config.database import Collections
from hotel_admin.database.db_operations import DBOperations
from hotel_admin.models.staff import StaffCreate, StaffRole, StaffUpdate
from hotel_admin.services.permissions import permissions_for_profile
from hotel_admin.services.user_service import ensure_email_available
from hotel_admin.utils.auth import actor, hash_password
from hotel_admin.utils.exceptions import InvalidOperationError, NotFoundError, PermissionDeniedError
from hotel_admin.utils.helpers import serialize_doc, serialize_docs

logger = logging.getLogger(__name__)

STAFF_ROLES = ["admin", "staff"]


class StaffService:

    def __init__(self, db: DBOperations):
        self.db = db

    async def list_staff(self, role: Optional[StaffRole] = None) -> List[Dict]:
        filter_query = {"role": role} if role else {"role": {"$in": STAFF_ROLES}}
        staff = await self.db.get_all(
            Collections.USER_PROFILES, filter_query, limit=1000, sort=[("display_name", 1)]
        )
        return serialize_docs(staff)

    async def _get_raw(self, staff_id: str) -> Dict:
        member = await self.db.get_by_id(Collections.USER_PROFILES, staff_id)
        if not member or member.get("role") not in STAFF_ROLES:
            raise NotFoundError("Staff member", staff_id)
        return member

    @staticmethod
    def _require_admin_power(caller: Optional[Dict], message: str) -> None:
        """Admin accounts are only created or edited by callers who can manage roles"""
        if not permissions_for_profile(caller).can_manage_roles:
            raise PermissionDeniedError(message)

    async def get_staff(self, staff_id: str) -> Dict:
        return serialize_doc(await self._get_raw(staff_id))

    async def create_staff(self, staff: StaffCreate, caller: Dict) -> Dict:
        if staff.role != "staff":
            self._require_admin_power(caller, "Only admins can create admin accounts")
        email = staff.email.lower()
        await ensure_email_available(self.db, email)

        staff_doc = staff.model_dump(exclude={"password"})
        staff_doc.update({
            "email": email,
            "status": "active",
            "hashed_password": hash_password(staff.password),
            "created_by": actor(caller),
        })
        created = await self.db.create(Collections.USER_PROFILES, staff_doc)
        logger.info("Staff account %s created with role %s", email, staff.role)
        return serialize_doc(created)

    async def update_staff(self, staff_id: str, staff_update: StaffUpdate, caller: Dict) -> Dict:
        update_data = staff_update.model_dump(exclude_unset=True, exclude_none=True)
        if not update_data:
            raise InvalidOperationError("No fields to update")
        member = await self._get_raw(staff_id)
        if member.get("role") == "admin":
            self._require_admin_power(caller, "Only admins can edit admin accounts")

        if "email" in update_data:
            update_data["email"] = update_data["email"].lower()
            await ensure_email_available(self.db, update_data["email"], exclude_id=staff_id)
        if "password" in update_data:
            update_data["hashed_password"] = hash_password(update_data.pop("password"))

        updated = await self.db.update(Collections.USER_PROFILES, staff_id, update_data)
        if not updated:
            raise NotFoundError("Staff member", staff_id)
        return serialize_doc(updated)

    async def change_role(self, staff_id: str, role: StaffRole) -> Dict:
        await self._get_raw(staff_id)
        updated = await self.db.update(Collections.USER_PROFILES, staff_id, {"role": role})
        if not updated:
            raise NotFoundError("Staff member", staff_id)
        logger.info("Staff member %s role changed to %s", staff_id, role)
        return serialize_doc(updated)

    async def set_status(self, staff_id: str, is_active: bool, caller: Dict) -> Dict:
        member = await self._get_raw(staff_id)
        if member.get("role") == "admin":
            self._require_admin_power(caller, "Only admins can change the status of admin accounts")
        status = "active" if is_active else "inactive"
        updated = await self.db.update(Collections.USER_PROFILES, staff_id, {"status": status})
        if not updated:
            raise NotFoundError("Staff member", staff_id)
        logger.info("Staff account %s is now %s", staff_id, status)
        return serialize_doc(updated)

    async def delete_staff(self, staff_id: str) -> None:
        member = await self._get_raw(staff_id)
        if member.get("role") == "admin":
            raise PermissionDeniedError("Cannot delete admin accounts")
        if not await self.db.delete(Collections.USER_PROFILES, staff_id):
            raise NotFoundError("Staff member", staff_id)
        logger.info("Staff account %s deleted", staff_id)
