"""
Guest user service - guest accounts stored in the shared profile collection
"""
import logging
from typing import Dict, List, Optional

from hotel_admin.config.database import Collections
from hotel_admin.database.db_operations import DBOperations, to_object_id
from hotel_admin.models.user import UserCreate, UserStatus, UserUpdate
from hotel_admin.utils.auth import hash_password
from hotel_admin.utils.exceptions import ConflictError, InvalidOperationError, NotFoundError
from hotel_admin.utils.helpers import serialize_doc, serialize_docs

logger = logging.getLogger(__name__)


async def ensure_email_available(db: DBOperations, email: str, exclude_id: Optional[str] = None) -> None:
    """Emails are unique across admins, staff and guests"""
    existing = await db.get_one(Collections.USER_PROFILES, {"email": email.lower()})
    if existing and (exclude_id is None or existing["_id"] != to_object_id(exclude_id)):
        raise ConflictError("Email already exists")


class UserService:

    def __init__(self, db: DBOperations):
        self.db = db

    async def list_users(self, status: Optional[UserStatus] = None) -> List[Dict]:
        filter_query = {"role": "user"}
        if status:
            filter_query["status"] = status
        users = await self.db.get_all(
            Collections.USER_PROFILES, filter_query, limit=1000, sort=[("created_at", -1)]
        )
        return serialize_docs(users)

    async def _get_raw(self, user_id: str) -> Dict:
        user = await self.db.get_by_id(Collections.USER_PROFILES, user_id)
        if not user or user.get("role") != "user":
            raise NotFoundError("User", user_id)
        return user

    async def get_user(self, user_id: str) -> Dict:
        return serialize_doc(await self._get_raw(user_id))

    async def create_user(self, user: UserCreate) -> Dict:
        email = user.email.lower()
        await ensure_email_available(self.db, email)
        user_doc = {
            "email": email,
            "display_name": user.display_name,
            "phone_number": user.phone_number,
            "role": "user",
            "status": "active",
            "bookings": [],
            "hashed_password": hash_password(user.password),
        }
        created = await self.db.create(Collections.USER_PROFILES, user_doc)
        logger.info("Guest account %s created", email)
        return serialize_doc(created)

    async def update_user(self, user_id: str, user_update: UserUpdate) -> Dict:
        update_data = user_update.model_dump(exclude_unset=True)
        if not update_data:
            raise InvalidOperationError("No fields to update")
        await self._get_raw(user_id)
        updated = await self.db.update(Collections.USER_PROFILES, user_id, update_data)
        if not updated:
            raise NotFoundError("User", user_id)
        return serialize_doc(updated)

    async def set_status(self, user_id: str, is_active: bool) -> Dict:
        await self._get_raw(user_id)
        status = "active" if is_active else "disabled"
        updated = await self.db.update(Collections.USER_PROFILES, user_id, {"status": status})
        if not updated:
            raise NotFoundError("User", user_id)
        logger.info("Guest account %s is now %s", user_id, status)
        return serialize_doc(updated)

    async def delete_user(self, user_id: str) -> None:
        await self._get_raw(user_id)
        if not await self.db.delete(Collections.USER_PROFILES, user_id):
            raise NotFoundError("User", user_id)
        logger.info("Guest account %s deleted", user_id)
