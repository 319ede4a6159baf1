"""
Room service - room inventory, status changes and image lists
"""
import logging
from datetime import datetime
from typing import BinaryIO, Dict, List, Optional

from hotel_admin.config.database import Collections
from hotel_admin.database.db_operations import DBOperations
from hotel_admin.models.room import RoomCreate, RoomStatus
from hotel_admin.services import storage_service
from hotel_admin.utils.exceptions import NotFoundError
from hotel_admin.utils.helpers import serialize_doc, serialize_docs

logger = logging.getLogger(__name__)


def _room_sort_key(room: Dict):
    # numeric room numbers first, in numeric order
    number = str(room.get("number", ""))
    try:
        return (0, float(number), number)
    except ValueError:
        return (1, 0.0, number)


class RoomService:

    def __init__(self, db: DBOperations):
        self.db = db

    async def list_rooms(self, status: Optional[RoomStatus] = None) -> List[Dict]:
        filter_query = {}
        if status:
            filter_query["status"] = RoomStatus(status).value
        rooms = await self.db.get_all(Collections.ROOMS, filter_query, limit=1000)
        return serialize_docs(sorted(rooms, key=_room_sort_key))

    async def get_room(self, room_id: str) -> Dict:
        room = await self.db.get_by_id(Collections.ROOMS, room_id)
        if not room:
            raise NotFoundError("Room", room_id)
        return serialize_doc(room)

    async def create_room(self, room: RoomCreate, created_by: Optional[str] = None) -> Dict:
        room_dict = room.model_dump(mode="json")
        room_dict["last_updated"] = datetime.utcnow()
        room_dict["updated_by"] = created_by
        created = await self.db.create(Collections.ROOMS, room_dict)
        logger.info("Room %s created (%s)", room_dict["number"], created["_id"])
        return serialize_doc(created)

    async def update_room(self, room_id: str, update_data: Dict, updated_by: Optional[str] = None) -> Dict:
        """Apply a partial update; this is also the room-mutation entry point
        used when booking or maintenance changes force a new status."""
        update_data = dict(update_data)
        if isinstance(update_data.get("status"), RoomStatus):
            update_data["status"] = update_data["status"].value
        update_data["last_updated"] = datetime.utcnow()
        if updated_by:
            update_data["updated_by"] = updated_by
        updated = await self.db.update(Collections.ROOMS, room_id, update_data)
        if not updated:
            raise NotFoundError("Room", room_id)
        if "status" in update_data:
            logger.info("Room %s status -> %s", room_id, update_data["status"])
        return serialize_doc(updated)

    async def delete_room(self, room_id: str) -> None:
        deleted = await self.db.delete(Collections.ROOMS, room_id)
        if not deleted:
            raise NotFoundError("Room", room_id)
        logger.info("Room %s deleted", room_id)

    async def add_room_image(self, room_id: str, fileobj: BinaryIO, filename: Optional[str],
                             updated_by: Optional[str] = None) -> Dict:
        room = await self.db.get_by_id(Collections.ROOMS, room_id)
        if not room:
            raise NotFoundError("Room", room_id)
        url = storage_service.save_room_image(room_id, fileobj, filename)
        images = list(room.get("images") or []) + [url]
        return await self.update_room(room_id, {"images": images}, updated_by)

    async def update_room_images(self, room_id: str, new_images: List[str],
                                 updated_by: Optional[str] = None) -> Dict:
        """Replace the image list, deleting stored files no longer referenced"""
        room = await self.db.get_by_id(Collections.ROOMS, room_id)
        if not room:
            raise NotFoundError("Room", room_id)
        removed = [img for img in room.get("images") or [] if img not in new_images]
        if removed:
            storage_service.delete_images(removed)
        return await self.update_room(room_id, {"images": list(new_images)}, updated_by)
