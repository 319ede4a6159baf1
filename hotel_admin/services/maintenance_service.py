"""
Maintenance service - scheduled room maintenance windows
"""
import logging
from datetime import date
from typing import Dict, List, Optional

from hotel_admin.config.database import Collections
from hotel_admin.database.db_operations import DBOperations
from hotel_admin.models.maintenance import MaintenanceCreate, MaintenanceUpdate
from hotel_admin.models.room import RoomStatus
from hotel_admin.services.room_service import RoomService
from hotel_admin.utils.exceptions import InvalidOperationError, NotFoundError
from hotel_admin.utils.helpers import date_overlap_query, serialize_doc, serialize_docs

logger = logging.getLogger(__name__)


class MaintenanceService:

    def __init__(self, db: DBOperations, rooms: Optional[RoomService] = None):
        self.db = db
        self.rooms = rooms or RoomService(db)

    async def list_maintenance(
        self,
        room_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[Dict]:
        filter_query = {}
        if room_id:
            filter_query["room_id"] = room_id
        if start and end:
            filter_query.update(date_overlap_query("start_date", "end_date", start, end))
        records = await self.db.get_all(
            Collections.MAINTENANCE, filter_query, limit=1000, sort=[("start_date", 1)]
        )
        return serialize_docs(records)

    async def get_maintenance(self, maintenance_id: str) -> Dict:
        record = await self.db.get_by_id(Collections.MAINTENANCE, maintenance_id)
        if not record:
            raise NotFoundError("Maintenance record", maintenance_id)
        return serialize_doc(record)

    async def _create_record(self, maintenance: MaintenanceCreate) -> Dict:
        """Insert the record without touching the room"""
        room = await self.db.get_by_id(Collections.ROOMS, maintenance.room_id)
        if not room:
            raise NotFoundError("Room", maintenance.room_id)
        created = await self.db.create(Collections.MAINTENANCE, maintenance.model_dump(mode="json"))
        return serialize_doc(created)

    async def schedule_maintenance(self, maintenance: MaintenanceCreate, scheduled_by: Optional[str] = None) -> Dict:
        """Create a maintenance record and take the room out of service"""
        created = await self._create_record(maintenance)
        await self.rooms.update_room(
            maintenance.room_id, {"status": RoomStatus.MAINTENANCE}, updated_by=scheduled_by
        )
        logger.info(
            "Maintenance %s scheduled for room %s (%s to %s)",
            created["_id"], maintenance.room_id, maintenance.start_date, maintenance.end_date,
        )
        return created

    async def update_maintenance(self, maintenance_id: str, maintenance_update: MaintenanceUpdate) -> Dict:
        update_data = maintenance_update.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        if not update_data:
            raise InvalidOperationError("No fields to update")

        if "start_date" in update_data or "end_date" in update_data:
            current = await self.db.get_by_id(Collections.MAINTENANCE, maintenance_id)
            if not current:
                raise NotFoundError("Maintenance record", maintenance_id)
            start = date.fromisoformat(update_data.get("start_date") or current["start_date"])
            end = date.fromisoformat(update_data.get("end_date") or current["end_date"])
            if end < start:
                raise InvalidOperationError("End date must not be before start date")

        updated = await self.db.update(Collections.MAINTENANCE, maintenance_id, update_data)
        if not updated:
            raise NotFoundError("Maintenance record", maintenance_id)
        return serialize_doc(updated)

    async def delete_maintenance(self, maintenance_id: str) -> None:
        deleted = await self.db.delete(Collections.MAINTENANCE, maintenance_id)
        if not deleted:
            raise NotFoundError("Maintenance record", maintenance_id)
