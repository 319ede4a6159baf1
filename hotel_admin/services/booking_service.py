"""
Booking service - reservations and the room status kept in step with them.

Updating a booking's status or payment status is two writes: the booking
itself, then the owning room's status. The writes are not atomic. When the
second one fails the booking change stands, the failure is logged as a room
status divergence and reported back in the result so the caller can retry
only the room step (see `sync_room_status`).
"""
import logging
from datetime import date
from typing import Dict, List, Optional

from hotel_admin.config.database import Collections
from hotel_admin.config.settings import settings
from hotel_admin.database.db_operations import DBOperations
from hotel_admin.models.booking import BookingCreate, BookingUpdate, BookingUpdateResult
from hotel_admin.models.room import RoomStatus
from hotel_admin.services.room_service import RoomService
from hotel_admin.services.room_status import determine_room_status, effective_pair, room_status_after_update
from hotel_admin.utils.exceptions import InvalidOperationError, NotFoundError
from hotel_admin.utils.helpers import date_overlap_query, serialize_doc, serialize_docs

logger = logging.getLogger(__name__)


class BookingService:

    def __init__(self, db: DBOperations, rooms: Optional[RoomService] = None):
        self.db = db
        self.rooms = rooms or RoomService(db)

    # ---- queries ----

    async def list_bookings(
        self,
        room_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: int = settings.MAX_PAGE_SIZE,
    ) -> List[Dict]:
        filter_query = {}
        if room_id:
            filter_query["room_id"] = room_id
        if start and end:
            filter_query.update(date_overlap_query("check_in", "check_out", start, end))
        bookings = await self.db.get_all(
            Collections.BOOKINGS, filter_query, limit=limit, sort=[("created_at", -1)]
        )
        return serialize_docs(bookings)

    async def get_booking(self, booking_id: str) -> Dict:
        booking = await self.db.get_by_id(Collections.BOOKINGS, booking_id)
        if not booking:
            raise NotFoundError("Booking", booking_id)
        return serialize_doc(booking)

    # ---- writes ----

    async def create_booking(self, booking: BookingCreate) -> Dict:
        room = await self.db.get_by_id(Collections.ROOMS, booking.room_id)
        if not room:
            raise NotFoundError("Room", booking.room_id)

        booking_dict = booking.model_dump(mode="json")
        created = await self.db.create(Collections.BOOKINGS, booking_dict)
        logger.info("Booking %s created for room %s", created["_id"], booking.room_id)
        return serialize_doc(created)

    async def update_booking_with_room(self, booking_id: str, booking_update: BookingUpdate) -> BookingUpdateResult:
        # The persisted booking supplies whichever status field the update omits
        current = await self._get_raw(booking_id)
        update_data = self._prepare_update(current, booking_update)
        target_status = room_status_after_update(current, update_data)

        updated = await self._write_booking(booking_id, update_data)

        result = BookingUpdateResult(
            booking=serialize_doc(updated),
            room_id=current["room_id"],
        )
        if target_status is None:
            return result
        return await self._apply_room_status(booking_id, result, target_status)

    async def sync_room_status(self, booking_id: str) -> BookingUpdateResult:
        """Re-run only the room step from the booking as persisted"""
        current = await self._get_raw(booking_id)
        target_status = determine_room_status(*effective_pair(current, {}))
        result = BookingUpdateResult(
            booking=serialize_doc(dict(current)),
            room_id=current["room_id"],
        )
        return await self._apply_room_status(booking_id, result, target_status)

    async def delete_booking(self, booking_id: str) -> None:
        deleted = await self.db.delete(Collections.BOOKINGS, booking_id)
        if not deleted:
            raise NotFoundError("Booking", booking_id)
        logger.info("Booking %s deleted", booking_id)

    # ---- internals ----

    async def _get_raw(self, booking_id: str) -> Dict:
        booking = await self.db.get_by_id(Collections.BOOKINGS, booking_id)
        if not booking:
            raise NotFoundError("Booking", booking_id)
        return booking

    def _prepare_update(self, current: Dict, booking_update: BookingUpdate) -> Dict:
        update_data = booking_update.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        if not update_data:
            raise InvalidOperationError("No fields to update")

        if "check_in" in update_data or "check_out" in update_data:
            check_in = date.fromisoformat(update_data.get("check_in") or current["check_in"])
            check_out = date.fromisoformat(update_data.get("check_out") or current["check_out"])
            if check_out <= check_in:
                raise InvalidOperationError("Check-out must be after check-in")
        return update_data

    async def _write_booking(self, booking_id: str, update_data: Dict) -> Dict:
        updated = await self.db.update(Collections.BOOKINGS, booking_id, dict(update_data))
        if not updated:
            raise NotFoundError("Booking", booking_id)
        return updated

    async def _apply_room_status(
        self, booking_id: str, result: BookingUpdateResult, target_status: RoomStatus
    ) -> BookingUpdateResult:
        result.room_status = target_status
        try:
            await self.rooms.update_room(result.room_id, {"status": target_status})
        except Exception as exc:
            logger.error(
                "Room status divergence: booking %s was written but room %s was not set to %s: %s",
                booking_id, result.room_id, target_status.value, exc,
            )
            result.room_sync = "failed"
            result.room_sync_error = str(exc) or exc.__class__.__name__
            return result
        result.room_sync = "applied"
        return result
