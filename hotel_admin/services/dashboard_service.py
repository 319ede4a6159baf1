"""
Dashboard statistics
"""
from typing import Dict

from hotel_admin.config.database import Collections
from hotel_admin.database.db_operations import DBOperations
from hotel_admin.models.booking import BookingStatus
from hotel_admin.models.room import RoomStatus
from hotel_admin.utils.helpers import serialize_docs

RECENT_BOOKINGS = 5


class DashboardService:

    def __init__(self, db: DBOperations):
        self.db = db

    async def get_stats(self) -> Dict:
        total_users = await self.db.count(Collections.USER_PROFILES, {"role": "user"})
        total_rooms = await self.db.count(Collections.ROOMS)
        available_rooms = await self.db.count(Collections.ROOMS, {"status": RoomStatus.AVAILABLE.value})
        total_bookings = await self.db.count(Collections.BOOKINGS)

        # Revenue counts confirmed bookings only
        confirmed = await self.db.get_all(
            Collections.BOOKINGS, {"status": BookingStatus.CONFIRMED.value}, limit=10000
        )
        total_revenue = round(sum(float(b.get("total_price") or 0) for b in confirmed), 2)

        recent = await self.db.get_all(
            Collections.BOOKINGS, {}, limit=RECENT_BOOKINGS, sort=[("created_at", -1)]
        )
        return {
            "total_users": total_users,
            "total_rooms": total_rooms,
            "available_rooms": available_rooms,
            "total_bookings": total_bookings,
            "total_revenue": total_revenue,
            "recent_bookings": serialize_docs(recent),
        }
