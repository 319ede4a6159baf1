"""
Room status rule applied whenever a booking's status or payment changes
"""
from typing import Dict, Optional, Tuple

from hotel_admin.models.booking import BookingStatus, PaymentStatus
from hotel_admin.models.room import RoomStatus


def determine_room_status(booking_status: BookingStatus, payment_status: PaymentStatus) -> RoomStatus:
    """A room is occupied only by a confirmed, paid booking.

    Pending, cancelled and completed bookings all leave the room available.
    """
    if booking_status == BookingStatus.CONFIRMED and payment_status == PaymentStatus.COMPLETED:
        return RoomStatus.OCCUPIED
    return RoomStatus.AVAILABLE


def touches_room_status(update: Dict) -> bool:
    return bool(update.get("status") or update.get("payment_status"))


def effective_pair(current: Dict, update: Dict) -> Tuple[BookingStatus, PaymentStatus]:
    """Merge a partial update with the persisted booking's status fields"""
    status = update.get("status") or current["status"]
    payment_status = update.get("payment_status") or current["payment_status"]
    return BookingStatus(status), PaymentStatus(payment_status)


def room_status_after_update(current: Dict, update: Dict) -> Optional[RoomStatus]:
    """Room status implied by applying `update` to `current`, or None when the
    update leaves both status fields alone"""
    if not touches_room_status(update):
        return None
    return determine_room_status(*effective_pair(current, update))
