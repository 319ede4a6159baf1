"""
Room status rule tests
"""
import pytest

from hotel_admin.models.booking import BookingStatus, PaymentStatus
from hotel_admin.models.room import RoomStatus
from hotel_admin.services.room_status import (
    determine_room_status,
    effective_pair,
    room_status_after_update,
    touches_room_status,
)


@pytest.mark.parametrize("booking_status,payment_status,expected", [
    ("confirmed", "completed", RoomStatus.OCCUPIED),
    ("pending", "pending", RoomStatus.AVAILABLE),
    ("confirmed", "pending", RoomStatus.AVAILABLE),
    ("pending", "completed", RoomStatus.AVAILABLE),
    ("cancelled", "completed", RoomStatus.AVAILABLE),
    ("completed", "completed", RoomStatus.AVAILABLE),
    ("confirmed", "refunded", RoomStatus.AVAILABLE),
])
def test_determine_room_status(booking_status, payment_status, expected):
    assert determine_room_status(BookingStatus(booking_status), PaymentStatus(payment_status)) == expected


def test_same_pair_twice_gives_same_status():
    pair = (BookingStatus.CONFIRMED, PaymentStatus.COMPLETED)
    assert determine_room_status(*pair) == determine_room_status(*pair)


class TestPartialUpdates:

    def test_cancelling_a_paid_confirmed_booking_frees_the_room(self):
        current = {"status": "confirmed", "payment_status": "completed"}
        assert room_status_after_update(current, {"status": "cancelled"}) == RoomStatus.AVAILABLE

    def test_payment_alone_uses_persisted_status(self):
        current = {"status": "confirmed", "payment_status": "pending"}
        assert effective_pair(current, {"payment_status": "completed"}) == (
            BookingStatus.CONFIRMED, PaymentStatus.COMPLETED,
        )
        assert room_status_after_update(current, {"payment_status": "completed"}) == RoomStatus.OCCUPIED

    def test_unrelated_fields_leave_room_alone(self):
        current = {"status": "confirmed", "payment_status": "completed"}
        assert touches_room_status({"guest_name": "New Name"}) is False
        assert room_status_after_update(current, {"guest_name": "New Name"}) is None
