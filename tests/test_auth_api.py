"""
Sign-in and session API tests
"""
import asyncio

import pytest

from hotel_admin.config.database import Collections
from hotel_admin.config.settings import settings
from hotel_admin.scripts.seed_admin import seed_first_admin


@pytest.fixture
def desk_login(profile_factory):
    profile, _ = profile_factory(
        "staff", "frontdesk@grandhotel.com", permissions={"can_manage_bookings": True}, password="letmein1",
    )
    return profile


class TestLogin:

    def test_staff_sign_in(self, client, db, desk_login):
        response = client.post("/api/auth/login", json={"email": "FrontDesk@grandhotel.com", "password": "letmein1"})
        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["profile"]["role"] == "staff"
        assert data["permissions"]["can_edit_bookings"] is True
        assert data["permissions"]["can_delete_bookings"] is False
        assert db.raw(Collections.USER_PROFILES, str(desk_login["_id"]))["last_login"] is not None

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert me.status_code == 200
        assert me.json()["profile"]["email"] == "frontdesk@grandhotel.com"

    def test_wrong_password(self, client, desk_login):
        response = client.post("/api/auth/login", json={"email": "frontdesk@grandhotel.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_unknown_email(self, client):
        response = client.post("/api/auth/login", json={"email": "ghost@grandhotel.com", "password": "whatever"})
        assert response.status_code == 401

    def test_guests_cannot_sign_in(self, client, profile_factory):
        profile_factory("user", "guest@example.com", password="guestpass")
        response = client.post("/api/auth/login", json={"email": "guest@example.com", "password": "guestpass"})
        assert response.status_code == 403

    def test_deactivated_account(self, client, profile_factory):
        profile_factory("staff", "former@grandhotel.com", status="inactive", password="oldpass1")
        response = client.post("/api/auth/login", json={"email": "former@grandhotel.com", "password": "oldpass1"})
        assert response.status_code == 403
        assert response.json()["detail"] == "Account is deactivated"

    def test_seeded_admin_signs_in_with_defaults(self, client, db):
        asyncio.run(seed_first_admin(db))
        response = client.post("/api/auth/login", json={
            "email": settings.ADMIN_EMAIL, "password": settings.ADMIN_PASSWORD,
        })
        assert response.status_code == 200
        assert response.json()["profile"]["role"] == "admin"

    def test_stored_special_use_domain_signs_in(self, client, profile_factory):
        profile_factory("staff", "night@hotel.local", password="nightshift1")
        response = client.post("/api/auth/login", json={"email": "night@hotel.local", "password": "nightshift1"})
        assert response.status_code == 200
        assert response.json()["profile"]["email"] == "night@hotel.local"


class TestSession:

    def test_me_for_admin_without_stored_grants(self, client, admin_headers):
        data = client.get("/api/auth/me", headers=admin_headers).json()
        assert data["profile"]["permissions"]["can_manage_staff"] is True
        assert all(data["permissions"].values())

    def test_guest_token_rejected(self, client, profile_factory):
        _, headers = profile_factory("user", "guest@example.com")
        response = client.get("/api/auth/me", headers=headers)
        assert response.status_code == 403

    def test_token_for_deleted_profile(self, client, db, staff_profile, staff_headers):
        db.collections[Collections.USER_PROFILES].clear()
        response = client.get("/api/auth/me", headers=staff_headers)
        assert response.status_code == 401
        assert response.json()["detail"] == "User profile not found"

    def test_permission_check(self, client, staff_headers, staff_profile):
        allowed = client.get("/api/auth/permissions/can_view_bookings", headers=staff_headers).json()
        denied = client.get("/api/auth/permissions/can_manage_roles", headers=staff_headers).json()
        assert allowed == {
            "permission": "can_view_bookings", "allowed": True, "user_id": str(staff_profile["_id"]),
        }
        assert denied["allowed"] is False

    def test_unknown_flag(self, client, staff_headers):
        response = client.get("/api/auth/permissions/can_fly", headers=staff_headers)
        assert response.status_code == 422
