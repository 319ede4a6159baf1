"""
Room API tests
"""
import io

from hotel_admin.config.database import Collections


class TestRoomCRUD:

    def test_create_room(self, client, admin_headers):
        response = client.post("/api/rooms/", headers=admin_headers, json={
            "number": "204",
            "type": "suite",
            "price": 310.5,
            "capacity": 4,
            "amenities": ["wifi", "minibar", "wifi"],
        })
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "available"
        assert data["amenities"] == ["wifi", "minibar"]
        assert data["updated_by"] == "admin@grandhotel.com"

    def test_unknown_amenity_rejected(self, client, admin_headers):
        response = client.post("/api/rooms/", headers=admin_headers, json={
            "number": "205", "type": "standard", "price": 90, "capacity": 2, "amenities": ["jacuzzi"],
        })
        assert response.status_code == 422

    def test_list_sorted_by_number_and_filtered(self, client, admin_headers, db):
        for number, status in [("12", "occupied"), ("3", "available"), ("101", "available")]:
            db.insert(Collections.ROOMS, {
                "number": number, "type": "standard", "price": 80, "capacity": 2, "status": status,
                "amenities": [], "images": [],
            })
        numbers = [r["number"] for r in client.get("/api/rooms/", headers=admin_headers).json()]
        assert numbers == ["3", "12", "101"]

        available = client.get("/api/rooms/", headers=admin_headers, params={"status": "available"}).json()
        assert [r["number"] for r in available] == ["3", "101"]

    def test_get_missing_room(self, client, admin_headers):
        response = client.get("/api/rooms/64b000000000000000000000", headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Room not found"

    def test_update_status(self, client, admin_headers, room):
        response = client.put(f"/api/rooms/{room['_id']}", headers=admin_headers, json={"status": "cleaning"})
        assert response.status_code == 200
        assert response.json()["status"] == "cleaning"

    def test_empty_update(self, client, admin_headers, room):
        response = client.put(f"/api/rooms/{room['_id']}", headers=admin_headers, json={})
        assert response.status_code == 400

    def test_delete_room(self, client, admin_headers, room, db):
        response = client.delete(f"/api/rooms/{room['_id']}", headers=admin_headers)
        assert response.status_code == 204
        assert db.raw(Collections.ROOMS, str(room["_id"])) is None


class TestRoomAccess:

    def test_requires_token(self, client):
        assert client.get("/api/rooms/").status_code in (401, 403)

    def test_bad_token(self, client):
        response = client.get("/api/rooms/", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_staff_without_grant_cannot_create(self, client, limited_staff_headers):
        response = client.post("/api/rooms/", headers=limited_staff_headers, json={
            "number": "1", "type": "standard", "price": 50, "capacity": 1,
        })
        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied"

    def test_staff_without_grant_can_read(self, client, limited_staff_headers, room):
        assert client.get("/api/rooms/", headers=limited_staff_headers).status_code == 200


class TestRoomImages:

    def test_upload_and_replace(self, client, admin_headers, room):
        upload = client.post(
            f"/api/rooms/{room['_id']}/images",
            headers=admin_headers,
            files={"file": ("front.png", io.BytesIO(b"\x89PNG fake"), "image/png")},
        )
        assert upload.status_code == 201
        images = upload.json()["images"]
        assert len(images) == 1
        assert images[0].startswith(f"/uploads/rooms/{room['_id']}/")

        replaced = client.put(f"/api/rooms/{room['_id']}/images", headers=admin_headers, json={"images": []})
        assert replaced.status_code == 200
        assert replaced.json()["images"] == []

    def test_rejects_non_images(self, client, admin_headers, room):
        response = client.post(
            f"/api/rooms/{room['_id']}/images",
            headers=admin_headers,
            files={"file": ("notes.txt", io.BytesIO(b"hello"), "text/plain")},
        )
        assert response.status_code == 400


def test_amenity_catalog(client, staff_headers):
    catalog = client.get("/api/rooms/amenities", headers=staff_headers).json()
    assert [c["category"] for c in catalog] == ["basic", "comfort", "luxury", "safety"]
    ids = {a["id"] for c in catalog for a in c["amenities"]}
    assert {"wifi", "safe", "minibar"} <= ids
