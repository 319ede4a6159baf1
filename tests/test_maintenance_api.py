"""
Maintenance API tests
"""
from hotel_admin.config.database import Collections


def _payload(room, **overrides):
    payload = {
        "room_id": str(room["_id"]),
        "start_date": "2030-07-01",
        "end_date": "2030-07-03",
        "reason": "Replace bathroom fittings",
    }
    payload.update(overrides)
    return payload


def test_schedule_takes_room_out_of_service(client, staff_headers, db, room):
    response = client.post("/api/maintenance/", headers=staff_headers, json=_payload(room))
    assert response.status_code == 201
    assert response.json()["status"] == "scheduled"

    stored_room = db.raw(Collections.ROOMS, str(room["_id"]))
    assert stored_room["status"] == "maintenance"
    assert stored_room["updated_by"] == "desk@grandhotel.com"


def test_single_day_window_allowed(client, staff_headers, room):
    response = client.post("/api/maintenance/", headers=staff_headers,
                           json=_payload(room, end_date="2030-07-01"))
    assert response.status_code == 201


def test_end_before_start_rejected(client, staff_headers, room):
    response = client.post("/api/maintenance/", headers=staff_headers,
                           json=_payload(room, end_date="2030-06-30"))
    assert response.status_code == 422


def test_filters(client, staff_headers, room):
    client.post("/api/maintenance/", headers=staff_headers, json=_payload(room))
    by_room = client.get("/api/maintenance/", headers=staff_headers, params={"room_id": str(room["_id"])})
    in_range = client.get("/api/maintenance/", headers=staff_headers,
                          params={"start": "2030-07-02", "end": "2030-07-02"})
    out_of_range = client.get("/api/maintenance/", headers=staff_headers,
                              params={"start": "2030-08-01", "end": "2030-08-02"})
    assert len(by_room.json()) == 1
    assert len(in_range.json()) == 1
    assert out_of_range.json() == []


def test_update_and_delete(client, staff_headers, room):
    created = client.post("/api/maintenance/", headers=staff_headers, json=_payload(room)).json()

    updated = client.put(f"/api/maintenance/{created['_id']}", headers=staff_headers,
                         json={"status": "completed", "notes": "Done early"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "completed"

    bad_dates = client.put(f"/api/maintenance/{created['_id']}", headers=staff_headers,
                           json={"end_date": "2030-06-01"})
    assert bad_dates.status_code == 400

    assert client.delete(f"/api/maintenance/{created['_id']}", headers=staff_headers).status_code == 204
    assert client.get(f"/api/maintenance/{created['_id']}", headers=staff_headers).status_code == 404


def test_requires_manage_rooms(client, limited_staff_headers):
    assert client.get("/api/maintenance/", headers=limited_staff_headers).status_code == 403


def test_schedule_for_missing_room(client, staff_headers, db):
    response = client.post("/api/maintenance/", headers=staff_headers,
                           json=_payload({"_id": "64b000000000000000000000"}))
    assert response.status_code == 404
    assert db.collections[Collections.MAINTENANCE] == []
