"""
Pytest configuration and shared fixtures
"""
import asyncio
import copy
import os
import tempfile
from collections import defaultdict
from datetime import datetime, timedelta

# Uploaded room images go to a throwaway directory
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="hotel-admin-uploads-"))

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from hotel_admin.config.database import Collections
from hotel_admin.database.db_operations import get_db, to_object_id
from hotel_admin.main import app
from hotel_admin.utils.auth import create_access_token, hash_password


def _matches(doc, query):
    for key, condition in query.items():
        value = doc.get(key)
        if isinstance(condition, dict) and condition and all(k.startswith("$") for k in condition):
            for op, operand in condition.items():
                if op == "$in" and value not in operand:
                    return False
                if op == "$ne" and value == operand:
                    return False
                if op == "$lte" and (value is None or value > operand):
                    return False
                if op == "$gte" and (value is None or value < operand):
                    return False
        elif value != condition:
            return False
    return True


class InMemoryDB:
    """Stand-in for DBOperations backed by plain dicts.

    Reads hand out copies, the way Motor hands out fresh documents.
    `fail_updates_on` makes `update` raise for the named collections.
    `changes` holds the change-stream events `watch` replays.
    """

    def __init__(self):
        self.collections = defaultdict(list)
        self.changes = defaultdict(list)
        self.fail_updates_on = set()
        self.update_calls = []

    def _find(self, collection_name, doc_id):
        object_id = to_object_id(doc_id)
        if object_id is None:
            return None
        for doc in self.collections[collection_name]:
            if doc["_id"] == object_id:
                return doc
        return None

    async def get_all(self, collection_name, filter_query=None, skip=0, limit=100, sort=None):
        docs = [d for d in self.collections[collection_name] if _matches(d, filter_query or {})]
        for key, direction in reversed(sort or []):
            docs.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return [copy.deepcopy(d) for d in docs[skip:skip + limit]]

    async def get_by_id(self, collection_name, doc_id):
        doc = self._find(collection_name, doc_id)
        return copy.deepcopy(doc) if doc else None

    async def get_one(self, collection_name, filter_query):
        for doc in self.collections[collection_name]:
            if _matches(doc, filter_query):
                return copy.deepcopy(doc)
        return None

    async def create(self, collection_name, document):
        now = datetime.utcnow()
        document.setdefault("created_at", now)
        document["updated_at"] = now
        document["_id"] = ObjectId()
        self.collections[collection_name].append(copy.deepcopy(document))
        return document

    async def update(self, collection_name, doc_id, update_data):
        self.update_calls.append((collection_name, doc_id, dict(update_data)))
        if collection_name in self.fail_updates_on:
            raise RuntimeError("store unavailable")
        doc = self._find(collection_name, doc_id)
        if doc is None:
            return None
        doc.update(copy.deepcopy(update_data))
        doc["updated_at"] = datetime.utcnow()
        return copy.deepcopy(doc)

    async def delete(self, collection_name, doc_id):
        doc = self._find(collection_name, doc_id)
        if doc is None:
            return False
        self.collections[collection_name].remove(doc)
        return True

    async def delete_many(self, collection_name, filter_query):
        keep = [d for d in self.collections[collection_name] if not _matches(d, filter_query)]
        removed = len(self.collections[collection_name]) - len(keep)
        self.collections[collection_name] = keep
        return removed

    async def count(self, collection_name, filter_query=None):
        return len([d for d in self.collections[collection_name] if _matches(d, filter_query or {})])

    async def watch(self, collection_name, pipeline=None):
        for change in self.changes[collection_name]:
            yield change

    # ---- test helpers ----

    def insert(self, collection_name, document):
        return asyncio.run(self.create(collection_name, dict(document)))

    def raw(self, collection_name, doc_id):
        return self._find(collection_name, doc_id)

    def room_updates(self):
        return [call for call in self.update_calls if call[0] == Collections.ROOMS]


@pytest.fixture
def db():
    return InMemoryDB()


@pytest.fixture
def client(db):
    """Test client wired to the in-memory store (lifespan is not run)"""
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============== Profiles and tokens ==============

def make_profile(db, role, email, permissions=None, status="active", password=None):
    profile = {
        "email": email,
        "display_name": email.split("@")[0].title(),
        "role": role,
        "status": status,
    }
    if permissions is not None:
        profile["permissions"] = permissions
    if password is not None:
        profile["hashed_password"] = hash_password(password)
    return db.insert(Collections.USER_PROFILES, profile)


def bearer(profile):
    token = create_access_token({"sub": str(profile["_id"]), "role": profile["role"]})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_profile(db):
    return make_profile(db, "admin", "admin@grandhotel.com")


@pytest.fixture
def admin_headers(admin_profile):
    return bearer(admin_profile)


@pytest.fixture
def staff_profile(db):
    """Front-desk staff allowed to manage bookings and rooms"""
    return make_profile(db, "staff", "desk@grandhotel.com", permissions={
        "can_manage_bookings": True,
        "can_manage_rooms": True,
    })


@pytest.fixture
def staff_headers(staff_profile):
    return bearer(staff_profile)


@pytest.fixture
def limited_staff_headers(db):
    """Staff with no stored grants"""
    return bearer(make_profile(db, "staff", "trainee@grandhotel.com", permissions={}))


# ============== Domain data ==============

@pytest.fixture
def room(db):
    return db.insert(Collections.ROOMS, {
        "number": "101",
        "type": "standard",
        "price": 120.0,
        "status": "available",
        "description": "Garden view",
        "capacity": 2,
        "amenities": ["wifi", "tv"],
        "images": [],
    })


@pytest.fixture
def booking(db, room):
    return db.insert(Collections.BOOKINGS, {
        "room_id": str(room["_id"]),
        "guest_name": "Ada Lovelace",
        "guest_email": "ada@example.com",
        "guest_phone": "+44 20 7946 0000",
        "check_in": "2030-05-01",
        "check_out": "2030-05-04",
        "status": "pending",
        "payment_status": "pending",
        "special_requests": None,
        "total_price": 360.0,
    })


@pytest.fixture
def booking_payload(room):
    check_in = datetime(2030, 6, 1).date()
    return {
        "room_id": str(room["_id"]),
        "guest_name": "Grace Hopper",
        "guest_email": "grace@example.com",
        "guest_phone": "+1 555 0100",
        "check_in": check_in.isoformat(),
        "check_out": (check_in + timedelta(days=2)).isoformat(),
        "total_price": 240.0,
    }


@pytest.fixture
def profile_factory(db):
    """Create a profile and return (profile, auth headers)"""
    def factory(role, email, permissions=None, status="active", password=None):
        profile = make_profile(db, role, email, permissions, status, password)
        return profile, bearer(profile)
    return factory
