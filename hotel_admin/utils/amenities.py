"""
Predefined room amenities offered in the room form
"""
from typing import Dict, List

AMENITY_CATEGORIES = {
    "basic": "Basic Amenities",
    "comfort": "Comfort & Entertainment",
    "luxury": "Luxury Features",
    "safety": "Safety & Security",
}

PREDEFINED_AMENITIES: List[Dict[str, str]] = [
    # Basic
    {"id": "wifi", "name": "Free Wi-Fi", "category": "basic"},
    {"id": "tv", "name": "Smart TV", "category": "basic"},
    {"id": "ac", "name": "Air Conditioning", "category": "basic"},
    {"id": "heating", "name": "Heating", "category": "basic"},
    {"id": "workspace", "name": "Work Desk", "category": "basic"},
    # Comfort
    {"id": "minibar", "name": "Mini Bar", "category": "comfort"},
    {"id": "kitchen", "name": "Kitchenette", "category": "comfort"},
    {"id": "living_room", "name": "Living Area", "category": "comfort"},
    # Luxury
    {"id": "room_service", "name": "24/7 Room Service", "category": "luxury"},
    {"id": "premium_view", "name": "Premium View", "category": "luxury"},
    # Safety
    {"id": "safe", "name": "In-room Safe", "category": "safety"},
    {"id": "keycard", "name": "Digital Key Card", "category": "safety"},
    {"id": "backup_power", "name": "Backup Power", "category": "safety"},
]

AMENITY_IDS = frozenset(a["id"] for a in PREDEFINED_AMENITIES)


def get_amenities_by_category(category: str) -> List[Dict[str, str]]:
    return [a for a in PREDEFINED_AMENITIES if a["category"] == category]


def amenity_catalog() -> List[Dict]:
    """Catalog grouped by category, in display order"""
    return [
        {"category": key, "label": label, "amenities": get_amenities_by_category(key)}
        for key, label in AMENITY_CATEGORIES.items()
    ]
