"""
Helper utility functions
"""
from bson import ObjectId
from typing import Dict, List, Optional
from datetime import datetime
import pytz

from hotel_admin.config.settings import settings

LOCAL_TZ = pytz.timezone(settings.TIMEZONE)

# Keys whose string values are naive-UTC timestamps written by older clients
TIMESTAMP_KEYS = ("created_at", "updated_at", "last_updated", "last_login")

# Never returned to API callers
PRIVATE_KEYS = ("hashed_password",)


def to_local(value: datetime) -> datetime:
    """Convert a stored datetime (naive means UTC) to the hotel's timezone"""
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(LOCAL_TZ)


def serialize_doc(doc: Optional[Dict]) -> Optional[Dict]:
    """Convert MongoDB document to JSON-serializable format"""
    if doc is None:
        return None

    for key in PRIVATE_KEYS:
        doc.pop(key, None)

    # Convert any nested ObjectIds or datetimes
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            doc[key] = str(value)
        elif isinstance(value, datetime):
            doc[key] = to_local(value).isoformat()
        elif isinstance(value, str) and key in TIMESTAMP_KEYS:
            try:
                dt = datetime.fromisoformat(value.replace('Z', '+00:00'))
                doc[key] = to_local(dt).isoformat()
            except ValueError:
                pass  # Not a valid isoformat string, leave as is
        elif isinstance(value, list):
            doc[key] = [serialize_doc(item) if isinstance(item, dict) else
                        str(item) if isinstance(item, ObjectId) else item
                        for item in value]
        elif isinstance(value, dict):
            doc[key] = serialize_doc(value)

    return doc

def serialize_docs(docs: List[Dict]) -> List[Dict]:
    """Convert list of MongoDB documents to JSON-serializable format"""
    return [serialize_doc(doc) for doc in docs]

def date_overlap_query(start_field: str, end_field: str, start, end) -> Dict:
    """Filter for records whose [start_field, end_field] range intersects [start, end]"""
    return {
        start_field: {"$lte": end.isoformat()},
        end_field: {"$gte": start.isoformat()},
    }
