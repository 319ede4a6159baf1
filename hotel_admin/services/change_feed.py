"""
Live change feed over rooms and bookings.

Each subscriber gets its own MongoDB change stream; events are reduced to
{operation, id, document} so dashboards can patch their lists in place.
Ordering between concurrent writers is whatever the store commits, last
write wins.
"""
import logging
from typing import AsyncIterator, Dict, Optional

from hotel_admin.database.db_operations import DBOperations
from hotel_admin.utils.helpers import serialize_doc

logger = logging.getLogger(__name__)

WATCHED_OPERATIONS = ["insert", "update", "replace", "delete"]


def to_feed_event(change: Dict) -> Optional[Dict]:
    operation = change.get("operationType")
    if operation not in WATCHED_OPERATIONS:
        return None
    document_key = change.get("documentKey") or {}
    document = change.get("fullDocument")
    return {
        "operation": operation,
        "id": str(document_key.get("_id")) if document_key.get("_id") is not None else None,
        "document": serialize_doc(dict(document)) if document else None,
    }


async def subscribe(db: DBOperations, collection_name: str) -> AsyncIterator[Dict]:
    pipeline = [{"$match": {"operationType": {"$in": WATCHED_OPERATIONS}}}]
    logger.debug("Opening change stream on %s", collection_name)
    async for change in db.watch(collection_name, pipeline):
        event = to_feed_event(change)
        if event is not None:
            yield event
