"""
Wipe operational data (rooms, bookings, maintenance, guest accounts).

Admin and staff profiles are kept so the dashboard stays reachable.
"""
import asyncio
import logging
from typing import Dict

from hotel_admin.config.database import Collections, db_config
from hotel_admin.database.db_operations import DBOperations, db_ops

logger = logging.getLogger(__name__)


async def cleanup_data(db: DBOperations) -> Dict[str, int]:
    deleted = {
        Collections.BOOKINGS: await db.delete_many(Collections.BOOKINGS, {}),
        Collections.MAINTENANCE: await db.delete_many(Collections.MAINTENANCE, {}),
        Collections.ROOMS: await db.delete_many(Collections.ROOMS, {}),
        Collections.USER_PROFILES: await db.delete_many(Collections.USER_PROFILES, {"role": "user"}),
    }
    for collection_name, count in deleted.items():
        logger.info("🗑️  %s: removed %d document(s)", collection_name, count)
    return deleted


async def main():
    await db_config.connect_db()
    try:
        await cleanup_data(db_ops)
    finally:
        await db_config.close_db()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    asyncio.run(main())
