"""
Seed script to create the first admin account for the dashboard
"""
import asyncio
import logging

from hotel_admin.config.database import Collections, db_config
from hotel_admin.config.settings import settings
from hotel_admin.database.db_operations import DBOperations, db_ops
from hotel_admin.models.permissions import StoredPermissions
from hotel_admin.utils.auth import hash_password

logger = logging.getLogger(__name__)


async def seed_first_admin(db: DBOperations, email: str = None, password: str = None) -> dict:
    """Create the admin profile unless one with the same email exists"""
    email = (email or settings.ADMIN_EMAIL).lower()
    password = password or settings.ADMIN_PASSWORD

    existing_admin = await db.get_one(Collections.USER_PROFILES, {"email": email})
    if existing_admin:
        logger.warning("⚠️  Admin %s already exists. Skipping...", email)
        return existing_admin

    # Admins resolve to every capability regardless; the stored grants keep
    # the profile consistent for clients that read them directly
    all_granted = {name: True for name in StoredPermissions.model_fields}
    admin_doc = {
        "email": email,
        "display_name": "System Administrator",
        "role": "admin",
        "status": "active",
        "permissions": all_granted,
        "hashed_password": hash_password(password),
        "last_login": None,
    }
    admin = await db.create(Collections.USER_PROFILES, admin_doc)
    logger.info("✅ Created admin user: %s", email)
    logger.warning("⚠️  IMPORTANT: Change the default password after first login!")
    return admin


async def main():
    await db_config.connect_db()
    try:
        await seed_first_admin(db_ops)
    finally:
        await db_config.close_db()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    asyncio.run(main())
