"""
Room image storage on the local upload directory (served under /uploads)
"""
import logging
import os
import shutil
import uuid
from typing import BinaryIO, Iterable, Optional

from hotel_admin.config.settings import settings

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads/"
ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}


def save_room_image(room_id: str, fileobj: BinaryIO, filename: Optional[str]) -> str:
    """Store an uploaded image for a room and return its public URL"""
    ext = os.path.splitext(filename or "")[1].lower() or ".jpg"
    name = f"{uuid.uuid4().hex}{ext}"
    room_dir = os.path.join(settings.UPLOAD_DIR, "rooms", room_id)
    os.makedirs(room_dir, exist_ok=True)
    with open(os.path.join(room_dir, name), "wb") as buffer:
        shutil.copyfileobj(fileobj, buffer)
    return f"{UPLOAD_URL_PREFIX}rooms/{room_id}/{name}"


def _local_path(url: str) -> Optional[str]:
    """Map an upload URL back to a path inside UPLOAD_DIR; None for external URLs"""
    if not url.startswith(UPLOAD_URL_PREFIX):
        return None
    root = os.path.realpath(settings.UPLOAD_DIR)
    path = os.path.realpath(os.path.join(root, url[len(UPLOAD_URL_PREFIX):]))
    if os.path.commonpath([root, path]) != root:
        return None
    return path


def delete_image(url: str) -> bool:
    path = _local_path(url)
    if path is None or not os.path.exists(path):
        logger.debug("Image %s is not stored locally, nothing to delete", url)
        return False
    os.remove(path)
    logger.info("Deleted image %s", url)
    return True


def delete_images(urls: Iterable[str]) -> int:
    return sum(1 for url in urls if delete_image(url))
