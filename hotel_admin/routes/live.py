"""
Live change feeds for the dashboard.

Clients connect with ?token=<access token>; each message is a JSON object
{operation, id, document} for one insert/update/replace/delete.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status
from hotel_admin.config.database import Collections
from hotel_admin.database.db_operations import DBOperations, get_db
from hotel_admin.models.permissions import PermissionFlag
from hotel_admin.services.change_feed import subscribe
from hotel_admin.services.permissions import permissions_for_profile
from hotel_admin.utils.auth import get_user_from_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ws", tags=["Live"])


async def _stream(websocket: WebSocket, db: DBOperations, collection_name: str,
                  token: str, flag: Optional[PermissionFlag] = None):
    await websocket.accept()
    try:
        profile = await get_user_from_token(token, db)
    except HTTPException as e:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason=e.detail)
        return
    if flag and not getattr(permissions_for_profile(profile), flag):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason="Access denied")
        return

    logger.info("📡 %s subscribed to %s", profile.get("email"), collection_name)
    try:
        async for event in subscribe(db, collection_name):
            await websocket.send_json(event)
    except WebSocketDisconnect:
        logger.info("%s left the %s feed", profile.get("email"), collection_name)
        return
    await websocket.close()


@router.websocket("/rooms")
async def room_feed(websocket: WebSocket, token: str, db: DBOperations = Depends(get_db)):
    await _stream(websocket, db, Collections.ROOMS, token)


@router.websocket("/bookings")
async def booking_feed(websocket: WebSocket, token: str, db: DBOperations = Depends(get_db)):
    await _stream(websocket, db, Collections.BOOKINGS, token, flag="can_view_bookings")
