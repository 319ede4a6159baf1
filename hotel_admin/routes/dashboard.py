from fastapi import APIRouter, Depends
from hotel_admin.database.db_operations import DBOperations, get_db
from hotel_admin.services.dashboard_service import DashboardService
from hotel_admin.utils.auth import get_current_user

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

@router.get("/stats")
async def get_dashboard_stats(
    current_user: dict = Depends(get_current_user),
    db: DBOperations = Depends(get_db),
):
    """Guest count, room availability, booking totals and the latest bookings"""
    return await DashboardService(db).get_stats()
