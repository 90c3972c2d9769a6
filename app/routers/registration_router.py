# /ministry-dashboard-backend/app/routers/registration_router.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..services import registration_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.registration_model import RegistrationStats, RegistrationStatsResponse

STATS_ERROR_MESSAGE = "Failed to fetch registration statistics"

router = APIRouter()


@router.get("/stats", response_model=RegistrationStatsResponse, summary="Get Registration Statistics")
async def get_registration_stats(db: DatabaseService = Depends(get_db_service)):
    try:
        stats = await registration_service.get_registration_stats(db=db)
    except Exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": STATS_ERROR_MESSAGE, "stats": RegistrationStats.empty().model_dump()},
        )
    return RegistrationStatsResponse(stats=stats)
