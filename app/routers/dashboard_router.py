# /ministry-dashboard-backend/app/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

# --- Service and Model Imports ---
# Import the business logic service that this router will use.
from ..services import dashboard_service
# Import the database service dependency provider.
from ..services.database_service import DatabaseService, get_db_service
# Import the Pydantic models that define the response shapes (the API contract).
from ..models.dashboard_model import (
    DashboardStats,
    DashboardStatsResponse,
    DashboardStatsErrorResponse,
    GrowthResponse,
)

STATS_ERROR_MESSAGE = "Failed to fetch dashboard statistics"
GROWTH_ERROR_MESSAGE = "Failed to fetch church growth data"

# --- APIRouter Instance ---
router = APIRouter()

# --- Endpoint Definitions ---
@router.get(
    "/stats",
    response_model=DashboardStatsResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": DashboardStatsErrorResponse}},
    summary="Get Dashboard Statistics",
    description="Retrieves the membership, ministry and registration counts for the dashboard cards."
)
async def get_dashboard_stats(db: DatabaseService = Depends(get_db_service)):
    """
    This is the "thin" router layer. It delegates the aggregation to the
    service and turns any failure into the fixed, zeroed failure envelope.
    The service has already logged the cause.
    """
    try:
        stats = await dashboard_service.get_dashboard_stats(db=db)
    except Exception:
        body = DashboardStatsErrorResponse(error=STATS_ERROR_MESSAGE, stats=DashboardStats.empty())
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump())
    return DashboardStatsResponse(stats=stats)


@router.get(
    "/growth",
    response_model=GrowthResponse,
    summary="Get Membership Growth",
    description="Retrieves new and total ACTIVE members for each of the last seven calendar months."
)
async def get_growth(db: DatabaseService = Depends(get_db_service)):
    try:
        data = await dashboard_service.get_growth_data(db=db)
    except Exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": GROWTH_ERROR_MESSAGE, "data": []},
        )
    return GrowthResponse(success=True, data=data)
