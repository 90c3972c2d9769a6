# /ministry-dashboard-backend/app/routers/sale_groups_router.py

from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..services import zone_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.zone_model import SaleGroupListResponse

router = APIRouter()


@router.get("", response_model=SaleGroupListResponse, summary="List Active Sale Groups")
def get_sale_groups(zoneId: Optional[str] = None, db: DatabaseService = Depends(get_db_service)):
    try:
        sale_groups = zone_service.list_sale_groups(db=db, zone_id=zoneId)
    except Exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch sale groups"},
        )
    return SaleGroupListResponse(saleGroups=sale_groups)
