# /ministry-dashboard-backend/app/routers/zones_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from ..services import zone_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.zone_model import SaleGroupListResponse, ZoneListResponse

router = APIRouter()


@router.get("", response_model=ZoneListResponse, summary="List Zones With Their Sale Groups")
def get_zones(db: DatabaseService = Depends(get_db_service)):
    try:
        zones = zone_service.list_zones(db=db)
    except Exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch zones"},
        )
    return ZoneListResponse(zones=zones)


@router.get("/{zone_id}/sale-groups", response_model=SaleGroupListResponse, summary="List a Zone's Sale Groups")
def get_zone_sale_groups(zone_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        sale_groups = zone_service.list_zone_sale_groups(zone_id, db=db)
    except zone_service.ZoneNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Zone not found")
    except Exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch sale groups"},
        )
    return SaleGroupListResponse(saleGroups=sale_groups)
