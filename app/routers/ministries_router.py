# /ministry-dashboard-backend/app/routers/ministries_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from ..services import ministry_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.ministry_model import MinistryListResponse, MinistryMembersResponse, MinistryResponse

router = APIRouter()


def _server_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


@router.get("", response_model=MinistryListResponse, summary="List All Ministries")
def get_ministries(db: DatabaseService = Depends(get_db_service)):
    try:
        ministries = ministry_service.list_ministries(db=db)
    except Exception:
        return _server_error("Failed to fetch ministries")
    return MinistryListResponse(ministries=ministries, total=len(ministries))


@router.get("/{ministry_id}", response_model=MinistryResponse, summary="Get a Single Ministry")
def get_ministry(ministry_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        ministry = ministry_service.get_ministry(ministry_id, db=db)
    except Exception:
        return _server_error("Failed to fetch ministry")
    if ministry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ministry not found")
    return MinistryResponse(ministry=ministry)


@router.get("/{ministry_id}/members", response_model=MinistryMembersResponse, summary="List Ministry Members")
def get_ministry_members(ministry_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        members = ministry_service.list_ministry_members(ministry_id, db=db)
    except Exception:
        return _server_error("Failed to fetch ministry members")
    return MinistryMembersResponse(members=members, total=len(members))
