# /ministry-dashboard-backend/app/routers/members_router.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..services import member_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.member_model import MemberListResponse

router = APIRouter()


@router.get("", response_model=MemberListResponse, summary="List Active Members")
def get_members(db: DatabaseService = Depends(get_db_service)):
    try:
        members = member_service.list_active_members(db=db)
    except Exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch members"},
        )
    return MemberListResponse(members=members)
