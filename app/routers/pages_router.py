# /ministry-dashboard-backend/app/routers/pages_router.py

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ..services import bootstrap_service

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def bootstrap_page():
    """Serves the static redirecting placeholder; the browser picks the destination."""
    return HTMLResponse(content=bootstrap_service.render_bootstrap_page())
