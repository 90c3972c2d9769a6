# /app/main.py

import os

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    dashboard_router,
    registration_router,
    uploads_router,
    pages_router,
    members_router,
    ministries_router,
    zones_router,
    sale_groups_router,
)

# --- Startup Helpers ---
from .db.database import init_db
from .logging_config import configure_logging

AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "false").lower() == "true"
CORS_ALLOW_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()]

configure_logging()

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    # Outside local development the schema comes from Alembic migrations.
    if AUTO_CREATE_TABLES:
        init_db()
    yield

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Ministry Dashboard Backend",
    description="Membership, ministry and pastoral zone dashboard API.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(registration_router.router, prefix="/api/registration", tags=["Registration"])
app.include_router(uploads_router.router, prefix="/api/uploads", tags=["Uploads"])
app.include_router(members_router.router, prefix="/api/members", tags=["Members"])
app.include_router(ministries_router.router, prefix="/api/ministries", tags=["Ministries"])
app.include_router(zones_router.router, prefix="/api/zones", tags=["Zones"])
app.include_router(sale_groups_router.router, prefix="/api/sale-groups", tags=["Sale Groups"])

# The browser entry point that sends visitors to /members or /login.
app.include_router(pages_router.router, tags=["Pages"])

# --- Health Check Endpoint ---
@app.get("/health", tags=["Health Check"])
async def read_health():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Ministry Dashboard Backend is running!", "version": app.version}
