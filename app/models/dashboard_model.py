# /ministry-dashboard-backend/app/models/dashboard_model.py

# --- Core Imports ---
# Import the necessary components from Pydantic for data modeling.
from pydantic import BaseModel, Field
from typing import List, Literal

# --- Model Definitions ---

class DashboardStats(BaseModel):
    """
    Defines the data contract for the summary statistics shown on the main
    dashboard cards. A fresh instance is built for every request; it is never
    persisted or cached.
    """

    totalMembers: int = Field(
        ...,  # This field is required.
        ge=0,
        description="The number of members whose status is ACTIVE.",
        examples=[412]
    )

    totalMinistries: int = Field(
        ...,
        ge=0,
        description="The number of ministries flagged as active.",
        examples=[18]
    )

    upcomingEvents: int = Field(
        default=0,
        ge=0,
        description="Reserved for the event calendar. Always 0 until an event source exists.",
        examples=[0]
    )

    recentRegistrations: int = Field(
        ...,
        ge=0,
        description="ACTIVE members registered during the last 30 days.",
        examples=[23]
    )

    @classmethod
    def empty(cls) -> "DashboardStats":
        return cls(totalMembers=0, totalMinistries=0, upcomingEvents=0, recentRegistrations=0)


class DashboardStatsResponse(BaseModel):
    """The success envelope of GET /api/dashboard/stats."""
    success: Literal[True] = True
    stats: DashboardStats


class DashboardStatsErrorResponse(BaseModel):
    """The failure envelope of GET /api/dashboard/stats, always carrying zeroed stats."""
    error: str
    stats: DashboardStats


class GrowthPoint(BaseModel):
    date: str = Field(..., description="First day of the month, formatted YYYY-MM-DD.")
    newMembers: int = Field(..., ge=0)
    totalMembers: int = Field(..., ge=0)


class GrowthResponse(BaseModel):
    success: bool
    data: List[GrowthPoint]
