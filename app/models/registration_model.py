# /ministry-dashboard-backend/app/models/registration_model.py

from pydantic import BaseModel, Field
from typing import List, Literal


class RecentRegistration(BaseModel):
    """A single row of the recent registrations table."""
    id: str = Field(..., description="Display identifier such as REG001; not the member ID.")
    name: str
    type: Literal["New Member", "Transfer In"]
    date: str
    status: Literal["Completed", "Pending"]


class RegistrationStats(BaseModel):
    newMembers: int = Field(..., ge=0)
    baptisms: int = Field(..., ge=0, description="Estimated as 30% of new REGULAR members.")
    transfersIn: int = Field(..., ge=0, description="Estimated as 10% of new members.")
    pendingRequests: int = Field(..., ge=0, description="Members whose status is INACTIVE.")
    recentRegistrations: List[RecentRegistration] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "RegistrationStats":
        return cls(newMembers=0, baptisms=0, transfersIn=0, pendingRequests=0, recentRegistrations=[])


class RegistrationStatsResponse(BaseModel):
    success: Literal[True] = True
    stats: RegistrationStats
