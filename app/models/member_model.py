# /ministry-dashboard-backend/app/models/member_model.py

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..db.models.member_models import MemberStatus, MembershipType


class MemberSummary(BaseModel):
    """The short form of a member used inside sale group listings."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    firstName: str
    lastName: str


class MemberListItem(MemberSummary):
    """
    A member row of the members page, flattened with the names of the
    member's ministries, sale group and zone.
    """
    email: Optional[str] = None
    phone: Optional[str] = None
    status: MemberStatus
    membershipType: MembershipType
    profileImageUrl: Optional[str] = None
    saleGroupId: Optional[str] = None
    createdAt: Optional[datetime] = None

    ministryNames: str = Field(..., description="Comma separated active ministry names, or 'None'.")
    saleGroupName: Optional[str] = None
    saleGroupLeaderName: Optional[str] = None
    zoneName: Optional[str] = None
    zoneLeaderName: Optional[str] = None


class MemberListResponse(BaseModel):
    success: Literal[True] = True
    members: List[MemberListItem]
