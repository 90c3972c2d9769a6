# /ministry-dashboard-backend/app/models/ministry_model.py

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..db.models.member_models import MemberStatus


class Ministry(BaseModel):
    """
    The full representation of a Ministry resource. `leaders` is parsed from
    the "Leader: <name>" lines of `notes`.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str] = None
    meetingDay: Optional[str] = None
    meetingTime: Optional[str] = None
    location: Optional[str] = None
    capacity: Optional[int] = None
    isActive: bool
    createdAt: Optional[datetime] = None
    notes: Optional[str] = None
    memberCount: int = Field(default=0, ge=0, description="Active member links of the ministry.")
    leaders: List[str] = Field(default_factory=list)


class MinistryListResponse(BaseModel):
    success: Literal[True] = True
    ministries: List[Ministry]
    total: int


class MinistryResponse(BaseModel):
    success: Literal[True] = True
    ministry: Ministry


class MinistryMember(BaseModel):
    id: str
    firstName: str
    lastName: str
    email: Optional[str] = None
    phone: Optional[str] = None
    status: MemberStatus
    joinDate: Optional[datetime] = None
    role: Optional[str] = None


class MinistryMembersResponse(BaseModel):
    success: Literal[True] = True
    members: List[MinistryMember]
    total: int
