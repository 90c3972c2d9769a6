# /ministry-dashboard-backend/app/models/zone_model.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .member_model import MemberSummary


class ZoneReference(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class SaleGroup(BaseModel):
    """An active sale group with its zone and ACTIVE members."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    leaderName: Optional[str] = None
    zoneId: str
    isActive: bool
    createdAt: Optional[datetime] = None
    zone: ZoneReference
    members: List[MemberSummary] = Field(default_factory=list)
    memberCount: int = Field(..., ge=0)


class SaleGroupListResponse(BaseModel):
    saleGroups: List[SaleGroup]


class ZoneSaleGroup(BaseModel):
    id: str
    name: str
    leaderName: Optional[str] = None
    memberCount: int = Field(..., ge=0, description="Members of the sale group, whatever their status.")


class Zone(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    leaderName: Optional[str] = None
    isActive: bool
    createdAt: Optional[datetime] = None
    saleGroupCount: int = Field(..., ge=0)
    memberCount: int = Field(..., ge=0, description="Members across all of the zone's sale groups.")
    saleGroups: List[ZoneSaleGroup] = Field(default_factory=list)


class ZoneListResponse(BaseModel):
    zones: List[Zone]
