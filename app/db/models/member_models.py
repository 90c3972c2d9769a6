# /ministry-dashboard-backend/app/db/models/member_models.py

"""
This module defines the SQLAlchemy ORM model for the `Member` entity, the
church member record that every dashboard statistic is counted from.
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MemberStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    TRANSFERRED = "TRANSFERRED"
    DECEASED = "DECEASED"


class MembershipType(str, enum.Enum):
    REGULAR = "REGULAR"
    TRANSFER = "TRANSFER"
    VISITOR = "VISITOR"


class Member(Base):
    """
    SQLAlchemy model representing a registered member.

    Only members whose `status` is ACTIVE are counted toward membership totals
    and recent registrations.
    """
    id = Column(String, primary_key=True, index=True)
    firstName = Column(String, nullable=False)
    lastName = Column(String, nullable=False)
    email = Column(String, nullable=True, index=True)
    phone = Column(String, nullable=True)

    status = Column(Enum(MemberStatus, name="member_status"), nullable=False, default=MemberStatus.ACTIVE, index=True)
    membershipType = Column(Enum(MembershipType, name="membership_type"), nullable=False, default=MembershipType.REGULAR)
    profileImageUrl = Column(String, nullable=True)

    # A member may optionally belong to one sale group.
    saleGroupId = Column(String, ForeignKey("salegroups.id"), nullable=True, index=True)
    saleGroup = relationship("SaleGroup", back_populates="members")
    ministries = relationship("MemberMinistry", back_populates="member", cascade="all, delete-orphan")

    createdAt = Column(DateTime(timezone=True), default=utc_now, server_default=func.now(), index=True)
    updatedAt = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, server_default=func.now())
