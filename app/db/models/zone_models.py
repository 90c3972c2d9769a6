# /ministry-dashboard-backend/app/db/models/zone_models.py

"""
Pastoral zones and the sale groups inside them. A zone contains many sale
groups; every sale group belongs to exactly one zone.
"""

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base
from .member_models import utc_now


class Zone(Base):
    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)
    leaderName = Column(String, nullable=True)
    isActive = Column(Boolean, nullable=False, default=True)
    createdAt = Column(DateTime(timezone=True), default=utc_now, server_default=func.now())

    # Deleting a zone removes its sale groups.
    saleGroups = relationship("SaleGroup", back_populates="zone", cascade="all, delete-orphan")


class SaleGroup(Base):
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    leaderName = Column(String, nullable=True)
    zoneId = Column(String, ForeignKey("zones.id"), nullable=False, index=True)
    isActive = Column(Boolean, nullable=False, default=True)
    createdAt = Column(DateTime(timezone=True), default=utc_now, server_default=func.now())

    zone = relationship("Zone", back_populates="saleGroups")
    members = relationship("Member", back_populates="saleGroup")
