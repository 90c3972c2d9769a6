# /ministry-dashboard-backend/app/db/models/ministry_models.py

from sqlalchemy import Column, String, Boolean, DateTime, Integer, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base
from .member_models import utc_now


class Ministry(Base):
    __tablename__ = "ministries" # Override automatic pluralization
    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)
    meetingDay = Column(String, nullable=True)
    meetingTime = Column(String, nullable=True)
    location = Column(String, nullable=True)
    capacity = Column(Integer, nullable=True)
    # Free text; leaders are stored as one "Leader: <name>" line each.
    notes = Column(String, nullable=True)
    isActive = Column(Boolean, nullable=False, default=True, index=True)
    createdAt = Column(DateTime(timezone=True), default=utc_now, server_default=func.now())

    members = relationship("MemberMinistry", back_populates="ministry", cascade="all, delete-orphan")


class MemberMinistry(Base):
    """A member's participation in a ministry."""
    __tablename__ = "member_ministries" # Override automatic pluralization
    id = Column(String, primary_key=True, index=True)
    memberId = Column(String, ForeignKey("members.id"), nullable=False, index=True)
    ministryId = Column(String, ForeignKey("ministries.id"), nullable=False, index=True)
    role = Column(String, nullable=True)
    isActive = Column(Boolean, nullable=False, default=True)
    joinedAt = Column(DateTime(timezone=True), default=utc_now, server_default=func.now())

    member = relationship("Member", back_populates="ministries")
    ministry = relationship("Ministry", back_populates="members")
