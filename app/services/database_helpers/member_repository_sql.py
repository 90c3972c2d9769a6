# /ministry-dashboard-backend/app/services/database_helpers/member_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Member table.
Every query here is read-only; member registration happens elsewhere.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from app.db.models.member_models import Member, MemberStatus, MembershipType
from app.db.models.ministry_models import MemberMinistry
from app.db.models.zone_models import SaleGroup


class MemberRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def count_members(
        self,
        status: Optional[MemberStatus] = None,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
        membership_type: Optional[MembershipType] = None,
    ) -> int:
        """
        Counts members matching every filter that is provided. Both bounds of
        the creation window are inclusive.
        """
        query = self.db.query(Member)
        if status is not None:
            query = query.filter(Member.status == status)
        if membership_type is not None:
            query = query.filter(Member.membershipType == membership_type)
        if created_from is not None:
            query = query.filter(Member.createdAt >= created_from)
        if created_to is not None:
            query = query.filter(Member.createdAt <= created_to)
        return query.count()

    def count_active_members(self) -> int:
        return self.count_members(status=MemberStatus.ACTIVE)

    def count_recent_registrations(self, since: datetime) -> int:
        """Counts ACTIVE members created on or after `since`."""
        return self.count_members(status=MemberStatus.ACTIVE, created_from=since)

    def get_recent_registrations(self, since: datetime, limit: int = 10) -> List[Member]:
        """Retrieves members of any status created since `since`, newest first."""
        return (
            self.db.query(Member)
            .filter(Member.createdAt >= since)
            .order_by(Member.createdAt.desc())
            .limit(limit)
            .all()
        )

    def get_active_members(self, limit: int = 50) -> List[Member]:
        """
        Retrieves the most recently created ACTIVE members with their sale
        group, the sale group's zone and their ministry links loaded.
        """
        return (
            self.db.query(Member)
            .options(
                selectinload(Member.saleGroup).selectinload(SaleGroup.zone),
                selectinload(Member.ministries).selectinload(MemberMinistry.ministry),
            )
            .filter(Member.status == MemberStatus.ACTIVE)
            .order_by(Member.createdAt.desc())
            .limit(limit)
            .all()
        )
