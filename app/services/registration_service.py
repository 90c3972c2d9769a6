# /ministry-dashboard-backend/app/services/registration_service.py

"""
Business logic for the registration page statistics.

There is no baptism or transfer tracking yet, so both figures are estimated
from the number of new members in the recent registration window.
"""

import asyncio
import logging
import math
from datetime import datetime
from typing import Dict, List, Optional

from ..db.models.member_models import MemberStatus, MembershipType
from ..models.registration_model import RecentRegistration, RegistrationStats
from .dashboard_service import recent_registration_threshold
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

BAPTISM_RATE = 0.3
TRANSFER_RATE = 0.1
RECENT_REGISTRATION_LIMIT = 10


def to_recent_registration(member: Dict, index: int) -> RecentRegistration:
    """
    Formats a member record as a row of the recent registrations table.
    `index` is the zero-based position in the list and drives the display ID.
    """
    membership_type = member.get("membershipType")
    created_at = member.get("createdAt")
    return RecentRegistration(
        id=f"REG{index + 1:03d}",
        name=f"{member.get('firstName')} {member.get('lastName')}",
        type="New Member" if membership_type == MembershipType.REGULAR else "Transfer In",
        date=created_at.strftime("%Y-%m-%d") if created_at else "",
        status="Completed" if member.get("status") == MemberStatus.ACTIVE else "Pending",
    )


async def get_registration_stats(db: DatabaseService, now: Optional[datetime] = None) -> RegistrationStats:
    """
    Calculates the registration statistics with a fail-fast join of four
    independent queries.
    """
    since = recent_registration_threshold(now)
    try:
        new_members, new_regular_members, pending_requests, recent = await asyncio.gather(
            asyncio.to_thread(db.count_recent_registrations, since),
            asyncio.to_thread(
                db.count_members,
                status=MemberStatus.ACTIVE,
                created_from=since,
                membership_type=MembershipType.REGULAR,
            ),
            asyncio.to_thread(db.count_members, status=MemberStatus.INACTIVE),
            asyncio.to_thread(db.get_recent_registrations, since, RECENT_REGISTRATION_LIMIT),
        )
    except Exception:
        logger.exception("Error fetching registration stats")
        raise

    recent_rows: List[RecentRegistration] = [
        to_recent_registration(member, index) for index, member in enumerate(recent)
    ]
    return RegistrationStats(
        newMembers=new_members,
        baptisms=math.floor(new_regular_members * BAPTISM_RATE),
        transfersIn=math.floor(new_members * TRANSFER_RATE),
        pendingRequests=pending_requests,
        recentRegistrations=recent_rows,
    )
