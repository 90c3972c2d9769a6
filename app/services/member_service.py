# /ministry-dashboard-backend/app/services/member_service.py

import logging
from typing import List

from ..models.member_model import MemberListItem
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

MEMBER_LIST_LIMIT = 50


def to_member_list_item(member) -> MemberListItem:
    """Flattens a Member with its sale group, zone and ministry links loaded."""
    ministry_names = [link.ministry.name for link in member.ministries if link.isActive and link.ministry]
    sale_group = member.saleGroup
    zone = sale_group.zone if sale_group else None
    return MemberListItem(
        id=member.id,
        firstName=member.firstName,
        lastName=member.lastName,
        email=member.email,
        phone=member.phone,
        status=member.status,
        membershipType=member.membershipType,
        profileImageUrl=member.profileImageUrl,
        saleGroupId=member.saleGroupId,
        createdAt=member.createdAt,
        ministryNames=", ".join(ministry_names) or "None",
        saleGroupName=sale_group.name if sale_group else None,
        saleGroupLeaderName=sale_group.leaderName if sale_group else None,
        zoneName=zone.name if zone else None,
        zoneLeaderName=zone.leaderName if zone else None,
    )


def list_active_members(db: DatabaseService) -> List[MemberListItem]:
    """The 50 most recently registered ACTIVE members, newest first."""
    try:
        members = db.get_active_members(limit=MEMBER_LIST_LIMIT)
    except Exception:
        logger.exception("Error fetching members")
        raise
    return [to_member_list_item(member) for member in members]
