# /ministry-dashboard-backend/app/services/ministry_service.py

"""
Read access to ministries and their members.

Ministries have no leader table; each leader is kept as a "Leader: <name>"
line in the ministry notes and parsed out here.
"""

import logging
from typing import Dict, List, Optional

from ..models import ministry_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

LEADER_PREFIX = "Leader: "


def extract_leaders(notes: Optional[str]) -> List[str]:
    """Returns the distinct leader names found in `notes`, in order of appearance."""
    leaders: List[str] = []
    for line in (notes or "").split("\n"):
        if line.startswith(LEADER_PREFIX):
            name = line[len(LEADER_PREFIX):].strip()
            if name and name not in leaders:
                leaders.append(name)
    return leaders


def _to_ministry(record, member_counts: Dict[str, int]) -> ministry_model.Ministry:
    ministry = ministry_model.Ministry.model_validate(record)
    return ministry.model_copy(update={
        "memberCount": member_counts.get(record.id, 0),
        "leaders": extract_leaders(record.notes),
    })


def list_ministries(db: DatabaseService) -> List[ministry_model.Ministry]:
    try:
        records = db.get_ministries()
        member_counts = db.count_active_memberships_by_ministry()
    except Exception:
        logger.exception("Error fetching ministries")
        raise
    return [_to_ministry(record, member_counts) for record in records]


def get_ministry(ministry_id: str, db: DatabaseService) -> Optional[ministry_model.Ministry]:
    """Returns None when no ministry has the given ID."""
    try:
        record = db.get_ministry_by_id(ministry_id)
        if record is None:
            return None
        member_counts = db.count_active_memberships_by_ministry()
    except Exception:
        logger.exception("Error fetching ministry %s", ministry_id)
        raise
    return _to_ministry(record, member_counts)


def list_ministry_members(ministry_id: str, db: DatabaseService) -> List[ministry_model.MinistryMember]:
    """
    Lists the members with an active link to the ministry. An unknown
    ministry simply has no members.
    """
    try:
        links = db.get_active_memberships(ministry_id)
    except Exception:
        logger.exception("Error fetching ministry members for %s", ministry_id)
        raise
    return [
        ministry_model.MinistryMember(
            id=link.member.id,
            firstName=link.member.firstName,
            lastName=link.member.lastName,
            email=link.member.email,
            phone=link.member.phone,
            status=link.member.status,
            joinDate=link.joinedAt,
            role=link.role,
        )
        for link in links
    ]
