# /ministry-dashboard-backend/app/services/zone_service.py

import logging
from typing import List, Optional

from ..db.models.member_models import MemberStatus
from ..models import zone_model
from ..models.member_model import MemberSummary
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


class ZoneNotFoundError(LookupError):
    pass


def _to_zone(record) -> zone_model.Zone:
    sale_groups = [
        zone_model.ZoneSaleGroup(
            id=group.id,
            name=group.name,
            leaderName=group.leaderName,
            memberCount=len(group.members),
        )
        for group in record.saleGroups
    ]
    return zone_model.Zone(
        id=record.id,
        name=record.name,
        description=record.description,
        leaderName=record.leaderName,
        isActive=record.isActive,
        createdAt=record.createdAt,
        saleGroupCount=len(sale_groups),
        memberCount=sum(group.memberCount for group in sale_groups),
        saleGroups=sale_groups,
    )


def _to_sale_group(record) -> zone_model.SaleGroup:
    # Only ACTIVE members are listed and counted.
    members = [MemberSummary.model_validate(m) for m in record.members if m.status == MemberStatus.ACTIVE]
    return zone_model.SaleGroup(
        id=record.id,
        name=record.name,
        leaderName=record.leaderName,
        zoneId=record.zoneId,
        isActive=record.isActive,
        createdAt=record.createdAt,
        zone=zone_model.ZoneReference.model_validate(record.zone),
        members=members,
        memberCount=len(members),
    )


def list_zones(db: DatabaseService) -> List[zone_model.Zone]:
    try:
        records = db.get_zones()
    except Exception:
        logger.exception("Error fetching zones")
        raise
    return [_to_zone(record) for record in records]


def list_sale_groups(db: DatabaseService, zone_id: Optional[str] = None) -> List[zone_model.SaleGroup]:
    """Active sale groups by name, optionally limited to one zone."""
    try:
        records = db.get_active_sale_groups(zone_id=zone_id)
    except Exception:
        logger.exception("Error fetching sale groups")
        raise
    return [_to_sale_group(record) for record in records]


def list_zone_sale_groups(zone_id: str, db: DatabaseService) -> List[zone_model.SaleGroup]:
    """Like `list_sale_groups`, but raises ZoneNotFoundError for an unknown zone."""
    try:
        zone = db.get_zone_by_id(zone_id)
    except Exception:
        logger.exception("Error fetching sale groups for zone %s", zone_id)
        raise
    if zone is None:
        raise ZoneNotFoundError(zone_id)
    return list_sale_groups(db, zone_id=zone_id)
