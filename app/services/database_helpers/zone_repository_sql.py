# /ministry-dashboard-backend/app/services/database_helpers/zone_repository_sql.py

from typing import List, Optional
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session, selectinload
from app.db.models.zone_models import Zone, SaleGroup


class ZoneRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_all_zones(self) -> List[Row]:
        """Retrieves every zone, projected to `id`, `name` and `isActive`."""
        return self.db.query(Zone.id, Zone.name, Zone.isActive).all()

    def get_all_sale_groups(self) -> List[Row]:
        """
        Retrieves every sale group. The owning zone is returned as its raw
        `zoneId`; no join against the zones table is made.
        """
        return self.db.query(
            SaleGroup.id,
            SaleGroup.name,
            SaleGroup.leaderName,
            SaleGroup.zoneId,
            SaleGroup.isActive,
        ).all()

    def get_zones(self) -> List[Zone]:
        """Retrieves every zone by name, with its sale groups and their members loaded."""
        return (
            self.db.query(Zone)
            .options(selectinload(Zone.saleGroups).selectinload(SaleGroup.members))
            .order_by(Zone.name.asc())
            .all()
        )

    def get_zone_by_id(self, zone_id: str) -> Optional[Zone]:
        return self.db.query(Zone).filter(Zone.id == zone_id).first()

    def get_active_sale_groups(self, zone_id: Optional[str] = None) -> List[SaleGroup]:
        """
        Retrieves active sale groups by name, optionally limited to one zone,
        with the zone and members loaded.
        """
        query = (
            self.db.query(SaleGroup)
            .options(selectinload(SaleGroup.zone), selectinload(SaleGroup.members))
            .filter(SaleGroup.isActive.is_(True))
        )
        if zone_id is not None:
            query = query.filter(SaleGroup.zoneId == zone_id)
        return query.order_by(SaleGroup.name.asc()).all()
