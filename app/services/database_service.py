# /ministry-dashboard-backend/app/services/database_service.py

from datetime import datetime
from typing import List, Dict, Optional, Generator
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session, sessionmaker

# --- Core Database Setup ---
from app.db.database import SessionLocal
from app.db.models.member_models import Member, MemberStatus, MembershipType
from app.db.models.ministry_models import Ministry, MemberMinistry
from app.db.models.zone_models import Zone, SaleGroup

# --- Repository Imports ---
from .database_helpers.member_repository_sql import MemberRepositorySQL
from .database_helpers.ministry_repository_sql import MinistryRepositorySQL
from .database_helpers.zone_repository_sql import ZoneRepositorySQL


def _row_to_dict(obj) -> Dict:
    return {c.name: getattr(obj, c.name) for c in obj.__table__.columns}


class DatabaseService:
    def __init__(self, session_factory: Optional[sessionmaker] = None):
        """
        Initializes the DatabaseService.

        Every delegated call opens its own short-lived session from the
        factory and closes it before returning, so independent calls may run
        on different worker threads at the same time.
        """
        if session_factory is None:
            raise ValueError("A session factory is required to build a DatabaseService.")
        self.session_factory = session_factory

    def _session(self) -> Session:
        return self.session_factory()

    # --- MEMBER METHODS (DELEGATED) ---
    def count_active_members(self) -> int:
        with self._session() as session:
            return MemberRepositorySQL(session).count_active_members()

    def count_recent_registrations(self, since: datetime) -> int:
        with self._session() as session:
            return MemberRepositorySQL(session).count_recent_registrations(since)

    def count_members(
        self,
        status: Optional[MemberStatus] = None,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
        membership_type: Optional[MembershipType] = None,
    ) -> int:
        with self._session() as session:
            return MemberRepositorySQL(session).count_members(
                status=status,
                created_from=created_from,
                created_to=created_to,
                membership_type=membership_type,
            )

    def get_recent_registrations(self, since: datetime, limit: int = 10) -> List[Dict]:
        with self._session() as session:
            members = MemberRepositorySQL(session).get_recent_registrations(since, limit=limit)
            return [_row_to_dict(m) for m in members]

    def get_active_members(self, limit: int = 50) -> List[Member]:
        with self._session() as session:
            return MemberRepositorySQL(session).get_active_members(limit=limit)

    # --- MINISTRY METHODS (DELEGATED) ---
    def count_active_ministries(self) -> int:
        with self._session() as session:
            return MinistryRepositorySQL(session).count_active_ministries()

    def get_all_ministries(self) -> List[Row]:
        with self._session() as session:
            return MinistryRepositorySQL(session).get_all_ministries()

    def get_ministries(self) -> List[Ministry]:
        with self._session() as session:
            return MinistryRepositorySQL(session).get_ministries()

    def get_ministry_by_id(self, ministry_id: str) -> Optional[Ministry]:
        with self._session() as session:
            return MinistryRepositorySQL(session).get_ministry_by_id(ministry_id)

    def count_active_memberships_by_ministry(self) -> Dict[str, int]:
        with self._session() as session:
            return MinistryRepositorySQL(session).count_active_memberships_by_ministry()

    def get_active_memberships(self, ministry_id: str) -> List[MemberMinistry]:
        with self._session() as session:
            return MinistryRepositorySQL(session).get_active_memberships(ministry_id)

    # --- ZONE & SALE GROUP METHODS (DELEGATED) ---
    def get_all_zones(self) -> List[Row]:
        with self._session() as session:
            return ZoneRepositorySQL(session).get_all_zones()

    def get_all_sale_groups(self) -> List[Row]:
        with self._session() as session:
            return ZoneRepositorySQL(session).get_all_sale_groups()

    def get_zones(self) -> List[Zone]:
        with self._session() as session:
            return ZoneRepositorySQL(session).get_zones()

    def get_zone_by_id(self, zone_id: str) -> Optional[Zone]:
        with self._session() as session:
            return ZoneRepositorySQL(session).get_zone_by_id(zone_id)

    def get_active_sale_groups(self, zone_id: Optional[str] = None) -> List[SaleGroup]:
        with self._session() as session:
            return ZoneRepositorySQL(session).get_active_sale_groups(zone_id=zone_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service() -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the
    application-wide session factory.
    """
    yield DatabaseService(session_factory=SessionLocal)
