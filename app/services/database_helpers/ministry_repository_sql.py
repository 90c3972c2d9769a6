# /ministry-dashboard-backend/app/services/database_helpers/ministry_repository_sql.py

from typing import Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session, selectinload
from app.db.models.ministry_models import Ministry, MemberMinistry


class MinistryRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def count_active_ministries(self) -> int:
        return self.db.query(Ministry).filter(Ministry.isActive.is_(True)).count()

    def get_all_ministries(self) -> List[Row]:
        """Retrieves every ministry, projected to `id`, `name` and `isActive`."""
        return self.db.query(Ministry.id, Ministry.name, Ministry.isActive).all()

    def get_ministries(self) -> List[Ministry]:
        """Retrieves every ministry, newest first."""
        return self.db.query(Ministry).order_by(Ministry.createdAt.desc()).all()

    def get_ministry_by_id(self, ministry_id: str) -> Optional[Ministry]:
        return self.db.query(Ministry).filter(Ministry.id == ministry_id).first()

    def count_active_memberships_by_ministry(self) -> Dict[str, int]:
        """Maps each ministry ID to its number of active member links."""
        rows = (
            self.db.query(MemberMinistry.ministryId, func.count(MemberMinistry.id))
            .filter(MemberMinistry.isActive.is_(True))
            .group_by(MemberMinistry.ministryId)
            .all()
        )
        return {ministry_id: count for ministry_id, count in rows}

    def get_active_memberships(self, ministry_id: str) -> List[MemberMinistry]:
        """Retrieves the active member links of one ministry with each member loaded."""
        return (
            self.db.query(MemberMinistry)
            .options(selectinload(MemberMinistry.member))
            .filter(MemberMinistry.ministryId == ministry_id, MemberMinistry.isActive.is_(True))
            .all()
        )
