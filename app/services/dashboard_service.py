# /ministry-dashboard-backend/app/services/dashboard_service.py

"""
Business logic for the dashboard endpoints. Counting is delegated to the
DatabaseService; this module decides which counts make up each statistic and
how the independent queries are joined.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pandas as pd

from ..db.models.member_models import MemberStatus
from ..models.dashboard_model import DashboardStats, GrowthPoint
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

# A fixed 30-day window, not aware of calendar months.
RECENT_REGISTRATION_WINDOW = timedelta(milliseconds=30 * 24 * 60 * 60 * 1000)
GROWTH_MONTHS = 6


def recent_registration_threshold(now: Optional[datetime] = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now - RECENT_REGISTRATION_WINDOW


async def get_dashboard_stats(db: DatabaseService, now: Optional[datetime] = None) -> DashboardStats:
    """
    Calculates the dashboard summary statistics.

    The three counts are independent, so they are issued together on worker
    threads and joined with `asyncio.gather`. The first failure aborts the
    join and is re-raised; a partially filled snapshot is never returned.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.
        now: The reference time for the recent registration window.

    Returns:
        A DashboardStats Pydantic object containing the calculated counts.
    """
    since = recent_registration_threshold(now)
    try:
        total_members, total_ministries, recent_registrations = await asyncio.gather(
            asyncio.to_thread(db.count_active_members),
            asyncio.to_thread(db.count_active_ministries),
            asyncio.to_thread(db.count_recent_registrations, since),
        )
    except Exception:
        logger.exception("Error fetching dashboard stats")
        raise

    return DashboardStats(
        totalMembers=total_members,
        totalMinistries=total_ministries,
        # No event source is wired up yet.
        upcomingEvents=0,
        recentRegistrations=recent_registrations,
    )


def growth_months(today: Optional[datetime] = None, months: int = GROWTH_MONTHS) -> List[pd.Timestamp]:
    """
    Returns the first instant of every calendar month from `months` months
    before `today` up to and including the current month, in UTC.
    """
    today = pd.Timestamp(today or datetime.now(timezone.utc))
    if today.tzinfo is None:
        today = today.tz_localize("UTC")
    first = (today - pd.DateOffset(months=months)).normalize().replace(day=1)
    return list(pd.date_range(start=first, end=today, freq="MS"))


def _build_growth_series(db: DatabaseService, today: Optional[datetime]) -> List[GrowthPoint]:
    points = []
    for month_start in growth_months(today):
        # Inclusive upper bound: the last microsecond of the month.
        month_end = month_start + pd.offsets.MonthBegin(1) - pd.Timedelta(microseconds=1)
        start, end = month_start.to_pydatetime(), month_end.to_pydatetime()

        new_members = db.count_members(status=MemberStatus.ACTIVE, created_from=start, created_to=end)
        total_members = db.count_members(status=MemberStatus.ACTIVE, created_to=end)
        points.append(GrowthPoint(
            date=month_start.strftime("%Y-%m-%d"),
            newMembers=new_members,
            totalMembers=total_members,
        ))
    return points


async def get_growth_data(db: DatabaseService, today: Optional[datetime] = None) -> List[GrowthPoint]:
    """
    Builds the monthly membership growth series for the last six months plus
    the current one. Each month reports the ACTIVE members created inside it
    and the running ACTIVE total at its end.
    """
    try:
        return await asyncio.to_thread(_build_growth_series, db, today)
    except Exception:
        logger.exception("Error fetching church growth data")
        raise
