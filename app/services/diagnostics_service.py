# /ministry-dashboard-backend/app/services/diagnostics_service.py

"""
One-shot listings of small reference tables, used to check database contents
by hand. Every routine is read-only, fetches whole tables without filtering,
and prints one line per row followed by a total.
"""

import logging
import sys
from typing import Callable, Optional, TextIO, Tuple

from ..db.database import DATABASE_URL, build_engine, build_session_factory
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def list_ministries(db: DatabaseService, out: Optional[TextIO] = None) -> int:
    out = out if out is not None else sys.stdout
    print("Checking ministries in database...", file=out)
    ministries = db.get_all_ministries()

    print("Found ministries:", file=out)
    for ministry in ministries:
        print(f"- ID: {ministry.id}, Name: {ministry.name}, Active: {ministry.isActive}", file=out)

    print(f"\nTotal ministries: {len(ministries)}", file=out)
    return len(ministries)


def list_zones_and_sale_groups(db: DatabaseService, out: Optional[TextIO] = None) -> Tuple[int, int]:
    """
    Lists zones and sale groups as two separate full-table reads. Sale groups
    show their raw zone ID; the zone name is not looked up.
    """
    out = out if out is not None else sys.stdout
    print("Checking zones and sale groups in database...", file=out)
    zones = db.get_all_zones()

    print("Found zones:", file=out)
    for zone in zones:
        print(f"- ID: {zone.id}, Name: {zone.name}, Active: {zone.isActive}", file=out)

    sale_groups = db.get_all_sale_groups()

    print("\nFound sale groups:", file=out)
    for group in sale_groups:
        print(
            f"- ID: {group.id}, Name: {group.name}, Leader: {group.leaderName}, "
            f"ZoneID: {group.zoneId}, Active: {group.isActive}",
            file=out,
        )

    print(f"\nTotal zones: {len(zones)}", file=out)
    print(f"Total sale groups: {len(sale_groups)}", file=out)
    return len(zones), len(sale_groups)


def run_listing(
    routine: Callable[[DatabaseService], object],
    database_url: Optional[str] = None,
) -> int:
    """
    Runs a listing routine against its own engine and returns the process
    exit code: 0 on success, 1 when any query fails. The engine is disposed
    on every path.
    """
    engine = None
    try:
        engine = build_engine(database_url or DATABASE_URL)
        db = DatabaseService(session_factory=build_session_factory(engine))
        routine(db)
        return 0
    except Exception:
        logger.exception("Error running %s", getattr(routine, "__name__", "listing"))
        return 1
    finally:
        if engine is not None:
            engine.dispose()
