# /tests/test_database_service.py

from datetime import timedelta

import pytest

from app.db.models.member_models import MemberStatus, MembershipType
from app.services.database_service import DatabaseService


def test_requires_a_session_factory():
    with pytest.raises(ValueError):
        DatabaseService()


def test_member_counts(db_service, make_member, now):
    make_member(age=timedelta(days=1))
    make_member(age=timedelta(days=40), membership_type=MembershipType.TRANSFER)
    make_member(status=MemberStatus.INACTIVE)

    assert db_service.count_active_members() == 2
    assert db_service.count_recent_registrations(now - timedelta(days=30)) == 1
    assert db_service.count_members() == 3
    assert db_service.count_members(status=MemberStatus.INACTIVE) == 1
    assert db_service.count_members(membership_type=MembershipType.TRANSFER) == 1
    assert db_service.count_members(created_to=now - timedelta(days=30)) == 1


def test_recent_registrations_are_newest_first_and_limited(db_service, make_member, now):
    for day in (5, 1, 3):
        make_member(id=f"mem_{day}", age=timedelta(days=day))

    records = db_service.get_recent_registrations(now - timedelta(days=30), limit=2)

    assert [r["id"] for r in records] == ["mem_1", "mem_3"]
    assert records[0]["status"] == MemberStatus.ACTIVE


def test_active_ministry_count_and_listing(db_service, make_ministry):
    make_ministry("Choir")
    make_ministry("Drama", is_active=False)

    assert db_service.count_active_ministries() == 1
    assert sorted((m.name, m.isActive) for m in db_service.get_all_ministries()) == [("Choir", True), ("Drama", False)]


def test_zone_and_sale_group_listing(db_service, make_zone, make_sale_group):
    make_zone("z1", "Central")
    make_sale_group("sg1", "Shiloh", "z1", leader_name="Yaw")

    assert [(z.id, z.name) for z in db_service.get_all_zones()] == [("z1", "Central")]
    group = db_service.get_all_sale_groups()[0]
    assert (group.name, group.leaderName, group.zoneId, group.isActive) == ("Shiloh", "Yaw", "z1", True)
