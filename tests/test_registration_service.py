# /tests/test_registration_service.py

from datetime import datetime, timedelta, timezone

import pytest
from unittest.mock import MagicMock

from app.db.models.member_models import MemberStatus, MembershipType
from app.services import registration_service


@pytest.mark.asyncio
async def test_registration_stats(db_service, make_member, now):
    for day in range(1, 11):
        make_member(age=timedelta(days=day), firstName=f"Regular{day}")
    make_member(age=timedelta(hours=1), membership_type=MembershipType.TRANSFER, firstName="Newest")
    make_member(age=timedelta(days=12), membership_type=MembershipType.TRANSFER)
    make_member(status=MemberStatus.INACTIVE, age=timedelta(days=3))
    make_member(status=MemberStatus.INACTIVE, age=timedelta(days=300))
    make_member(age=timedelta(days=60))

    stats = await registration_service.get_registration_stats(db=db_service, now=now)

    assert stats.newMembers == 12
    assert stats.baptisms == 3      # floor(10 * 0.3)
    assert stats.transfersIn == 1   # floor(12 * 0.1)
    assert stats.pendingRequests == 2
    assert len(stats.recentRegistrations) == 10
    first = stats.recentRegistrations[0]
    assert first.id == "REG001"
    assert first.name == "Newest Mensah"
    assert first.type == "Transfer In"
    assert first.status == "Completed"
    assert stats.recentRegistrations[-1].id == "REG010"
    print("\n✅ SUCCESS: test_registration_stats passed.")


def test_to_recent_registration_formats_a_pending_member():
    member = {
        "firstName": "Kofi",
        "lastName": "Asante",
        "membershipType": MembershipType.REGULAR,
        "status": MemberStatus.INACTIVE,
        "createdAt": datetime(2026, 10, 2, 9, 15, tzinfo=timezone.utc),
    }

    row = registration_service.to_recent_registration(member, index=4)

    assert row.id == "REG005"
    assert row.name == "Kofi Asante"
    assert row.type == "New Member"
    assert row.date == "2026-10-02"
    assert row.status == "Pending"


@pytest.mark.asyncio
async def test_registration_failure_is_reraised(caplog):
    db = MagicMock()
    db.count_recent_registrations.return_value = 4
    db.get_recent_registrations.side_effect = RuntimeError("lost connection")

    with pytest.raises(RuntimeError):
        await registration_service.get_registration_stats(db=db)

    assert "Error fetching registration stats" in caplog.text


def test_registration_router_failure_envelope(client, override_db):
    db = MagicMock()
    db.count_members.side_effect = RuntimeError("boom")
    override_db(db)

    response = client.get("/api/registration/stats")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to fetch registration statistics",
        "stats": {"newMembers": 0, "baptisms": 0, "transfersIn": 0, "pendingRequests": 0, "recentRegistrations": []},
    }


def test_registration_router_success(client, override_db, db_service):
    override_db(db_service)

    response = client.get("/api/registration/stats")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["stats"]["recentRegistrations"] == []
