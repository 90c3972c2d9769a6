# /tests/test_directory_routers.py

import pytest
from unittest.mock import MagicMock

from app.db.models.member_models import MemberStatus


@pytest.fixture
def failing_db():
    db = MagicMock()
    for method in (
        "get_active_members",
        "get_ministries",
        "get_ministry_by_id",
        "get_active_memberships",
        "get_zones",
        "get_zone_by_id",
        "get_active_sale_groups",
    ):
        getattr(db, method).side_effect = RuntimeError("database unavailable")
    return db


def test_members_listing(client, override_db, db_service, make_member, make_ministry, make_membership):
    member_id = make_member(firstName="Kwame", lastName="Boateng", email="kwame@example.com")
    make_membership(member_id, make_ministry("Choir"))
    make_member(status=MemberStatus.INACTIVE)
    override_db(db_service)

    response = client.get("/api/members")

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    [member] = body["members"]
    assert member["id"] == member_id
    assert member["email"] == "kwame@example.com"
    assert member["status"] == "ACTIVE"
    assert member["ministryNames"] == "Choir"


def test_ministries_listing_and_detail(client, override_db, db_service, make_ministry):
    ministry_id = make_ministry("Media", notes="Leader: Esi", capacity=40)
    override_db(db_service)

    listing = client.get("/api/ministries").json()
    detail = client.get(f"/api/ministries/{ministry_id}")

    assert listing["success"] is True
    assert listing["total"] == 1
    assert listing["ministries"][0]["name"] == "Media"
    assert detail.status_code == 200
    assert detail.json()["ministry"]["leaders"] == ["Esi"]
    assert detail.json()["ministry"]["capacity"] == 40


def test_unknown_ministry_is_404(client, override_db, db_service):
    override_db(db_service)

    response = client.get("/api/ministries/min_missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "Ministry not found"}


def test_ministry_members(client, override_db, db_service, make_member, make_ministry, make_membership):
    ministry_id = make_ministry("Choir")
    make_membership(make_member(), ministry_id, role="Tenor")
    override_db(db_service)

    response = client.get(f"/api/ministries/{ministry_id}/members")

    body = response.json()
    assert response.status_code == 200
    assert body["total"] == 1
    assert body["members"][0]["role"] == "Tenor"


def test_zones_and_their_sale_groups(client, override_db, db_service, make_zone, make_sale_group, make_member):
    make_zone("zone_n", "North")
    make_sale_group("sg_1", "Bethel", "zone_n", leader_name="Kofi")
    make_member(saleGroupId="sg_1")
    override_db(db_service)

    zones = client.get("/api/zones").json()["zones"]
    groups = client.get("/api/zones/zone_n/sale-groups")

    assert zones[0]["saleGroupCount"] == 1
    assert zones[0]["memberCount"] == 1
    assert zones[0]["saleGroups"] == [{"id": "sg_1", "name": "Bethel", "leaderName": "Kofi", "memberCount": 1}]
    assert groups.status_code == 200
    [group] = groups.json()["saleGroups"]
    assert group["zone"] == {"id": "zone_n", "name": "North"}
    assert group["memberCount"] == 1


def test_unknown_zone_sale_groups_is_404(client, override_db, db_service):
    override_db(db_service)

    response = client.get("/api/zones/zone_missing/sale-groups")

    assert response.status_code == 404
    assert response.json() == {"detail": "Zone not found"}


def test_sale_groups_filter_by_zone(client, override_db, db_service, make_zone, make_sale_group):
    make_zone("zone_a", "Accra")
    make_zone("zone_k", "Kumasi")
    make_sale_group("sg_a", "Adenta", "zone_a")
    make_sale_group("sg_k", "Kejetia", "zone_k")
    override_db(db_service)

    everything = client.get("/api/sale-groups").json()["saleGroups"]
    kumasi = client.get("/api/sale-groups", params={"zoneId": "zone_k"}).json()["saleGroups"]

    assert [g["id"] for g in everything] == ["sg_a", "sg_k"]
    assert [g["id"] for g in kumasi] == ["sg_k"]


@pytest.mark.parametrize("path, message", [
    ("/api/members", "Failed to fetch members"),
    ("/api/ministries", "Failed to fetch ministries"),
    ("/api/ministries/min_1", "Failed to fetch ministry"),
    ("/api/ministries/min_1/members", "Failed to fetch ministry members"),
    ("/api/zones", "Failed to fetch zones"),
    ("/api/zones/zone_1/sale-groups", "Failed to fetch sale groups"),
    ("/api/sale-groups", "Failed to fetch sale groups"),
])
def test_query_failures_return_500(client, override_db, failing_db, path, message):
    override_db(failing_db)

    response = client.get(path)

    assert response.status_code == 500
    assert response.json() == {"error": message}
