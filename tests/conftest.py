# /tests/conftest.py

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.db.database import build_engine, build_session_factory, init_db
from app.db.models.member_models import Member, MemberStatus, MembershipType
from app.db.models.ministry_models import Ministry, MemberMinistry
from app.db.models.zone_models import Zone, SaleGroup
from app.main import app
from app.services.database_service import DatabaseService, get_db_service

# A fixed reference time so the 30-day window is deterministic.
NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def database_url(tmp_path):
    """A file-backed SQLite database, private to each test."""
    return f"sqlite:///{tmp_path / 'ministry_test.db'}"


@pytest.fixture
def session_factory(database_url):
    engine = build_engine(database_url)
    init_db(bind=engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def db_service(session_factory):
    return DatabaseService(session_factory=session_factory)


def _save(session_factory, record):
    with session_factory() as session:
        session.add(record)
        session.commit()


@pytest.fixture
def make_member(session_factory):
    """Factory fixture that inserts a Member. `age` is how long before NOW it registered."""
    def _make(status=MemberStatus.ACTIVE, age=timedelta(days=1), membership_type=MembershipType.REGULAR, **fields):
        member_id = fields.pop("id", f"mem_{uuid.uuid4().hex[:8]}")
        record = Member(
            id=member_id,
            firstName=fields.pop("firstName", "Grace"),
            lastName=fields.pop("lastName", "Mensah"),
            status=status,
            membershipType=membership_type,
            createdAt=fields.pop("createdAt", NOW - age),
            **fields,
        )
        _save(session_factory, record)
        return member_id
    return _make


@pytest.fixture
def make_ministry(session_factory):
    def _make(name, is_active=True, **fields):
        ministry_id = fields.pop("id", f"min_{uuid.uuid4().hex[:8]}")
        _save(session_factory, Ministry(id=ministry_id, name=name, isActive=is_active, **fields))
        return ministry_id
    return _make


@pytest.fixture
def make_membership(session_factory):
    """Links a member to a ministry."""
    def _make(member_id, ministry_id, role=None, is_active=True, joined_at=NOW):
        _save(session_factory, MemberMinistry(
            id=f"mm_{uuid.uuid4().hex[:8]}",
            memberId=member_id,
            ministryId=ministry_id,
            role=role,
            isActive=is_active,
            joinedAt=joined_at,
        ))
    return _make


@pytest.fixture
def make_zone(session_factory):
    def _make(zone_id, name, is_active=True, **fields):
        _save(session_factory, Zone(id=zone_id, name=name, isActive=is_active, **fields))
        return zone_id
    return _make


@pytest.fixture
def make_sale_group(session_factory):
    def _make(group_id, name, zone_id, leader_name=None, is_active=True):
        _save(session_factory, SaleGroup(id=group_id, name=name, zoneId=zone_id, leaderName=leader_name, isActive=is_active))
        return group_id
    return _make


@pytest.fixture
def client():
    """A TestClient whose database dependency is replaced per test via `override_db`."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override_db():
    def _override(db):
        app.dependency_overrides[get_db_service] = lambda: db
    return _override
