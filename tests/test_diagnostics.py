# /tests/test_diagnostics.py

import io

import pytest
from unittest.mock import MagicMock

from app.scripts import check_ministries, check_zones_salegroups
from app.services import diagnostics_service


def row_lines(output):
    return [line for line in output.splitlines() if line.startswith("- ")]


def test_list_ministries(db_service, make_ministry):
    make_ministry("Choir")
    make_ministry("Media")
    make_ministry("Drama", is_active=False)
    out = io.StringIO()

    count = diagnostics_service.list_ministries(db_service, out=out)

    text = out.getvalue()
    totals = [line for line in text.splitlines() if line.startswith("Total")]
    assert count == 3
    assert len(row_lines(text)) == 3
    assert totals == ["Total ministries: 3"]
    assert any("Name: Drama, Active: False" in line for line in row_lines(text))


def test_list_ministries_on_empty_table(db_service):
    out = io.StringIO()

    assert diagnostics_service.list_ministries(db_service, out=out) == 0
    assert row_lines(out.getvalue()) == []
    assert "Total ministries: 0" in out.getvalue()


def test_list_zones_and_sale_groups_prints_raw_zone_ids(db_service, make_zone, make_sale_group):
    make_zone("zone_north", "North Zone")
    make_zone("zone_south", "South Zone", is_active=False)
    make_sale_group("sg_1", "Bethel", "zone_north", leader_name="Ama")
    out = io.StringIO()

    zones, groups = diagnostics_service.list_zones_and_sale_groups(db_service, out=out)

    text = out.getvalue()
    assert (zones, groups) == (2, 1)
    assert len(row_lines(text)) == 3
    assert "- ID: sg_1, Name: Bethel, Leader: Ama, ZoneID: zone_north, Active: True" in text
    # The zone name is never resolved for a sale group.
    sale_group_line = [line for line in row_lines(text) if "sg_1" in line][0]
    assert "North Zone" not in sale_group_line
    assert "Total zones: 2" in text
    assert "Total sale groups: 1" in text


def test_run_listing_succeeds_against_a_real_database(database_url, session_factory, make_ministry):
    make_ministry("Hospitality")
    seen = []

    exit_code = diagnostics_service.run_listing(lambda db: seen.append(db.get_all_ministries()), database_url=database_url)

    assert exit_code == 0
    assert [m.name for m in seen[0]] == ["Hospitality"]


def test_run_listing_failure_exits_non_zero_and_releases_the_engine(mocker, caplog):
    engine = MagicMock()
    mocker.patch.object(diagnostics_service, "build_engine", return_value=engine)

    def broken(db):
        raise RuntimeError("relation does not exist")

    exit_code = diagnostics_service.run_listing(broken, database_url="sqlite://")

    assert exit_code == 1
    engine.dispose.assert_called_once()
    assert "relation does not exist" in caplog.text


def test_run_listing_releases_the_engine_on_success(mocker):
    engine = MagicMock()
    mocker.patch.object(diagnostics_service, "build_engine", return_value=engine)

    assert diagnostics_service.run_listing(lambda db: None, database_url="sqlite://") == 0
    engine.dispose.assert_called_once()


@pytest.mark.parametrize("script, routine", [
    (check_ministries, diagnostics_service.list_ministries),
    (check_zones_salegroups, diagnostics_service.list_zones_and_sale_groups),
])
def test_scripts_delegate_to_their_listing(mocker, script, routine):
    run_listing = mocker.patch.object(script, "run_listing", return_value=1)

    assert script.main() == 1
    run_listing.assert_called_once_with(routine)


def test_listing_writes_to_the_current_stdout(db_service, make_ministry, capsys):
    make_ministry("Welfare")

    diagnostics_service.list_ministries(db_service)

    assert "- ID: " in capsys.readouterr().out


def test_unusable_database_url_exits_non_zero(caplog):
    exit_code = diagnostics_service.run_listing(diagnostics_service.list_ministries, database_url="nosuchdialect://host/db")

    assert exit_code == 1
    assert "Error running list_ministries" in caplog.text
