from __future__ import annotations

from types import SimpleNamespace

import pytest
from flask import Flask

from conftest import InMemoryEmployees, InMemoryPunches, InMemorySettings, punch, utc
from timeclock_reports.core.enums import PunchType
from timeclock_reports.employees.model import Employee
from timeclock_reports.reports.controller import register
from timeclock_reports.reports.service import ReportService
from timeclock_reports.settings.model import TenantSettings


@pytest.fixture
def punches():
    return InMemoryPunches([punch("e1", "IN", utc(2026, 1, 5, 9)), punch("e1", "OUT", utc(2026, 1, 5, 17))])


@pytest.fixture
def settings():
    return InMemorySettings(TenantSettings("UTC", 0, True))


@pytest.fixture
def client(punches, settings):
    app = Flask(__name__)
    app.secret_key = "test"
    app.config["AUDIT_MAX_LIMIT"] = 100
    service = ReportService(
        punches,
        InMemoryEmployees([Employee(employee_id="e1", full_name="Alice Adams", hourly_rate=20)]),
        settings,
    )
    register(app, SimpleNamespace(report_service=service))
    return app.test_client()


def _login(client, role="admin"):
    with client.session_transaction() as sess:
        sess["user_id"] = "u1"
        sess["tenant_id"] = "t1"
        sess["role"] = role


def test_requires_session(client):
    resp = client.get("/reports/hours?from=2026-01-05&to=2026-01-05")

    assert resp.status_code == 401


def test_requires_admin_role(client):
    _login(client, role="staff")

    resp = client.get("/reports/hours?from=2026-01-05&to=2026-01-05")

    assert resp.status_code == 403


@pytest.mark.parametrize(
    "query",
    [
        "",
        "from=2026-01-05",
        "from=2026-1-5&to=2026-01-05",
        "from=2026-01-06&to=2026-01-05",
        "from=2026-02-30&to=2026-03-01",
    ],
)
def test_bad_window_is_400(client, query):
    _login(client)

    resp = client.get(f"/reports/hours?{query}")

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_hours_report_json(client):
    _login(client)

    resp = client.get("/reports/hours?from=2026-01-05&to=2026-01-05&round=15&tzOffset=0")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["roundMinutes"] == 15
    assert body["employees"][0]["totalMinutes"] == 480
    assert body["employees"][0]["days"][0]["hoursFormatted"] == "8:00"


def test_invalid_round_falls_back_to_zero(client):
    _login(client)

    resp = client.get("/reports/hours?from=2026-01-05&to=2026-01-05&round=7")

    assert resp.get_json()["roundMinutes"] == 0


def test_omitted_round_uses_tenant_setting(client, settings):
    settings.settings = TenantSettings("UTC", 30, True)
    _login(client)

    resp = client.get("/reports/hours?from=2026-01-05&to=2026-01-05")

    assert resp.get_json()["roundMinutes"] == 30


def test_daily_report_has_in_out_times(client):
    _login(client)

    resp = client.get("/reports/daily?from=2026-01-05&to=2026-01-05")

    day = resp.get_json()["employees"][0]["days"][0]
    assert day["firstIn"] == "2026-01-05T09:00:00.000Z"
    assert day["lastOut"] == "2026-01-05T17:00:00.000Z"


def test_payroll_report_echoes_week_settings(client):
    _login(client)

    resp = client.get("/reports/payroll?from=2026-01-05&to=2026-01-11&weekStartsOn=0&overtimeThreshold=0")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["weekStartsOn"] == 0
    assert body["overtimeThreshold"] == 40
    assert body["employees"][0]["totalPay"] == 160


def test_reports_disabled_is_403(client, settings, punches):
    settings.settings = TenantSettings("UTC", 0, False)
    _login(client)

    resp = client.get("/reports/payroll?from=2026-01-05&to=2026-01-11")

    assert resp.status_code == 403
    assert punches.calls == []


def test_audit_limit_capped_by_app_config(client, punches):
    _login(client)

    resp = client.get("/reports/audit?from=2026-01-05&to=2026-01-05&limit=5000&type=out")

    assert resp.status_code == 200
    assert resp.get_json() == {"records": []}
    assert punches.last_audit_args["limit"] == 100
    assert punches.last_audit_args["punch_type"] is PunchType.OUT


def test_unexpected_error_is_500(client, punches):
    def boom(**kwargs):
        raise RuntimeError("db down")

    punches.list_in_range = boom
    _login(client)

    resp = client.get("/reports/hours?from=2026-01-05&to=2026-01-05")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal server error"}
