from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, current_app, jsonify, request, session

from ..common.validators import (
    coerce_audit_limit,
    coerce_overtime_threshold,
    coerce_punch_type,
    coerce_round_minutes,
    coerce_tz_offset,
    coerce_week_starts_on,
    optional_id,
    require_window,
)
from ..core.constants import MAX_AUDIT_LIMIT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container
from ..employees.model import EmployeeFilter

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session or "tenant_id" not in session:
                return jsonify({"error": "Unauthorized"}), 401

            if session.get("role") != Role.ADMIN.value:
                return jsonify({"error": "Forbidden"}), 403

            return view(*args, **kwargs)

        return wrapper

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return jsonify(view(*args, **kwargs))
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except AuthorizationError as e:
                return jsonify({"error": str(e)}), 403
            except Exception:
                logger.exception("Report %s failed", request.path)
                return jsonify({"error": "Internal server error"}), 500

        return wrapper

    def _filters() -> EmployeeFilter:
        return EmployeeFilter(
            employee_id=optional_id(request.args.get("employeeId")),
            office_id=optional_id(request.args.get("officeId")),
            group_id=optional_id(request.args.get("groupId")),
        )

    def _hours_args() -> dict:
        start, end = require_window(request.args.get("from"), request.args.get("to"))
        round_raw = request.args.get("round")
        tz_raw = request.args.get("tzOffset")
        return {
            "tenant_id": str(session["tenant_id"]),
            "start": start,
            "end": end,
            "filters": _filters(),
            # Omitted values fall back to tenant settings.
            "round_minutes": coerce_round_minutes(round_raw) if round_raw is not None else None,
            "tz_offset": coerce_tz_offset(tz_raw) if tz_raw is not None else None,
        }

    @app.route("/reports/hours", methods=["GET"], endpoint="reports_hours")
    @admin_required
    @json_errors
    def reports_hours():
        return container.report_service.get_hours_report(**_hours_args())

    @app.route("/reports/daily", methods=["GET"], endpoint="reports_daily")
    @admin_required
    @json_errors
    def reports_daily():
        return container.report_service.get_daily_report(**_hours_args())

    @app.route("/reports/payroll", methods=["GET"], endpoint="reports_payroll")
    @admin_required
    @json_errors
    def reports_payroll():
        return container.report_service.get_payroll_report(
            **_hours_args(),
            week_starts_on=coerce_week_starts_on(request.args.get("weekStartsOn")),
            overtime_threshold=coerce_overtime_threshold(request.args.get("overtimeThreshold")),
        )

    @app.route("/reports/audit", methods=["GET"], endpoint="reports_audit")
    @admin_required
    @json_errors
    def reports_audit():
        start, end = require_window(request.args.get("from"), request.args.get("to"))
        max_limit = int(current_app.config.get("AUDIT_MAX_LIMIT", MAX_AUDIT_LIMIT))
        return container.report_service.get_audit_report(
            tenant_id=str(session["tenant_id"]),
            start=start,
            end=end,
            filters=_filters(),
            tz_offset=coerce_tz_offset(request.args.get("tzOffset")),
            punch_type=coerce_punch_type(request.args.get("type")),
            limit=coerce_audit_limit(request.args.get("limit"), max_limit=max_limit),
        )

    @app.route("/reports/tips", methods=["GET"], endpoint="reports_tips")
    @admin_required
    @json_errors
    def reports_tips():
        start, end = require_window(request.args.get("from"), request.args.get("to"))
        return container.report_service.get_tips_report(
            tenant_id=str(session["tenant_id"]),
            start=start,
            end=end,
            filters=_filters(),
        )
