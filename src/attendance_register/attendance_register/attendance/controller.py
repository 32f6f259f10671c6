from __future__ import annotations

import csv
import io

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import domain_error, read_json, server_error
from ..common.validators import require_fields, require_positive_int
from ..core.exceptions import AuthorizationError, DomainError
from ..container import Container
from ..users.guard import make_auth_required

REPORT_FIELDS = ["name", "regno", "attendance_percentage", "present_days", "absent_days"]


def register(app: Flask, container: Container) -> None:
    auth_required = make_auth_required(app, container)

    def _marking_account_id(body: dict) -> int:
        """The token's account wins; a body userId may only repeat it."""
        account = getattr(g, "account", None)
        if account is None:
            return require_positive_int(body["userId"], "user ID")

        claimed = body.get("userId")
        if claimed not in (None, "") and str(claimed) != str(account.account_id):
            raise AuthorizationError("userId does not match the signed-in account")
        return account.account_id

    def _report_range():
        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        start = parse_iso_date(start_s, "startDate") if start_s else None
        end = parse_iso_date(end_s, "endDate") if end_s else None
        return start, end

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @auth_required
    def mark_attendance():
        try:
            body = read_json()
            if getattr(g, "account", None) is not None and body.get("userId") in (None, ""):
                body["userId"] = g.account.account_id
            require_fields(body, "studentId", "date", "status", "userId")

            student = container.attendance_service.mark(
                student_id=require_positive_int(body["studentId"], "student ID"),
                day=parse_iso_date(body["date"]),
                status=body["status"],
                account_id=_marking_account_id(body),
            )
            return jsonify({"message": "Attendance marked successfully", "student": student.as_dict()})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("marking attendance")

    @app.route("/api/attendance/report", methods=["GET"], endpoint="attendance_report")
    @auth_required
    def attendance_report():
        try:
            start, end = _report_range()
            rows = container.attendance_service.report(start=start, end=end)
            return jsonify([r.as_dict() for r in rows])
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("getting attendance report")

    @app.route("/api/attendance/report.csv", methods=["GET"], endpoint="attendance_report_csv")
    @auth_required
    def attendance_report_csv():
        try:
            start, end = _report_range()
            rows = container.attendance_service.report(start=start, end=end)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("exporting attendance report")

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row.as_dict())

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=attendance_report.csv"},
        )

    @app.route("/api/attendance/window", methods=["GET"], endpoint="attendance_window")
    def attendance_window():
        return jsonify(container.attendance_service.window_info())
