from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float, to_int
from .calculator.base import PercentageCalculator
from .calculator.standard_calculator import StandardPercentageCalculator
from .model import AttendanceRecord, AttendanceReportRow, AttendanceTally
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, calculator: Optional[PercentageCalculator] = None):
        self._conn_factory = conn_factory
        self._calculator = calculator or StandardPercentageCalculator()

    def mark(
        self,
        *,
        student_id: int,
        day: date,
        status: AttendanceStatus,
        marked_by: int,
    ) -> AttendanceTally:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records (student_id, date, status, marked_by)
                    VALUES (%s, %s, %s, %s)
                    ON DUPLICATE KEY UPDATE status=VALUES(status), marked_by=VALUES(marked_by)
                    """,
                    (int(student_id), day, status.value, int(marked_by)),
                )

                # Full-history re-aggregation; the window never applies here.
                cur.execute(
                    """
                    SELECT
                        COUNT(*) AS total,
                        COALESCE(SUM(CASE WHEN status='present' THEN 1 ELSE 0 END), 0) AS present
                    FROM attendance_records
                    WHERE student_id=%s
                    """,
                    (int(student_id),),
                )
                r = fetchone(cur) or {}
                tally = AttendanceTally(present=to_int(r.get("present")), total=to_int(r.get("total")))

                cur.execute(
                    "UPDATE students SET attendance_percentage=%s WHERE id=%s",
                    (self._calculator.percentage(tally), int(student_id)),
                )
                return tally
        except mysql.connector.IntegrityError as e:
            # Student or account vanished between the existence check and the write.
            if "fk_attendance_marked_by" in str(getattr(e, "msg", None) or e):
                raise NotFoundError("Invalid user ID")
            raise NotFoundError("Student not found")

    def list_for_student(self, *, student_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ar.id, ar.student_id, ar.date, ar.status, ar.marked_by, u.name AS marked_by_name
                FROM attendance_records ar
                LEFT JOIN users u ON u.id = ar.marked_by
                WHERE ar.student_id=%s AND ar.date BETWEEN %s AND %s
                ORDER BY ar.date DESC
                """,
                (int(student_id), start, end),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    record_id=int(r["id"]),
                    student_id=int(r["student_id"]),
                    date=r["date"],
                    status=AttendanceStatus(r["status"]),
                    marked_by=int(r["marked_by"]),
                    marked_by_name=r.get("marked_by_name"),
                )
                for r in rows
            ]

    def get_report_rows(self, *, start_date: date, end_date: date) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            # Range filter sits in the JOIN so students without records in range stay in.
            cur.execute(
                """
                SELECT
                    s.id, s.name, s.regno, s.attendance_percentage,
                    COUNT(CASE WHEN ar.status='present' THEN 1 END) AS present_days,
                    COUNT(CASE WHEN ar.status='absent' THEN 1 END) AS absent_days
                FROM students s
                LEFT JOIN attendance_records ar
                    ON ar.student_id = s.id AND ar.date BETWEEN %s AND %s
                GROUP BY s.id, s.name, s.regno, s.attendance_percentage
                ORDER BY s.name
                """,
                (start_date, end_date),
            )
            rows = fetchall(cur)

            return [
                AttendanceReportRow(
                    student_id=int(r["id"]),
                    name=r["name"],
                    regno=r["regno"],
                    attendance_percentage=to_float(r.get("attendance_percentage")),
                    present_days=to_int(r.get("present_days")),
                    absent_days=to_int(r.get("absent_days")),
                )
                for r in rows
            ]
