from __future__ import annotations

from datetime import date
from decimal import Decimal

import mysql.connector
import pytest

from src.attendance_register.attendance_register.attendance.mysql_attendance_repository import (
    MySQLAttendanceRepository,
)
from src.attendance_register.attendance_register.core.enums import AttendanceStatus
from src.attendance_register.attendance_register.core.exceptions import ConflictError, NotFoundError
from src.attendance_register.attendance_register.students.mysql_student_repository import MySQLStudentRepository


class ScriptedCursor:
    """Records executed SQL and replays queued fetch results."""

    def __init__(self, results=None, fail_on=None, fail_msg="duplicate or missing key"):
        self.executed: list[tuple[str, tuple]] = []
        self._results = list(results or [])
        self._fail_on = fail_on
        self._fail_msg = fail_msg
        self.rowcount = 1
        self.lastrowid = 41

    def execute(self, sql, params=()):
        if self._fail_on and self._fail_on in sql:
            raise mysql.connector.IntegrityError(self._fail_msg)
        self.executed.append((" ".join(sql.split()), tuple(params)))

    def fetchone(self):
        return self._results.pop(0) if self._results else None

    def fetchall(self):
        return self._results.pop(0) if self._results else []

    def close(self):
        pass


class ScriptedConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class ScriptedFactory:
    def __init__(self, cursor):
        self.conn = ScriptedConn(cursor)

    def connect(self):
        return self.conn


def test_mark_upserts_recounts_and_updates_in_one_transaction():
    cur = ScriptedCursor(results=[{"total": 3, "present": Decimal("2")}])
    factory = ScriptedFactory(cur)
    repo = MySQLAttendanceRepository(factory)

    tally = repo.mark(student_id=5, day=date(2026, 3, 2), status=AttendanceStatus.ABSENT, marked_by=9)

    assert (tally.present, tally.total) == (2, 3)
    insert_sql, insert_params = cur.executed[0]
    assert "ON DUPLICATE KEY UPDATE status=VALUES(status), marked_by=VALUES(marked_by)" in insert_sql
    assert insert_params == (5, date(2026, 3, 2), "absent", 9)
    count_sql, count_params = cur.executed[1]
    assert "WHERE student_id=%s" in count_sql and "BETWEEN" not in count_sql
    assert count_params == (5,)
    assert cur.executed[2] == ("UPDATE students SET attendance_percentage=%s WHERE id=%s", (66.67, 5))
    assert factory.conn.committed


def test_mark_with_no_rows_stores_zero():
    cur = ScriptedCursor(results=[{"total": 0, "present": None}])
    repo = MySQLAttendanceRepository(ScriptedFactory(cur))

    repo.mark(student_id=5, day=date(2026, 3, 2), status=AttendanceStatus.PRESENT, marked_by=9)

    assert cur.executed[2][1] == (0.0, 5)


def test_mark_foreign_key_failure_maps_to_not_found():
    cur = ScriptedCursor(fail_on="INSERT INTO attendance_records")
    factory = ScriptedFactory(cur)
    repo = MySQLAttendanceRepository(factory)

    with pytest.raises(NotFoundError, match="Student not found"):
        repo.mark(student_id=5, day=date(2026, 3, 2), status=AttendanceStatus.PRESENT, marked_by=9)
    assert factory.conn.rolled_back


def test_mark_missing_marking_account_maps_to_invalid_user():
    cur = ScriptedCursor(
        fail_on="INSERT INTO attendance_records",
        fail_msg="Cannot add or update a child row: a foreign key constraint fails "
        "(CONSTRAINT `fk_attendance_marked_by` FOREIGN KEY (`marked_by`) REFERENCES `users` (`id`))",
    )
    repo = MySQLAttendanceRepository(ScriptedFactory(cur))

    with pytest.raises(NotFoundError, match="Invalid user ID"):
        repo.mark(student_id=5, day=date(2026, 3, 2), status=AttendanceStatus.PRESENT, marked_by=9)


def test_report_query_filters_range_in_join():
    cur = ScriptedCursor(
        results=[
            [
                {
                    "id": 1,
                    "name": "Asha",
                    "regno": "R1",
                    "attendance_percentage": Decimal("66.67"),
                    "present_days": 0,
                    "absent_days": 0,
                }
            ]
        ]
    )
    repo = MySQLAttendanceRepository(ScriptedFactory(cur))

    rows = repo.get_report_rows(start_date=date(2026, 3, 1), end_date=date(2026, 3, 31))

    sql, params = cur.executed[0]
    assert "LEFT JOIN attendance_records ar ON ar.student_id = s.id AND ar.date BETWEEN %s AND %s" in sql
    assert "WHERE" not in sql
    assert params == (date(2026, 3, 1), date(2026, 3, 31))
    assert rows[0].as_dict() == {
        "name": "Asha",
        "regno": "R1",
        "attendance_percentage": 66.67,
        "present_days": 0,
        "absent_days": 0,
    }


def test_students_for_date_default_to_absent():
    cur = ScriptedCursor(
        results=[[{"id": 1, "name": "Asha", "regno": "R1", "attendance_percentage": None, "today_status": None}]]
    )
    repo = MySQLStudentRepository(ScriptedFactory(cur))

    rows = repo.list_for_date(date(2026, 3, 2))

    assert rows[0].as_dict() == {
        "id": 1,
        "name": "Asha",
        "regno": "R1",
        "attendance_percentage": 0.0,
        "today_status": "absent",
    }
    assert cur.executed[0][1] == (date(2026, 3, 2),)
    assert cur.executed[0][0].endswith("ORDER BY s.name")


def test_duplicate_regno_race_maps_to_conflict():
    cur = ScriptedCursor(fail_on="INSERT INTO students")
    repo = MySQLStudentRepository(ScriptedFactory(cur))

    with pytest.raises(ConflictError):
        repo.create(name="Asha", regno="R1")


def test_delete_reports_missing_row():
    cur = ScriptedCursor()
    cur.rowcount = 0
    repo = MySQLStudentRepository(ScriptedFactory(cur))

    assert repo.delete_by_id(3) is False
