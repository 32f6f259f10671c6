from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import Student, StudentDayRow
from .repository import StudentRepository

_DAY_ROW_SELECT = """
    SELECT
        s.id, s.name, s.regno, s.attendance_percentage,
        COALESCE(
            (SELECT ar.status FROM attendance_records ar
             WHERE ar.student_id = s.id AND ar.date = %s
             LIMIT 1),
            'absent'
        ) AS today_status
    FROM students s
"""


def _to_day_row(r: dict) -> StudentDayRow:
    return StudentDayRow(
        student_id=int(r["id"]),
        name=r["name"],
        regno=r["regno"],
        attendance_percentage=to_float(r.get("attendance_percentage")),
        today_status=AttendanceStatus(r.get("today_status") or AttendanceStatus.ABSENT.value),
    )


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["id"]),
        name=r["name"],
        regno=r["regno"],
        attendance_percentage=to_float(r.get("attendance_percentage")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, regno, attendance_percentage, created_at, updated_at
                FROM students
                WHERE id=%s
                """,
                (int(student_id),),
            )
            r = fetchone(cur)
            return _to_student(r) if r else None

    def get_by_regno(self, regno: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, regno, attendance_percentage, created_at, updated_at
                FROM students
                WHERE regno=%s
                """,
                (regno,),
            )
            r = fetchone(cur)
            return _to_student(r) if r else None

    def create(self, *, name: str, regno: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO students (name, regno, attendance_percentage) VALUES (%s, %s, 0.0)",
                    (name, regno),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError:
            raise ConflictError("Registration number already exists")

    def delete_by_id(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE id=%s", (int(student_id),))
            return cur.rowcount > 0

    def list_for_date(self, day: date) -> Sequence[StudentDayRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_DAY_ROW_SELECT + " ORDER BY s.name", (day,))
            return [_to_day_row(r) for r in fetchall(cur)]

    def get_day_row(self, *, student_id: int, day: date) -> Optional[StudentDayRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_DAY_ROW_SELECT + " WHERE s.id=%s", (day, int(student_id)))
            r = fetchone(cur)
            return _to_day_row(r) if r else None
