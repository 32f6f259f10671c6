from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.constants import PERCENTAGE_DECIMALS
from ..core.exceptions import ConflictError, NotFoundError
from .model import DashboardStats, StudentDayRow
from .repository import StudentRepository


def summarize(rows: Sequence[StudentDayRow]) -> DashboardStats:
    """Dashboard aggregates for one date: derived per call, never stored."""

    total = len(rows)
    if total == 0:
        return DashboardStats(total_students=0, present_today=0, average_attendance=0.0)

    present = sum(1 for r in rows if r.today_status == AttendanceStatus.PRESENT)
    average = sum(float(r.attendance_percentage or 0.0) for r in rows) / total
    return DashboardStats(
        total_students=total,
        present_today=present,
        average_attendance=round(average, PERCENTAGE_DECIMALS),
    )


class StudentService:
    """Use cases: register, list and remove students."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_for_date(self, day: Optional[date] = None) -> list[StudentDayRow]:
        return list(self._students.list_for_date(day or today_local()))

    def stats_for_date(self, day: Optional[date] = None) -> DashboardStats:
        return summarize(self.list_for_date(day))

    def add(self, *, name: str, regno: str) -> StudentDayRow:
        name = require_non_empty(name, "Name")
        regno = require_non_empty(regno, "Registration number")

        if self._students.get_by_regno(regno):
            raise ConflictError("Registration number already exists")

        student_id = self._students.create(name=name, regno=regno)
        return StudentDayRow(
            student_id=student_id,
            name=name,
            regno=regno,
            attendance_percentage=0.0,
            today_status=AttendanceStatus.ABSENT,
        )

    def delete(self, student_id: int) -> None:
        if not self._students.delete_by_id(int(student_id)):
            raise NotFoundError("Student not found")
