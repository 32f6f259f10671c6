from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.model import StudentDayRow
from ..students.repository import StudentRepository
from ..users.repository import AccountRepository
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository
from .window import DateWindow


def parse_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError("Status must be 'present' or 'absent'")


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        accounts: AccountRepository,
        *,
        window: DateWindow | None = None,
        enforce_edit_window: bool = False,
    ):
        self._attendance = attendance
        self._students = students
        self._accounts = accounts
        self._window = window or DateWindow()
        self._enforce_edit_window = bool(enforce_edit_window)

    def mark(
        self,
        *,
        student_id: int,
        day: date,
        status: AttendanceStatus | str,
        account_id: int,
        today: date | None = None,
    ) -> StudentDayRow:
        """Record status for (student, day) and return the refreshed student row.

        A second mark for the same day overwrites status and marking account.
        """
        status = parse_status(status)
        today = today or today_local()

        if self._enforce_edit_window and not self._window.is_editable(day, today):
            raise ValidationError(f"Attendance can only be changed for the last {self._window.edit_days} days")

        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")
        if not self._accounts.get_by_id(account_id):
            raise NotFoundError("Invalid user ID")

        self._attendance.mark(student_id=student_id, day=day, status=status, marked_by=account_id)

        row = self._students.get_day_row(student_id=student_id, day=day)
        if not row:
            # Deleted concurrently after the write committed.
            raise NotFoundError("Student not found")
        return row

    def history(self, student_id: int, *, today: date | None = None) -> list[AttendanceRecord]:
        """A student's records inside the viewable window, newest first."""
        today = today or today_local()
        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")
        return list(
            self._attendance.list_for_student(
                student_id=student_id,
                start=self._window.view_from(today),
                end=today,
            )
        )

    def report(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        today: date | None = None,
    ) -> list[AttendanceReportRow]:
        today = today or today_local()
        start = start or self._window.view_from(today)
        end = end or today
        if start > end:
            raise ValidationError("startDate must not be after endDate")
        return list(self._attendance.get_report_rows(start_date=start, end_date=end))

    def window_info(self, *, today: date | None = None) -> dict:
        info = self._window.describe(today or today_local())
        info["enforced"] = self._enforce_edit_window
        return info
