from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceReportRow, AttendanceTally


class AttendanceRepository(Protocol):
    def mark(
        self,
        *,
        student_id: int,
        day: date,
        status: AttendanceStatus,
        marked_by: int,
    ) -> AttendanceTally:
        """Upsert the (student, day) record and store the recomputed percentage.

        Both happen in one transaction. Returns the tally the percentage was
        computed from.
        """

        raise NotImplementedError

    def list_for_student(self, *, student_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_report_rows(self, *, start_date: date, end_date: date) -> Sequence[AttendanceReportRow]:
        """One row per student (students without records in range included)."""

        raise NotImplementedError
