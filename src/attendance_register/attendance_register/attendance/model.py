from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one present/absent entry for a student on a date."""

    record_id: int
    student_id: int
    date: date
    status: AttendanceStatus
    marked_by: int
    marked_by_name: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "id": self.record_id,
            "date": self.date.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "marked_by": self.marked_by,
            "marked_by_name": self.marked_by_name,
        }


@dataclass(frozen=True)
class AttendanceTally:
    """Present/total counts over a student's whole history."""

    present: int
    total: int

    @property
    def absent(self) -> int:
        return self.total - self.present


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for the range report (one row per student)."""

    student_id: int
    name: str
    regno: str
    attendance_percentage: float
    present_days: int
    absent_days: int

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "regno": self.regno,
            "attendance_percentage": self.attendance_percentage,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
        }
