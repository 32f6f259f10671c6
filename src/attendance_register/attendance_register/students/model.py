from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on the register.

    attendance_percentage is derived; only the attendance write path updates it.
    """

    student_id: int
    name: str
    regno: str
    attendance_percentage: float = 0.0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class StudentDayRow:
    """Read-model: a student plus their status on one selected date."""

    student_id: int
    name: str
    regno: str
    attendance_percentage: float
    today_status: AttendanceStatus

    def as_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "regno": self.regno,
            "attendance_percentage": float(self.attendance_percentage),
            "today_status": self.today_status.value,
        }


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    present_today: int
    average_attendance: float

    def as_dict(self) -> dict:
        return {
            "total_students": self.total_students,
            "present_today": self.present_today,
            "average_attendance": self.average_attendance,
        }
