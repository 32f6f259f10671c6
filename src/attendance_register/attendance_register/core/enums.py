from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Per-day attendance state stored in attendance_records.status."""

    PRESENT = "present"
    ABSENT = "absent"
