from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Student, StudentDayRow


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_regno(self, regno: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, *, name: str, regno: str) -> int:
        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        """Delete a student; attendance records go with it (ON DELETE CASCADE)."""

        raise NotImplementedError

    def list_for_date(self, day: date) -> Sequence[StudentDayRow]:
        """All students ordered by name; status is 'absent' when no record exists for day."""

        raise NotImplementedError

    def get_day_row(self, *, student_id: int, day: date) -> Optional[StudentDayRow]:
        raise NotImplementedError
