from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from werkzeug.security import generate_password_hash

from src.attendance_register.attendance_register.attendance.calculator.standard_calculator import (
    StandardPercentageCalculator,
)
from src.attendance_register.attendance_register.attendance.model import (
    AttendanceRecord,
    AttendanceReportRow,
    AttendanceTally,
)
from src.attendance_register.attendance_register.core.enums import AttendanceStatus
from src.attendance_register.attendance_register.students.model import Student, StudentDayRow
from src.attendance_register.attendance_register.users.model import Account


@dataclass
class InMemoryStore:
    """Tables shared by the fake repositories (students <-> records <-> users)."""

    accounts: dict[int, Account] = field(default_factory=dict)
    students: dict[int, Student] = field(default_factory=dict)
    records: dict[tuple[int, date], AttendanceRecord] = field(default_factory=dict)
    _next_id: int = 0

    def next_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def add_account(self, name: str, email: str, password: str) -> Account:
        account = Account(
            account_id=self.next_id(),
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
        )
        self.accounts[account.account_id] = account
        return account

    def add_student(self, name: str, regno: str) -> Student:
        student = Student(student_id=self.next_id(), name=name, regno=regno)
        self.students[student.student_id] = student
        return student


class InMemoryAccounts:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, account_id: int) -> Optional[Account]:
        return self._store.accounts.get(int(account_id))

    def get_by_email(self, email: str) -> Optional[Account]:
        return next((a for a in self._store.accounts.values() if a.email == email), None)

    def create(self, *, name: str, email: str, password_hash: str) -> int:
        account = Account(account_id=self._store.next_id(), name=name, email=email, password_hash=password_hash)
        self._store.accounts[account.account_id] = account
        return account.account_id


class InMemoryStudents:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._store.students.get(int(student_id))

    def get_by_regno(self, regno: str) -> Optional[Student]:
        return next((s for s in self._store.students.values() if s.regno == regno), None)

    def create(self, *, name: str, regno: str) -> int:
        return self._store.add_student(name, regno).student_id

    def delete_by_id(self, student_id: int) -> bool:
        if self._store.students.pop(int(student_id), None) is None:
            return False
        for key in [k for k in self._store.records if k[0] == int(student_id)]:
            del self._store.records[key]
        return True

    def _day_row(self, s: Student, day: date) -> StudentDayRow:
        rec = self._store.records.get((s.student_id, day))
        return StudentDayRow(
            student_id=s.student_id,
            name=s.name,
            regno=s.regno,
            attendance_percentage=s.attendance_percentage,
            today_status=rec.status if rec else AttendanceStatus.ABSENT,
        )

    def list_for_date(self, day: date):
        students = sorted(self._store.students.values(), key=lambda s: s.name)
        return [self._day_row(s, day) for s in students]

    def get_day_row(self, *, student_id: int, day: date) -> Optional[StudentDayRow]:
        s = self._store.students.get(int(student_id))
        return self._day_row(s, day) if s else None


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._store = store
        self._calculator = StandardPercentageCalculator()
        self.mark_calls = 0

    def mark(self, *, student_id: int, day: date, status: AttendanceStatus, marked_by: int) -> AttendanceTally:
        self.mark_calls += 1
        existing = self._store.records.get((student_id, day))
        record_id = existing.record_id if existing else self._store.next_id()
        self._store.records[(student_id, day)] = AttendanceRecord(
            record_id=record_id,
            student_id=student_id,
            date=day,
            status=status,
            marked_by=marked_by,
        )

        mine = [r for r in self._store.records.values() if r.student_id == student_id]
        tally = AttendanceTally(
            present=sum(1 for r in mine if r.status == AttendanceStatus.PRESENT),
            total=len(mine),
        )
        s = self._store.students[student_id]
        self._store.students[student_id] = Student(
            student_id=s.student_id,
            name=s.name,
            regno=s.regno,
            attendance_percentage=self._calculator.percentage(tally),
        )
        return tally

    def list_for_student(self, *, student_id: int, start: date, end: date):
        items = [
            r for r in self._store.records.values()
            if r.student_id == student_id and start <= r.date <= end
        ]
        items.sort(key=lambda r: r.date, reverse=True)
        return items

    def get_report_rows(self, *, start_date: date, end_date: date):
        rows = []
        for s in sorted(self._store.students.values(), key=lambda s: s.name):
            in_range = [
                r for r in self._store.records.values()
                if r.student_id == s.student_id and start_date <= r.date <= end_date
            ]
            rows.append(
                AttendanceReportRow(
                    student_id=s.student_id,
                    name=s.name,
                    regno=s.regno,
                    attendance_percentage=s.attendance_percentage,
                    present_days=sum(1 for r in in_range if r.status == AttendanceStatus.PRESENT),
                    absent_days=sum(1 for r in in_range if r.status == AttendanceStatus.ABSENT),
                )
            )
        return rows
