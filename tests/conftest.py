from __future__ import annotations

from datetime import date

import pytest

from src.attendance_register.attendance_register.attendance.service import AttendanceService
from src.attendance_register.attendance_register.container import assemble
from src.attendance_register.attendance_register.main import create_app
from src.attendance_register.attendance_register.students.service import StudentService
from tests.fakes import InMemoryAccounts, InMemoryAttendance, InMemoryStore, InMemoryStudents


@pytest.fixture
def today() -> date:
    return date(2026, 3, 16)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def account(store):
    return store.add_account("Ms. Rao", "rao@school.test", "secret123")


@pytest.fixture
def repos(store):
    return InMemoryAccounts(store), InMemoryStudents(store), InMemoryAttendance(store)


@pytest.fixture
def attendance_service(repos) -> AttendanceService:
    accounts, students, attendance = repos
    return AttendanceService(attendance, students, accounts)


@pytest.fixture
def student_service(repos) -> StudentService:
    _, students, _ = repos
    return StudentService(students)


@pytest.fixture
def make_app(repos):
    def _make(**overrides):
        accounts, students, attendance = repos
        enforce = bool(overrides.get("ENFORCE_EDIT_WINDOW", False))
        container = assemble(
            conn=None,
            accounts_repo=accounts,
            students_repo=students,
            attendance_repo=attendance,
            secret_key="test-secret",
            token_ttl_minutes=5,
            enforce_edit_window=enforce,
        )
        return create_app(settings_module="config.testing", overrides=overrides, container=container)

    return _make


@pytest.fixture
def client(make_app):
    return make_app().test_client()


@pytest.fixture
def auth_headers(client, account):
    resp = client.post("/api/signin", json={"email": "rao@school.test", "password": "secret123"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.get_json()['token']}"}
