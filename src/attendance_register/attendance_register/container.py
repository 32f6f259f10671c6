from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.window import DateWindow
from .core.constants import DEFAULT_TOKEN_TTL_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_user_repository import MySQLAccountRepository
from .users.repository import AccountRepository
from .users.service import AuthService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    accounts_repo: AccountRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    student_service: StudentService
    attendance_service: AttendanceService


def assemble(
    *,
    conn: Optional[DatabaseConnection],
    accounts_repo: AccountRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    secret_key: str,
    token_ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES,
    enforce_edit_window: bool = False,
) -> Container:
    """Wire services over the given repositories (MySQL or in-memory)."""

    tokens = TokenService(secret_key=secret_key, ttl_minutes=int(token_ttl_minutes))
    return Container(
        conn=conn,
        accounts_repo=accounts_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(accounts_repo, tokens),
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            students_repo,
            accounts_repo,
            window=DateWindow(),
            enforce_edit_window=enforce_edit_window,
        ),
    )


def build_container(
    *,
    db_config: dict,
    secret_key: str,
    token_ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES,
    enforce_edit_window: bool = False,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return assemble(
        conn=conn,
        accounts_repo=MySQLAccountRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        secret_key=secret_key,
        token_ttl_minutes=token_ttl_minutes,
        enforce_edit_window=enforce_edit_window,
    )
