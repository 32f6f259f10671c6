from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Account
from .repository import AccountRepository


class MySQLAccountRepository(AccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_account(row: dict) -> Account:
        return Account(
            account_id=int(row["id"]),
            name=row["name"],
            email=row["email"],
            password_hash=row["password"],
            created_at=row.get("created_at"),
        )

    def get_by_id(self, account_id: int) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, email, password, created_at FROM users WHERE id=%s",
                (int(account_id),),
            )
            row = fetchone(cur)
            return self._to_account(row) if row else None

    def get_by_email(self, email: str) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, email, password, created_at FROM users WHERE email=%s",
                (email,),
            )
            row = fetchone(cur)
            return self._to_account(row) if row else None

    def create(self, *, name: str, email: str, password_hash: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO users (name, email, password) VALUES (%s, %s, %s)",
                    (name, email, password_hash),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError:
            # Lost a race with a concurrent sign-up for the same email.
            raise ConflictError("Email already exists")
