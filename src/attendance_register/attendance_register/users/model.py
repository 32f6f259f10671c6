from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Account:
    """Domain entity: a sign-in account, the one that marks attendance.

    Plain data object; no database access here.
    """

    account_id: int
    name: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None

    def public(self) -> dict:
        return {"id": self.account_id, "name": self.name, "email": self.email}
