from __future__ import annotations

from typing import Optional, Protocol

from .model import Account


class AccountRepository(Protocol):
    """Repository interface for accounts.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, account_id: int) -> Optional[Account]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Account]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, password_hash: str) -> int:
        raise NotImplementedError
