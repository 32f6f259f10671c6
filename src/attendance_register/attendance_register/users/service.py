from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError
from .model import Account
from .repository import AccountRepository
from .tokens import TokenService


@dataclass(frozen=True)
class SignInResult:
    """What the client keeps after sign-in: the public account plus a token."""

    account: Account
    token: str

    def as_dict(self) -> dict:
        return {"user": self.account.public(), "token": self.token}


class AuthService:
    """Use cases: sign up, sign in, resolve the caller of a request."""

    def __init__(self, accounts: AccountRepository, tokens: TokenService):
        self._accounts = accounts
        self._tokens = tokens

    def sign_up(self, *, name: str, email: str, password: str) -> int:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        require_non_empty(password, "Password")

        if self._accounts.get_by_email(email):
            raise ConflictError("Email already exists")

        return self._accounts.create(name=name, email=email, password_hash=generate_password_hash(password))

    def sign_in(self, *, email: str, password: str) -> SignInResult:
        account = self._accounts.get_by_email(str(email or "").strip())
        if not account:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(account.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return SignInResult(account=account, token=self._tokens.issue(account.account_id))

    def authenticate_token(self, token: str) -> Account:
        account_id = self._tokens.account_id_from(token)
        account = self._accounts.get_by_id(account_id)
        if not account:
            raise AuthenticationError("Token is invalid")
        return account

    def require_account(self, account_id: int) -> Account:
        account = self._accounts.get_by_id(int(account_id))
        if not account:
            raise NotFoundError("Invalid user ID")
        return account
