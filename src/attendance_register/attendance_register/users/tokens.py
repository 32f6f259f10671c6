from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_TTL_MINUTES
from ..core.exceptions import AuthenticationError

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenService:
    """Issue and verify short-lived signed access tokens (JWT, HS256)."""

    secret_key: str
    ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES

    def issue(self, account_id: int, *, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(account_id),
            "iat": now,
            "exp": now + timedelta(minutes=int(self.ttl_minutes)),
        }
        return jwt.encode(payload, self.secret_key, algorithm=ALGORITHM)

    def account_id_from(self, token: str) -> int:
        try:
            data = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Token is invalid")

        try:
            return int(data["sub"])
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Token is invalid")
