from __future__ import annotations

from functools import wraps

from flask import Flask, g, request

from ..common.http import domain_error, json_error, server_error
from ..core.exceptions import AuthenticationError
from ..container import Container


def make_auth_required(app: Flask, container: Container):
    """Build the per-request bearer-token check.

    With a valid token, g.account is the caller. Without a header, g.account
    is None, which REQUIRE_TOKEN turns into a 401.
    """

    def auth_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.account = None
            header = request.headers.get("Authorization", "").strip()

            if header:
                scheme, _, token = header.partition(" ")
                if scheme.lower() != "bearer" or not token.strip():
                    return json_error("Authorization header must be 'Bearer <token>'", 401)
                try:
                    g.account = container.auth_service.authenticate_token(token.strip())
                except AuthenticationError as e:
                    return domain_error(e)
                except Exception:
                    return server_error("authenticating request")
            elif app.config.get("REQUIRE_TOKEN", True):
                return json_error("Authorization token is missing", 401)

            return view(*args, **kwargs)

        return wrapper

    return auth_required
