from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import domain_error, read_json, server_error
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/signup", methods=["POST"], endpoint="signup")
    def signup():
        try:
            body = read_json()
            container.auth_service.sign_up(
                name=body.get("name"),
                email=body.get("email"),
                password=body.get("password"),
            )
            return jsonify({"message": "User created successfully"}), 201
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("in signup")

    @app.route("/api/signin", methods=["POST"], endpoint="signin")
    def signin():
        try:
            body = read_json()
            result = container.auth_service.sign_in(email=body.get("email"), password=body.get("password"))
            return jsonify({"message": "Login successful", **result.as_dict()})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("in signin")
