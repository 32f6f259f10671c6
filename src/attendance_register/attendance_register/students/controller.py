from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import domain_error, read_json, server_error
from ..common.validators import require_fields
from ..core.exceptions import DomainError
from ..container import Container
from ..users.guard import make_auth_required


def register(app: Flask, container: Container) -> None:
    auth_required = make_auth_required(app, container)

    def _selected_date():
        value = request.args.get("date")
        return parse_iso_date(value) if value else None

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @auth_required
    def list_students():
        try:
            rows = container.student_service.list_for_date(_selected_date())
            return jsonify([r.as_dict() for r in rows])
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("fetching students")

    @app.route("/api/students/stats", methods=["GET"], endpoint="student_stats")
    @auth_required
    def student_stats():
        try:
            return jsonify(container.student_service.stats_for_date(_selected_date()).as_dict())
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("computing student stats")

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @auth_required
    def add_student():
        try:
            body = read_json()
            require_fields(body, "name", "regno")
            student = container.student_service.add(name=body["name"], regno=body["regno"])
            return jsonify({"message": "Student added successfully", "student": student.as_dict()}), 201
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("adding student")

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    @auth_required
    def delete_student(student_id: int):
        try:
            container.student_service.delete(student_id)
            return jsonify({"message": "Student deleted successfully"})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("deleting student")

    @app.route("/api/students/<int:student_id>/attendance", methods=["GET"], endpoint="student_history")
    @auth_required
    def student_history(student_id: int):
        try:
            records = container.attendance_service.history(student_id)
            return jsonify([r.as_dict() for r in records])
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return server_error("fetching attendance history")
