from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_role, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/settings/special-wages", methods=["GET"], endpoint="list_special_wages")
    @login_required
    def list_special_wages():
        return jsonify([w.to_dict() for w in container.special_wage_service.list_all()])

    @app.route("/settings/special-wages", methods=["POST"], endpoint="create_special_wage")
    @login_required
    def create_special_wage():
        body = json_body()
        wage = container.special_wage_service.create(
            current_role=current_role(),
            label=body.get("label"),
            hourly_wage=body.get("hourlyWage"),
        )
        return jsonify(wage.to_dict()), 201

    @app.route("/settings/special-wages/<int:wage_id>", methods=["DELETE"], endpoint="delete_special_wage")
    @login_required
    def delete_special_wage(wage_id: int):
        container.special_wage_service.delete(current_role=current_role(), special_wage_id=wage_id)
        return "", 204
