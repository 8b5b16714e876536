from __future__ import annotations

from flask import Flask, jsonify, send_file

from ..common.http import json_body, owner_or_admin
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/users/<int:user_id>/salary/<year_month>", methods=["GET"], endpoint="salary_summary")
    @owner_or_admin
    def salary_summary(user_id: int, year_month: str):
        return jsonify(container.salary_service.summary(user_id=user_id, year_month=year_month).to_dict())

    @app.route("/users/<int:user_id>/salary/<year_month>/export", methods=["GET"], endpoint="salary_export")
    @owner_or_admin
    def salary_export(user_id: int, year_month: str):
        out = container.salary_service.export_xlsx(user_id=user_id, year_month=year_month)
        return send_file(
            out,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=f"salary_{user_id}_{year_month}.xlsx",
        )

    @app.route("/users/<int:user_id>/advance/<year_month>", methods=["GET"], endpoint="get_advance")
    @owner_or_admin
    def get_advance(user_id: int, year_month: str):
        return jsonify({"amount": container.salary_service.get_advance(user_id=user_id, year_month=year_month)})

    @app.route("/users/<int:user_id>/advance/<year_month>", methods=["PUT"], endpoint="update_advance")
    @owner_or_admin
    def update_advance(user_id: int, year_month: str):
        amount = container.salary_service.update_advance(user_id=user_id, year_month=year_month, payload=json_body())
        return jsonify({"amount": amount})
