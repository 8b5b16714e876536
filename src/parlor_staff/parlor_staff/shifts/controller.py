from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, owner_or_admin
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/users/<int:user_id>/shifts", methods=["GET"], endpoint="list_shifts")
    @owner_or_admin
    def list_shifts(user_id: int):
        shifts = container.shift_service.list_shifts(
            user_id=user_id,
            year_month=request.args.get("yearMonth"),
            start_date=request.args.get("start"),
            end_date=request.args.get("end"),
            on_date=request.args.get("date"),
        )
        return jsonify([s.to_dict() for s in shifts])

    @app.route("/users/<int:user_id>/shifts/stats", methods=["GET"], endpoint="shift_stats")
    @owner_or_admin
    def shift_stats(user_id: int):
        stats = container.shift_service.stats(user_id=user_id, year_month=request.args.get("yearMonth", ""))
        return jsonify(stats.to_dict())

    @app.route("/users/<int:user_id>/shifts", methods=["POST"], endpoint="create_shift")
    @owner_or_admin
    def create_shift(user_id: int):
        shift = container.shift_service.create(user_id=user_id, payload=json_body())
        return jsonify(shift.to_dict()), 201

    @app.route("/users/<int:user_id>/shifts/<int:shift_id>", methods=["GET"], endpoint="get_shift")
    @owner_or_admin
    def get_shift(user_id: int, shift_id: int):
        return jsonify(container.shift_service.get(user_id=user_id, shift_id=shift_id).to_dict())

    @app.route("/users/<int:user_id>/shifts/<int:shift_id>", methods=["PUT"], endpoint="replace_shift")
    @owner_or_admin
    def replace_shift(user_id: int, shift_id: int):
        shift = container.shift_service.replace(user_id=user_id, shift_id=shift_id, payload=json_body())
        return jsonify(shift.to_dict())

    @app.route("/users/<int:user_id>/shifts/<int:shift_id>", methods=["PATCH"], endpoint="patch_shift")
    @owner_or_admin
    def patch_shift(user_id: int, shift_id: int):
        shift = container.shift_service.patch(user_id=user_id, shift_id=shift_id, payload=json_body())
        return jsonify(shift.to_dict())

    @app.route("/users/<int:user_id>/shifts/<int:shift_id>", methods=["DELETE"], endpoint="delete_shift")
    @owner_or_admin
    def delete_shift(user_id: int, shift_id: int):
        container.shift_service.delete(user_id=user_id, shift_id=shift_id)
        return "", 204
