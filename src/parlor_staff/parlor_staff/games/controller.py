from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.http import current_user_id, json_body, login_required, owner_or_admin
from ..container import Container
from .service import resolve_range


def register(app: Flask, container: Container) -> None:
    service = container.game_result_service

    @app.route("/users/<int:user_id>/results", methods=["GET"], endpoint="list_results")
    @owner_or_admin
    def list_results(user_id: int):
        start, end = resolve_range(
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
            year_month=request.args.get("yearMonth"),
            today=now_local().date(),
        )
        return jsonify(service.list_results(user_id=user_id, start=start, end=end).to_dict())

    @app.route("/users/<int:user_id>/results", methods=["POST"], endpoint="create_result")
    @owner_or_admin
    def create_result(user_id: int):
        return jsonify(service.create(user_id=user_id, payload=json_body()).to_dict()), 201

    @app.route("/users/<int:user_id>/results/<int:result_id>", methods=["GET"], endpoint="get_result")
    @owner_or_admin
    def get_result(user_id: int, result_id: int):
        return jsonify(service.get(user_id=user_id, result_id=result_id).to_dict())

    @app.route("/users/<int:user_id>/results/<int:result_id>", methods=["PUT"], endpoint="replace_result")
    @owner_or_admin
    def replace_result(user_id: int, result_id: int):
        return jsonify(service.replace(user_id=user_id, result_id=result_id, payload=json_body()).to_dict())

    @app.route("/users/<int:user_id>/results/<int:result_id>", methods=["PATCH"], endpoint="patch_result")
    @owner_or_admin
    def patch_result(user_id: int, result_id: int):
        return jsonify(service.patch(user_id=user_id, result_id=result_id, payload=json_body()).to_dict())

    @app.route("/users/<int:user_id>/results/<int:result_id>", methods=["DELETE"], endpoint="delete_result")
    @owner_or_admin
    def delete_result(user_id: int, result_id: int):
        service.delete(user_id=user_id, result_id=result_id)
        return "", 204

    @app.route("/users/<int:user_id>/results/simple-batch/start", methods=["POST"], endpoint="start_simple_batch")
    @owner_or_admin
    def start_simple_batch(user_id: int):
        return jsonify(service.start_batch(user_id=user_id, payload=json_body()).to_dict()), 201

    @app.route(
        "/users/<int:user_id>/results/simple-batch/<batch_id>/finalize",
        methods=["POST"],
        endpoint="finalize_simple_batch",
    )
    @owner_or_admin
    def finalize_simple_batch(user_id: int, batch_id: str):
        final = service.finalize_batch(user_id=user_id, batch_id=batch_id, payload=json_body())
        return jsonify(final.to_dict()), 201

    @app.route("/users/<int:user_id>/results/simple-batch/<batch_id>", methods=["DELETE"], endpoint="delete_simple_batch")
    @owner_or_admin
    def delete_simple_batch(user_id: int, batch_id: str):
        return jsonify({"deletedCount": service.delete_batch(user_id=user_id, batch_id=batch_id)})

    @app.route("/ranking", methods=["GET"], endpoint="ranking")
    @login_required
    def ranking():
        start, end = resolve_range(
            start_date=request.args.get("start"),
            end_date=request.args.get("end"),
            year_month=request.args.get("yearMonth"),
            today=now_local().date(),
        )
        return jsonify(
            service.ranking(
                game_type=request.args.get("type", "YONMA"),
                start=start,
                end=end,
                current_user_id=current_user_id(),
            )
        )
