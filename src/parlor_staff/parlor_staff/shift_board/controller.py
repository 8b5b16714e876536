from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.http import current_role, json_body, login_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthorizationError


def register(app: Flask, container: Container) -> None:
    def _ensure_store_member(store_id: int) -> None:
        if current_role() == Role.ADMIN:
            return
        if session.get("store_id") != store_id:
            raise AuthorizationError("You can only view your own store's board")

    @app.route("/stores/<int:store_id>/shift-board", methods=["GET"], endpoint="shift_board")
    @login_required
    def shift_board(store_id: int):
        _ensure_store_member(store_id)
        start, end = container.shift_board_service.resolve_range(
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
            year_month=request.args.get("yearMonth"),
            half=request.args.get("half"),
        )
        return jsonify(container.shift_board_service.build_board(store_id=store_id, start=start, end=end))

    @app.route("/stores/<int:store_id>/shift-requirements", methods=["PUT"], endpoint="upsert_shift_requirement")
    @login_required
    def upsert_shift_requirement(store_id: int):
        saved = container.shift_board_service.upsert_requirement(
            current_role=current_role(),
            store_id=store_id,
            payload=json_body(),
        )
        return jsonify(saved)
