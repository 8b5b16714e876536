from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        s_user = container.auth_service.authenticate(body.get("loginId", ""), body.get("password", ""))

        session.clear()
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value
        session["store_id"] = s_user.store_id
        return jsonify({"success": True, "user": s_user.to_dict()})

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(
            {
                "id": session["user_id"],
                "name": session.get("name"),
                "role": session.get("role"),
                "storeId": session.get("store_id"),
            }
        )
