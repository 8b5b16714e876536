from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, owner_or_admin
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/users/<int:user_id>/settings", methods=["GET"], endpoint="get_settings")
    @owner_or_admin
    def get_settings(user_id: int):
        return jsonify(container.settings_service.get_or_create(user_id).to_dict())

    @app.route("/users/<int:user_id>/settings", methods=["PUT"], endpoint="replace_settings")
    @owner_or_admin
    def replace_settings(user_id: int):
        return jsonify(container.settings_service.replace(user_id, json_body()).to_dict())

    @app.route("/users/<int:user_id>/settings", methods=["PATCH"], endpoint="patch_settings")
    @owner_or_admin
    def patch_settings(user_id: int):
        return jsonify(container.settings_service.patch(user_id, json_body()).to_dict())
