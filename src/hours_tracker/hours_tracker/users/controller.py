from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import admin_required, current_role, current_user_id, json_error, login_required, request_data
from ..container import Container
from .service import profile_view


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request_data()
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember_me", True))
        session["user_id"] = s_user.user_id
        session["username"] = s_user.username
        session["role"] = s_user.role.value

        return jsonify({"success": True, "user": {"user_id": s_user.user_id, "username": s_user.username, "role": s_user.role.value}})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        user = container.user_service.get_profile(current_user_id())
        return jsonify({"success": True, "user": profile_view(user)})

    @app.route("/api/me/hourly-rate", methods=["PUT"], endpoint="update_hourly_rate")
    @login_required
    def update_hourly_rate():
        data = request_data()
        if "hourly_rate" not in data:
            return json_error("Missing hourly_rate", 400)
        rate = container.user_service.update_hourly_rate(current_user_id(), data["hourly_rate"])
        return jsonify({"success": True, "hourly_rate": rate})

    @app.route("/api/admin/users", methods=["GET"], endpoint="admin_users")
    @admin_required
    def admin_users():
        users = container.user_service.list_profiles(current_role=current_role())
        return jsonify({"success": True, "users": [profile_view(u) for u in users]})

    @app.route("/api/admin/users", methods=["POST"], endpoint="add_user")
    @admin_required
    def add_user():
        data = request_data()
        user_id = container.user_service.create_account(
            current_role=current_role(),
            username=data.get("username", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
            hourly_rate=data.get("hourly_rate"),
        )
        return jsonify({"success": True, "user_id": user_id}), 201
