from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import current_user_id, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _start_session(s_user) -> None:
        session.clear()
        session["user_id"] = s_user.user_id
        session["email"] = s_user.email
        session["name"] = s_user.name

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        body = json_body()
        s_user = container.auth_service.register(
            email=body.get("email", ""),
            password=body.get("password", ""),
            name=body.get("name"),
        )
        return jsonify({"id": s_user.user_id, "email": s_user.email})

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        body = json_body()
        s_user = container.auth_service.authenticate(body.get("email", ""), body.get("password", ""))
        _start_session(s_user)
        return jsonify({"id": s_user.user_id, "email": s_user.email, "name": s_user.name})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return jsonify({"ok": True})

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @login_required
    def auth_me():
        return jsonify({"id": current_user_id(), "email": session.get("email"), "name": session.get("name")})
