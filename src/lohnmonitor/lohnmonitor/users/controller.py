from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.web import error_response, login_required
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        payload = request.get_json(silent=True) or request.form
        try:
            s_user = container.auth_service.authenticate(payload.get("username", ""), payload.get("password", ""))
        except AuthenticationError as e:
            logger.info("Failed login for %r", payload.get("username"))
            return error_response(e)

        session.clear()
        session.permanent = bool(payload.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
        session["user_id"] = s_user.user_id
        session["username"] = s_user.username
        session["role"] = s_user.role.value

        return jsonify({"user": {"id": s_user.user_id, "username": s_user.username, "role": s_user.role.value}})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(
            {"user": {"id": session["user_id"], "username": session.get("username"), "role": session.get("role")}}
        )
