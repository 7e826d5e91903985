from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import error_response, roles_required
from ..core.enums import Role
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/settings", methods=["GET"], endpoint="get_settings")
    @roles_required([Role.ADMIN])
    def get_settings():
        return jsonify({"settings": container.settings_service.all()})

    @app.route("/api/admin/settings", methods=["PUT"], endpoint="update_settings")
    @roles_required([Role.ADMIN])
    def update_settings():
        payload = request.get_json(silent=True)
        try:
            container.settings_service.update(
                payload.get("settings") if isinstance(payload, dict) else None,
                username=session.get("username", ""),
                user_id=session.get("user_id"),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True, "message": "Einstellungen gespeichert"})

    @app.route("/api/admin/test-email", methods=["POST"], endpoint="test_email")
    @roles_required([Role.ADMIN])
    def test_email():
        mailer = container.email_service
        if not mailer.enabled:
            return jsonify({"success": False, "message": "SMTP nicht konfiguriert"})
        ok = mailer.test_connection()
        return jsonify(
            {"success": ok, "message": "SMTP-Verbindung erfolgreich" if ok else "SMTP-Verbindung fehlgeschlagen"}
        )
