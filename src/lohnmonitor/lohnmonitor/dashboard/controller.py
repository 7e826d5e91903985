from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import current_role, error_response, login_required, roles_required
from ..core.enums import Role
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/summary", methods=["GET"], endpoint="dashboard_summary")
    @login_required
    def dashboard_summary():
        try:
            return jsonify({"summary": container.dashboard_service.summary()})
        except DomainError as e:
            return error_response(e)

    @app.route("/api/dashboard/alarms", methods=["GET"], endpoint="dashboard_alarms")
    @login_required
    def dashboard_alarms():
        try:
            return jsonify(container.dashboard_service.alarms(role=current_role()))
        except DomainError as e:
            return error_response(e)

    @app.route(
        "/api/dashboard/alarms/<int:employee_id>/acknowledge",
        methods=["POST"],
        endpoint="acknowledge_alarm",
    )
    @roles_required([Role.ADMIN, Role.EDITOR])
    def acknowledge_alarm(employee_id: int):
        try:
            n = container.notification_service.acknowledge(
                current_role=current_role(),
                employee_id=employee_id,
                username=session.get("username", ""),
                user_id=session.get("user_id"),
            )
        except DomainError as e:
            return error_response(e)

        return jsonify(
            {
                "success": True,
                "message": "Alarm als bearbeitet markiert",
                "notification": {
                    "id": n.notification_id,
                    "employeeId": n.employee_id,
                    "acknowledged": n.acknowledged,
                    "acknowledgedAt": n.acknowledged_at.isoformat() if n.acknowledged_at else None,
                    "acknowledgedBy": n.acknowledged_by,
                },
            }
        )

    @app.route("/api/dashboard/notifications", methods=["GET"], endpoint="dashboard_notifications")
    @login_required
    def dashboard_notifications():
        unacknowledged_only = request.args.get("unacknowledgedOnly") == "true"
        items = container.dashboard_service.notifications(
            role=current_role(), unacknowledged_only=unacknowledged_only
        )
        return jsonify({"notifications": items})
