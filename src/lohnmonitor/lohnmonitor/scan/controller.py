from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import error_response, roles_required
from ..core.enums import AuditAction, Role
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/scan", methods=["POST"], endpoint="trigger_scan")
    @roles_required([Role.ADMIN])
    def trigger_scan():
        logger.info("Manual promotion scan triggered by %s", session.get("username"))
        try:
            result = container.scan_orchestrator.run_scan()
        except DomainError as e:
            return error_response(e)

        try:
            container.audit_repo.append(
                user_id=session.get("user_id"),
                action=AuditAction.SCAN_TRIGGERED,
                details=result.as_dict(),
            )
        except Exception:
            logger.exception("Could not write audit log entry")

        return jsonify({"success": True, "result": result.as_dict()})
