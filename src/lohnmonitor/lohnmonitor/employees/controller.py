from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..common.web import error_response, login_required
from ..core.exceptions import DomainError, NotFoundError
from ..container import Container
from ..tariff.promotion import current_step_from_hire_date, format_step
from ..tariff.status import evaluate_employee


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<int:employee_id>/salary", methods=["GET"], endpoint="employee_salary")
    @login_required
    def employee_salary(employee_id: int):
        try:
            breakdown = container.salary_service.compute_for_employee_id(employee_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"gehalt": breakdown.as_dict()})

    @app.route("/api/employees/<int:employee_id>/promotion", methods=["GET"], endpoint="employee_promotion")
    @login_required
    def employee_promotion(employee_id: int):
        try:
            emp = container.employees_repo.get_by_id(employee_id)
            if not emp:
                raise NotFoundError("Mitarbeiter nicht gefunden")
            today = now_local().date()
            status = evaluate_employee(emp, container.settings_service.threshold_days(), today)
            expected = current_step_from_hire_date(emp.hire_date, today)
        except DomainError as e:
            return error_response(e)

        return jsonify(
            {
                "stufe": emp.step,
                "stufeLabel": format_step(emp.step),
                "naechsterAufstieg": status.next_promotion_date.isoformat() if status.next_promotion_date else None,
                "tageBisAufstieg": status.days_remaining,
                "alarmLevel": status.alarm_level.value,
                "alarm": status.alarm,
                "erwarteteStufe": {
                    "stufe": expected.step,
                    "naechsterAufstieg": (
                        expected.next_promotion_date.isoformat() if expected.next_promotion_date else None
                    ),
                    "tageBisAufstieg": expected.days_remaining,
                    "istSonderstufe": expected.is_special_step,
                },
            }
        )
