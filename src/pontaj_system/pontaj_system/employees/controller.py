from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_user_id, json_body, login_required
from ..container import Container
from .service import UNSET

_FIELDS = {
    "fullName": "full_name",
    "active": "active",
    "startDate": "start_date",
    "terminationDate": "termination_date",
}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @login_required
    def employees_list():
        employees = container.employee_service.list_active(
            user_id=current_user_id(),
            business_id=request.args.get("businessId", ""),
        )
        return jsonify([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @login_required
    def employees_create():
        body = json_body()
        employee = container.employee_service.create(
            user_id=current_user_id(),
            business_id=body.get("businessId") or "",
            full_name=body.get("fullName") or "",
            start_date=body.get("startDate"),
        )
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    @login_required
    def employees_update(employee_id: str):
        body = json_body()
        changes = {attr: body.get(key, UNSET) for key, attr in _FIELDS.items()}
        employee = container.employee_service.update(user_id=current_user_id(), employee_id=employee_id, **changes)
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @login_required
    def employees_delete(employee_id: str):
        container.employee_service.deactivate(user_id=current_user_id(), employee_id=employee_id)
        return jsonify({"ok": True})
