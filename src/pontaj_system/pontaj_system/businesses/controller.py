from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_user_id, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/businesses", methods=["GET"], endpoint="businesses_list")
    @login_required
    def businesses_list():
        businesses = container.business_service.list_businesses(user_id=current_user_id())
        return jsonify([b.to_dict() for b in businesses])

    @app.route("/api/businesses", methods=["POST"], endpoint="businesses_create")
    @login_required
    def businesses_create():
        body = json_body()
        business = container.business_service.create(
            user_id=current_user_id(),
            name=body.get("name") or "",
            location_name=body.get("locationName"),
        )
        return jsonify(business.to_dict())

    @app.route("/api/businesses/<business_id>", methods=["PUT"], endpoint="businesses_update")
    @login_required
    def businesses_update(business_id: str):
        body = json_body()
        business = container.business_service.update(
            user_id=current_user_id(),
            business_id=business_id,
            name=body.get("name"),
            location_name=body.get("locationName"),
        )
        return jsonify(business.to_dict())

    @app.route("/api/businesses/<business_id>", methods=["DELETE"], endpoint="businesses_delete")
    @login_required
    def businesses_delete(business_id: str):
        container.business_service.delete(user_id=current_user_id(), business_id=business_id)
        return jsonify({"ok": True})

    @app.route(
        "/api/businesses/<business_id>/employees/<employee_id>",
        methods=["DELETE"],
        endpoint="businesses_employee_delete",
    )
    @login_required
    def businesses_employee_delete(business_id: str, employee_id: str):
        container.employee_service.delete_permanently(
            user_id=current_user_id(),
            business_id=business_id,
            employee_id=employee_id,
        )
        return jsonify({"ok": True})
