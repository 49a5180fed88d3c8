from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_user_id, json_body, login_required
from ..container import Container
from ..core.exceptions import ValidationError
from ..employees.service import UNSET
from .model import CellInput


def _cell_inputs(body: dict) -> list[CellInput]:
    """Accept either ``{"cells": [...]}`` or a single cell body."""
    raw = body["cells"] if "cells" in body else [body]
    if not isinstance(raw, list):
        raise ValidationError("Format invalid pentru celule")

    out: list[CellInput] = []
    for c in raw:
        if not isinstance(c, dict):
            raise ValidationError("Format invalid pentru celule")
        out.append(
            CellInput(
                plan_id=str(c.get("monthPlanId") or ""),
                employee_id=str(c.get("employeeId") or ""),
                day=c.get("day"),
                code=str(c.get("value") or ""),
            )
        )
    return out


def register(app: Flask, container: Container) -> None:
    @app.route("/api/month-plans", methods=["GET"], endpoint="plans_list")
    @login_required
    def plans_list():
        plans = container.plan_service.list_plans(
            user_id=current_user_id(),
            business_id=request.args.get("businessId") or None,
        )
        return jsonify([p.to_dict() for p in plans])

    @app.route("/api/month-plans", methods=["POST"], endpoint="plans_fetch_or_create")
    @login_required
    def plans_fetch_or_create():
        body = json_body()
        plan = container.plan_service.get_or_create(
            user_id=current_user_id(),
            business_id=body.get("businessId") or "",
            month=body.get("month"),
            year=body.get("year"),
        )
        return jsonify(plan.to_dict())

    @app.route("/api/month-plans/<plan_id>", methods=["GET"], endpoint="plans_get")
    @login_required
    def plans_get(plan_id: str):
        plan, cells = container.plan_service.get_plan(user_id=current_user_id(), plan_id=plan_id)
        return jsonify(plan.to_dict(cells=cells))

    @app.route("/api/month-plans/<plan_id>", methods=["PUT"], endpoint="plans_update")
    @login_required
    def plans_update(plan_id: str):
        body = json_body()
        plan = container.plan_service.update_plan(
            user_id=current_user_id(),
            plan_id=plan_id,
            employee_ids=body.get("employeeIds", UNSET),
            location_name=body.get("locationName", UNSET),
        )
        return jsonify(plan.to_dict())

    @app.route("/api/month-plans/<plan_id>", methods=["DELETE"], endpoint="plans_delete")
    @login_required
    def plans_delete(plan_id: str):
        container.plan_service.delete_plan(user_id=current_user_id(), plan_id=plan_id)
        return jsonify({"ok": True})

    @app.route("/api/month-plans/<plan_id>/grid", methods=["GET"], endpoint="plans_grid")
    @login_required
    def plans_grid(plan_id: str):
        grid = container.plan_service.build_grid(user_id=current_user_id(), plan_id=plan_id)
        return jsonify(grid.to_dict())

    @app.route("/api/month-plans/<plan_id>/resignation", methods=["POST"], endpoint="plans_resignation")
    @login_required
    def plans_resignation(plan_id: str):
        body = json_body()
        result = container.plan_service.apply_resignation(
            user_id=current_user_id(),
            plan_id=plan_id,
            employee_id=str(body.get("employeeId") or ""),
            termination_date=body.get("terminationDate"),
        )
        return jsonify({"employee": result.employee.to_dict(), "clearedDays": result.cleared_days})

    @app.route("/api/cells", methods=["POST"], endpoint="cells_upsert")
    @login_required
    def cells_upsert():
        cells = container.plan_service.upsert_cells(user_id=current_user_id(), cells=_cell_inputs(json_body()))
        return jsonify([c.to_dict() for c in cells])
