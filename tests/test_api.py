def _login(client, email="ana@example.com", password="secret1"):
    client.post("/api/auth/register", json={"email": email, "password": password, "name": "Ana"})
    res = client.post("/api/auth/login", json={"email": email, "password": password})
    assert res.status_code == 200
    return res.get_json()


def test_endpoints_require_login(client):
    res = client.get("/api/businesses")

    assert res.status_code == 401
    assert res.get_json() == {"error": "Neautorizat"}


def test_auth_flow(client):
    me = _login(client)

    assert client.get("/api/auth/me").get_json()["id"] == me["id"]
    assert client.post("/api/auth/logout").status_code == 200
    assert client.get("/api/auth/me").status_code == 401


def test_domain_errors_map_to_status_codes(client):
    client.post("/api/auth/register", json={"email": "ana@example.com", "password": "secret1"})

    dup = client.post("/api/auth/register", json={"email": "ana@example.com", "password": "secret1"})
    assert dup.status_code == 409

    bad = client.post("/api/auth/login", json={"email": "ana@example.com", "password": "nope"})
    assert bad.status_code == 401

    missing = client.post("/api/auth/register", json={})
    assert missing.status_code == 400
    assert missing.get_json() == {"error": "Câmpuri lipsă"}


def test_unknown_route_returns_json_404(client):
    res = client.get("/api/nope")

    assert res.status_code == 404
    assert "error" in res.get_json()


def test_month_plan_workflow(client):
    _login(client)
    business = client.get("/api/businesses").get_json()[0]
    bid = business["id"]

    a = client.post("/api/employees", json={"businessId": bid, "fullName": "A", "startDate": "2025-01-01"}).get_json()
    b = client.post("/api/employees", json={"businessId": bid, "fullName": "B", "startDate": "2025-01-01"}).get_json()

    plan = client.post("/api/month-plans", json={"businessId": bid, "month": 3, "year": 2025}).get_json()
    assert plan["employeeIds"] == [a["id"], b["id"]]
    assert plan["locationName"] == "Ansamblul Petrila"

    c = client.post("/api/employees", json={"businessId": bid, "fullName": "C", "startDate": "2025-02-01"}).get_json()
    again = client.post("/api/month-plans", json={"businessId": bid, "month": 3, "year": 2025}).get_json()
    assert again["id"] == plan["id"]
    assert again["employeeIds"] == [a["id"], b["id"], c["id"]]

    saved = client.post(
        "/api/cells",
        json={
            "cells": [
                {"monthPlanId": plan["id"], "employeeId": a["id"], "day": 1, "value": "24"},
                {"monthPlanId": plan["id"], "employeeId": a["id"], "day": 2, "value": "co"},
            ]
        },
    )
    assert saved.status_code == 200
    assert [c["value"] for c in saved.get_json()] == ["24", "CO"]

    single = client.post(
        "/api/cells", json={"monthPlanId": plan["id"], "employeeId": b["id"], "day": 31, "value": "12"}
    )
    assert single.status_code == 200

    rejected = client.post(
        "/api/cells", json={"monthPlanId": plan["id"], "employeeId": b["id"], "day": 3, "value": "D"}
    )
    assert rejected.status_code == 400

    resigned = client.post(
        f"/api/month-plans/{plan['id']}/resignation",
        json={"employeeId": b["id"], "terminationDate": "2025-03-30"},
    ).get_json()
    assert resigned["clearedDays"] == [30, 31]
    assert resigned["employee"]["terminationDate"] == "2025-03-30"

    grid = client.get(f"/api/month-plans/{plan['id']}/grid").get_json()
    assert grid["title"] == "Martie 2025"
    rows = {r["employeeId"]: r for r in grid["rows"]}
    assert rows[a["id"]]["totalHours"] == 24
    assert rows[a["id"]]["paidLeaveDays"] == [2]
    assert rows[b["id"]]["cells"]["30"] == {"code": "D", "derived": True, "kind": "RESIGNATION"}
    assert rows[b["id"]]["cells"]["31"]["code"] == "E"
    assert rows[b["id"]]["totalHours"] == 0
    assert grid["leaveFootnotes"][0]["label"] == "A = 1 zile (2)"

    detail = client.get(f"/api/month-plans/{plan['id']}").get_json()
    assert {(c["employeeId"], c["day"]) for c in detail["cells"]} >= {(a["id"], 1), (a["id"], 2)}


def test_deactivated_employee_keeps_plan_row(client):
    _login(client)
    bid = client.get("/api/businesses").get_json()[0]["id"]
    a = client.post("/api/employees", json={"businessId": bid, "fullName": "A", "startDate": "2025-01-01"}).get_json()
    plan = client.post("/api/month-plans", json={"businessId": bid, "month": 3, "year": 2025}).get_json()

    assert client.delete(f"/api/employees/{a['id']}").status_code == 200
    assert client.get(f"/api/employees?businessId={bid}").get_json() == []

    again = client.post("/api/month-plans", json={"businessId": bid, "month": 3, "year": 2025}).get_json()
    assert again["employeeIds"] == [a["id"]]


def test_other_users_cannot_see_plans(client, app):
    _login(client)
    bid = client.get("/api/businesses").get_json()[0]["id"]
    plan = client.post("/api/month-plans", json={"businessId": bid, "month": 3, "year": 2025}).get_json()

    other = app.test_client()
    _login(other, email="ion@example.com")

    assert other.get(f"/api/month-plans/{plan['id']}").status_code == 404
    assert other.post("/api/month-plans", json={"businessId": bid, "month": 3, "year": 2025}).status_code == 404
