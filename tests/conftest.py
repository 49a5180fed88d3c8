from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from types import SimpleNamespace

import pytest

from src.pontaj_system.pontaj_system.businesses.model import Business
from src.pontaj_system.pontaj_system.container import wire_services
from src.pontaj_system.pontaj_system.employees.model import Employee
from src.pontaj_system.pontaj_system.plans.model import Cell, MonthPlan
from src.pontaj_system.pontaj_system.users.model import User


class FakeUsersRepo:
    def __init__(self):
        self._next_id = 1
        self.users: dict[str, User] = {}

    def get_by_id(self, user_id):
        return self.users.get(user_id)

    def get_by_email(self, email):
        for u in self.users.values():
            if u.email == email:
                return u
        return None

    def create_user(self, *, email, password_hash, name):
        user_id = f"u{self._next_id}"
        self._next_id += 1
        self.users[user_id] = User(user_id=user_id, email=email, password_hash=password_hash, name=name)
        return user_id


class FakeBusinessesRepo:
    def __init__(self):
        self._next_id = 1
        self.businesses: dict[str, Business] = {}

    def get_owned(self, *, business_id, owner_user_id):
        b = self.businesses.get(business_id)
        return b if b and b.owner_user_id == owner_user_id else None

    def list_for_owner(self, owner_user_id):
        return [b for b in self.businesses.values() if b.owner_user_id == owner_user_id]

    def create(self, *, owner_user_id, name, location_name):
        business_id = f"b{self._next_id}"
        self._next_id += 1
        b = Business(business_id=business_id, owner_user_id=owner_user_id, name=name, location_name=location_name)
        self.businesses[business_id] = b
        return b

    def update(self, *, business_id, name, location_name):
        b = replace(self.businesses[business_id], name=name, location_name=location_name)
        self.businesses[business_id] = b
        return b

    def delete(self, *, business_id):
        return self.businesses.pop(business_id, None) is not None


class FakeEmployeesRepo:
    def __init__(self, plans=None, cells=None):
        self._next_id = 1
        self.employees: dict[str, Employee] = {}
        self._plans = plans
        self._cells = cells

    def get_by_id(self, employee_id):
        return self.employees.get(employee_id)

    def list_active(self, business_id):
        return [e for e in self.employees.values() if e.business_id == business_id and e.active]

    def list_by_ids(self, *, business_id, employee_ids):
        found = [self.employees.get(i) for i in employee_ids]
        return [e for e in found if e and e.business_id == business_id]

    def create(self, *, business_id, full_name, start_date=None):
        employee_id = f"e{self._next_id}"
        self._next_id += 1
        e = Employee(
            employee_id=employee_id,
            business_id=business_id,
            full_name=full_name,
            start_date=start_date,
            created_at=datetime(2024, 1, 1, 9, 0, 0),
        )
        self.employees[employee_id] = e
        return e

    def update(self, *, employee_id, full_name, active, start_date, termination_date):
        e = replace(
            self.employees[employee_id],
            full_name=full_name,
            active=active,
            start_date=start_date,
            termination_date=termination_date,
        )
        self.employees[employee_id] = e
        return e

    def delete_permanently(self, *, business_id, employee_id):
        e = self.employees.get(employee_id)
        if not e or e.business_id != business_id:
            return False
        if self._cells is not None:
            self._cells.cells = {k: v for k, v in self._cells.cells.items() if v.employee_id != employee_id}
        if self._plans is not None:
            for plan_id, plan in list(self._plans.plans.items()):
                if plan.business_id == business_id and employee_id in plan.employee_ids:
                    kept = tuple(i for i in plan.employee_ids if i != employee_id)
                    self._plans.plans[plan_id] = replace(plan, employee_ids=kept)
        del self.employees[employee_id]
        return True


class FakePlansRepo:
    def __init__(self):
        self._next_id = 1
        self.plans: dict[str, MonthPlan] = {}
        # (plan_id, ids) applied right before the next compare-and-set
        self.interleaved_writes: list[tuple[str, tuple[str, ...]]] = []
        self.cas_calls = 0

    def get_by_key(self, *, business_id, month, year):
        for p in self.plans.values():
            if p.business_id == business_id and p.month == month and p.year == year:
                return p
        return None

    def get_owned(self, *, plan_id, user_id):
        p = self.plans.get(plan_id)
        return p if p and p.user_id == user_id else None

    def list_for_user(self, *, user_id, business_id=None):
        out = [p for p in self.plans.values() if p.user_id == user_id]
        if business_id:
            out = [p for p in out if p.business_id == business_id]
        return sorted(out, key=lambda p: (p.year, p.month), reverse=True)

    def create_if_absent(self, *, user_id, business_id, month, year, location_name, employee_ids):
        existing = self.get_by_key(business_id=business_id, month=month, year=year)
        if existing:
            return existing
        plan_id = f"p{self._next_id}"
        self._next_id += 1
        p = MonthPlan(
            plan_id=plan_id,
            user_id=user_id,
            business_id=business_id,
            month=month,
            year=year,
            employee_ids=tuple(employee_ids),
            location_name=location_name,
        )
        self.plans[plan_id] = p
        return p

    def compare_and_set_membership(self, *, plan_id, expected, new):
        self.cas_calls += 1
        if self.interleaved_writes:
            other_id, ids = self.interleaved_writes.pop(0)
            self.plans[other_id] = replace(self.plans[other_id], employee_ids=tuple(ids))
        p = self.plans.get(plan_id)
        if not p or list(p.employee_ids) != list(expected):
            return False
        self.plans[plan_id] = replace(p, employee_ids=tuple(new))
        return True

    def update(self, *, plan_id, employee_ids, location_name):
        p = replace(self.plans[plan_id], employee_ids=tuple(employee_ids), location_name=location_name)
        self.plans[plan_id] = p
        return p

    def delete(self, *, plan_id):
        return self.plans.pop(plan_id, None) is not None


class FakeCellsRepo:
    def __init__(self):
        self._next_id = 1
        self.cells: dict[tuple[str, str, int], Cell] = {}

    def list_for_plan(self, plan_id):
        return [c for c in self.cells.values() if c.plan_id == plan_id]

    def upsert_many(self, cells):
        out = []
        for c in cells:
            key = (c.plan_id, c.employee_id, c.day)
            existing = self.cells.get(key)
            if existing:
                stored = replace(existing, code=c.code)
            else:
                stored = Cell(cell_id=f"c{self._next_id}", plan_id=c.plan_id, employee_id=c.employee_id, day=c.day, code=c.code)
                self._next_id += 1
            self.cells[key] = stored
            out.append(stored)
        return out

    def clear_days(self, *, plan_id, employee_id, days):
        changed = 0
        for day in days:
            key = (plan_id, employee_id, day)
            if key in self.cells and self.cells[key].code:
                self.cells[key] = replace(self.cells[key], code="")
                changed += 1
        return changed


@pytest.fixture
def repos():
    plans = FakePlansRepo()
    cells = FakeCellsRepo()
    return SimpleNamespace(
        users=FakeUsersRepo(),
        businesses=FakeBusinessesRepo(),
        employees=FakeEmployeesRepo(plans=plans, cells=cells),
        plans=plans,
        cells=cells,
    )


@pytest.fixture
def container(repos):
    return wire_services(
        conn=None,
        users_repo=repos.users,
        businesses_repo=repos.businesses,
        employees_repo=repos.employees,
        plans_repo=repos.plans,
        cells_repo=repos.cells,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.pontaj_system.pontaj_system.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
