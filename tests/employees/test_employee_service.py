import pytest

from src.pontaj_system.pontaj_system.core.exceptions import NotFoundError, ValidationError
from src.pontaj_system.pontaj_system.employees.service import normalize_date_field, require_termination_after_start
from src.pontaj_system.pontaj_system.plans.model import CellInput


@pytest.fixture
def business(repos):
    return repos.businesses.create(owner_user_id="u1", name="Firma 1", location_name="Ansamblul Petrila")


def test_normalize_date_field():
    assert normalize_date_field(None, "Data angajării") is None
    assert normalize_date_field("  ", "Data angajării") is None
    assert normalize_date_field("2024-03-05", "Data angajării") == "2024-03-05"
    assert normalize_date_field(" 2024-03-05\n", "Data angajării") == "2024-03-05"
    with pytest.raises(ValidationError, match="Data angajării invalidă"):
        normalize_date_field("05.03.2024", "Data angajării")


def test_termination_must_not_precede_start():
    require_termination_after_start("2024-03-05", "2024-03-05")
    require_termination_after_start(None, "2024-03-05")
    require_termination_after_start("garbage", "2024-03-05")
    with pytest.raises(ValidationError):
        require_termination_after_start("2024-03-05", "2024-03-04")


def test_create_and_list_active(container, business):
    svc = container.employee_service
    a = svc.create(user_id="u1", business_id=business.business_id, full_name="  Ana Pop ", start_date="2024-01-15")
    svc.create(user_id="u1", business_id=business.business_id, full_name="Ion Ilie")

    assert a.full_name == "Ana Pop"
    assert a.start_date == "2024-01-15"
    assert a.active
    assert [e.full_name for e in svc.list_active(user_id="u1", business_id=business.business_id)] == ["Ana Pop", "Ion Ilie"]


def test_create_validates_input(container, business):
    svc = container.employee_service
    with pytest.raises(ValidationError):
        svc.create(user_id="u1", business_id=business.business_id, full_name=" ")
    with pytest.raises(ValidationError):
        svc.create(user_id="u1", business_id=business.business_id, full_name="Ana", start_date="2024/01/15")
    with pytest.raises(NotFoundError):
        svc.create(user_id="u2", business_id=business.business_id, full_name="Ana")


def test_partial_update_keeps_unset_fields(container, business):
    svc = container.employee_service
    e = svc.create(user_id="u1", business_id=business.business_id, full_name="Ana", start_date="2024-01-15")

    renamed = svc.update(user_id="u1", employee_id=e.employee_id, full_name="Ana Maria")
    assert renamed.start_date == "2024-01-15"

    resigned = svc.update(user_id="u1", employee_id=e.employee_id, termination_date="2024-06-30")
    assert resigned.full_name == "Ana Maria"
    assert resigned.termination_date == "2024-06-30"

    cleared = svc.update(user_id="u1", employee_id=e.employee_id, start_date=None)
    assert cleared.start_date is None
    assert cleared.termination_date == "2024-06-30"


def test_employees_of_other_users_are_hidden(container, business):
    svc = container.employee_service
    e = svc.create(user_id="u1", business_id=business.business_id, full_name="Ana")

    with pytest.raises(NotFoundError):
        svc.update(user_id="u2", employee_id=e.employee_id, full_name="X")
    with pytest.raises(NotFoundError):
        svc.list_active(user_id="u2", business_id=business.business_id)


def test_deactivate_is_soft(container, repos, business):
    svc = container.employee_service
    e = svc.create(user_id="u1", business_id=business.business_id, full_name="Ana")

    svc.deactivate(user_id="u1", employee_id=e.employee_id)

    assert svc.list_active(user_id="u1", business_id=business.business_id) == []
    assert repos.employees.get_by_id(e.employee_id).active is False


def test_delete_permanently_removes_cells_and_memberships(container, repos, business):
    svc = container.employee_service
    a = svc.create(user_id="u1", business_id=business.business_id, full_name="A", start_date="2025-01-01")
    b = svc.create(user_id="u1", business_id=business.business_id, full_name="B", start_date="2025-01-01")
    plan = container.plan_service.get_or_create(user_id="u1", business_id=business.business_id, month=3, year=2025)
    container.plan_service.upsert_cells(
        user_id="u1",
        cells=[CellInput(plan.plan_id, a.employee_id, 1, "24"), CellInput(plan.plan_id, b.employee_id, 1, "24")],
    )

    svc.delete_permanently(user_id="u1", business_id=business.business_id, employee_id=a.employee_id)

    assert repos.employees.get_by_id(a.employee_id) is None
    assert list(repos.plans.plans[plan.plan_id].employee_ids) == [b.employee_id]
    assert [c.employee_id for c in repos.cells.list_for_plan(plan.plan_id)] == [b.employee_id]

    with pytest.raises(NotFoundError):
        svc.delete_permanently(user_id="u1", business_id=business.business_id, employee_id=a.employee_id)
