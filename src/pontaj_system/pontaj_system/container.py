from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .businesses.mysql_business_repository import MySQLBusinessRepository
from .businesses.service import BusinessService
from .core.constants import DEFAULT_MAX_SHIFT_HOURS
from .core.enums import HoursModel
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .plans.mysql_cell_repository import MySQLCellRepository
from .plans.mysql_plan_repository import MySQLPlanRepository
from .plans.service import PlanService
from .schedule.aggregation import calculator_for
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: MySQLUserRepository
    businesses_repo: MySQLBusinessRepository
    employees_repo: MySQLEmployeeRepository
    plans_repo: MySQLPlanRepository
    cells_repo: MySQLCellRepository

    auth_service: AuthService
    business_service: BusinessService
    employee_service: EmployeeService
    plan_service: PlanService


def wire_services(
    *,
    conn: Optional[DatabaseConnection],
    users_repo,
    businesses_repo,
    employees_repo,
    plans_repo,
    cells_repo,
    hours_model: HoursModel | str = HoursModel.GENERALIZED,
    max_shift_hours: int = DEFAULT_MAX_SHIFT_HOURS,
) -> Container:
    """Build services over any repository implementations (MySQL or in-memory)."""
    auth_service = AuthService(users_repo)
    business_service = BusinessService(businesses_repo)
    employee_service = EmployeeService(employees_repo, businesses_repo)
    plan_service = PlanService(
        plans_repo,
        cells_repo,
        employees_repo,
        businesses_repo,
        employee_service,
        calculator=calculator_for(hours_model),
        max_shift_hours=max_shift_hours,
    )

    return Container(
        conn=conn,
        users_repo=users_repo,
        businesses_repo=businesses_repo,
        employees_repo=employees_repo,
        plans_repo=plans_repo,
        cells_repo=cells_repo,
        auth_service=auth_service,
        business_service=business_service,
        employee_service=employee_service,
        plan_service=plan_service,
    )


def build_container(
    *,
    db_config: dict,
    hours_model: HoursModel | str = HoursModel.GENERALIZED,
    max_shift_hours: int = DEFAULT_MAX_SHIFT_HOURS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire_services(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        businesses_repo=MySQLBusinessRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        plans_repo=MySQLPlanRepository(conn),
        cells_repo=MySQLCellRepository(conn),
        hours_model=hours_model,
        max_shift_hours=max_shift_hours,
    )
