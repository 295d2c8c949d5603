# crud.py
import logging
from typing import List, Optional

from .database import InMemoryDatabase
from .models import Employee, User
from .schemas import EmployeeCreate, EmployeeUpdate
from .security import verify_password

logger = logging.getLogger(__name__)

# GraphQL field name -> Employee attribute
SORTABLE_FIELDS = {
    "id": "id",
    "name": "name",
    "age": "age",
    "class": "class_name",
    "subjects": "subjects",
    "attendance": "attendance",
    "flagged": "flagged",
}


def _find(db: InMemoryDatabase, employee_id: str) -> Optional[Employee]:
    return next((emp for emp in db.employees if emp.id == employee_id), None)


def sort_and_paginate(
        employees: List[Employee],
        limit: Optional[int] = 0,
        offset: Optional[int] = 0,
        sort_by: Optional[str] = "none",
        sort_order: Optional[str] = "asc"
) -> List[Employee]:
    """
    Sorts by a known field (stable, so ties keep list order) and slices.
    A limit of 0 means "everything" and ignores the offset.
    """
    result = list(employees)

    attribute = SORTABLE_FIELDS.get(sort_by or "none")
    if attribute is not None:
        def sort_key(emp: Employee):
            value = getattr(emp, attribute)
            if isinstance(value, list):
                # subjects may hold nulls
                value = [(item is not None, item) for item in value]
            return (value is not None, value)

        result.sort(key=sort_key, reverse=sort_order != "asc")

    if not limit:
        return result

    start = max(offset or 0, 0)
    return result[start:start + limit]


# --- Employee CRUD ---

async def get_all_employees(
        db: InMemoryDatabase,
        limit: Optional[int] = 0,
        offset: Optional[int] = 0,
        sort_by: Optional[str] = "none",
        sort_order: Optional[str] = "asc"
) -> List[Employee]:
    with db.lock:
        snapshot = [emp.model_copy(deep=True) for emp in db.employees]
    return sort_and_paginate(snapshot, limit, offset, sort_by, sort_order)


async def get_employee_by_id(db: InMemoryDatabase, employee_id: str) -> Optional[Employee]:
    with db.lock:
        employee = _find(db, employee_id)
        return employee.model_copy(deep=True) if employee else None


async def create_employee(db: InMemoryDatabase, employee: EmployeeCreate) -> Employee:
    with db.lock:
        db_employee = Employee(id=db.next_id(), flagged=False, **employee.model_dump())
        db.employees.append(db_employee)
        logger.info("Created employee %s (%s)", db_employee.id, db_employee.name)
        return db_employee.model_copy(deep=True)


async def update_employee(
        db: InMemoryDatabase,
        employee_id: str,
        employee_update: EmployeeUpdate
) -> Optional[Employee]:
    update_data = employee_update.model_dump(exclude_unset=True, exclude_none=True)

    with db.lock:
        db_employee = _find(db, employee_id)
        if not db_employee:
            return None

        for key, value in update_data.items():
            setattr(db_employee, key, value)

        logger.info("Updated employee %s fields=%s", employee_id, sorted(update_data))
        return db_employee.model_copy(deep=True)


async def delete_employee(db: InMemoryDatabase, employee_id: str) -> Optional[Employee]:
    with db.lock:
        db_employee = _find(db, employee_id)
        if not db_employee:
            return None

        db.employees.remove(db_employee)
        logger.info("Deleted employee %s", employee_id)
        return db_employee


async def toggle_employee_flag(db: InMemoryDatabase, employee_id: str) -> Optional[Employee]:
    with db.lock:
        db_employee = _find(db, employee_id)
        if not db_employee:
            return None

        db_employee.flagged = not db_employee.flagged
        logger.info("Employee %s flagged=%s", employee_id, db_employee.flagged)
        return db_employee.model_copy(deep=True)


# --- User CRUD ---

async def get_user_by_username(db: InMemoryDatabase, username: str) -> Optional[User]:
    # Users are seeded once and never mutated, so no lock
    return db.users.get(username)


async def authenticate_user(db: InMemoryDatabase, username: str, password: str) -> Optional[User]:
    user = await get_user_by_username(db, username)
    if not user or not verify_password(password, user.hashed_password):
        logger.info("Failed login for %r", username)
        return None
    logger.info("User %r logged in", username)
    return user
