# tests/test_crud.py
from employee_directory import crud
from employee_directory.models import Employee
from employee_directory.schemas import EmployeeCreate, EmployeeUpdate


def make_employee(id, **overrides):
    fields = {"name": f"emp{id}", "age": 30, "class_name": "A", "attendance": 90}
    fields.update(overrides)
    return Employee(id=id, **fields)


def test_sort_and_paginate_no_sort_keeps_order():
    employees = [make_employee("2"), make_employee("1"), make_employee("3")]
    result = crud.sort_and_paginate(employees, sort_by="none")
    assert [e.id for e in result] == ["2", "1", "3"]
    assert result is not employees


def test_sort_and_paginate_descending_for_any_other_order():
    employees = [make_employee("1", age=20), make_employee("2", age=40), make_employee("3", age=30)]
    result = crud.sort_and_paginate(employees, sort_by="age", sort_order="down")
    assert [e.age for e in result] == [40, 30, 20]


def test_sort_ids_compare_as_strings():
    employees = [make_employee("2"), make_employee("10"), make_employee("1")]
    result = crud.sort_and_paginate(employees, sort_by="id")
    assert [e.id for e in result] == ["1", "10", "2"]


def test_sort_puts_missing_values_first():
    employees = [make_employee("1", attendance=50), make_employee("2", attendance=None)]
    result = crud.sort_and_paginate(employees, sort_by="attendance")
    assert [e.id for e in result] == ["2", "1"]


def test_paginate_past_the_end():
    employees = [make_employee(str(i)) for i in range(1, 4)]
    assert crud.sort_and_paginate(employees, limit=5, offset=2) == employees[2:]
    assert crud.sort_and_paginate(employees, limit=5, offset=10) == []


def test_paginate_negative_offset_starts_at_zero():
    employees = [make_employee(str(i)) for i in range(1, 4)]
    assert crud.sort_and_paginate(employees, limit=2, offset=-4) == employees[:2]


def test_null_limit_means_everything():
    employees = [make_employee(str(i)) for i in range(1, 4)]
    assert crud.sort_and_paginate(employees, limit=None, offset=None, sort_by=None) == employees


async def test_reads_return_copies(db):
    employee = await crud.get_employee_by_id(db, "1")
    employee.name = "Mutated"
    assert (await crud.get_employee_by_id(db, "1")).name == "Ravi"


async def test_create_employee_assigns_next_id(db):
    created = await crud.create_employee(db, EmployeeCreate(name="Asha", age=22, class_name="C"))
    assert created.id == "11"
    assert created.flagged is False
    assert created.subjects is None

    second = await crud.create_employee(db, EmployeeCreate(name="Dev", age=23, class_name="C"))
    assert second.id == "12"


async def test_update_ignores_explicit_none(db):
    updated = await crud.update_employee(db, "1", EmployeeUpdate(name=None, subjects=[]))
    assert updated.name == "Ravi"
    assert updated.subjects == []


async def test_delete_then_lookup(db):
    deleted = await crud.delete_employee(db, "3")
    assert deleted.name == "Suresh"
    assert await crud.get_employee_by_id(db, "3") is None
    assert len(db.employees) == 9
    assert await crud.delete_employee(db, "3") is None


async def test_toggle_flag_missing(db):
    assert await crud.toggle_employee_flag(db, "404") is None


async def test_authenticate_user(db):
    user = await crud.authenticate_user(db, "admin", "admin123")
    assert user.role == "ADMIN"
    assert await crud.authenticate_user(db, "admin", "wrong") is None
    assert await crud.authenticate_user(db, "nobody", "admin123") is None
