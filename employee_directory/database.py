# database.py
import itertools
import threading
from functools import lru_cache
from typing import Dict, Iterator, List, Sequence, Tuple

from .models import Employee, Role, User
from .security import get_password_hash

SEED_USERS = [
    {"id": "1", "username": "admin", "password": "admin123", "role": Role.ADMIN},
    {"id": "2", "username": "employee", "password": "employee123", "role": Role.EMPLOYEE},
]

SEED_EMPLOYEES = [
    {"id": "1", "name": "Ravi", "age": 28, "class_name": "A", "subjects": ["Math", "Physics"], "attendance": 92},
    {"id": "2", "name": "Kiran", "age": 25, "class_name": "B", "subjects": ["Biology", "Chemistry"], "attendance": 88},
    {"id": "3", "name": "Suresh", "age": 30, "class_name": "C", "subjects": ["English", "History"], "attendance": 95},
    {"id": "4", "name": "Anjali", "age": 26, "class_name": "A", "subjects": ["Computer Science", "Mathematics"], "attendance": 90},
    {"id": "5", "name": "Vijay", "age": 32, "class_name": "B", "subjects": ["Economics", "Statistics"], "attendance": 90},
    {"id": "6", "name": "Sunita", "age": 29, "class_name": "C", "subjects": ["History", "Geography"], "attendance": 88},
    {"id": "7", "name": "Ramesh", "age": 31, "class_name": "A", "subjects": ["Mechanical", "Physics"], "attendance": 93},
    {"id": "8", "name": "Priya", "age": 27, "class_name": "B", "subjects": ["Biology", "Chemistry"], "attendance": 91},
    {"id": "9", "name": "Srinivas", "age": 34, "class_name": "C", "subjects": ["English", "Literature"], "attendance": 87},
    {"id": "10", "name": "Lakshmi", "age": 30, "class_name": "A", "subjects": ["Art", "Design"], "attendance": 94},
]


class InMemoryDatabase:
    """
    Process-local storage for employees and users.
    All access to `employees` and the id sequence must hold `lock`.
    """

    def __init__(self, employees: Sequence[Employee], users: Sequence[User]):
        self.lock = threading.Lock()
        self.employees = list(employees)
        self.users: Dict[str, User] = {user.username: user for user in users}
        start = max((int(e.id) for e in employees if e.id.isdigit()), default=0) + 1
        self._ids: Iterator[int] = itertools.count(start)

    def next_id(self) -> str:
        # Monotonic, so an id is never handed out again after a delete
        return str(next(self._ids))


@lru_cache(maxsize=None)
def seed_users() -> Tuple[User, ...]:
    # Read-only, hashed once per process
    return tuple(
        User(
            id=seed["id"],
            username=seed["username"],
            hashed_password=get_password_hash(seed["password"]),
            role=seed["role"],
        )
        for seed in SEED_USERS
    )


def seed_employees() -> List[Employee]:
    return [Employee(**seed) for seed in SEED_EMPLOYEES]


def create_database() -> InMemoryDatabase:
    """Builds a freshly seeded database; nothing survives a restart."""
    return InMemoryDatabase(employees=seed_employees(), users=seed_users())
