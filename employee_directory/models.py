# models.py
from enum import Enum
from typing import List, Optional

from sqlmodel import Field, SQLModel


class Role(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class Employee(SQLModel):
    id: str
    name: str
    age: int
    # Exposed as "class" in the GraphQL schema
    class_name: str
    subjects: Optional[List[Optional[str]]] = None
    attendance: Optional[int] = None
    flagged: bool = Field(default=False)


class User(SQLModel):
    id: str
    username: str
    hashed_password: str
    role: Role = Field(default=Role.EMPLOYEE)
