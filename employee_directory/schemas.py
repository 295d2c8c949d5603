# schemas.py
from typing import List, Optional

from pydantic import ConfigDict
from sqlmodel import SQLModel

from .models import Role


# --- Schemas for Employees ---

class EmployeeCreate(SQLModel):
    name: str
    age: int
    class_name: str
    subjects: Optional[List[Optional[str]]] = None
    attendance: Optional[int] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ravi",
                "age": 28,
                "class_name": "A",
                "subjects": ["Math", "Physics"],
                "attendance": 92
            }
        }
    )


# Only the fields a caller actually supplied are applied, so 0 and "" count
class EmployeeUpdate(SQLModel):
    name: Optional[str] = None
    age: Optional[int] = None
    class_name: Optional[str] = None
    subjects: Optional[List[Optional[str]]] = None
    attendance: Optional[int] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "attendance": 0,
                "class_name": "B"
            }
        }
    )


# --- Schemas for Auth ---

class Token(SQLModel):
    access_token: str
    token_type: str = "bearer"


class TokenData(SQLModel):
    """The identity carried inside a verified access token."""
    id: str
    role: Role


class LoginResult(SQLModel):
    id: str
    username: str
    role: Role
    token: str
