# graphql_api.py
"""
GraphQL schema and resolvers for the employee directory.
Resolvers read the in-memory database and the caller identity from the context.
"""
import logging

from ariadne import MutationType, ObjectType, QueryType, gql, make_executable_schema
from ariadne.asgi import GraphQL
from starlette.requests import Request

from . import crud
from .config import Settings
from .schemas import EmployeeCreate, EmployeeUpdate, LoginResult
from .security import AuthenticationError, create_access_token, identity_from_authorization, require_admin

logger = logging.getLogger(__name__)

type_defs = gql("""
  type Employee {
    id: ID!
    name: String!
    age: Int!
    class: String!
    subjects: [String]
    attendance: Int
    flagged: Boolean
  }

  type User {
    id: ID!
    username: String!
    role: String!
    token: String
  }

  type Query {
    employees(limit: Int, offset: Int, sortBy: String, sortOrder: String): [Employee]
    employee(id: ID!): Employee
  }

  type Mutation {
    login(username: String!, password: String!): User
    addEmployee(name: String!, age: Int!, class: String!, subjects: [String], attendance: Int): Employee
    updateEmployee(id: ID!, name: String, age: Int, class: String, subjects: [String], attendance: Int): Employee
    deleteEmployee(id: ID!): Employee
    flagEmployee(id: ID!): Employee
  }
""")

query = QueryType()
mutation = MutationType()
employee_type = ObjectType("Employee")


def _employee_fields(arguments: dict) -> dict:
    # "class" is reserved in Python; the models call it class_name
    fields = dict(arguments)
    if "class" in fields:
        fields["class_name"] = fields.pop("class")
    return fields


@employee_type.field("class")
def resolve_employee_class(employee, _info):
    return employee.class_name


@query.field("employees")
async def resolve_employees(_, info, limit=0, offset=0, sort_by="none", sort_order="asc"):
    return await crud.get_all_employees(
        info.context["db"],
        limit=limit,
        offset=offset,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@query.field("employee")
async def resolve_employee(_, info, id):
    return await crud.get_employee_by_id(info.context["db"], id)


@mutation.field("login")
async def resolve_login(_, info, username, password):
    user = await crud.authenticate_user(info.context["db"], username, password)
    if not user:
        raise AuthenticationError()

    token = create_access_token(
        data={"id": user.id, "role": user.role.value},
        settings=info.context["settings"],
    )
    return LoginResult(id=user.id, username=user.username, role=user.role, token=token).model_dump(mode="json")


@mutation.field("addEmployee")
async def resolve_add_employee(_, info, **arguments):
    require_admin(info.context["user"])
    employee = EmployeeCreate(**_employee_fields(arguments))
    return await crud.create_employee(info.context["db"], employee)


@mutation.field("updateEmployee")
async def resolve_update_employee(_, info, id, **arguments):
    require_admin(info.context["user"])
    changes = EmployeeUpdate(**_employee_fields(arguments))
    return await crud.update_employee(info.context["db"], id, changes)


@mutation.field("deleteEmployee")
async def resolve_delete_employee(_, info, id):
    require_admin(info.context["user"])
    return await crud.delete_employee(info.context["db"], id)


@mutation.field("flagEmployee")
async def resolve_flag_employee(_, info, id):
    require_admin(info.context["user"])
    return await crud.toggle_employee_flag(info.context["db"], id)


schema = make_executable_schema(type_defs, query, mutation, employee_type, convert_names_case=True)


def get_context_value(request: Request, _data=None) -> dict:
    settings = request.app.state.settings
    return {
        "request": request,
        "db": request.app.state.db,
        "settings": settings,
        "user": identity_from_authorization(request.headers.get("Authorization"), settings),
    }


def create_graphql_app(settings: Settings) -> GraphQL:
    return GraphQL(
        schema,
        context_value=get_context_value,
        debug=settings.graphql_debug,
    )
