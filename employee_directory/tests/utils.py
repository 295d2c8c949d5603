# tests/utils.py
from httpx import AsyncClient

LOGIN_MUTATION = """
mutation Login($username: String!, $password: String!) {
  login(username: $username, password: $password) { id username role token }
}
"""


async def graphql(client: AsyncClient, query: str, variables: dict = None) -> dict:
    response = await client.post("/graphql", json={"query": query, "variables": variables or {}})
    return response.json()


async def login(client: AsyncClient, username: str, password: str) -> str:
    body = await graphql(client, LOGIN_MUTATION, {"username": username, "password": password})
    return body["data"]["login"]["token"]
