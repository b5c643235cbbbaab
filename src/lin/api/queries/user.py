"""User queries."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.user import UsersResponse, ViewerResponse

VIEWER = Operation(
    name="Viewer",
    response=ViewerResponse,
    document="""
query Viewer {
    viewer {
        id
        name
        email
        displayName
        active
    }
}
""",
)

USERS = Operation(
    name="Users",
    variables={"first": "Int"},
    response=UsersResponse,
    document="""
query Users($first: Int) {
    users(first: $first) {
        nodes {
            id
            name
            email
            displayName
            active
        }
    }
}
""",
)
