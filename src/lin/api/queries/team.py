"""Team queries."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.team import TeamResponse, TeamsResponse

TEAMS = Operation(
    name="Teams",
    variables={"first": "Int"},
    response=TeamsResponse,
    document="""
query Teams($first: Int) {
    teams(first: $first) {
        nodes {
            id
            key
            name
            description
            issueEstimationType
        }
    }
}
""",
)

TEAM = Operation(
    name="Team",
    variables={"id": "String!"},
    response=TeamResponse,
    document="""
query Team($id: String!) {
    team(id: $id) {
        id
        key
        name
        description
        issueEstimationType
    }
}
""",
)

# Keys are matched as given; callers upper-case them first.
TEAM_BY_KEY = Operation(
    name="TeamByKey",
    variables={"filter": "TeamFilter!"},
    response=TeamsResponse,
    document="""
query TeamByKey($filter: TeamFilter!) {
    teams(filter: $filter, first: 1) {
        nodes {
            id
            key
            name
            description
            issueEstimationType
        }
    }
}
""",
)
