"""Issue label queries."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.label import LabelResponse, LabelsResponse, TeamLabelsResponse

LABELS = Operation(
    name="Labels",
    variables={"first": "Int"},
    response=LabelsResponse,
    document="""
query Labels($first: Int) {
    issueLabels(first: $first) {
        nodes {
            id
            name
            description
            color
            isGroup
            createdAt
            updatedAt
        }
    }
}
""",
)

TEAM_LABELS = Operation(
    name="TeamLabels",
    variables={"teamId": "String!", "first": "Int"},
    response=TeamLabelsResponse,
    document="""
query TeamLabels($teamId: String!, $first: Int) {
    team(id: $teamId) {
        id
        labels(first: $first) {
            nodes {
                id
                name
                description
                color
                isGroup
                createdAt
                updatedAt
            }
        }
    }
}
""",
)

LABEL = Operation(
    name="Label",
    variables={"id": "String!"},
    response=LabelResponse,
    document="""
query Label($id: String!) {
    issueLabel(id: $id) {
        id
        name
        description
        color
        isGroup
        createdAt
        updatedAt
    }
}
""",
)
