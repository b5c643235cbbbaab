"""Cycle queries."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.cycle import CycleResponse, CyclesResponse

CYCLES = Operation(
    name="Cycles",
    variables={"teamId": "String!", "first": "Int"},
    response=CyclesResponse,
    document="""
query Cycles($teamId: String!, $first: Int) {
    team(id: $teamId) {
        id
        cycles(first: $first, orderBy: createdAt) {
            nodes {
                id
                number
                name
                description
                startsAt
                endsAt
                completedAt
                progress
                completedScopeHistory
                scopeHistory
            }
        }
    }
}
""",
)

CYCLE = Operation(
    name="Cycle",
    variables={"id": "String!"},
    response=CycleResponse,
    document="""
query Cycle($id: String!) {
    cycle(id: $id) {
        id
        number
        name
        description
        startsAt
        endsAt
        completedAt
        progress
        completedScopeHistory
        scopeHistory
        issues {
            nodes {
                id
                identifier
                title
                description
                priority
                estimate
                createdAt
                updatedAt
                state {
                    id
                    name
                    color
                    type
                }
                team {
                    id
                    key
                    name
                    description
                    issueEstimationType
                }
                assignee {
                    id
                    name
                    email
                    displayName
                    active
                }
            }
        }
    }
}
""",
)
