"""Workflow state query."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.workflow import WorkflowStatesResponse

WORKFLOW_STATES = Operation(
    name="WorkflowStates",
    variables={"id": "String!"},
    response=WorkflowStatesResponse,
    document="""
query WorkflowStates($id: String!) {
    team(id: $id) {
        id
        states {
            nodes {
                id
                name
                color
                type
            }
        }
    }
}
""",
)
