"""Workflow states (issue statuses) for a team."""

from __future__ import annotations

from lin.models.base import Connection, Record


class WorkflowState(Record):
    id: str
    name: str
    color: str
    # backlog, unstarted, started, completed, canceled, triage
    type: str


class TeamWithWorkflowStates(Record):
    id: str
    states: Connection[WorkflowState]


class WorkflowStatesResponse(Record):
    team: TeamWithWorkflowStates | None = None
