"""Issue labels."""

from __future__ import annotations

from lin.models.base import Connection, Record


class Label(Record):
    id: str
    name: str
    color: str
    is_group: bool
    created_at: str
    updated_at: str
    description: str | None = None


class TeamWithLabels(Record):
    id: str
    labels: Connection[Label]


class LabelsResponse(Record):
    issue_labels: Connection[Label]


class TeamLabelsResponse(Record):
    team: TeamWithLabels | None = None


class LabelResponse(Record):
    issue_label: Label | None = None
