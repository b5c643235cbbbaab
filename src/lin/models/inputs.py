"""Mutation input records, encoded with ``to_input`` (unset fields are omitted)."""

from __future__ import annotations

from lin.models.base import Record


class IssueCreateInput(Record):
    title: str
    team_id: str
    description: str | None = None
    priority: int | None = None
    assignee_id: str | None = None
    state_id: str | None = None
    estimate: float | None = None
    label_ids: list[str] | None = None
    project_id: str | None = None
    parent_id: str | None = None


class IssueUpdateInput(Record):
    title: str | None = None
    description: str | None = None
    priority: int | None = None
    assignee_id: str | None = None
    state_id: str | None = None
    estimate: float | None = None
    label_ids: list[str] | None = None
    project_id: str | None = None
    parent_id: str | None = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class CommentCreateInput(Record):
    issue_id: str
    body: str


class DocumentCreateInput(Record):
    title: str
    content: str | None = None
    project_id: str | None = None
    icon: str | None = None
    color: str | None = None


class AttachmentCreateInput(Record):
    issue_id: str
    title: str
    url: str
    subtitle: str | None = None


class IssueRelationCreateInput(Record):
    issue_id: str
    related_issue_id: str
    # blocks, duplicate, related
    type: str


class ProjectMilestoneCreateInput(Record):
    project_id: str
    name: str
    description: str | None = None
    target_date: str | None = None
    sort_order: float | None = None


class ProjectMilestoneUpdateInput(Record):
    name: str | None = None
    description: str | None = None
    target_date: str | None = None
    sort_order: float | None = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)
