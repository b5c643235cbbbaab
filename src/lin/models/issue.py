"""Issue records and the responses of the issue operations."""

from __future__ import annotations

from lin.models.base import Connection, MutationResult, Record
from lin.models.comment import Comment
from lin.models.team import Team
from lin.models.user import User
from lin.models.workflow import WorkflowState


class Issue(Record):
    id: str
    identifier: str
    title: str
    priority: int
    created_at: str
    updated_at: str
    description: str | None = None
    state: WorkflowState | None = None
    team: Team | None = None
    assignee: User | None = None
    estimate: float | None = None


class IssueWithComments(Record):
    id: str
    identifier: str
    title: str
    priority: int
    created_at: str
    updated_at: str
    comments: Connection[Comment]
    description: str | None = None
    state: WorkflowState | None = None
    team: Team | None = None
    assignee: User | None = None
    estimate: float | None = None


class IssuesResponse(Record):
    issues: Connection[Issue]


class IssueResponse(Record):
    issue: Issue | None = None


class IssueWithCommentsResponse(Record):
    issue: IssueWithComments | None = None


class IssuesWithCommentsResponse(Record):
    issues: Connection[IssueWithComments]


class IssuePayload(Record):
    success: bool
    issue: Issue | None = None


class IssueCreateResponse(Record):
    issue_create: IssuePayload


class IssueUpdateResponse(Record):
    issue_update: IssuePayload


class IssueDeleteResponse(Record):
    issue_delete: MutationResult


class IssueArchiveResponse(Record):
    issue_archive: MutationResult


class IssueUnarchiveResponse(Record):
    issue_unarchive: MutationResult
