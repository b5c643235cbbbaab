"""Issue comments."""

from __future__ import annotations

from lin.models.base import Connection, Record
from lin.models.user import User


class Comment(Record):
    id: str
    body: str
    created_at: str
    updated_at: str
    user: User | None = None


class CommentCreatePayload(Record):
    success: bool
    comment: Comment | None = None


class CommentCreateResponse(Record):
    comment_create: CommentCreatePayload


class IssueComments(Record):
    id: str
    identifier: str
    comments: Connection[Comment]


class IssueCommentsResponse(Record):
    issue: IssueComments | None = None
