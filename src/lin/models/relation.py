"""Issue relations (blocks, duplicate, related) and parent/child links."""

from __future__ import annotations

from lin.models.base import Connection, MutationResult, Record


class RelatedIssue(Record):
    id: str
    identifier: str
    title: str


class IssueRelation(Record):
    id: str
    type: str
    related_issue: RelatedIssue | None = None


class InverseIssueRelation(Record):
    id: str
    type: str
    issue: RelatedIssue | None = None


class FullIssueRelation(Record):
    id: str
    type: str
    issue: RelatedIssue | None = None
    related_issue: RelatedIssue | None = None


class IssueWithRelations(Record):
    id: str
    identifier: str
    relations: Connection[IssueRelation]
    inverse_relations: Connection[InverseIssueRelation]
    children: Connection[RelatedIssue]
    parent: RelatedIssue | None = None


class IssueRelationsResponse(Record):
    issue: IssueWithRelations | None = None


class IssueRelationCreatePayload(Record):
    success: bool
    issue_relation: FullIssueRelation | None = None


class IssueRelationCreateResponse(Record):
    issue_relation_create: IssueRelationCreatePayload


class IssueRelationDeleteResponse(Record):
    issue_relation_delete: MutationResult


class IssueWithParent(Record):
    id: str
    identifier: str
    title: str
    parent: RelatedIssue | None = None


class IssueSetParentPayload(Record):
    success: bool
    issue: IssueWithParent | None = None


class IssueSetParentResponse(Record):
    issue_update: IssueSetParentPayload


class NormalizedRelation(Record):
    """One row of ``issue relations`` output, whichever side the link was made from."""

    id: str
    type: str
    issue: RelatedIssue
