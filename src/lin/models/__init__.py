"""Typed records mirroring the Linear GraphQL schema.

IMPORT CONSTRAINT: models/ modules import only from the standard library,
pydantic, ``lin.errors`` and each other. Never import from ``lin.api`` or ``lin.core``.
"""

from __future__ import annotations

from lin.models.attachment import Attachment, AttachmentWithIssue, UploadFile
from lin.models.base import Connection, MutationResult, decode, to_dict, to_input
from lin.models.comment import Comment
from lin.models.cycle import Cycle, CycleWithIssues
from lin.models.document import Document, DocumentProject, DocumentWithContent
from lin.models.issue import Issue, IssueWithComments
from lin.models.label import Label
from lin.models.milestone import ProjectMilestone
from lin.models.project import Project
from lin.models.relation import FullIssueRelation, IssueWithRelations, NormalizedRelation, RelatedIssue
from lin.models.team import Team
from lin.models.user import User
from lin.models.workflow import WorkflowState

__all__ = [
    "Attachment",
    "AttachmentWithIssue",
    "Comment",
    "Connection",
    "Cycle",
    "CycleWithIssues",
    "Document",
    "DocumentProject",
    "DocumentWithContent",
    "FullIssueRelation",
    "Issue",
    "IssueWithComments",
    "IssueWithRelations",
    "Label",
    "MutationResult",
    "NormalizedRelation",
    "Project",
    "ProjectMilestone",
    "RelatedIssue",
    "Team",
    "UploadFile",
    "User",
    "WorkflowState",
    "decode",
    "to_dict",
    "to_input",
]
