"""Rendering of command results: a JSON envelope or human-readable text.

JSON mode wraps every result as ``{"success": true, "data": ...}`` and every
failure as ``{"success": false, "error": {"kind", "message"}}``, both on
stdout so scripts only read one stream. Human mode picks a formatter by
record type; lists are separated by a blank line.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import click

from lin.errors import LinError
from lin.gitlinks import GitLink
from lin.models.attachment import Attachment, AttachmentWithIssue
from lin.models.base import to_dict
from lin.models.comment import Comment
from lin.models.cycle import Cycle, CycleWithIssues
from lin.models.document import Document, DocumentWithContent
from lin.models.issue import Issue, IssueWithComments
from lin.models.label import Label
from lin.models.milestone import ProjectMilestone
from lin.models.project import Project
from lin.models.relation import FullIssueRelation, IssueWithParent, NormalizedRelation
from lin.models.team import Team
from lin.models.user import User
from lin.models.workflow import WorkflowState
from lin.ws_base import PRIORITY_LABELS

EMPTY_MESSAGE = "No results found."

_RELATION_LABELS = {
    "parent": "Parent",
    "child": "Child",
    "blocks": "Blocks",
    "blocked_by": "Blocked by",
    "related": "Related to",
    "related_inverse": "Related to",
    "duplicate": "Duplicate of",
    "duplicate_inverse": "Duplicated by",
}

_STATE_TYPE_LABELS = {
    "backlog": "Backlog",
    "unstarted": "Unstarted",
    "started": "Started",
    "completed": "Completed",
    "canceled": "Canceled",
    "triage": "Triage",
}

_LINK_LABELS = {"branch": "[Branch]", "pull_request": "[PR]"}


def _date(value: str | None) -> str:
    return value[:10] if value else ""


def _percent(fraction: float) -> str:
    return f"{fraction * 100:.0f}%"


def _indent(text: str, prefix: str = "  ") -> str:
    return "\n".join(f"{prefix}{line}" if line else line for line in text.splitlines())


def _number(value: float) -> str:
    return str(int(value)) if value == int(value) else str(value)


# ---------------------------------------------------------------------------
# Per-record formatters
# ---------------------------------------------------------------------------


def format_issue(issue: Issue | IssueWithComments) -> str:
    lines = [f"{issue.identifier} {issue.title}"]
    if issue.state is not None:
        lines.append(f"  Status: {issue.state.name}")
    if issue.priority:
        lines.append(f"  Priority: {PRIORITY_LABELS.get(issue.priority, 'Unknown')}")
    if issue.estimate is not None:
        lines.append(f"  Estimate: {_number(issue.estimate)}")
    if issue.assignee is not None:
        lines.append(f"  Assignee: {issue.assignee.name}")
    if issue.team is not None:
        lines.append(f"  Team: {issue.team.name}")
    return "\n".join(lines)


def format_comment(comment: Comment) -> str:
    author = comment.user.name if comment.user is not None else "Unknown"
    header = f"{author} {_date(comment.created_at)}"
    return f"{header}\n{_indent(comment.body)}" if comment.body else header


def format_issue_with_comments(issue: IssueWithComments) -> str:
    parts = [format_issue(issue)]
    if issue.description:
        parts.append(f"\n  Description\n{_indent(issue.description, '    ')}")
    comments = issue.comments.nodes
    parts.append(f"\n  Comments ({len(comments)})")
    if not comments:
        parts.append("  No comments yet.")
    for comment in comments:
        parts.append(_indent(format_comment(comment), "    "))
    return "\n".join(parts)


def format_user(user: User) -> str:
    display = f" ({user.display_name})" if user.display_name else ""
    status = "" if user.active else " (inactive)"
    return f"{user.name}{display}{status}\n  {user.email}"


def format_team(team: Team) -> str:
    text = f"[{team.key}] {team.name}"
    if team.description:
        text += f"\n  {team.description}"
    if team.estimation_type and team.estimation_type != "notUsed":
        text += f"\n  Estimates: {team.estimation_type}"
    return text


def format_workflow_state(state: WorkflowState) -> str:
    type_label = _STATE_TYPE_LABELS.get(state.type, state.type)
    return f"{state.name} [{type_label}]\n  ID: {state.id}\n  Color: {state.color}"


def format_project(project: Project) -> str:
    lines = [project.name, f"  State: {project.state}", f"  Progress: {_percent(project.progress)}"]
    if project.description:
        lines.append(f"  Description: {project.description}")
    if project.start_date:
        lines.append(f"  Start: {project.start_date}")
    if project.target_date:
        lines.append(f"  Target: {project.target_date}")
    lines.append(f"  ID: {project.id}")
    return "\n".join(lines)


def format_cycle(cycle: Cycle | CycleWithIssues) -> str:
    lines = [cycle.name or f"Cycle {cycle.number}", f"  Progress: {_percent(cycle.progress)}"]
    if cycle.description:
        lines.append(f"  Description: {cycle.description}")
    if cycle.starts_at:
        lines.append(f"  Starts: {_date(cycle.starts_at)}")
    if cycle.ends_at:
        lines.append(f"  Ends: {_date(cycle.ends_at)}")
    if cycle.completed_at:
        lines.append(f"  Completed: {_date(cycle.completed_at)}")
    lines.append(f"  ID: {cycle.id}")
    return "\n".join(lines)


def format_cycle_with_issues(cycle: CycleWithIssues) -> str:
    issues = cycle.issues.nodes
    parts = [format_cycle(cycle), f"\n  Issues ({len(issues)})"]
    if not issues:
        parts.append("  No issues in this cycle.")
    parts.extend(_indent(format_issue(issue), "    ") for issue in issues)
    return "\n".join(parts)


def format_label(label: Label) -> str:
    lines = [f"{label.name} [Group]" if label.is_group else label.name]
    lines.append(f"  ID: {label.id}")
    lines.append(f"  Color: {label.color}")
    if label.description:
        lines.append(f"  Description: {label.description}")
    return "\n".join(lines)


def format_milestone(milestone: ProjectMilestone) -> str:
    lines = [milestone.name, f"  Status: {milestone.status}", f"  Progress: {_percent(milestone.progress)}"]
    if milestone.description:
        lines.append(f"  Description: {milestone.description}")
    if milestone.target_date:
        lines.append(f"  Target: {milestone.target_date}")
    lines.append(f"  ID: {milestone.id}")
    return "\n".join(lines)


def format_document(document: Document | DocumentWithContent) -> str:
    lines = [document.title, f"  ID: {document.id}"]
    if document.creator is not None:
        lines.append(f"  Creator: {document.creator.name}")
    if document.project is not None:
        lines.append(f"  Project: {document.project.name}")
    lines.append(f"  Updated: {_date(document.updated_at)}")
    return "\n".join(lines)


def format_document_with_content(document: DocumentWithContent) -> str:
    text = format_document(document) + "\n\nContent"
    if document.content is None:
        return text + "\n  (no content)"
    if not document.content.strip():
        return text + "\n  (empty)"
    return text + "\n" + _indent(document.content)


def format_attachment(attachment: Attachment | AttachmentWithIssue) -> str:
    lines = [attachment.title, f"  ID: {attachment.id}", f"  URL: {attachment.url}"]
    if attachment.subtitle:
        lines.append(f"  Description: {attachment.subtitle}")
    if attachment.creator is not None:
        lines.append(f"  Creator: {attachment.creator.name}")
    lines.append(f"  Created: {_date(attachment.created_at)}")
    return "\n".join(lines)


def format_attachment_with_issue(attachment: AttachmentWithIssue) -> str:
    text = format_attachment(attachment)
    if attachment.issue is not None:
        text += f"\n  Issue: {attachment.issue.identifier}"
    return text


def format_git_link(link: GitLink) -> str:
    lines = [f"{_LINK_LABELS.get(link.link_type, '[Link]')} {link.title}", f"  URL: {link.url}"]
    if link.subtitle:
        lines.append(f"  Description: {link.subtitle}")
    lines.append(f"  Created: {_date(link.created_at)}")
    return "\n".join(lines)


def format_relation(relation: NormalizedRelation) -> str:
    label = _RELATION_LABELS.get(relation.type, relation.type)
    return f"{label}: {relation.issue.identifier} {relation.issue.title}\n  ID: {relation.id}"


def format_full_relation(relation: FullIssueRelation) -> str:
    source = f"{relation.issue.identifier} {relation.issue.title}" if relation.issue else "(unknown)"
    target = f"{relation.related_issue.identifier} {relation.related_issue.title}" if relation.related_issue else "(unknown)"
    verb = {"related": "related to", "duplicate": "duplicate of"}.get(relation.type, relation.type)
    return f"{source} {verb} {target}"


def format_issue_with_parent(issue: IssueWithParent) -> str:
    if issue.parent is None:
        return f"{issue.identifier} {issue.title}\n  Parent: (none)"
    return f"{issue.identifier} {issue.title}\n  Parent: {issue.parent.identifier} {issue.parent.title}"


# Most specific types first: isinstance() picks the first match.
_FORMATTERS: list[tuple[type, Callable[[Any], str]]] = [
    (IssueWithComments, format_issue_with_comments),
    (Issue, format_issue),
    (Comment, format_comment),
    (User, format_user),
    (Team, format_team),
    (WorkflowState, format_workflow_state),
    (Project, format_project),
    (CycleWithIssues, format_cycle_with_issues),
    (Cycle, format_cycle),
    (Label, format_label),
    (ProjectMilestone, format_milestone),
    (DocumentWithContent, format_document_with_content),
    (Document, format_document),
    (AttachmentWithIssue, format_attachment_with_issue),
    (Attachment, format_attachment),
    (GitLink, format_git_link),
    (NormalizedRelation, format_relation),
    (FullIssueRelation, format_full_relation),
    (IssueWithParent, format_issue_with_parent),
]


def format_record(record: Any) -> str:
    for tp, formatter in _FORMATTERS:
        if isinstance(record, tp):
            return formatter(record)
    return str(record)


def render_human(data: Any) -> str:
    if isinstance(data, list):
        if not data:
            return EMPTY_MESSAGE
        return "\n\n".join(format_record(item) for item in data)
    return format_record(data)


# ---------------------------------------------------------------------------
# Emitters
# ---------------------------------------------------------------------------


def emit(data: Any, as_json: bool, human: Callable[[Any], str] | None = None) -> None:
    """Print a successful result. ``human`` overrides the type-based formatter."""
    if as_json:
        click.echo(json.dumps({"success": True, "data": to_dict(data)}, indent=2))
        return
    click.echo(human(data) if human is not None else render_human(data))


def emit_message(message: str, as_json: bool, data: Any = None) -> None:
    """Print a confirmation line, or ``data`` in the JSON envelope."""
    if as_json:
        click.echo(json.dumps({"success": True, "data": to_dict(data)}, indent=2))
    else:
        click.echo(message)


def emit_error(err: LinError, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps({"success": False, "error": {"kind": err.kind, "message": err.message}}, indent=2))
    else:
        click.echo(f"Error: {err.message}", err=True)
