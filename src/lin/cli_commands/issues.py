"""CLI commands for issues: CRUD, git links, relations, comments and search."""

from __future__ import annotations

import click

from lin.cli_common import as_json, open_workspace
from lin.errors import NotFoundError
from lin.output import emit, emit_message
from lin.ws_base import DEFAULT_LIMIT, SORT_FIELDS
from lin.ws_content import relation_choices

_ORDER_CHOICES = ["asc", "desc", "ascending", "descending"]


def _not_found(ref: str) -> NotFoundError:
    return NotFoundError(f"Issue '{ref}' not found")


@click.group("issue")
def issue_group() -> None:
    """Query and change issues."""


@issue_group.command("list")
@click.option("--team", "-t", default=None, help="Team key, e.g. ENG (default: the current team)")
@click.option("--assignee", "-a", default=None, help="Assignee user id, or 'me'")
@click.option("--state", "-s", default=None, help="Workflow state name")
@click.option("--project", default=None, help="Project id")
@click.option("--cycle", default=None, help="Cycle id")
@click.option("--label", default=None, help="Label id")
@click.option("--priority", "-p", default=None, help="0-4 or none/urgent/high/normal/low")
@click.option("--created-after", default=None, help="ISO-8601 date or timestamp")
@click.option("--created-before", default=None, help="ISO-8601 date or timestamp")
@click.option("--updated-after", default=None, help="ISO-8601 date or timestamp")
@click.option("--updated-before", default=None, help="ISO-8601 date or timestamp")
@click.option("--sort", type=click.Choice(sorted(SORT_FIELDS), case_sensitive=False), default=None)
@click.option("--order", type=click.Choice(_ORDER_CHOICES, case_sensitive=False), default=None, help="Needs --sort")
@click.option("--limit", "-l", default=DEFAULT_LIMIT, type=int, help=f"Max results (default {DEFAULT_LIMIT})")
@click.pass_context
def list_issues(
    ctx: click.Context,
    team: str | None,
    assignee: str | None,
    state: str | None,
    project: str | None,
    cycle: str | None,
    label: str | None,
    priority: str | None,
    created_after: str | None,
    created_before: str | None,
    updated_after: str | None,
    updated_before: str | None,
    sort: str | None,
    order: str | None,
    limit: int,
) -> None:
    """List issues with optional filters."""
    with open_workspace(ctx) as ws:
        issues = ws.list_issues(
            team=team,
            assignee=assignee,
            state=state,
            project=project,
            cycle=cycle,
            label=label,
            priority=priority,
            created_after=created_after,
            created_before=created_before,
            updated_after=updated_after,
            updated_before=updated_before,
            sort=sort,
            order=order,
            limit=limit,
        )
        emit(issues, as_json(ctx))


@issue_group.command("get")
@click.argument("issue_ref")
@click.option("--with-comments", is_flag=True, help="Include the comment thread")
@click.pass_context
def get_issue(ctx: click.Context, issue_ref: str, with_comments: bool) -> None:
    """Show one issue by identifier (ENG-123) or id."""
    with open_workspace(ctx) as ws:
        issue = ws.get_issue_with_comments(issue_ref) if with_comments else ws.get_issue(issue_ref)
        if issue is None:
            raise _not_found(issue_ref)
        emit(issue, as_json(ctx))


@issue_group.command("create")
@click.argument("title")
@click.option("--team", "-t", default=None, help="Team key or id (default: the current team)")
@click.option("--description", "-d", default=None, help="Markdown description")
@click.option("--priority", "-p", default=None, help="0-4 or none/urgent/high/normal/low")
@click.option("--assignee", "-a", default=None, help="User id, or 'me'")
@click.option("--state", "-s", default=None, help="Workflow state name or id")
@click.option("--estimate", "-e", default=None, type=float, help="Estimate points")
@click.option("--label", "labels", multiple=True, help="Label id (repeatable)")
@click.option("--project", default=None, help="Project id")
@click.option("--parent", default=None, help="Parent issue identifier or id")
@click.pass_context
def create(
    ctx: click.Context,
    title: str,
    team: str | None,
    description: str | None,
    priority: str | None,
    assignee: str | None,
    state: str | None,
    estimate: float | None,
    labels: tuple[str, ...],
    project: str | None,
    parent: str | None,
) -> None:
    """Create a new issue."""
    with open_workspace(ctx) as ws:
        issue = ws.create_issue(
            title,
            team,
            description=description,
            priority=priority,
            assignee=assignee,
            state=state,
            estimate=estimate,
            labels=list(labels),
            project=project,
            parent=parent,
        )
        emit(issue, as_json(ctx), human=lambda i: f"Created {i.identifier}: {i.title}")


@issue_group.command("update")
@click.argument("issue_ref")
@click.option("--title", default=None, help="New title")
@click.option("--description", "-d", default=None, help="New description")
@click.option("--priority", "-p", default=None, help="0-4 or none/urgent/high/normal/low")
@click.option("--assignee", "-a", default=None, help="User id, or 'me'")
@click.option("--state", "-s", default=None, help="Workflow state name or id")
@click.option("--estimate", "-e", default=None, type=float, help="Estimate points")
@click.option("--label", "labels", multiple=True, help="Label id (repeatable, replaces existing)")
@click.option("--project", default=None, help="Project id")
@click.option("--parent", default=None, help="Parent issue identifier or id")
@click.pass_context
def update(
    ctx: click.Context,
    issue_ref: str,
    title: str | None,
    description: str | None,
    priority: str | None,
    assignee: str | None,
    state: str | None,
    estimate: float | None,
    labels: tuple[str, ...],
    project: str | None,
    parent: str | None,
) -> None:
    """Update the given fields of an issue."""
    with open_workspace(ctx) as ws:
        issue = ws.update_issue(
            issue_ref,
            title=title,
            description=description,
            priority=priority,
            assignee=assignee,
            state=state,
            estimate=estimate,
            labels=list(labels),
            project=project,
            parent=parent,
        )
        emit(issue, as_json(ctx), human=lambda i: f"Updated {i.identifier}: {i.title}")


@issue_group.command("delete")
@click.argument("issue_ref")
@click.pass_context
def delete(ctx: click.Context, issue_ref: str) -> None:
    """Move an issue to the trash."""
    with open_workspace(ctx) as ws:
        issue_id = ws.delete_issue(issue_ref)
        emit_message(f"Deleted {issue_ref}", as_json(ctx), {"id": issue_id})


@issue_group.command("archive")
@click.argument("issue_ref")
@click.pass_context
def archive(ctx: click.Context, issue_ref: str) -> None:
    """Archive an issue."""
    with open_workspace(ctx) as ws:
        issue_id = ws.archive_issue(issue_ref)
        emit_message(f"Archived {issue_ref}", as_json(ctx), {"id": issue_id})


@issue_group.command("unarchive")
@click.argument("issue_ref")
@click.pass_context
def unarchive(ctx: click.Context, issue_ref: str) -> None:
    """Restore an archived issue."""
    with open_workspace(ctx) as ws:
        issue_id = ws.unarchive_issue(issue_ref)
        emit_message(f"Unarchived {issue_ref}", as_json(ctx), {"id": issue_id})


# -- Git links ------------------------------------------------------------------


@issue_group.command("links")
@click.argument("issue_ref")
@click.pass_context
def links(ctx: click.Context, issue_ref: str) -> None:
    """List branches and pull requests linked to an issue."""
    with open_workspace(ctx) as ws:
        emit(ws.list_git_links(issue_ref), as_json(ctx))


@issue_group.command("link-branch")
@click.argument("issue_ref")
@click.argument("branch")
@click.option("--repo", default=None, help="Repository URL, e.g. https://github.com/org/repo")
@click.pass_context
def link_branch(ctx: click.Context, issue_ref: str, branch: str, repo: str | None) -> None:
    """Link a git branch to an issue."""
    with open_workspace(ctx) as ws:
        emit(ws.link_branch(issue_ref, branch, repo), as_json(ctx))


@issue_group.command("link-pr")
@click.argument("issue_ref")
@click.argument("url")
@click.pass_context
def link_pr(ctx: click.Context, issue_ref: str, url: str) -> None:
    """Link a pull request URL to an issue."""
    with open_workspace(ctx) as ws:
        emit(ws.link_pr(issue_ref, url), as_json(ctx))


# -- Relations ------------------------------------------------------------------


@issue_group.command("relations")
@click.argument("issue_ref")
@click.pass_context
def relations(ctx: click.Context, issue_ref: str) -> None:
    """Show parent, children and related issues."""
    with open_workspace(ctx) as ws:
        emit(ws.list_relations(issue_ref), as_json(ctx))


@issue_group.command("add-relation")
@click.argument("issue_ref")
@click.argument("related_ref")
@click.option(
    "--type",
    "relation_type",
    type=click.Choice(relation_choices(), case_sensitive=False),
    default="related",
    show_default=True,
)
@click.pass_context
def add_relation(ctx: click.Context, issue_ref: str, related_ref: str, relation_type: str) -> None:
    """Relate ISSUE_REF to RELATED_REF (ISSUE_REF blocks RELATED_REF, and so on)."""
    with open_workspace(ctx) as ws:
        emit(ws.add_relation(issue_ref, related_ref, relation_type), as_json(ctx))


@issue_group.command("remove-relation")
@click.argument("relation_id")
@click.pass_context
def remove_relation(ctx: click.Context, relation_id: str) -> None:
    """Remove a relation by the id shown in 'lin issue relations'."""
    with open_workspace(ctx) as ws:
        removed = ws.remove_relation(relation_id)
        emit_message(f"Removed relation {removed}", as_json(ctx), {"id": removed})


# -- Comments -------------------------------------------------------------------


@click.group("comment")
def comment_group() -> None:
    """Read and write issue comments."""


@comment_group.command("list")
@click.argument("issue_ref")
@click.pass_context
def list_comments(ctx: click.Context, issue_ref: str) -> None:
    """List comments on an issue, oldest first."""
    with open_workspace(ctx) as ws:
        emit(ws.list_comments(issue_ref), as_json(ctx))


@comment_group.command("add")
@click.argument("issue_ref")
@click.argument("body")
@click.pass_context
def add_comment(ctx: click.Context, issue_ref: str, body: str) -> None:
    """Add a comment to an issue."""
    with open_workspace(ctx) as ws:
        comment = ws.add_comment(issue_ref, body)
        emit(comment, as_json(ctx), human=lambda c: f"Added comment {c.id} to {issue_ref}")


# -- Search ---------------------------------------------------------------------


@click.command("search")
@click.argument("query")
@click.option("--team", "-t", default=None, help="Team key (default: the current team)")
@click.option("--assignee", "-a", default=None, help="Assignee user id, or 'me'")
@click.option("--state", "-s", default=None, help="Workflow state name")
@click.option("--limit", "-l", default=DEFAULT_LIMIT, type=int, help=f"Max results (default {DEFAULT_LIMIT})")
@click.pass_context
def search(
    ctx: click.Context,
    query: str,
    team: str | None,
    assignee: str | None,
    state: str | None,
    limit: int,
) -> None:
    """Full-text search over issue titles, descriptions and comments."""
    with open_workspace(ctx) as ws:
        emit(ws.search_issues(query, team=team, assignee=assignee, state=state, limit=limit), as_json(ctx))


def register(cli: click.Group) -> None:
    """Register issue, comment and search commands."""
    cli.add_command(issue_group)
    cli.add_command(comment_group)
    cli.add_command(search)
