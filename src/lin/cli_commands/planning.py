"""CLI commands for projects, cycles and milestones."""

from __future__ import annotations

import click

from lin.cli_common import as_json, open_workspace
from lin.errors import NotFoundError
from lin.output import emit, emit_message

# -- Projects -------------------------------------------------------------------


@click.group("project")
def project_group() -> None:
    """Projects."""


@project_group.command("list")
@click.option("--team", "-t", default=None, help="Only projects this team can access")
@click.option("--limit", "-l", default=50, type=int, help="Max results (default 50)")
@click.pass_context
def list_projects(ctx: click.Context, team: str | None, limit: int) -> None:
    """List projects."""
    with open_workspace(ctx) as ws:
        emit(ws.list_projects(team, limit=limit), as_json(ctx))


@project_group.command("get")
@click.argument("project_id")
@click.pass_context
def get_project(ctx: click.Context, project_id: str) -> None:
    """Show one project."""
    with open_workspace(ctx) as ws:
        project = ws.get_project(project_id)
        if project is None:
            raise NotFoundError(f"Project '{project_id}' not found")
        emit(project, as_json(ctx))


# -- Cycles ---------------------------------------------------------------------


@click.group("cycle")
def cycle_group() -> None:
    """Team cycles (sprints)."""


@cycle_group.command("list")
@click.option("--team", "-t", required=True, help="Team key or id")
@click.option("--limit", "-l", default=50, type=int, help="Max results (default 50)")
@click.pass_context
def list_cycles(ctx: click.Context, team: str, limit: int) -> None:
    """List a team's cycles."""
    with open_workspace(ctx) as ws:
        emit(ws.list_cycles(team, limit=limit), as_json(ctx))


@cycle_group.command("get")
@click.argument("cycle_id")
@click.pass_context
def get_cycle(ctx: click.Context, cycle_id: str) -> None:
    """Show a cycle and its issues."""
    with open_workspace(ctx) as ws:
        cycle = ws.get_cycle(cycle_id)
        if cycle is None:
            raise NotFoundError(f"Cycle '{cycle_id}' not found")
        emit(cycle, as_json(ctx))


# -- Milestones -----------------------------------------------------------------


@click.group("milestone")
def milestone_group() -> None:
    """Project milestones."""


@milestone_group.command("list")
@click.option("--project", required=True, help="Project id")
@click.option("--limit", "-l", default=50, type=int, help="Max results (default 50)")
@click.pass_context
def list_milestones(ctx: click.Context, project: str, limit: int) -> None:
    """List a project's milestones."""
    with open_workspace(ctx) as ws:
        emit(ws.list_milestones(project, limit=limit), as_json(ctx))


@milestone_group.command("get")
@click.argument("milestone_ref")
@click.option("--project", default=None, help="Project id, needed to look up a milestone by name")
@click.pass_context
def get_milestone(ctx: click.Context, milestone_ref: str, project: str | None) -> None:
    """Show one milestone by id, or by name with --project."""
    with open_workspace(ctx) as ws:
        milestone = ws.get_milestone(milestone_ref, project)
        if milestone is None:
            raise NotFoundError(f"Milestone '{milestone_ref}' not found")
        emit(milestone, as_json(ctx))


@milestone_group.command("create")
@click.argument("name")
@click.option("--project", required=True, help="Project id")
@click.option("--description", "-d", default=None, help="Description")
@click.option("--target-date", default=None, help="Target date (YYYY-MM-DD)")
@click.option("--sort-order", default=None, type=float, help="Position within the project")
@click.pass_context
def create_milestone(
    ctx: click.Context,
    name: str,
    project: str,
    description: str | None,
    target_date: str | None,
    sort_order: float | None,
) -> None:
    """Create a milestone in a project."""
    with open_workspace(ctx) as ws:
        milestone = ws.create_milestone(
            project,
            name,
            description=description,
            target_date=target_date,
            sort_order=sort_order,
        )
        emit(milestone, as_json(ctx), human=lambda m: f"Created milestone {m.name}\n  ID: {m.id}")


@milestone_group.command("update")
@click.argument("milestone_ref")
@click.option("--project", default=None, help="Project id, needed to look up a milestone by name")
@click.option("--name", default=None, help="New name")
@click.option("--description", "-d", default=None, help="New description")
@click.option("--target-date", default=None, help="New target date (YYYY-MM-DD)")
@click.option("--sort-order", default=None, type=float, help="New position within the project")
@click.pass_context
def update_milestone(
    ctx: click.Context,
    milestone_ref: str,
    project: str | None,
    name: str | None,
    description: str | None,
    target_date: str | None,
    sort_order: float | None,
) -> None:
    """Update the given fields of a milestone."""
    with open_workspace(ctx) as ws:
        milestone = ws.update_milestone(
            milestone_ref,
            project=project,
            name=name,
            description=description,
            target_date=target_date,
            sort_order=sort_order,
        )
        emit(milestone, as_json(ctx), human=lambda m: f"Updated milestone {m.name}")


@milestone_group.command("delete")
@click.argument("milestone_ref")
@click.option("--project", default=None, help="Project id, needed to look up a milestone by name")
@click.pass_context
def delete_milestone(ctx: click.Context, milestone_ref: str, project: str | None) -> None:
    """Delete a milestone."""
    with open_workspace(ctx) as ws:
        deleted = ws.delete_milestone(milestone_ref, project)
        emit_message(f"Deleted milestone {milestone_ref}", as_json(ctx), {"id": deleted})


def register(cli: click.Group) -> None:
    """Register project, cycle and milestone commands."""
    cli.add_command(project_group)
    cli.add_command(cycle_group)
    cli.add_command(milestone_group)
