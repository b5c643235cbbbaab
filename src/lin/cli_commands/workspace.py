"""CLI commands for teams, users, workflow states and labels."""

from __future__ import annotations

import click

from lin.cli_common import as_json, handle_errors, open_workspace
from lin.config import Config, scoped_config_path
from lin.errors import NotFoundError
from lin.output import emit, emit_message


@click.group("team")
def team_group() -> None:
    """Teams."""


@team_group.command("list")
@click.option("--limit", "-l", default=50, type=int, help="Max results (default 50)")
@click.pass_context
def list_teams(ctx: click.Context, limit: int) -> None:
    """List teams."""
    with open_workspace(ctx) as ws:
        emit(ws.list_teams(limit), as_json(ctx))


@team_group.command("get")
@click.argument("team_ref")
@click.pass_context
def get_team(ctx: click.Context, team_ref: str) -> None:
    """Show a team by key (ENG) or id."""
    with open_workspace(ctx) as ws:
        team = ws.get_team(team_ref)
        if team is None:
            raise NotFoundError(f"Team '{team_ref}' not found")
        emit(team, as_json(ctx))


@team_group.command("switch")
@click.argument("team_ref")
@click.option("--local", is_flag=True, help="Write the project's .lin/config.json instead of the global file")
@click.pass_context
def switch_team(ctx: click.Context, team_ref: str, local: bool) -> None:
    """Make TEAM_REF the current team for issue list, create and search."""
    with open_workspace(ctx) as ws:
        team = ws.get_team(team_ref)
        if team is None:
            raise NotFoundError(f"Team '{team_ref}' not found. Run 'lin team list' to see available teams.")
        path = scoped_config_path(local)
        config = Config.load_file(path)
        config.set_current_team(team.key)
        config.save(path)
        emit_message(f"Switched to team {team.key} ({team.name})", as_json(ctx), {"current_team": team.key})


@team_group.command("current")
@click.pass_context
def current_team(ctx: click.Context) -> None:
    """Show the current team."""
    with handle_errors(ctx):
        key = Config.load().current_team
        message = f"Current team: {key}" if key else "No current team set. Use 'lin team switch <key>'."
        emit_message(message, as_json(ctx), {"current_team": key})


@click.group("user")
def user_group() -> None:
    """Users."""


@user_group.command("me")
@click.pass_context
def me(ctx: click.Context) -> None:
    """Show the user the token belongs to."""
    with open_workspace(ctx) as ws:
        emit(ws.viewer(), as_json(ctx))


@user_group.command("list")
@click.option("--limit", "-l", default=50, type=int, help="Max results (default 50)")
@click.pass_context
def list_users(ctx: click.Context, limit: int) -> None:
    """List users in the organization."""
    with open_workspace(ctx) as ws:
        emit(ws.list_users(limit), as_json(ctx))


@click.group("workflow")
def workflow_group() -> None:
    """Workflow states."""


@workflow_group.command("list")
@click.option("--team", "-t", required=True, help="Team key or id")
@click.pass_context
def list_states(ctx: click.Context, team: str) -> None:
    """List a team's workflow states."""
    with open_workspace(ctx) as ws:
        emit(ws.list_workflow_states(team), as_json(ctx))


@click.group("label")
def label_group() -> None:
    """Issue labels."""


@label_group.command("list")
@click.option("--team", "-t", default=None, help="Only this team's labels")
@click.option("--limit", "-l", default=50, type=int, help="Max results (default 50)")
@click.pass_context
def list_labels(ctx: click.Context, team: str | None, limit: int) -> None:
    """List labels, workspace-wide or for one team."""
    with open_workspace(ctx) as ws:
        emit(ws.list_labels(team, limit=limit), as_json(ctx))


@label_group.command("get")
@click.argument("label_id")
@click.pass_context
def get_label(ctx: click.Context, label_id: str) -> None:
    """Show one label."""
    with open_workspace(ctx) as ws:
        label = ws.get_label(label_id)
        if label is None:
            raise NotFoundError(f"Label '{label_id}' not found")
        emit(label, as_json(ctx))


def register(cli: click.Group) -> None:
    """Register team, user, workflow and label commands."""
    cli.add_command(team_group)
    cli.add_command(user_group)
    cli.add_command(workflow_group)
    cli.add_command(label_group)
