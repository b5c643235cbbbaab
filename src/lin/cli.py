"""CLI for the Linear GraphQL API.

Usage:
    lin issue list --assignee me --state "In Progress"   # My open work
    lin issue get ENG-123 --with-comments                 # One issue and its thread
    lin issue create "Fix the bug" --team ENG -p high     # Create issue
    lin issue update ENG-123 --state Done                 # Move an issue
    lin issue relations ENG-123                           # Parent, children, blockers
    lin search "login timeout"                            # Full-text search
    lin org add work                                      # Store a token
    lin --json team list                                  # Machine-readable output
    lin completions zsh                                   # Shell completion script
"""

from __future__ import annotations

import click

from lin import __version__
from lin.cli_commands import admin, content, issues, planning, workspace
from lin.config import config_dir
from lin.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="lin")
@click.option("--api-token", default=None, help="API token (overrides LINEAR_API_TOKEN and stored tokens)")
@click.option("--org", "-o", default=None, help="Organization whose stored token to use")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Also log requests to stderr")
@click.pass_context
def cli(ctx: click.Context, api_token: str | None, org: str | None, as_json: bool, verbose: bool) -> None:
    """lin: a command-line client for Linear."""
    ctx.ensure_object(dict)
    ctx.obj.update({"api_token": api_token, "org": org, "json": as_json, "verbose": verbose})
    setup_logging(config_dir(), verbose=verbose)


issues.register(cli)
content.register(cli)
planning.register(cli)
workspace.register(cli)
admin.register(cli)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
