"""CLI commands for local setup: stored organizations, settings and shell completion."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
from click.shell_completion import get_completion_class

from lin.auth import has_token
from lin.cli_common import as_json, handle_errors, options
from lin.config import SETTINGS, Config, find_local_config, global_config_path, mask_token, scoped_config_path
from lin.errors import ConfigError
from lin.output import emit, emit_message

_SHELLS = ["bash", "zsh", "fish"]

local_option = click.option(
    "--local",
    "local",
    is_flag=True,
    help="Write the project's .lin/config.json instead of the global file",
)


def _scoped_config(local: bool) -> tuple[Config, Path]:
    path = scoped_config_path(local)
    return Config.load_file(path), path


def _org_rows(config: Config) -> list[dict[str, Any]]:
    return [
        {"name": name, "token": mask_token(config.organizations[name]), "default": name == config.default_org}
        for name in config.list_orgs()
    ]


def _format_org_rows(rows: list[dict[str, Any]]) -> str:
    if not rows:
        return "No organizations configured. Add one with 'lin org add <name>'."
    lines = []
    for row in rows:
        marker = " (default)" if row["default"] else ""
        lines.append(f"{row['name']}{marker}\n  Token: {row['token']}")
    return "\n".join(lines)


@click.group("org")
def org_group() -> None:
    """Manage stored organization tokens."""


@org_group.command("add")
@click.argument("name")
@click.option("--token", default=None, help="API token (prompted for, or read from stdin, when omitted)")
@local_option
@click.pass_context
def add_org(ctx: click.Context, name: str, token: str | None, local: bool) -> None:
    """Store an API token under NAME. The first one added to a file becomes its default."""
    if token is None:
        token = click.prompt("API token", hide_input=True).strip()
    with handle_errors(ctx):
        config, path = _scoped_config(local)
        became_default = config.add_org(name, token)
        config.save(path)
        message = f"Added organization '{name}' to {path}"
        if became_default:
            message += "\nSet as default organization"
        emit_message(message, as_json(ctx), {"name": name, "default": config.default_org == name, "path": str(path)})


@org_group.command("remove")
@click.argument("name")
@local_option
@click.pass_context
def remove_org(ctx: click.Context, name: str, local: bool) -> None:
    """Forget a stored organization."""
    with handle_errors(ctx):
        config, path = _scoped_config(local)
        config.remove_org(name)
        config.save(path)
        emit_message(f"Removed organization '{name}'", as_json(ctx), {"name": name})


@org_group.command("list")
@click.pass_context
def list_orgs(ctx: click.Context) -> None:
    """List stored organizations with masked tokens."""
    with handle_errors(ctx):
        emit(_org_rows(Config.load()), as_json(ctx), human=_format_org_rows)


@org_group.command("set-default")
@click.argument("name")
@local_option
@click.pass_context
def set_default(ctx: click.Context, name: str, local: bool) -> None:
    """Use NAME's token when no --org is given."""
    with handle_errors(ctx):
        config, path = _scoped_config(local)
        # A local default may name an organization stored globally.
        config.set_default(name, known=Config.load().organizations if local else None)
        config.save(path)
        emit_message(f"Default organization set to '{name}'", as_json(ctx), {"default": name, "path": str(path)})


@org_group.command("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show config file locations, the default organization and stored tokens."""
    opts = options(ctx)
    with handle_errors(ctx):
        config = Config.load()
        local = find_local_config()
        data = {
            "config_path": str(global_config_path()),
            "local_config_path": str(local) if local else None,
            "default_org": config.default_org,
            "organizations": _org_rows(config),
            "token_available": has_token(opts.get("api_token"), config, opts.get("org")),
            "problems": config.validate(),
        }

        def human(d: dict[str, Any]) -> str:
            lines = [f"Config file: {d['config_path']}"]
            if d["local_config_path"]:
                lines.append(f"Local config: {d['local_config_path']}")
            lines.append(f"Default organization: {d['default_org'] or '(none)'}")
            lines.append(f"Token available: {'yes' if d['token_available'] else 'no'}")
            lines.append("")
            lines.append(_format_org_rows(d["organizations"]))
            if d["problems"]:
                lines.append("")
                lines.append("Problems:")
                lines.extend(f"  - {p}" for p in d["problems"])
            return "\n".join(lines)

        emit(data, as_json(ctx), human=human)


@click.group("config")
def config_group() -> None:
    """Read and change settings (default-org, current-team)."""


def _setting_rows() -> list[dict[str, Any]]:
    global_config = Config.load_file(global_config_path())
    local_path = find_local_config()
    local_config = Config.load_file(local_path) if local_path else Config()
    rows = []
    for key in SETTINGS:
        local_value = local_config.get_setting(key)
        value = local_value if local_value is not None else global_config.get_setting(key)
        source = None
        if local_value is not None:
            source = "local"
        elif value is not None:
            source = "global"
        rows.append({"key": key, "value": value, "source": source})
    return rows


def _format_setting_rows(rows: list[dict[str, Any]]) -> str:
    lines = []
    for row in rows:
        origin = f" ({row['source']})" if row["source"] else ""
        lines.append(f"{row['key']}: {row['value'] or '(not set)'}{origin}")
    return "\n".join(lines)


@config_group.command("list")
@click.pass_context
def list_settings(ctx: click.Context) -> None:
    """Show every setting and which file it comes from."""
    with handle_errors(ctx):
        emit(_setting_rows(), as_json(ctx), human=_format_setting_rows)


@config_group.command("get")
@click.argument("key", type=click.Choice(SETTINGS))
@click.pass_context
def get_setting(ctx: click.Context, key: str) -> None:
    """Print one setting's effective value."""
    with handle_errors(ctx):
        value = Config.load().get_setting(key)
        if value is None:
            raise ConfigError(f"'{key}' is not set")
        emit_message(value, as_json(ctx), {"key": key, "value": value})


@config_group.command("set")
@click.argument("key", type=click.Choice(SETTINGS))
@click.argument("value")
@local_option
@click.pass_context
def set_setting(ctx: click.Context, key: str, value: str, local: bool) -> None:
    """Change a setting."""
    with handle_errors(ctx):
        config, path = _scoped_config(local)
        config.set_setting(key, value, known_orgs=Config.load().organizations if local else None)
        config.save(path)
        stored = config.get_setting(key)
        data = {"key": key, "value": stored, "path": str(path)}
        emit_message(f"Set {key} to '{stored}' in {path}", as_json(ctx), data)


@config_group.command("unset")
@click.argument("key", type=click.Choice(SETTINGS))
@local_option
@click.pass_context
def unset_setting(ctx: click.Context, key: str, local: bool) -> None:
    """Clear a setting."""
    with handle_errors(ctx):
        config, path = _scoped_config(local)
        config.unset_setting(key)
        config.save(path)
        emit_message(f"Unset {key} in {path}", as_json(ctx), {"key": key, "path": str(path)})


@config_group.command("validate")
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Check the merged configuration for problems."""
    with handle_errors(ctx):
        problems = Config.load().validate()
        data = {"valid": not problems, "problems": problems}

        def human(d: dict[str, Any]) -> str:
            if d["valid"]:
                return "Configuration is valid."
            return "\n".join(["Configuration has problems:", *(f"  - {p}" for p in d["problems"])])

        emit(data, as_json(ctx), human=human)


@click.command("completions")
@click.argument("shell", type=click.Choice(_SHELLS))
@click.pass_context
def completions(ctx: click.Context, shell: str) -> None:
    """Print a shell completion script.

    \b
    bash: lin completions bash > ~/.local/share/bash-completion/completions/lin
    zsh:  lin completions zsh > "${fpath[1]}/_lin"
    fish: lin completions fish > ~/.config/fish/completions/lin.fish
    """
    root = ctx.find_root()
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.BadParameter(f"unsupported shell: {shell}")
    comp = comp_cls(root.command, {}, "lin", "_LIN_COMPLETE")
    click.echo(comp.source())


def register(cli: click.Group) -> None:
    """Register org, config and completions commands."""
    cli.add_command(org_group)
    cli.add_command(config_group)
    cli.add_command(completions)
