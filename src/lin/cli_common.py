"""Shared CLI helpers.

Provides ``open_workspace()`` and ``handle_errors()`` so that ``cli.py``
and the ``cli_commands/*.py`` modules share one way of resolving
credentials, opening the client and rendering failures.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import click

from lin.auth import resolve_token
from lin.config import Config
from lin.core import Workspace
from lin.errors import LinError
from lin.output import emit_error


def options(ctx: click.Context) -> dict[str, Any]:
    """Global options stored on the root context by ``cli()``."""
    ctx.ensure_object(dict)
    return ctx.obj  # type: ignore[no-any-return]


def as_json(ctx: click.Context) -> bool:
    return bool(options(ctx).get("json"))


@contextmanager
def handle_errors(ctx: click.Context) -> Iterator[None]:
    """Render any ``LinError`` and exit with status 1."""
    try:
        yield
    except LinError as exc:
        emit_error(exc, as_json(ctx))
        sys.exit(1)


@contextmanager
def open_workspace(ctx: click.Context) -> Iterator[Workspace]:
    """Resolve the token, connect, and close the client on exit."""
    opts = options(ctx)
    with handle_errors(ctx):
        config = Config.load()
        token = resolve_token(opts.get("api_token"), config, opts.get("org"))
        with Workspace.connect(token, transport=opts.get("transport"), default_team=config.current_team) as ws:
            yield ws
