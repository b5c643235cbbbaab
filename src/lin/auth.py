"""API token resolution.

The first source that yields a non-empty token wins:

1. the ``--api-token`` flag;
2. the ``LINEAR_API_TOKEN`` environment variable;
3. the config store, for ``--org`` or the default organization.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from lin.config import Config
from lin.errors import AuthError

TOKEN_ENV_VAR = "LINEAR_API_TOKEN"

NO_TOKEN_MESSAGE = (
    "No API token found. Provide a token using one of these methods:\n"
    "  1. Use the --api-token flag: lin --api-token <token> <command>\n"
    f"  2. Set the {TOKEN_ENV_VAR} environment variable\n"
    "  3. Store a token: lin org add <name>"
)


def resolve_token(
    explicit_token: str | None,
    config: Config,
    org: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    if explicit_token:
        return explicit_token
    env = os.environ if environ is None else environ
    env_token = env.get(TOKEN_ENV_VAR)
    if env_token:
        return env_token
    stored = config.get_token(org)
    if stored:
        return stored
    if org is not None and org not in config.organizations:
        raise AuthError(f"Organization '{org}' not found in configuration.\n{NO_TOKEN_MESSAGE}")
    raise AuthError(NO_TOKEN_MESSAGE)


def has_token(
    explicit_token: str | None,
    config: Config,
    org: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    try:
        resolve_token(explicit_token, config, org, environ)
    except AuthError:
        return False
    return True
