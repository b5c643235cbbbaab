"""The Linear workspace facade.

``Workspace`` is what commands talk to. Each method picks a catalog
operation, builds its variables, executes it through the shared
``GraphQLClient`` and returns decoded records. Composite flows (resolve a
viewer or identifier first, then query or mutate) live in the mixins.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from lin.api.client import GraphQLClient, api_url_from_env
from lin.api.operations import Operation
from lin.ws_content import ContentMixin
from lin.ws_issues import IssuesMixin
from lin.ws_teams import TeamsMixin


class Workspace(IssuesMixin, TeamsMixin, ContentMixin):
    """Typed access to one Linear workspace. Owns its client when used as a context manager."""

    def __init__(self, client: GraphQLClient, *, default_team: str | None = None) -> None:
        self.client = client
        # Team key used by list, search and create when none is given.
        self.default_team = default_team

    @classmethod
    def connect(
        cls,
        token: str,
        *,
        url: str | None = None,
        transport: httpx.BaseTransport | None = None,
        default_team: str | None = None,
    ) -> Workspace:
        """Build a workspace with its own client (endpoint from ``LIN_API_URL`` by default)."""
        return cls(GraphQLClient(token, url or api_url_from_env(), transport=transport), default_team=default_team)

    def execute(self, operation: Operation, variables: Mapping[str, Any] | None = None) -> Any:
        return self.client.execute(operation, variables)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> Workspace:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
