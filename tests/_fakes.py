"""A recording fake of the Linear GraphQL endpoint, plus sample nodes.

``FakeLinear`` plugs into ``httpx.MockTransport``: responses are queued in
the order requests are expected, and every request is captured so tests
can assert on operation names and variables.
"""

from __future__ import annotations

import json
import re
from collections import deque
from collections.abc import Callable
from typing import Any

import httpx
from click.testing import Result

_OPERATION_RE = re.compile(r"\b(?:query|mutation)\s+(\w+)")

TEST_TOKEN = "lin_api_test0123456789"

RunCli = Callable[..., Result]


class FakeLinear:
    def __init__(self) -> None:
        self._responses: deque[httpx.Response] = deque()
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    # -- Queueing -------------------------------------------------------------

    def queue(self, data: Any = None, *, errors: list[dict[str, Any]] | None = None) -> FakeLinear:
        body: dict[str, Any] = {"data": data}
        if errors is not None:
            body["errors"] = errors
        self._responses.append(httpx.Response(200, json=body))
        return self

    def queue_raw(self, status: int = 200, content: bytes = b"", **kwargs: Any) -> FakeLinear:
        self._responses.append(httpx.Response(status, content=content, **kwargs))
        return self

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        return self._responses.popleft()

    # -- Inspection -----------------------------------------------------------

    @property
    def graphql_requests(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests if r.method == "POST"]

    @property
    def operations(self) -> list[str]:
        names = []
        for payload in self.graphql_requests:
            match = _OPERATION_RE.search(payload["query"])
            names.append(match.group(1) if match else "")
        return names

    def variables(self, index: int = -1) -> dict[str, Any]:
        return self.graphql_requests[index].get("variables", {})  # type: ignore[no-any-return]

    @property
    def pending(self) -> int:
        return len(self._responses)


# ---------------------------------------------------------------------------
# Sample nodes, shaped like real API responses
# ---------------------------------------------------------------------------

ISSUE_ID = "11111111-2222-3333-4444-555555555555"
OTHER_ISSUE_ID = "66666666-7777-8888-9999-000000000000"
TEAM_ID = "aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee"
VIEWER_ID = "99999999-8888-7777-6666-555555555555"
TS = "2026-03-01T12:30:00.000Z"


def user_node(**overrides: Any) -> dict[str, Any]:
    node = {
        "id": VIEWER_ID,
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "displayName": "ada",
        "active": True,
    }
    node.update(overrides)
    return node


def team_node(**overrides: Any) -> dict[str, Any]:
    node = {
        "id": TEAM_ID,
        "key": "ENG",
        "name": "Engineering",
        "description": None,
        "issueEstimationType": "fibonacci",
    }
    node.update(overrides)
    return node


def state_node(name: str = "Todo", state_type: str = "unstarted", **overrides: Any) -> dict[str, Any]:
    node = {"id": f"state-{name.lower().replace(' ', '-')}", "name": name, "color": "#e2e2e2", "type": state_type}
    node.update(overrides)
    return node


def issue_node(identifier: str = "ENG-1", **overrides: Any) -> dict[str, Any]:
    node = {
        "id": ISSUE_ID,
        "identifier": identifier,
        "title": "Fix login timeout",
        "description": None,
        "priority": 2,
        "estimate": None,
        "createdAt": TS,
        "updatedAt": TS,
        "state": state_node(),
        "team": team_node(),
        "assignee": user_node(),
    }
    node.update(overrides)
    return node


def comment_node(body: str = "Looks good", **overrides: Any) -> dict[str, Any]:
    node = {"id": "comment-1", "body": body, "createdAt": TS, "updatedAt": TS, "user": user_node()}
    node.update(overrides)
    return node


def attachment_node(
    url: str, title: str = "Attachment", subtitle: str | None = None, node_id: str = "att-1", **overrides: Any
) -> dict[str, Any]:
    node = {
        "id": node_id,
        "title": title,
        "subtitle": subtitle,
        "url": url,
        "metadata": None,
        "createdAt": TS,
        "updatedAt": TS,
        "creator": None,
    }
    node.update(overrides)
    return node


def related_node(identifier: str, node_id: str) -> dict[str, Any]:
    return {"id": node_id, "identifier": identifier, "title": f"Issue {identifier}"}


def nodes(*items: dict[str, Any]) -> dict[str, Any]:
    return {"nodes": list(items)}


def json_output(result: Any) -> Any:
    """Parse the JSON envelope a ``--json`` CLI invocation printed."""
    return json.loads(result.output)


def project_node(**overrides: Any) -> dict[str, Any]:
    node = {
        "id": "project-1",
        "name": "Auth revamp",
        "description": None,
        "content": None,
        "state": "started",
        "progress": 0.5,
        "targetDate": "2026-04-01",
        "startDate": None,
        "createdAt": TS,
        "updatedAt": TS,
    }
    node.update(overrides)
    return node


def cycle_node(**overrides: Any) -> dict[str, Any]:
    node = {
        "id": "cycle-1",
        "number": 7,
        "name": None,
        "description": None,
        "startsAt": TS,
        "endsAt": "2026-03-14T12:30:00.000Z",
        "completedAt": None,
        "progress": 0.25,
        "completedScopeHistory": [0.0, 1.0],
        "scopeHistory": [3.0, 4.0],
    }
    node.update(overrides)
    return node


def label_node(**overrides: Any) -> dict[str, Any]:
    node = {
        "id": "label-1",
        "name": "bug",
        "description": None,
        "color": "#eb5757",
        "isGroup": False,
        "createdAt": TS,
        "updatedAt": TS,
    }
    node.update(overrides)
    return node


def milestone_node(**overrides: Any) -> dict[str, Any]:
    node = {
        "id": "milestone-1",
        "name": "Beta",
        "description": None,
        "targetDate": "2026-05-01",
        "sortOrder": 1.0,
        "status": "next",
        "progress": 0.4,
        "createdAt": TS,
        "updatedAt": TS,
    }
    node.update(overrides)
    return node


def document_node(**overrides: Any) -> dict[str, Any]:
    node = {
        "id": "doc-1",
        "title": "Design notes",
        "icon": None,
        "color": None,
        "createdAt": TS,
        "updatedAt": TS,
        "creator": user_node(),
        "project": {"id": "project-1", "name": "Auth revamp"},
    }
    node.update(overrides)
    return node
