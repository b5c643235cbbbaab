"""Shared helpers, value parsers, and Protocol for Workspace mixins."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Protocol, TypeVar

from lin.errors import MutationFailedError, VariablesError

if TYPE_CHECKING:
    from lin.api.client import GraphQLClient
    from lin.api.operations import Operation
    from lin.models.issue import Issue
    from lin.models.user import User

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]

DEFAULT_LIMIT = 50

_UUID_RE = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")


def is_uuid(value: str) -> bool:
    """True for the 8-4-4-4-12 hex form Linear uses for every entity id."""
    return bool(_UUID_RE.match(value))


_TEAM_KEY_RE = re.compile(r"^[A-Z][A-Z0-9]*(-[A-Z0-9]+)*$")


def parse_identifier(ref: str) -> tuple[str, int]:
    """Split ``ENG-123`` into ``("ENG", 123)``.

    The key is everything before the last hyphen and is upper-cased.
    """
    key, sep, number_text = ref.strip().rpartition("-")
    if not sep or not key:
        msg = f"Invalid identifier '{ref}': expected TEAM-NUMBER (e.g. ENG-123)"
        raise VariablesError(msg)
    key = key.upper()
    if not _TEAM_KEY_RE.match(key):
        msg = f"Invalid team key '{key}' in identifier '{ref}'"
        raise VariablesError(msg)
    try:
        number = int(number_text)
    except ValueError:
        msg = f"Invalid issue number '{number_text}': expected an integer"
        raise VariablesError(msg) from None
    if number <= 0:
        msg = f"Invalid issue number '{number}': must be positive"
        raise VariablesError(msg)
    return key, number


# ---------------------------------------------------------------------------
# Priority
# ---------------------------------------------------------------------------

PRIORITY_NAMES: dict[str, int] = {
    "none": 0,
    "urgent": 1,
    "high": 2,
    "normal": 3,
    "medium": 3,
    "low": 4,
}

PRIORITY_LABELS: dict[int, str] = {1: "Urgent", 2: "High", 3: "Normal", 4: "Low"}


def parse_priority(value: str | int) -> int:
    """Parse ``0``-``4`` or a priority name into Linear's integer priority."""
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        text = str(value).strip().lower()
        if text in PRIORITY_NAMES:
            return PRIORITY_NAMES[text]
        try:
            number = int(text)
        except ValueError:
            number = -1
    if 0 <= number <= 4:
        return number
    msg = f"Invalid priority '{value}': use 0-4 or one of none, urgent, high, normal, medium, low"
    raise VariablesError(msg)


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SortField:
    name: str
    order_by: str
    default_order: SortOrder


SORT_FIELDS: dict[str, SortField] = {
    "priority": SortField("priority", "priority", "asc"),
    "created": SortField("created", "createdAt", "desc"),
    "updated": SortField("updated", "updatedAt", "desc"),
    "title": SortField("title", "title", "asc"),
}


def parse_sort(value: str) -> SortField:
    try:
        return SORT_FIELDS[value.strip().lower()]
    except KeyError:
        msg = f"Invalid sort field '{value}': use one of {', '.join(SORT_FIELDS)}"
        raise VariablesError(msg) from None


def parse_order(value: str) -> SortOrder:
    text = value.strip().lower()
    if text in ("asc", "ascending"):
        return "asc"
    if text in ("desc", "descending"):
        return "desc"
    msg = f"Invalid sort order '{value}': use asc or desc"
    raise VariablesError(msg)


# ---------------------------------------------------------------------------
# Mutation payloads
# ---------------------------------------------------------------------------


def ensure_success(payload: T, action: str) -> T:
    """Return *payload*, or raise ``MutationFailedError`` if it reports ``success: false``."""
    if not getattr(payload, "success", False):
        raise MutationFailedError(action)
    return payload


def eq(value: Any) -> dict[str, Any]:
    return {"eq": value}


def compact(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Drop ``None`` entries (filters are only sent for what the user asked)."""
    return {k: v for k, v in mapping.items() if v is not None}


class WorkspaceProtocol(Protocol):
    """Shared attributes and methods that Workspace mixins access via self.

    Actual implementations are provided by ``Workspace`` at composition time.
    """

    client: GraphQLClient
    default_team: str | None

    def execute(self, operation: Operation, variables: Mapping[str, Any] | None = None) -> Any: ...

    def viewer(self) -> User: ...

    def resolve_team_id(self, team: str) -> str: ...

    def resolve_issue_id(self, ref: str) -> str: ...

    def require_issue(self, ref: str) -> Issue: ...
