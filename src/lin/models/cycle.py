"""Cycles (sprints)."""

from __future__ import annotations

from lin.models.base import Connection, Record
from lin.models.issue import Issue


class Cycle(Record):
    id: str
    number: int
    progress: float
    completed_scope_history: list[float]
    scope_history: list[float]
    name: str | None = None
    description: str | None = None
    starts_at: str | None = None
    ends_at: str | None = None
    completed_at: str | None = None


class CycleWithIssues(Record):
    id: str
    number: int
    progress: float
    completed_scope_history: list[float]
    scope_history: list[float]
    issues: Connection[Issue]
    name: str | None = None
    description: str | None = None
    starts_at: str | None = None
    ends_at: str | None = None
    completed_at: str | None = None


class TeamWithCycles(Record):
    id: str
    cycles: Connection[Cycle]


class CyclesResponse(Record):
    team: TeamWithCycles | None = None


class CycleResponse(Record):
    cycle: CycleWithIssues | None = None
