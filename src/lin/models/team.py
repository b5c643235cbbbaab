"""Team records."""

from __future__ import annotations

from pydantic import Field

from lin.models.base import Connection, Record


class Team(Record):
    id: str
    key: str
    name: str
    description: str | None = None
    estimation_type: str | None = Field(default=None, alias="issueEstimationType")


class TeamResponse(Record):
    team: Team | None = None


class TeamsResponse(Record):
    teams: Connection[Team]
