"""Project records."""

from __future__ import annotations

from lin.models.base import Connection, Record


class Project(Record):
    id: str
    name: str
    state: str
    created_at: str
    updated_at: str
    # 0.0-1.0 as reported by the API; not clamped here.
    progress: float
    description: str | None = None
    content: str | None = None
    target_date: str | None = None
    start_date: str | None = None


class ProjectResponse(Record):
    project: Project | None = None


class ProjectsResponse(Record):
    projects: Connection[Project]
