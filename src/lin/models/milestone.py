"""Project milestones."""

from __future__ import annotations

from lin.models.base import Connection, MutationResult, Record


class ProjectMilestone(Record):
    id: str
    name: str
    sort_order: float
    status: str
    progress: float
    created_at: str
    updated_at: str
    description: str | None = None
    target_date: str | None = None


class ProjectMilestonesResponse(Record):
    project_milestones: Connection[ProjectMilestone]


class ProjectMilestoneResponse(Record):
    project_milestone: ProjectMilestone | None = None


class ProjectMilestonePayload(Record):
    success: bool
    project_milestone: ProjectMilestone | None = None


class ProjectMilestoneCreateResponse(Record):
    project_milestone_create: ProjectMilestonePayload


class ProjectMilestoneUpdateResponse(Record):
    project_milestone_update: ProjectMilestonePayload


class ProjectMilestoneDeleteResponse(Record):
    project_milestone_delete: MutationResult
