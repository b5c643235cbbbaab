"""TeamsMixin: teams, users, workflow states, labels, cycles, projects and milestones."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lin.api.queries import cycle as cycle_ops
from lin.api.queries import label as label_ops
from lin.api.queries import milestone as milestone_ops
from lin.api.queries import project as project_ops
from lin.api.queries import team as team_ops
from lin.api.queries import user as user_ops
from lin.api.queries import workflow as workflow_ops
from lin.errors import ApiError, NotFoundError, VariablesError
from lin.models.base import to_input
from lin.models.inputs import ProjectMilestoneCreateInput, ProjectMilestoneUpdateInput
from lin.ws_base import DEFAULT_LIMIT, WorkspaceProtocol, ensure_success, eq, is_uuid

if TYPE_CHECKING:
    from lin.models.cycle import Cycle, CycleWithIssues
    from lin.models.label import Label
    from lin.models.milestone import ProjectMilestone
    from lin.models.project import Project
    from lin.models.team import Team
    from lin.models.user import User
    from lin.models.workflow import WorkflowState


class TeamsMixin(WorkspaceProtocol):
    """Organization structure: everything issues hang off."""

    # -- Teams ----------------------------------------------------------------

    def list_teams(self, limit: int = DEFAULT_LIMIT) -> list[Team]:
        return list(self.execute(team_ops.TEAMS, {"first": limit}).teams.nodes)

    def find_team_by_key(self, key: str) -> Team | None:
        result = self.execute(team_ops.TEAM_BY_KEY, {"filter": {"key": eq(key.strip().upper())}})
        nodes = result.teams.nodes
        return nodes[0] if nodes else None

    def get_team(self, key_or_id: str) -> Team | None:
        if is_uuid(key_or_id):
            return self.execute(team_ops.TEAM, {"id": key_or_id}).team  # type: ignore[no-any-return]
        return self.find_team_by_key(key_or_id)

    def resolve_team_id(self, team: str) -> str:
        if is_uuid(team):
            return team
        found = self.find_team_by_key(team)
        if found is None:
            msg = f"Team '{team}' not found. Run 'lin team list' to see available teams."
            raise NotFoundError(msg)
        return found.id

    # -- Users ----------------------------------------------------------------

    def list_users(self, limit: int = DEFAULT_LIMIT) -> list[User]:
        return list(self.execute(user_ops.USERS, {"first": limit}).users.nodes)

    # -- Workflow states --------------------------------------------------------

    def list_workflow_states(self, team: str) -> list[WorkflowState]:
        team_id = self.resolve_team_id(team)
        result = self.execute(workflow_ops.WORKFLOW_STATES, {"id": team_id}).team
        if result is None:
            msg = f"Team '{team}' not found"
            raise NotFoundError(msg)
        return list(result.states.nodes)

    # -- Labels ---------------------------------------------------------------

    def list_labels(self, team: str | None = None, limit: int = DEFAULT_LIMIT) -> list[Label]:
        if team is None:
            return list(self.execute(label_ops.LABELS, {"first": limit}).issue_labels.nodes)
        team_id = self.resolve_team_id(team)
        result = self.execute(label_ops.TEAM_LABELS, {"teamId": team_id, "first": limit}).team
        if result is None:
            msg = f"Team '{team}' not found"
            raise NotFoundError(msg)
        return list(result.labels.nodes)

    def get_label(self, label_id: str) -> Label | None:
        return self.execute(label_ops.LABEL, {"id": label_id}).issue_label  # type: ignore[no-any-return]

    # -- Cycles ---------------------------------------------------------------

    def list_cycles(self, team: str, limit: int = DEFAULT_LIMIT) -> list[Cycle]:
        team_id = self.resolve_team_id(team)
        result = self.execute(cycle_ops.CYCLES, {"teamId": team_id, "first": limit}).team
        if result is None:
            msg = f"Team '{team}' not found"
            raise NotFoundError(msg)
        return list(result.cycles.nodes)

    def get_cycle(self, cycle_id: str) -> CycleWithIssues | None:
        return self.execute(cycle_ops.CYCLE, {"id": cycle_id}).cycle  # type: ignore[no-any-return]

    # -- Projects -------------------------------------------------------------

    def list_projects(self, team: str | None = None, limit: int = DEFAULT_LIMIT) -> list[Project]:
        team_filter = None
        if team is not None:
            team_filter = {"accessibleTeams": {"some": {"id": eq(self.resolve_team_id(team))}}}
        result = self.execute(project_ops.PROJECTS, {"first": limit, "filter": team_filter})
        return list(result.projects.nodes)

    def get_project(self, project_id: str) -> Project | None:
        return self.execute(project_ops.PROJECT, {"id": project_id}).project  # type: ignore[no-any-return]

    # -- Milestones -----------------------------------------------------------

    def list_milestones(self, project: str, limit: int = DEFAULT_LIMIT) -> list[ProjectMilestone]:
        result = self.execute(milestone_ops.PROJECT_MILESTONES, {"projectId": project, "first": limit})
        return list(result.project_milestones.nodes)

    def resolve_milestone_id(self, ref: str, project: str | None = None) -> str:
        """UUIDs pass through; a name needs ``project`` and matches case-insensitively."""
        if is_uuid(ref):
            return ref
        if project is None:
            msg = f"Milestone '{ref}' is not an id; pass --project to look it up by name"
            raise VariablesError(msg)
        milestones = self.list_milestones(project, limit=100)
        wanted = ref.strip().lower()
        for milestone in milestones:
            if milestone.name.lower() == wanted:
                return milestone.id
        if not milestones:
            msg = f"No milestones found for project '{project}'"
        else:
            msg = f"Milestone '{ref}' not found. Available milestones: {', '.join(m.name for m in milestones)}"
        raise NotFoundError(msg)

    def get_milestone(self, ref: str, project: str | None = None) -> ProjectMilestone | None:
        milestone_id = self.resolve_milestone_id(ref, project)
        return self.execute(milestone_ops.PROJECT_MILESTONE, {"id": milestone_id}).project_milestone  # type: ignore[no-any-return]

    def create_milestone(
        self,
        project: str,
        name: str,
        *,
        description: str | None = None,
        target_date: str | None = None,
        sort_order: float | None = None,
    ) -> ProjectMilestone:
        if not name.strip():
            msg = "Milestone name cannot be empty"
            raise VariablesError(msg)
        data = ProjectMilestoneCreateInput(
            project_id=project,
            name=name,
            description=description,
            target_date=target_date,
            sort_order=sort_order,
        )
        result = self.execute(milestone_ops.PROJECT_MILESTONE_CREATE, {"input": to_input(data)})
        return self._milestone_or_raise(result.project_milestone_create, "Milestone create")

    def update_milestone(
        self,
        ref: str,
        *,
        project: str | None = None,
        name: str | None = None,
        description: str | None = None,
        target_date: str | None = None,
        sort_order: float | None = None,
    ) -> ProjectMilestone:
        data = ProjectMilestoneUpdateInput(
            name=name,
            description=description,
            target_date=target_date,
            sort_order=sort_order,
        )
        if data.is_empty():
            msg = "No fields to update. Specify at least one field to change."
            raise VariablesError(msg)
        milestone_id = self.resolve_milestone_id(ref, project)
        result = self.execute(milestone_ops.PROJECT_MILESTONE_UPDATE, {"id": milestone_id, "input": to_input(data)})
        return self._milestone_or_raise(result.project_milestone_update, "Milestone update")

    def delete_milestone(self, ref: str, project: str | None = None) -> str:
        milestone_id = self.resolve_milestone_id(ref, project)
        result = self.execute(milestone_ops.PROJECT_MILESTONE_DELETE, {"id": milestone_id})
        ensure_success(result.project_milestone_delete, "Milestone delete")
        return milestone_id

    @staticmethod
    def _milestone_or_raise(payload: object, action: str) -> ProjectMilestone:
        ensure_success(payload, action)
        milestone = getattr(payload, "project_milestone", None)
        if milestone is None:
            msg = f"{action} succeeded but no milestone was returned"
            raise ApiError([msg])
        return milestone  # type: ignore[no-any-return]
