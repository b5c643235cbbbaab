"""IssuesMixin: issue queries, mutations, comments and search.

All methods reach the API through ``self.execute`` and the shared
resolvers (``resolve_team_id``, ``resolve_issue_id``) via the MRO when
composed into ``Workspace``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from lin.api.queries import comment as comment_ops
from lin.api.queries import issue as issue_ops
from lin.api.queries import search as search_ops
from lin.api.queries import user as user_ops
from lin.api.queries import workflow as workflow_ops
from lin.errors import ApiError, NotFoundError, VariablesError
from lin.models.base import to_input
from lin.models.inputs import CommentCreateInput, IssueCreateInput, IssueUpdateInput
from lin.ws_base import (
    DEFAULT_LIMIT,
    WorkspaceProtocol,
    compact,
    ensure_success,
    eq,
    is_uuid,
    parse_identifier,
    parse_order,
    parse_priority,
    parse_sort,
)

if TYPE_CHECKING:
    from lin.models.comment import Comment
    from lin.models.issue import Issue, IssueWithComments
    from lin.models.user import User
    from lin.models.workflow import WorkflowState

logger = logging.getLogger(__name__)


def _range(after: str | None, before: str | None) -> dict[str, str] | None:
    bounds = compact({"gt": after, "lt": before})
    return bounds or None


class IssuesMixin(WorkspaceProtocol):
    """Issue CRUD, comments and search.

    Inherits ``WorkspaceProtocol`` for type-safe access to shared attributes.
    """

    # -- Viewer ---------------------------------------------------------------

    def viewer(self) -> User:
        return self.execute(user_ops.VIEWER).viewer  # type: ignore[no-any-return]

    def _resolve_assignee(self, assignee: str) -> str:
        """``me`` (any case) becomes the viewer's id; anything else passes through."""
        if assignee.strip().lower() == "me":
            return self.viewer().id
        return assignee

    # -- Lookup ---------------------------------------------------------------

    def _identifier_filter(self, ref: str) -> dict[str, Any]:
        key, number = parse_identifier(ref)
        return {"team": {"key": eq(key)}, "number": eq(number)}

    def find_issue_by_identifier(self, ref: str) -> Issue | None:
        """Look up ``ENG-123``. Zero matching nodes is ``None``, not an error."""
        result = self.execute(issue_ops.ISSUE_BY_IDENTIFIER, {"filter": self._identifier_filter(ref)})
        nodes = result.issues.nodes
        return nodes[0] if nodes else None

    def get_issue(self, ref: str) -> Issue | None:
        if is_uuid(ref):
            return self.execute(issue_ops.ISSUE, {"id": ref}).issue  # type: ignore[no-any-return]
        return self.find_issue_by_identifier(ref)

    def get_issue_with_comments(self, ref: str) -> IssueWithComments | None:
        if is_uuid(ref):
            return self.execute(issue_ops.ISSUE_WITH_COMMENTS, {"id": ref}).issue  # type: ignore[no-any-return]
        result = self.execute(
            issue_ops.ISSUE_BY_IDENTIFIER_WITH_COMMENTS,
            {"filter": self._identifier_filter(ref)},
        )
        nodes = result.issues.nodes
        return nodes[0] if nodes else None

    def require_issue(self, ref: str) -> Issue:
        issue = self.get_issue(ref)
        if issue is None:
            msg = f"Issue '{ref}' not found"
            raise NotFoundError(msg)
        return issue

    def resolve_issue_id(self, ref: str) -> str:
        """UUIDs pass through untouched; identifiers cost one lookup."""
        if is_uuid(ref):
            return ref
        return self.require_issue(ref).id

    # -- List -----------------------------------------------------------------

    def list_issues(
        self,
        *,
        team: str | None = None,
        assignee: str | None = None,
        state: str | None = None,
        project: str | None = None,
        cycle: str | None = None,
        label: str | None = None,
        priority: str | int | None = None,
        created_after: str | None = None,
        created_before: str | None = None,
        updated_after: str | None = None,
        updated_before: str | None = None,
        sort: str | None = None,
        order: str | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Issue]:
        """List issues matching every given filter.

        ``assignee="me"`` costs an extra ``Viewer`` request first. Linear's
        ``orderBy`` has no direction, so an ``order`` other than the sort
        field's natural one reverses the page client-side.
        Without *team* the workspace's ``default_team`` applies.
        """
        sort_field = parse_sort(sort) if sort else None
        requested_order = parse_order(order) if order else None
        if requested_order is not None and sort_field is None:
            msg = "--order requires --sort"
            raise VariablesError(msg)

        team = team or self.default_team
        assignee_id = self._resolve_assignee(assignee) if assignee else None
        filters = compact(
            {
                "team": {"key": eq(team.upper())} if team else None,
                "assignee": {"id": eq(assignee_id)} if assignee_id else None,
                "state": {"name": eq(state)} if state else None,
                "project": {"id": eq(project)} if project else None,
                "cycle": {"id": eq(cycle)} if cycle else None,
                "labels": {"id": eq(label)} if label else None,
                "priority": eq(parse_priority(priority)) if priority is not None else None,
                "createdAt": _range(created_after, created_before),
                "updatedAt": _range(updated_after, updated_before),
            }
        )
        variables = {
            "first": limit,
            "filter": filters or None,
            "orderBy": sort_field.order_by if sort_field else None,
        }
        issues = list(self.execute(issue_ops.ISSUES, variables).issues.nodes)
        if sort_field is not None and requested_order not in (None, sort_field.default_order):
            issues.reverse()
        return issues

    def search_issues(
        self,
        query: str,
        *,
        team: str | None = None,
        assignee: str | None = None,
        state: str | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Issue]:
        if not query.strip():
            msg = "Search query cannot be empty"
            raise VariablesError(msg)
        team = team or self.default_team
        assignee_id = self._resolve_assignee(assignee) if assignee else None
        filters = compact(
            {
                "searchableContent": {"contains": query},
                "team": {"key": eq(team.upper())} if team else None,
                "assignee": {"id": eq(assignee_id)} if assignee_id else None,
                "state": {"name": eq(state)} if state else None,
            }
        )
        return list(self.execute(search_ops.ISSUE_SEARCH, {"first": limit, "filter": filters}).issues.nodes)

    # -- State resolution -----------------------------------------------------

    def _team_states(self, team_id: str) -> list[WorkflowState]:
        team = self.execute(workflow_ops.WORKFLOW_STATES, {"id": team_id}).team
        if team is None:
            msg = f"Team '{team_id}' not found"
            raise NotFoundError(msg)
        return list(team.states.nodes)

    def _resolve_state_id(self, team_id: str, state: str) -> str:
        """Match a state name case-insensitively within the team's workflow."""
        if is_uuid(state):
            return state
        states = self._team_states(team_id)
        wanted = state.strip().lower()
        for candidate in states:
            if candidate.name.lower() == wanted:
                return candidate.id
        available = ", ".join(s.name for s in states) or "(none)"
        msg = f"State '{state}' not found. Available states: {available}"
        raise NotFoundError(msg)

    # -- Mutations ------------------------------------------------------------

    def create_issue(
        self,
        title: str,
        team: str | None = None,
        *,
        description: str | None = None,
        priority: str | int | None = None,
        assignee: str | None = None,
        state: str | None = None,
        estimate: float | None = None,
        labels: list[str] | None = None,
        project: str | None = None,
        parent: str | None = None,
    ) -> Issue:
        if not title.strip():
            msg = "Issue title cannot be empty"
            raise VariablesError(msg)
        team = team or self.default_team
        if not team:
            msg = "No team specified. Use --team or set a current team with 'lin team switch <key>'"
            raise VariablesError(msg)
        team_id = self.resolve_team_id(team)
        data = IssueCreateInput(
            title=title,
            team_id=team_id,
            description=description,
            priority=parse_priority(priority) if priority is not None else None,
            assignee_id=self._resolve_assignee(assignee) if assignee else None,
            state_id=self._resolve_state_id(team_id, state) if state else None,
            estimate=estimate,
            label_ids=list(labels) if labels else None,
            project_id=project,
            parent_id=self.resolve_issue_id(parent) if parent else None,
        )
        payload = ensure_success(self.execute(issue_ops.ISSUE_CREATE, {"input": to_input(data)}).issue_create, "Issue create")
        if payload.issue is None:
            msg = "Issue creation succeeded but no issue was returned"
            raise ApiError([msg])
        logger.info("Created issue %s", payload.issue.identifier)
        return payload.issue  # type: ignore[no-any-return]

    def update_issue(
        self,
        ref: str,
        *,
        title: str | None = None,
        description: str | None = None,
        priority: str | int | None = None,
        assignee: str | None = None,
        state: str | None = None,
        estimate: float | None = None,
        labels: list[str] | None = None,
        project: str | None = None,
        parent: str | None = None,
    ) -> Issue:
        """Apply only the given fields. Raises ``VariablesError`` if none are."""
        given = (title, description, priority, assignee, state, estimate, project, parent)
        if all(value is None for value in given) and not labels:
            msg = "No fields to update. Specify at least one field to change."
            raise VariablesError(msg)

        state_id: str | None = None
        if state and not is_uuid(state):
            # State names are per team, so the issue's own team decides.
            current = self.require_issue(ref)
            issue_id = current.id
            if current.team is None:
                msg = f"Issue '{ref}' has no team; pass the state id instead of its name"
                raise VariablesError(msg)
            state_id = self._resolve_state_id(current.team.id, state)
        else:
            issue_id = self.resolve_issue_id(ref)
            state_id = state

        data = IssueUpdateInput(
            title=title,
            description=description,
            priority=parse_priority(priority) if priority is not None else None,
            assignee_id=self._resolve_assignee(assignee) if assignee else None,
            state_id=state_id,
            estimate=estimate,
            label_ids=list(labels) if labels else None,
            project_id=project,
            parent_id=self.resolve_issue_id(parent) if parent else None,
        )
        result = self.execute(issue_ops.ISSUE_UPDATE, {"id": issue_id, "input": to_input(data)})
        payload = ensure_success(result.issue_update, "Issue update")
        if payload.issue is None:
            msg = "Issue update succeeded but no issue was returned"
            raise ApiError([msg])
        return payload.issue  # type: ignore[no-any-return]

    def delete_issue(self, ref: str) -> str:
        """Delete (trash) an issue. Returns the issue id."""
        issue_id = self.resolve_issue_id(ref)
        ensure_success(self.execute(issue_ops.ISSUE_DELETE, {"id": issue_id}).issue_delete, "Issue delete")
        return issue_id

    def archive_issue(self, ref: str) -> str:
        issue_id = self.resolve_issue_id(ref)
        ensure_success(self.execute(issue_ops.ISSUE_ARCHIVE, {"id": issue_id}).issue_archive, "Issue archive")
        return issue_id

    def unarchive_issue(self, ref: str) -> str:
        issue_id = self.resolve_issue_id(ref)
        ensure_success(
            self.execute(issue_ops.ISSUE_UNARCHIVE, {"id": issue_id}).issue_unarchive,
            "Issue unarchive",
        )
        return issue_id

    # -- Comments -------------------------------------------------------------

    def list_comments(self, ref: str) -> list[Comment]:
        issue_id = self.resolve_issue_id(ref)
        issue = self.execute(issue_ops.ISSUE_COMMENTS, {"id": issue_id}).issue
        if issue is None:
            msg = f"Issue '{ref}' not found"
            raise NotFoundError(msg)
        return list(issue.comments.nodes)

    def add_comment(self, ref: str, body: str) -> Comment:
        if not body.strip():
            msg = "Comment body cannot be empty"
            raise VariablesError(msg)
        issue_id = self.resolve_issue_id(ref)
        data = CommentCreateInput(issue_id=issue_id, body=body)
        payload = ensure_success(
            self.execute(comment_ops.COMMENT_CREATE, {"input": to_input(data)}).comment_create,
            "Comment create",
        )
        if payload.comment is None:
            msg = "Comment creation succeeded but no comment was returned"
            raise ApiError([msg])
        return payload.comment  # type: ignore[no-any-return]
