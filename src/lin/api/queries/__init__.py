"""The operation catalog: every GraphQL document lin sends.

Each submodule holds module-level ``Operation`` constants for one area of
the schema. ``ALL_OPERATIONS`` is the flat list, used by tests to check
that names are unique and that every response type decodes.
"""

from __future__ import annotations

from lin.api.operations import Operation
from lin.api.queries import (
    attachment,
    comment,
    cycle,
    document,
    issue,
    label,
    milestone,
    project,
    relation,
    search,
    team,
    user,
    workflow,
)

_MODULES = (issue, comment, team, user, project, cycle, label, document, attachment, milestone, workflow, relation, search)

ALL_OPERATIONS: tuple[Operation, ...] = tuple(
    value for module in _MODULES for value in vars(module).values() if isinstance(value, Operation)
)

__all__ = ["ALL_OPERATIONS"]
