"""Project milestone queries and mutations."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.milestone import (
    ProjectMilestoneCreateResponse,
    ProjectMilestoneDeleteResponse,
    ProjectMilestoneResponse,
    ProjectMilestonesResponse,
    ProjectMilestoneUpdateResponse,
)

PROJECT_MILESTONES = Operation(
    name="ProjectMilestones",
    variables={"projectId": "String!", "first": "Int"},
    response=ProjectMilestonesResponse,
    document="""
query ProjectMilestones($projectId: String!, $first: Int) {
    projectMilestones(filter: { project: { id: { eq: $projectId } } }, first: $first) {
        nodes {
            id
            name
            description
            targetDate
            sortOrder
            status
            progress
            createdAt
            updatedAt
        }
    }
}
""",
)

PROJECT_MILESTONE = Operation(
    name="ProjectMilestone",
    variables={"id": "String!"},
    response=ProjectMilestoneResponse,
    document="""
query ProjectMilestone($id: String!) {
    projectMilestone(id: $id) {
        id
        name
        description
        targetDate
        sortOrder
        status
        progress
        createdAt
        updatedAt
    }
}
""",
)

PROJECT_MILESTONE_CREATE = Operation(
    name="ProjectMilestoneCreate",
    variables={"input": "ProjectMilestoneCreateInput!"},
    response=ProjectMilestoneCreateResponse,
    document="""
mutation ProjectMilestoneCreate($input: ProjectMilestoneCreateInput!) {
    projectMilestoneCreate(input: $input) {
        success
        projectMilestone {
            id
            name
            description
            targetDate
            sortOrder
            status
            progress
            createdAt
            updatedAt
        }
    }
}
""",
)

PROJECT_MILESTONE_UPDATE = Operation(
    name="ProjectMilestoneUpdate",
    variables={"id": "String!", "input": "ProjectMilestoneUpdateInput!"},
    response=ProjectMilestoneUpdateResponse,
    document="""
mutation ProjectMilestoneUpdate($id: String!, $input: ProjectMilestoneUpdateInput!) {
    projectMilestoneUpdate(id: $id, input: $input) {
        success
        projectMilestone {
            id
            name
            description
            targetDate
            sortOrder
            status
            progress
            createdAt
            updatedAt
        }
    }
}
""",
)

PROJECT_MILESTONE_DELETE = Operation(
    name="ProjectMilestoneDelete",
    variables={"id": "String!"},
    response=ProjectMilestoneDeleteResponse,
    document="""
mutation ProjectMilestoneDelete($id: String!) {
    projectMilestoneDelete(id: $id) {
        success
    }
}
""",
)
