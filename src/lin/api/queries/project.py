"""Project queries."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.project import ProjectResponse, ProjectsResponse

PROJECTS = Operation(
    name="Projects",
    variables={"first": "Int", "filter": "ProjectFilter"},
    response=ProjectsResponse,
    document="""
query Projects($first: Int, $filter: ProjectFilter) {
    projects(first: $first, filter: $filter) {
        nodes {
            id
            name
            description
            content
            state
            createdAt
            updatedAt
            targetDate
            startDate
            progress
        }
    }
}
""",
)

PROJECT = Operation(
    name="Project",
    variables={"id": "String!"},
    response=ProjectResponse,
    document="""
query Project($id: String!) {
    project(id: $id) {
        id
        name
        description
        content
        state
        createdAt
        updatedAt
        targetDate
        startDate
        progress
    }
}
""",
)
