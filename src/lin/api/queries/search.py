"""Full-text issue search."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.issue import IssuesResponse

ISSUE_SEARCH = Operation(
    name="IssueSearch",
    variables={"first": "Int", "filter": "IssueFilter"},
    response=IssuesResponse,
    document="""
query IssueSearch($first: Int, $filter: IssueFilter) {
    issues(first: $first, filter: $filter) {
        nodes {
            id
            identifier
            title
            description
            priority
            estimate
            createdAt
            updatedAt
            state {
                id
                name
                color
                type
            }
            team {
                id
                key
                name
                description
                issueEstimationType
            }
            assignee {
                id
                name
                email
                displayName
                active
            }
        }
    }
}
""",
)
