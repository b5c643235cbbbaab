"""Issue queries and mutations."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.comment import IssueCommentsResponse
from lin.models.issue import (
    IssueArchiveResponse,
    IssueCreateResponse,
    IssueDeleteResponse,
    IssueResponse,
    IssuesResponse,
    IssuesWithCommentsResponse,
    IssueUnarchiveResponse,
    IssueUpdateResponse,
    IssueWithCommentsResponse,
)

ISSUES = Operation(
    name="Issues",
    variables={"first": "Int", "filter": "IssueFilter", "orderBy": "PaginationOrderBy"},
    response=IssuesResponse,
    document="""
query Issues($first: Int, $filter: IssueFilter, $orderBy: PaginationOrderBy) {
    issues(first: $first, filter: $filter, orderBy: $orderBy) {
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

ISSUE = Operation(
    name="Issue",
    variables={"id": "String!"},
    response=IssueResponse,
    document="""
query Issue($id: String!) {
    issue(id: $id) {
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
""",
)

# Identifier lookups ("ENG-123") are a filtered list capped at one node;
# an empty ``nodes`` list means "not found", not an error.
ISSUE_BY_IDENTIFIER = Operation(
    name="IssueByIdentifier",
    variables={"filter": "IssueFilter!"},
    response=IssuesResponse,
    document="""
query IssueByIdentifier($filter: IssueFilter!) {
    issues(filter: $filter, first: 1) {
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

ISSUE_WITH_COMMENTS = Operation(
    name="IssueWithComments",
    variables={"id": "String!"},
    response=IssueWithCommentsResponse,
    document="""
query IssueWithComments($id: String!) {
    issue(id: $id) {
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
        comments {
            nodes {
                id
                body
                createdAt
                updatedAt
                user {
                    id
                    name
                    email
                    displayName
                    active
                }
            }
        }
    }
}
""",
)

ISSUE_BY_IDENTIFIER_WITH_COMMENTS = Operation(
    name="IssueByIdentifierWithComments",
    variables={"filter": "IssueFilter!"},
    response=IssuesWithCommentsResponse,
    document="""
query IssueByIdentifierWithComments($filter: IssueFilter!) {
    issues(filter: $filter, first: 1) {
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
            comments {
                nodes {
                    id
                    body
                    createdAt
                    updatedAt
                    user {
                        id
                        name
                        email
                        displayName
                        active
                    }
                }
            }
        }
    }
}
""",
)

ISSUE_COMMENTS = Operation(
    name="IssueComments",
    variables={"id": "String!"},
    response=IssueCommentsResponse,
    document="""
query IssueComments($id: String!) {
    issue(id: $id) {
        id
        identifier
        comments {
            nodes {
                id
                body
                createdAt
                updatedAt
                user {
                    id
                    name
                    email
                    displayName
                    active
                }
            }
        }
    }
}
""",
)

ISSUE_CREATE = Operation(
    name="IssueCreate",
    variables={"input": "IssueCreateInput!"},
    response=IssueCreateResponse,
    document="""
mutation IssueCreate($input: IssueCreateInput!) {
    issueCreate(input: $input) {
        success
        issue {
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

ISSUE_UPDATE = Operation(
    name="IssueUpdate",
    variables={"id": "String!", "input": "IssueUpdateInput!"},
    response=IssueUpdateResponse,
    document="""
mutation IssueUpdate($id: String!, $input: IssueUpdateInput!) {
    issueUpdate(id: $id, input: $input) {
        success
        issue {
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

ISSUE_DELETE = Operation(
    name="IssueDelete",
    variables={"id": "String!"},
    response=IssueDeleteResponse,
    document="""
mutation IssueDelete($id: String!) {
    issueDelete(id: $id) {
        success
    }
}
""",
)

ISSUE_ARCHIVE = Operation(
    name="IssueArchive",
    variables={"id": "String!"},
    response=IssueArchiveResponse,
    document="""
mutation IssueArchive($id: String!) {
    issueArchive(id: $id) {
        success
    }
}
""",
)

ISSUE_UNARCHIVE = Operation(
    name="IssueUnarchive",
    variables={"id": "String!"},
    response=IssueUnarchiveResponse,
    document="""
mutation IssueUnarchive($id: String!) {
    issueUnarchive(id: $id) {
        success
    }
}
""",
)
