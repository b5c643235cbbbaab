"""Issue relation queries and mutations.

Parent/child links are not issue relations on the server: they are the
``parentId`` field of ``IssueUpdateInput``, hence ``ISSUE_SET_PARENT``.
"""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.relation import (
    IssueRelationCreateResponse,
    IssueRelationDeleteResponse,
    IssueRelationsResponse,
    IssueSetParentResponse,
)

ISSUE_RELATIONS = Operation(
    name="IssueRelations",
    variables={"id": "String!"},
    response=IssueRelationsResponse,
    document="""
query IssueRelations($id: String!) {
    issue(id: $id) {
        id
        identifier
        relations {
            nodes {
                id
                type
                relatedIssue {
                    id
                    identifier
                    title
                }
            }
        }
        inverseRelations {
            nodes {
                id
                type
                issue {
                    id
                    identifier
                    title
                }
            }
        }
        parent {
            id
            identifier
            title
        }
        children {
            nodes {
                id
                identifier
                title
            }
        }
    }
}
""",
)

ISSUE_RELATION_CREATE = Operation(
    name="IssueRelationCreate",
    variables={"input": "IssueRelationCreateInput!"},
    response=IssueRelationCreateResponse,
    document="""
mutation IssueRelationCreate($input: IssueRelationCreateInput!) {
    issueRelationCreate(input: $input) {
        success
        issueRelation {
            id
            type
            issue {
                id
                identifier
                title
            }
            relatedIssue {
                id
                identifier
                title
            }
        }
    }
}
""",
)

ISSUE_RELATION_DELETE = Operation(
    name="IssueRelationDelete",
    variables={"id": "String!"},
    response=IssueRelationDeleteResponse,
    document="""
mutation IssueRelationDelete($id: String!) {
    issueRelationDelete(id: $id) {
        success
    }
}
""",
)

ISSUE_SET_PARENT = Operation(
    name="IssueSetParent",
    variables={"id": "String!", "input": "IssueUpdateInput!"},
    response=IssueSetParentResponse,
    document="""
mutation IssueSetParent($id: String!, $input: IssueUpdateInput!) {
    issueUpdate(id: $id, input: $input) {
        success
        issue {
            id
            identifier
            title
            parent {
                id
                identifier
                title
            }
        }
    }
}
""",
)
