"""Comment mutations. Comment listing lives with the issue queries."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.comment import CommentCreateResponse

COMMENT_CREATE = Operation(
    name="CommentCreate",
    variables={"input": "CommentCreateInput!"},
    response=CommentCreateResponse,
    document="""
mutation CommentCreate($input: CommentCreateInput!) {
    commentCreate(input: $input) {
        success
        comment {
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
""",
)
