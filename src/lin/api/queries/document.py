"""Document queries and mutations."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.document import (
    DocumentCreateResponse,
    DocumentDeleteResponse,
    DocumentResponse,
    DocumentsResponse,
)

DOCUMENTS = Operation(
    name="Documents",
    variables={"first": "Int", "filter": "DocumentFilter"},
    response=DocumentsResponse,
    document="""
query Documents($first: Int, $filter: DocumentFilter) {
    documents(first: $first, filter: $filter) {
        nodes {
            id
            title
            icon
            color
            createdAt
            updatedAt
            creator {
                id
                name
                email
                displayName
                active
            }
            project {
                id
                name
            }
        }
    }
}
""",
)

DOCUMENT = Operation(
    name="Document",
    variables={"id": "String!"},
    response=DocumentResponse,
    document="""
query Document($id: String!) {
    document(id: $id) {
        id
        title
        content
        icon
        color
        createdAt
        updatedAt
        creator {
            id
            name
            email
            displayName
            active
        }
        project {
            id
            name
        }
    }
}
""",
)

DOCUMENT_CREATE = Operation(
    name="DocumentCreate",
    variables={"input": "DocumentCreateInput!"},
    response=DocumentCreateResponse,
    document="""
mutation DocumentCreate($input: DocumentCreateInput!) {
    documentCreate(input: $input) {
        success
        document {
            id
            title
            content
            icon
            color
            createdAt
            updatedAt
            creator {
                id
                name
                email
                displayName
                active
            }
            project {
                id
                name
            }
        }
    }
}
""",
)

DOCUMENT_DELETE = Operation(
    name="DocumentDelete",
    variables={"id": "String!"},
    response=DocumentDeleteResponse,
    document="""
mutation DocumentDelete($id: String!) {
    documentDelete(id: $id) {
        success
    }
}
""",
)
