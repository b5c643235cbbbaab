"""Attachment queries, the attachment mutation, and presigned uploads."""

from __future__ import annotations

from lin.api.operations import Operation
from lin.models.attachment import (
    AttachmentCreateResponse,
    AttachmentResponse,
    FileUploadResponse,
    IssueAttachmentsResponse,
)

ISSUE_ATTACHMENTS = Operation(
    name="IssueAttachments",
    variables={"id": "String!"},
    response=IssueAttachmentsResponse,
    document="""
query IssueAttachments($id: String!) {
    issue(id: $id) {
        id
        identifier
        attachments {
            nodes {
                id
                title
                subtitle
                url
                metadata
                createdAt
                updatedAt
                creator {
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

ATTACHMENT = Operation(
    name="Attachment",
    variables={"id": "String!"},
    response=AttachmentResponse,
    document="""
query Attachment($id: String!) {
    attachment(id: $id) {
        id
        title
        subtitle
        url
        metadata
        createdAt
        updatedAt
        creator {
            id
            name
            email
            displayName
            active
        }
        issue {
            id
            identifier
        }
    }
}
""",
)

ATTACHMENT_CREATE = Operation(
    name="AttachmentCreate",
    variables={"input": "AttachmentCreateInput!"},
    response=AttachmentCreateResponse,
    document="""
mutation AttachmentCreate($input: AttachmentCreateInput!) {
    attachmentCreate(input: $input) {
        success
        attachment {
            id
            title
            subtitle
            url
            metadata
            createdAt
            updatedAt
            creator {
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

# Same selection as ISSUE_ATTACHMENTS. The API has no git-link filter, so
# lin.gitlinks narrows the result client-side.
ISSUE_GIT_LINKS = Operation(
    name="IssueGitLinks",
    variables={"id": "String!"},
    response=IssueAttachmentsResponse,
    document="""
query IssueGitLinks($id: String!) {
    issue(id: $id) {
        id
        identifier
        attachments {
            nodes {
                id
                title
                subtitle
                url
                metadata
                createdAt
                updatedAt
                creator {
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

FILE_UPLOAD_CREATE = Operation(
    name="FileUploadCreate",
    variables={"contentType": "String!", "filename": "String!", "size": "Int!"},
    response=FileUploadResponse,
    document="""
mutation FileUploadCreate($contentType: String!, $filename: String!, $size: Int!) {
    fileUpload(contentType: $contentType, filename: $filename, size: $size) {
        uploadFile {
            uploadUrl
            assetUrl
            headers {
                key
                value
            }
        }
    }
}
""",
)
