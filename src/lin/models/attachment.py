"""Attachments and presigned file uploads."""

from __future__ import annotations

from typing import Any

from lin.models.base import Connection, Record
from lin.models.user import User


class AttachmentIssue(Record):
    id: str
    identifier: str


class Attachment(Record):
    id: str
    title: str
    url: str
    created_at: str
    updated_at: str
    subtitle: str | None = None
    metadata: dict[str, Any] | None = None
    creator: User | None = None


class AttachmentWithIssue(Record):
    id: str
    title: str
    url: str
    created_at: str
    updated_at: str
    subtitle: str | None = None
    metadata: dict[str, Any] | None = None
    creator: User | None = None
    issue: AttachmentIssue | None = None


class IssueAttachments(Record):
    id: str
    identifier: str
    attachments: Connection[Attachment]


class IssueAttachmentsResponse(Record):
    issue: IssueAttachments | None = None


class AttachmentResponse(Record):
    attachment: AttachmentWithIssue | None = None


class AttachmentCreatePayload(Record):
    success: bool
    attachment: Attachment | None = None


class AttachmentCreateResponse(Record):
    attachment_create: AttachmentCreatePayload


class UploadHeader(Record):
    key: str
    value: str


class UploadFile(Record):
    upload_url: str
    asset_url: str
    headers: list[UploadHeader]


class FileUploadPayload(Record):
    upload_file: UploadFile | None = None


class FileUploadResponse(Record):
    file_upload: FileUploadPayload
