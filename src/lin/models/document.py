"""Documents. List results omit ``content``; single fetches include it."""

from __future__ import annotations

from lin.models.base import Connection, MutationResult, Record
from lin.models.user import User


class DocumentProject(Record):
    id: str
    name: str


class Document(Record):
    id: str
    title: str
    created_at: str
    updated_at: str
    icon: str | None = None
    color: str | None = None
    creator: User | None = None
    project: DocumentProject | None = None


class DocumentWithContent(Record):
    id: str
    title: str
    created_at: str
    updated_at: str
    content: str | None = None
    icon: str | None = None
    color: str | None = None
    creator: User | None = None
    project: DocumentProject | None = None


class DocumentsResponse(Record):
    documents: Connection[Document]


class DocumentResponse(Record):
    document: DocumentWithContent | None = None


class DocumentCreatePayload(Record):
    success: bool
    document: DocumentWithContent | None = None


class DocumentCreateResponse(Record):
    document_create: DocumentCreatePayload


class DocumentDeleteResponse(Record):
    document_delete: MutationResult
