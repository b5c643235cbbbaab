"""ContentMixin: documents, attachments, git links and issue relations."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING

from lin.api.queries import attachment as attachment_ops
from lin.api.queries import document as document_ops
from lin.api.queries import relation as relation_ops
from lin.errors import ApiError, NotFoundError, VariablesError
from lin.gitlinks import BRANCH_SUBTITLE, PR_SUBTITLE, GitLink, branch_url, filter_git_links, pr_title
from lin.models.base import to_input
from lin.models.inputs import AttachmentCreateInput, DocumentCreateInput, IssueRelationCreateInput
from lin.models.relation import NormalizedRelation
from lin.ws_base import DEFAULT_LIMIT, WorkspaceProtocol, ensure_success, eq

if TYPE_CHECKING:
    from lin.api.operations import Operation
    from lin.models.attachment import Attachment, AttachmentWithIssue
    from lin.models.document import Document, DocumentWithContent
    from lin.models.relation import FullIssueRelation, IssueWithParent

logger = logging.getLogger(__name__)

# CLI relation name -> (API type, swap issue and related issue)
RELATION_TYPES: dict[str, tuple[str, bool]] = {
    "blocks": ("blocks", False),
    "blocked_by": ("blocks", True),
    "blocked-by": ("blocks", True),
    "related": ("related", False),
    "duplicate": ("duplicate", False),
}
PARENT_TYPES = ("parent", "child")

PARENT_PREFIX = "parent:"
CHILD_PREFIX = "child:"


def relation_choices() -> list[str]:
    return [*PARENT_TYPES, *RELATION_TYPES]


def guess_content_type(path: Path) -> str:
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or "application/octet-stream"


class ContentMixin(WorkspaceProtocol):
    """Everything attached to issues and projects rather than structuring them."""

    # -- Documents ------------------------------------------------------------

    def list_documents(self, project: str | None = None, limit: int = DEFAULT_LIMIT) -> list[Document]:
        project_filter = {"project": {"id": eq(project)}} if project else None
        result = self.execute(document_ops.DOCUMENTS, {"first": limit, "filter": project_filter})
        return list(result.documents.nodes)

    def get_document(self, document_id: str) -> DocumentWithContent | None:
        return self.execute(document_ops.DOCUMENT, {"id": document_id}).document  # type: ignore[no-any-return]

    def create_document(
        self,
        title: str,
        *,
        content: str | None = None,
        project: str | None = None,
        icon: str | None = None,
        color: str | None = None,
    ) -> DocumentWithContent:
        if not title.strip():
            msg = "Document title cannot be empty"
            raise VariablesError(msg)
        data = DocumentCreateInput(title=title, content=content, project_id=project, icon=icon, color=color)
        payload = ensure_success(
            self.execute(document_ops.DOCUMENT_CREATE, {"input": to_input(data)}).document_create,
            "Document create",
        )
        if payload.document is None:
            msg = "Document creation succeeded but no document was returned"
            raise ApiError([msg])
        return payload.document  # type: ignore[no-any-return]

    def delete_document(self, document_id: str) -> str:
        result = self.execute(document_ops.DOCUMENT_DELETE, {"id": document_id})
        ensure_success(result.document_delete, "Document delete")
        return document_id

    # -- Attachments ----------------------------------------------------------

    def _issue_attachments(self, ref: str, operation: Operation) -> list[Attachment]:
        issue_id = self.resolve_issue_id(ref)
        issue = self.execute(operation, {"id": issue_id}).issue
        if issue is None:
            msg = f"Issue '{ref}' not found"
            raise NotFoundError(msg)
        return list(issue.attachments.nodes)

    def list_attachments(self, ref: str) -> list[Attachment]:
        return self._issue_attachments(ref, attachment_ops.ISSUE_ATTACHMENTS)

    def get_attachment(self, attachment_id: str) -> AttachmentWithIssue | None:
        return self.execute(attachment_ops.ATTACHMENT, {"id": attachment_id}).attachment  # type: ignore[no-any-return]

    def create_attachment(
        self,
        ref: str,
        title: str,
        url: str,
        *,
        subtitle: str | None = None,
    ) -> Attachment:
        issue_id = self.resolve_issue_id(ref)
        return self._create_attachment(AttachmentCreateInput(issue_id=issue_id, title=title, url=url, subtitle=subtitle))

    def _create_attachment(self, data: AttachmentCreateInput) -> Attachment:
        payload = ensure_success(
            self.execute(attachment_ops.ATTACHMENT_CREATE, {"input": to_input(data)}).attachment_create,
            "Attachment create",
        )
        if payload.attachment is None:
            msg = "Attachment creation succeeded but no attachment was returned"
            raise ApiError([msg])
        return payload.attachment  # type: ignore[no-any-return]

    def upload_attachment(self, ref: str, path: Path, *, title: str | None = None) -> Attachment:
        """Upload a local file and attach it to the issue.

        Three steps: ask Linear for a presigned URL, PUT the bytes there
        with the headers Linear returned, then attach the asset URL.
        """
        if not path.is_file():
            msg = f"File not found: {path}"
            raise VariablesError(msg)
        issue_id = self.resolve_issue_id(ref)
        content = path.read_bytes()
        content_type = guess_content_type(path)

        result = self.execute(
            attachment_ops.FILE_UPLOAD_CREATE,
            {"contentType": content_type, "filename": path.name, "size": len(content)},
        )
        upload = result.file_upload.upload_file
        if upload is None:
            msg = "File upload request returned no upload URL"
            raise ApiError([msg])

        headers = {"Content-Type": content_type, "Cache-Control": "public, max-age=31536000"}
        headers.update({h.key: h.value for h in upload.headers})
        self.client.put_file(upload.upload_url, content, headers)
        logger.info("Uploaded %s (%d bytes)", path.name, len(content))

        data = AttachmentCreateInput(issue_id=issue_id, title=title or path.name, url=upload.asset_url)
        return self._create_attachment(data)

    # -- Git links ------------------------------------------------------------

    def list_git_links(self, ref: str) -> list[GitLink]:
        return filter_git_links(self._issue_attachments(ref, attachment_ops.ISSUE_GIT_LINKS))

    def link_branch(self, ref: str, branch: str, repo: str | None = None) -> GitLink:
        if not branch.strip():
            msg = "Branch name cannot be empty"
            raise VariablesError(msg)
        issue_id = self.resolve_issue_id(ref)
        data = AttachmentCreateInput(
            issue_id=issue_id,
            title=branch,
            url=branch_url(branch, repo),
            subtitle=BRANCH_SUBTITLE,
        )
        return GitLink.from_attachment(self._create_attachment(data))

    def link_pr(self, ref: str, url: str) -> GitLink:
        issue_id = self.resolve_issue_id(ref)
        data = AttachmentCreateInput(issue_id=issue_id, title=pr_title(url), url=url, subtitle=PR_SUBTITLE)
        return GitLink.from_attachment(self._create_attachment(data))

    # -- Relations ------------------------------------------------------------

    def list_relations(self, ref: str) -> list[NormalizedRelation]:
        """Parent, children, outgoing and incoming relations as one flat list.

        Parent/child rows get synthetic ids (``parent:<id>``, ``child:<id>``)
        so ``remove_relation`` can tell them apart from real relation ids.
        """
        issue_id = self.resolve_issue_id(ref)
        issue = self.execute(relation_ops.ISSUE_RELATIONS, {"id": issue_id}).issue
        if issue is None:
            msg = f"Issue '{ref}' not found"
            raise NotFoundError(msg)

        rows: list[NormalizedRelation] = []
        if issue.parent is not None:
            rows.append(NormalizedRelation(id=f"{PARENT_PREFIX}{issue.parent.id}", type="parent", issue=issue.parent))
        rows.extend(NormalizedRelation(id=f"{CHILD_PREFIX}{c.id}", type="child", issue=c) for c in issue.children.nodes)
        for rel in issue.relations.nodes:
            if rel.related_issue is not None:
                rows.append(NormalizedRelation(id=rel.id, type=rel.type, issue=rel.related_issue))
        for rel in issue.inverse_relations.nodes:
            if rel.issue is not None:
                kind = "blocked_by" if rel.type == "blocks" else f"{rel.type}_inverse"
                rows.append(NormalizedRelation(id=rel.id, type=kind, issue=rel.issue))
        return rows

    def add_relation(self, ref: str, related: str, relation_type: str) -> FullIssueRelation | IssueWithParent:
        """Link two issues.

        ``parent`` makes *related* the parent of *ref*; ``child`` the reverse.
        ``blocked_by`` is stored as ``blocks`` with the two issues swapped.
        """
        kind = relation_type.strip().lower()
        if kind not in PARENT_TYPES and kind not in RELATION_TYPES:
            msg = f"Invalid relation type '{relation_type}': use one of {', '.join(relation_choices())}"
            raise VariablesError(msg)
        source_id = self.resolve_issue_id(ref)
        target_id = self.resolve_issue_id(related)

        if kind == "parent":
            return self.set_parent(source_id, target_id)
        if kind == "child":
            return self.set_parent(target_id, source_id)

        api_type, swap = RELATION_TYPES[kind]
        issue_id, related_id = (target_id, source_id) if swap else (source_id, target_id)
        data = IssueRelationCreateInput(issue_id=issue_id, related_issue_id=related_id, type=api_type)
        payload = ensure_success(
            self.execute(relation_ops.ISSUE_RELATION_CREATE, {"input": to_input(data)}).issue_relation_create,
            "Relation create",
        )
        if payload.issue_relation is None:
            msg = "Relation creation succeeded but no relation was returned"
            raise ApiError([msg])
        return payload.issue_relation  # type: ignore[no-any-return]

    def set_parent(self, child_id: str, parent_id: str | None) -> IssueWithParent:
        """Set or (with ``None``) clear an issue's parent."""
        result = self.execute(relation_ops.ISSUE_SET_PARENT, {"id": child_id, "input": {"parentId": parent_id}})
        payload = ensure_success(result.issue_update, "Set parent")
        if payload.issue is None:
            msg = "Parent update succeeded but no issue was returned"
            raise ApiError([msg])
        return payload.issue  # type: ignore[no-any-return]

    def remove_relation(self, relation_id: str) -> str:
        if relation_id.startswith(CHILD_PREFIX):
            self.set_parent(relation_id[len(CHILD_PREFIX) :], None)
            return relation_id
        if relation_id.startswith(PARENT_PREFIX):
            msg = "To remove a parent link, list the parent's relations and remove its 'child:' entry"
            raise VariablesError(msg)
        result = self.execute(relation_ops.ISSUE_RELATION_DELETE, {"id": relation_id})
        ensure_success(result.issue_relation_delete, "Relation delete")
        return relation_id
