"""CLI commands for attachments and documents."""

from __future__ import annotations

from pathlib import Path

import click

from lin.cli_common import as_json, open_workspace
from lin.errors import NotFoundError
from lin.output import emit, emit_message

# -- Attachments ----------------------------------------------------------------


@click.group("attachment")
def attachment_group() -> None:
    """Files and links attached to issues."""


@attachment_group.command("list")
@click.argument("issue_ref")
@click.pass_context
def list_attachments(ctx: click.Context, issue_ref: str) -> None:
    """List an issue's attachments."""
    with open_workspace(ctx) as ws:
        emit(ws.list_attachments(issue_ref), as_json(ctx))


@attachment_group.command("get")
@click.argument("attachment_id")
@click.pass_context
def get_attachment(ctx: click.Context, attachment_id: str) -> None:
    """Show one attachment."""
    with open_workspace(ctx) as ws:
        attachment = ws.get_attachment(attachment_id)
        if attachment is None:
            raise NotFoundError(f"Attachment '{attachment_id}' not found")
        emit(attachment, as_json(ctx))


@attachment_group.command("create")
@click.argument("issue_ref")
@click.argument("url")
@click.option("--title", required=True, help="Attachment title")
@click.option("--subtitle", default=None, help="Shown under the title in Linear")
@click.pass_context
def create_attachment(ctx: click.Context, issue_ref: str, url: str, title: str, subtitle: str | None) -> None:
    """Attach a URL to an issue."""
    with open_workspace(ctx) as ws:
        emit(ws.create_attachment(issue_ref, title, url, subtitle=subtitle), as_json(ctx))


@attachment_group.command("upload")
@click.argument("issue_ref")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--title", default=None, help="Attachment title (default: file name)")
@click.pass_context
def upload(ctx: click.Context, issue_ref: str, file: Path, title: str | None) -> None:
    """Upload a local file and attach it to an issue."""
    with open_workspace(ctx) as ws:
        attachment = ws.upload_attachment(issue_ref, file, title=title)
        emit(attachment, as_json(ctx), human=lambda a: f"Uploaded {file.name} to {issue_ref}\n  URL: {a.url}")


# -- Documents ------------------------------------------------------------------


@click.group("document")
def document_group() -> None:
    """Project documents."""


@document_group.command("list")
@click.option("--project", default=None, help="Only documents in this project (id)")
@click.option("--limit", "-l", default=50, type=int, help="Max results (default 50)")
@click.pass_context
def list_documents(ctx: click.Context, project: str | None, limit: int) -> None:
    """List documents."""
    with open_workspace(ctx) as ws:
        emit(ws.list_documents(project, limit=limit), as_json(ctx))


@document_group.command("get")
@click.argument("document_id")
@click.pass_context
def get_document(ctx: click.Context, document_id: str) -> None:
    """Show a document and its content."""
    with open_workspace(ctx) as ws:
        document = ws.get_document(document_id)
        if document is None:
            raise NotFoundError(f"Document '{document_id}' not found")
        emit(document, as_json(ctx))


@document_group.command("create")
@click.argument("title")
@click.option("--content", "-c", default=None, help="Markdown content")
@click.option("--project", default=None, help="Project id")
@click.option("--icon", default=None, help="Icon name or emoji")
@click.option("--color", default=None, help="Icon color (hex)")
@click.pass_context
def create_document(
    ctx: click.Context,
    title: str,
    content: str | None,
    project: str | None,
    icon: str | None,
    color: str | None,
) -> None:
    """Create a document."""
    with open_workspace(ctx) as ws:
        document = ws.create_document(title, content=content, project=project, icon=icon, color=color)
        emit(document, as_json(ctx), human=lambda d: f"Created document {d.title}\n  ID: {d.id}")


@document_group.command("delete")
@click.argument("document_id")
@click.pass_context
def delete_document(ctx: click.Context, document_id: str) -> None:
    """Delete a document."""
    with open_workspace(ctx) as ws:
        deleted = ws.delete_document(document_id)
        emit_message(f"Deleted document {deleted}", as_json(ctx), {"id": deleted})


def register(cli: click.Group) -> None:
    """Register attachment and document commands."""
    cli.add_command(attachment_group)
    cli.add_command(document_group)
