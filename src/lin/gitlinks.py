"""Git branch and pull-request links.

Linear stores these as ordinary attachments; there is no server-side
"git link" type. Recognition is a URL/subtitle heuristic applied to the
decoded attachments, and link creation is an ``attachmentCreate`` with a
conventional subtitle.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Literal

from lin.models.attachment import Attachment
from lin.models.base import Record

LinkType = Literal["branch", "pull_request", "unknown"]

BRANCH_SUBTITLE = "Git branch"
PR_SUBTITLE = "Pull Request"

_GIT_URL_MARKERS = (
    "github.com",
    "gitlab.com",
    "gitlab.",
    "bitbucket.org",
    "bitbucket.",
    "/tree/",
    "/pull/",
    "/merge_requests/",
    "/branch/",
)
_PR_MARKERS = ("/pull/", "/pulls/", "/merge_requests/")
_BRANCH_MARKERS = ("/tree/", "/-/tree/", "/src/branch/", "/branch/")
_PR_NUMBER_RE = re.compile(r"/(?:pull|merge_requests)/(\d+)")


class GitLink(Record):
    id: str
    title: str
    url: str
    link_type: LinkType
    created_at: str
    subtitle: str | None = None

    @classmethod
    def from_attachment(cls, attachment: Attachment) -> GitLink:
        return cls(
            id=attachment.id,
            title=attachment.title,
            url=attachment.url,
            link_type=classify_link(attachment.url),
            created_at=attachment.created_at,
            subtitle=attachment.subtitle,
        )


def is_git_url(url: str) -> bool:
    lowered = url.lower()
    return any(marker in lowered for marker in _GIT_URL_MARKERS)


def is_git_link(attachment: Attachment) -> bool:
    return is_git_url(attachment.url) or attachment.subtitle in (BRANCH_SUBTITLE, PR_SUBTITLE)


def classify_link(url: str) -> LinkType:
    lowered = url.lower()
    if any(marker in lowered for marker in _PR_MARKERS):
        return "pull_request"
    if any(marker in lowered for marker in _BRANCH_MARKERS):
        return "branch"
    return "unknown"


def filter_git_links(attachments: Iterable[Attachment]) -> list[GitLink]:
    """Keep git-looking attachments, in their original order."""
    return [GitLink.from_attachment(a) for a in attachments if is_git_link(a)]


def branch_url(branch: str, repo: str | None = None) -> str:
    """``<repo>/tree/<branch>``, or ``branch://<branch>`` without a repo."""
    if repo:
        return f"{repo.rstrip('/')}/tree/{branch}"
    return f"branch://{branch}"


def pr_title(url: str) -> str:
    match = _PR_NUMBER_RE.search(url)
    if match:
        return f"PR #{match.group(1)}"
    return "Pull Request"
