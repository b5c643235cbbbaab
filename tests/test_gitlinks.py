"""Tests for git branch / pull request link recognition."""

from __future__ import annotations

import pytest

from lin.gitlinks import (
    BRANCH_SUBTITLE,
    GitLink,
    branch_url,
    classify_link,
    filter_git_links,
    is_git_url,
    pr_title,
)
from lin.models.attachment import Attachment
from lin.models.base import decode
from tests._fakes import attachment_node


def _attachment(url: str, subtitle: str | None = None, node_id: str = "att") -> Attachment:
    return decode(Attachment, attachment_node(url, subtitle=subtitle, node_id=node_id))


class TestFilter:
    def test_selects_first_second_and_fourth(self) -> None:
        attachments = [
            _attachment("https://github.com/x/y/pull/12", node_id="a1"),
            _attachment("https://github.com/x/y/tree/feature", node_id="a2"),
            _attachment("https://example.com/doc.pdf", node_id="a3"),
            _attachment("https://internal.example.com/refs/feature", subtitle=BRANCH_SUBTITLE, node_id="a4"),
        ]
        links = filter_git_links(attachments)
        assert [link.id for link in links] == ["a1", "a2", "a4"]
        assert [link.link_type for link in links] == ["pull_request", "branch", "unknown"]

    def test_pull_request_subtitle_counts(self) -> None:
        links = filter_git_links([_attachment("https://review.example.com/42", subtitle="Pull Request")])
        assert len(links) == 1

    def test_empty(self) -> None:
        assert filter_git_links([]) == []


class TestClassify:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://github.com/o/r/pull/1", "pull_request"),
            ("https://gitlab.com/o/r/-/merge_requests/9", "pull_request"),
            ("https://github.com/o/r/tree/main", "branch"),
            ("https://gitea.example.com/o/r/src/branch/dev", "branch"),
            ("branch://feature/login", "unknown"),
        ],
    )
    def test_classify(self, url: str, expected: str) -> None:
        assert classify_link(url) == expected

    def test_is_git_url_is_case_insensitive(self) -> None:
        assert is_git_url("https://GitHub.com/o/r")
        assert not is_git_url("https://example.com/page")

    def test_from_attachment(self) -> None:
        link = GitLink.from_attachment(_attachment("https://github.com/o/r/pull/3", subtitle="Pull Request"))
        assert link.link_type == "pull_request"
        assert link.subtitle == "Pull Request"


class TestHelpers:
    def test_branch_url_with_repo(self) -> None:
        assert branch_url("feat/x", "https://github.com/o/r/") == "https://github.com/o/r/tree/feat/x"

    def test_branch_url_without_repo(self) -> None:
        assert branch_url("feat/x") == "branch://feat/x"

    def test_pr_title(self) -> None:
        assert pr_title("https://github.com/o/r/pull/57") == "PR #57"
        assert pr_title("https://gitlab.com/o/r/-/merge_requests/8") == "PR #8"
        assert pr_title("https://example.com/review") == "Pull Request"
