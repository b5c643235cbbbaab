"""Shared pytest fixtures for lin tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lin.core import Workspace
from tests._fakes import TEST_TOKEN, FakeLinear


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and logs at tmp_path and hide any real credentials."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("LIN_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("LINEAR_API_TOKEN", raising=False)
    monkeypatch.delenv("LIN_API_URL", raising=False)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return config_dir


@pytest.fixture(autouse=True)
def _reset_lin_logger() -> Generator[None, None, None]:
    yield
    logger = logging.getLogger("lin")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture
def fake_linear() -> FakeLinear:
    return FakeLinear()


@pytest.fixture
def workspace(fake_linear: FakeLinear) -> Generator[Workspace, None, None]:
    """Workspace wired to the fake endpoint."""
    ws = Workspace.connect(TEST_TOKEN, url="https://linear.test/graphql", transport=fake_linear.transport)
    yield ws
    ws.close()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()
