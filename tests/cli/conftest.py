"""Fixtures for CLI interface tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner, Result

from lin.cli import cli
from tests._fakes import TEST_TOKEN, FakeLinear, RunCli


@pytest.fixture
def run_cli(cli_runner: CliRunner, fake_linear: FakeLinear) -> RunCli:
    """Invoke ``lin`` against the fake endpoint with a token on the command line."""

    def run(*args: str, token: bool = True, input: str | None = None) -> Result:
        argv = ["--api-token", TEST_TOKEN, *args] if token else list(args)
        return cli_runner.invoke(cli, argv, obj={"transport": fake_linear.transport}, input=input)

    return run
