"""CLI tests for org management, settings and shell completion."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests._fakes import RunCli, json_output


def _stored(config_dir: Path) -> dict[str, object]:
    return json.loads((config_dir / "config.json").read_text())  # type: ignore[no-any-return]


class TestOrgAdd:
    def test_first_org_becomes_default(self, run_cli: RunCli, isolated_env: Path) -> None:
        result = run_cli("org", "add", "work", "--token", "lin_api_work0123456789", token=False)
        assert result.exit_code == 0, result.output
        assert f"Added organization 'work' to {isolated_env / 'config.json'}" in result.output
        assert "Set as default organization" in result.output
        assert _stored(isolated_env) == {
            "organizations": {"work": "lin_api_work0123456789"},
            "default_org": "work",
        }

    def test_second_org_keeps_default(self, run_cli: RunCli, isolated_env: Path) -> None:
        run_cli("org", "add", "work", "--token", "lin_api_a", token=False)
        result = run_cli("org", "add", "home", "--token", "lin_api_b", token=False)
        assert "Set as default" not in result.output
        assert _stored(isolated_env)["default_org"] == "work"

    def test_prompts_for_token(self, run_cli: RunCli, isolated_env: Path) -> None:
        result = run_cli("org", "add", "work", token=False, input="lin_api_prompted\n")
        assert result.exit_code == 0, result.output
        assert _stored(isolated_env)["organizations"] == {"work": "lin_api_prompted"}
        assert "lin_api_prompted" not in result.output

    def test_json(self, run_cli: RunCli, isolated_env: Path) -> None:
        result = run_cli("--json", "org", "add", "work", "--token", "lin_api_a", token=False)
        assert json_output(result) == {
            "success": True,
            "data": {"name": "work", "default": True, "path": str(isolated_env / "config.json")},
        }

    def test_writes_global_file_only(self, run_cli: RunCli, isolated_env: Path, tmp_path: Path) -> None:
        local = tmp_path / "work" / ".lin" / "config.json"
        local.parent.mkdir(parents=True)
        local.write_text(json.dumps({"organizations": {"local": "lin_api_local"}}))
        run_cli("org", "add", "work", "--token", "lin_api_a", token=False)
        assert "local" not in _stored(isolated_env)["organizations"]  # type: ignore[operator]
        assert json.loads(local.read_text()) == {"organizations": {"local": "lin_api_local"}}


class TestOrgListAndDefault:
    def test_list_masks_tokens(self, run_cli: RunCli) -> None:
        run_cli("org", "add", "work", "--token", "lin_api_1234567890abcdef", token=False)
        run_cli("org", "add", "home", "--token", "short", token=False)
        result = run_cli("org", "list", token=False)
        assert result.exit_code == 0
        assert "work (default)\n  Token: lin_api_1234..." in result.output
        assert "home\n  Token: *****" in result.output
        assert "1234567890abcdef" not in result.output

    def test_list_empty(self, run_cli: RunCli) -> None:
        result = run_cli("org", "list", token=False)
        assert "No organizations configured" in result.output

    def test_list_json(self, run_cli: RunCli) -> None:
        run_cli("org", "add", "work", "--token", "lin_api_1234567890abcdef", token=False)
        result = run_cli("--json", "org", "list", token=False)
        assert json_output(result)["data"] == [{"name": "work", "token": "lin_api_1234...", "default": True}]

    def test_set_default(self, run_cli: RunCli, isolated_env: Path) -> None:
        run_cli("org", "add", "work", "--token", "lin_api_a", token=False)
        run_cli("org", "add", "home", "--token", "lin_api_b", token=False)
        result = run_cli("org", "set-default", "home", token=False)
        assert result.output.strip() == "Default organization set to 'home'"
        assert _stored(isolated_env)["default_org"] == "home"

    def test_set_default_unknown(self, run_cli: RunCli) -> None:
        result = run_cli("org", "set-default", "nope", token=False)
        assert result.exit_code == 1
        assert "Organization 'nope' not found" in result.output

    def test_remove(self, run_cli: RunCli, isolated_env: Path) -> None:
        run_cli("org", "add", "work", "--token", "lin_api_a", token=False)
        result = run_cli("org", "remove", "work", token=False)
        assert result.output.strip() == "Removed organization 'work'"
        assert _stored(isolated_env) == {"organizations": {}, "default_org": None}

    def test_remove_unknown_json(self, run_cli: RunCli) -> None:
        result = run_cli("--json", "org", "remove", "nope", token=False)
        assert result.exit_code == 1
        assert json_output(result)["error"]["kind"] == "config"


class TestOrgInfo:
    def test_no_config(self, run_cli: RunCli, isolated_env: Path) -> None:
        result = run_cli("--json", "org", "info", token=False)
        data = json_output(result)["data"]
        assert data["config_path"] == str(isolated_env / "config.json")
        assert data["local_config_path"] is None
        assert data["default_org"] is None
        assert data["token_available"] is False
        assert data["problems"] == []

    def test_env_token_counts(self, run_cli: RunCli, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINEAR_API_TOKEN", "lin_api_env")
        result = run_cli("--json", "org", "info", token=False)
        assert json_output(result)["data"]["token_available"] is True

    def test_human_lists_problems(self, run_cli: RunCli, isolated_env: Path) -> None:
        isolated_env.mkdir(parents=True)
        config = {"organizations": {"work": "lin_api_x"}, "default_org": "gone"}
        (isolated_env / "config.json").write_text(json.dumps(config))
        result = run_cli("org", "info", token=False)
        assert result.exit_code == 0
        assert "Default organization: gone" in result.output
        assert "Token available: no" in result.output
        assert "Problems:\n  - Default organization 'gone'" in result.output

    def test_oauth_style_token_is_not_a_problem(self, run_cli: RunCli, isolated_env: Path) -> None:
        isolated_env.mkdir(parents=True)
        (isolated_env / "config.json").write_text(json.dumps({"organizations": {"work": "abc"}, "default_org": "work"}))
        result = run_cli("--json", "org", "info", token=False)
        assert json_output(result)["data"]["problems"] == []


class TestOrgLocalScope:
    def test_add_local(self, run_cli: RunCli, isolated_env: Path, tmp_path: Path) -> None:
        local = tmp_path / "work" / ".lin" / "config.json"
        result = run_cli("org", "add", "proj", "--token", "lin_api_p", "--local", token=False)
        assert result.exit_code == 0, result.output
        assert f"Added organization 'proj' to {local}" in result.output
        assert _stored(local.parent) == {"organizations": {"proj": "lin_api_p"}, "default_org": "proj"}
        assert not (isolated_env / "config.json").exists()

    def test_add_local_reuses_nearest_file(
        self, run_cli: RunCli, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        local = tmp_path / "work" / ".lin" / "config.json"
        local.parent.mkdir(parents=True)
        local.write_text(json.dumps({"organizations": {"a": "t"}, "default_org": "a"}))
        nested = tmp_path / "work" / "src"
        nested.mkdir()
        monkeypatch.chdir(nested)
        run_cli("org", "add", "b", "--token", "u", "--local", token=False)
        assert _stored(local.parent)["organizations"] == {"a": "t", "b": "u"}
        assert not (nested / ".lin").exists()

    def test_set_default_local_accepts_global_org(self, run_cli: RunCli, isolated_env: Path, tmp_path: Path) -> None:
        run_cli("org", "add", "work", "--token", "lin_api_a", token=False)
        run_cli("org", "add", "home", "--token", "lin_api_b", token=False)
        result = run_cli("org", "set-default", "home", "--local", token=False)
        assert result.exit_code == 0, result.output
        assert _stored(tmp_path / "work" / ".lin") == {"organizations": {}, "default_org": "home"}
        assert _stored(isolated_env)["default_org"] == "work"

        info = run_cli("--json", "org", "info", token=False)
        assert json_output(info)["data"]["default_org"] == "home"

    def test_set_default_local_unknown(self, run_cli: RunCli, tmp_path: Path) -> None:
        result = run_cli("org", "set-default", "nope", "--local", token=False)
        assert result.exit_code == 1
        assert not (tmp_path / "work" / ".lin" / "config.json").exists()


class TestConfigCommands:
    def test_list_unset(self, run_cli: RunCli) -> None:
        result = run_cli("config", "list", token=False)
        assert result.exit_code == 0
        assert result.output == "default-org: (not set)\ncurrent-team: (not set)\n"

    def test_set_get_unset(self, run_cli: RunCli, isolated_env: Path) -> None:
        result = run_cli("config", "set", "current-team", "eng", token=False)
        assert result.exit_code == 0, result.output
        assert result.output.strip() == f"Set current-team to 'ENG' in {isolated_env / 'config.json'}"
        assert run_cli("config", "get", "current-team", token=False).output.strip() == "ENG"

        run_cli("config", "unset", "current-team", token=False)
        assert "current_team" not in _stored(isolated_env)

    def test_get_unset_key(self, run_cli: RunCli) -> None:
        result = run_cli("--json", "config", "get", "default-org", token=False)
        assert result.exit_code == 1
        assert json_output(result)["error"]["message"] == "'default-org' is not set"

    def test_unknown_key_is_usage_error(self, run_cli: RunCli) -> None:
        result = run_cli("config", "get", "colour", token=False)
        assert result.exit_code == 2

    def test_set_default_org_requires_known_org(self, run_cli: RunCli) -> None:
        result = run_cli("config", "set", "default-org", "nope", token=False)
        assert result.exit_code == 1
        assert "Organization 'nope' not found" in result.output

    def test_list_shows_sources(self, run_cli: RunCli) -> None:
        run_cli("org", "add", "work", "--token", "lin_api_a", token=False)
        run_cli("config", "set", "current-team", "ops", "--local", token=False)
        result = run_cli("--json", "config", "list", token=False)
        assert json_output(result)["data"] == [
            {"key": "default-org", "value": "work", "source": "global"},
            {"key": "current-team", "value": "OPS", "source": "local"},
        ]

    def test_json_set(self, run_cli: RunCli, tmp_path: Path) -> None:
        result = run_cli("--json", "config", "set", "current-team", "eng", "--local", token=False)
        local = tmp_path / "work" / ".lin" / "config.json"
        assert json_output(result)["data"] == {"key": "current-team", "value": "ENG", "path": str(local)}

    def test_validate_clean(self, run_cli: RunCli) -> None:
        run_cli("org", "add", "work", "--token", "lin_api_a", token=False)
        result = run_cli("config", "validate", token=False)
        assert result.exit_code == 0
        assert result.output.strip() == "Configuration is valid."

    def test_validate_reports_problems(self, run_cli: RunCli, isolated_env: Path) -> None:
        isolated_env.mkdir(parents=True)
        (isolated_env / "config.json").write_text(json.dumps({"organizations": {"work": ""}, "default_org": "gone"}))
        result = run_cli("config", "validate", token=False)
        assert result.exit_code == 0
        assert result.output.startswith("Configuration has problems:\n")
        assert "  - Token for organization 'work' is empty" in result.output

        data = json_output(run_cli("--json", "config", "validate", token=False))["data"]
        assert data["valid"] is False
        assert len(data["problems"]) == 2


class TestCompletions:
    @pytest.mark.parametrize(("shell", "marker"), [("bash", "complete "), ("zsh", "compdef"), ("fish", "complete ")])
    def test_script(self, run_cli: RunCli, shell: str, marker: str) -> None:
        result = run_cli("completions", shell, token=False)
        assert result.exit_code == 0
        assert marker in result.output
        assert "_LIN_COMPLETE" in result.output

    def test_unknown_shell(self, run_cli: RunCli) -> None:
        result = run_cli("completions", "tcsh", token=False)
        assert result.exit_code == 2
