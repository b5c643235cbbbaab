"""Tests for the organization token store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lin.config import (
    Config,
    config_dir,
    find_local_config,
    global_config_path,
    local_config_target,
    mask_token,
    scoped_config_path,
    write_atomic,
)
from lin.errors import ConfigError


def _write(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))
    return path


class TestConfigDir:
    def test_explicit_dir(self, tmp_path: Path) -> None:
        assert config_dir({"LIN_CONFIG_DIR": str(tmp_path)}) == tmp_path

    def test_xdg(self, tmp_path: Path) -> None:
        assert config_dir({"XDG_CONFIG_HOME": str(tmp_path)}) == tmp_path / "lin"

    def test_home_fallback(self) -> None:
        assert config_dir({}) == Path.home() / ".config" / "lin"

    def test_global_path_uses_env(self, isolated_env: Path) -> None:
        assert global_config_path() == isolated_env / "config.json"


class TestLoad:
    def test_missing_file_is_empty(self) -> None:
        config = Config.load()
        assert config.organizations == {}
        assert config.default_org is None

    def test_corrupt_json_raises(self, isolated_env: Path) -> None:
        isolated_env.mkdir(parents=True)
        (isolated_env / "config.json").write_text("{not json")
        with pytest.raises(ConfigError, match="Failed to parse"):
            Config.load()

    def test_wrong_shape_raises(self, isolated_env: Path) -> None:
        _write(isolated_env / "config.json", {"organizations": ["a", "b"]})
        with pytest.raises(ConfigError, match="organizations"):
            Config.load()

    def test_local_overrides_global(self, isolated_env: Path, tmp_path: Path) -> None:
        _write(
            isolated_env / "config.json",
            {"organizations": {"work": "lin_api_global", "home": "lin_api_home"}, "default_org": "home"},
        )
        project = tmp_path / "project"
        nested = project / "src" / "pkg"
        nested.mkdir(parents=True)
        _write(project / ".lin" / "config.json", {"organizations": {"work": "lin_api_local"}, "default_org": "work"})

        config = Config.load(cwd=nested)
        assert config.organizations == {"work": "lin_api_local", "home": "lin_api_home"}
        assert config.default_org == "work"

    def test_local_without_default_keeps_global_default(self, isolated_env: Path, tmp_path: Path) -> None:
        _write(isolated_env / "config.json", {"organizations": {"home": "lin_api_home"}, "default_org": "home"})
        _write(tmp_path / "work" / ".lin" / "config.json", {"organizations": {"work": "lin_api_w"}})
        assert Config.load().default_org == "home"

    def test_find_local_config_none(self, tmp_path: Path) -> None:
        assert find_local_config(tmp_path / "work") is None


class TestSave:
    def test_round_trip(self, isolated_env: Path) -> None:
        config = Config()
        config.add_org("work", "lin_api_1234567890abc")
        path = config.save()
        assert path == isolated_env / "config.json"
        assert Config.load_file(path) == config

    def test_sorted_and_readable(self, isolated_env: Path) -> None:
        config = Config(organizations={"zeta": "t1", "alpha": "t2"}, default_org="zeta")
        config.save()
        raw = json.loads((isolated_env / "config.json").read_text())
        assert list(raw["organizations"]) == ["alpha", "zeta"]
        assert raw["default_org"] == "zeta"

    def test_write_atomic_leaves_no_temp(self, tmp_path: Path) -> None:
        target = tmp_path / "config.json"
        write_atomic(target, "{}")
        assert target.read_text() == "{}"
        assert not (tmp_path / "config.json.tmp").exists()


class TestOrganizations:
    def test_first_org_becomes_default(self) -> None:
        config = Config()
        assert config.add_org("work", "lin_api_a") is True
        assert config.add_org("home", "lin_api_b") is False
        assert config.default_org == "work"
        assert config.list_orgs() == ["home", "work"]

    def test_add_rejects_empty(self) -> None:
        with pytest.raises(ConfigError):
            Config().add_org("", "lin_api_a")
        with pytest.raises(ConfigError):
            Config().add_org("work", "")

    def test_remove_clears_default(self) -> None:
        config = Config(organizations={"work": "t"}, default_org="work")
        config.remove_org("work")
        assert config.organizations == {}
        assert config.default_org is None

    def test_remove_unknown_raises(self) -> None:
        with pytest.raises(ConfigError, match="Organization 'nope' not found"):
            Config().remove_org("nope")

    def test_set_default(self) -> None:
        config = Config(organizations={"work": "a", "home": "b"}, default_org="work")
        config.set_default("home")
        assert config.get_token() == "b"

    def test_set_default_unknown_raises(self) -> None:
        with pytest.raises(ConfigError):
            Config().set_default("nope")

    def test_get_token(self) -> None:
        config = Config(organizations={"work": "a"})
        assert config.get_token() is None
        assert config.get_token("work") == "a"
        assert config.get_token("missing") is None

    def test_validate(self) -> None:
        config = Config(organizations={"ok": "lin_api_x", "oauth": "abc", "empty": ""}, default_org="gone")
        problems = config.validate()
        assert len(problems) == 2
        assert any("'empty'" in p for p in problems)
        assert any("'gone'" in p for p in problems)
        assert not any("'oauth'" in p for p in problems)

    def test_validate_clean(self) -> None:
        assert Config(organizations={"work": "abc"}, default_org="work").validate() == []

    def test_set_default_known_elsewhere(self) -> None:
        config = Config()
        config.set_default("work", known={"work"})
        assert config.default_org == "work"


class TestSettings:
    def test_current_team_upper_cased(self) -> None:
        config = Config()
        config.set_current_team(" eng ")
        assert config.current_team == "ENG"

    def test_empty_team_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Team key cannot be empty"):
            Config().set_current_team("  ")

    def test_get_set_unset(self) -> None:
        config = Config(organizations={"work": "t"})
        config.set_setting("default-org", "work")
        config.set_setting("current-team", "ops")
        assert config.get_setting("default-org") == "work"
        assert config.get_setting("current-team") == "OPS"
        config.unset_setting("current-team")
        assert config.get_setting("current-team") is None
        assert config.default_org == "work"

    def test_set_default_org_must_exist(self) -> None:
        with pytest.raises(ConfigError, match="not found"):
            Config().set_setting("default-org", "nope")

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="Valid keys: default-org, current-team"):
            Config().get_setting("colour")

    def test_current_team_omitted_until_set(self) -> None:
        assert "current_team" not in Config().to_dict()
        assert Config(current_team="ENG").to_dict()["current_team"] == "ENG"

    def test_current_team_round_trip(self, isolated_env: Path) -> None:
        path = Config(current_team="ENG").save()
        assert Config.load_file(path).current_team == "ENG"

    def test_bad_current_team_type(self, isolated_env: Path) -> None:
        _write(isolated_env / "config.json", {"organizations": {}, "current_team": 7})
        with pytest.raises(ConfigError, match="current_team"):
            Config.load()

    def test_local_current_team_wins(self, isolated_env: Path, tmp_path: Path) -> None:
        _write(isolated_env / "config.json", {"organizations": {}, "current_team": "ENG"})
        _write(tmp_path / "work" / ".lin" / "config.json", {"organizations": {}, "current_team": "OPS"})
        assert Config.load().current_team == "OPS"

    def test_global_current_team_survives_local_without_one(self, isolated_env: Path, tmp_path: Path) -> None:
        _write(isolated_env / "config.json", {"organizations": {}, "current_team": "ENG"})
        _write(tmp_path / "work" / ".lin" / "config.json", {"organizations": {"w": "t"}})
        assert Config.load().current_team == "ENG"


class TestScopes:
    def test_local_target_found_above(self, tmp_path: Path) -> None:
        found = _write(tmp_path / "project" / ".lin" / "config.json", {"organizations": {}})
        nested = tmp_path / "project" / "src"
        nested.mkdir()
        assert local_config_target(nested) == found.resolve()

    def test_local_target_defaults_to_start(self, tmp_path: Path) -> None:
        assert local_config_target(tmp_path) == tmp_path.resolve() / ".lin" / "config.json"

    def test_scoped_path(self, isolated_env: Path, tmp_path: Path) -> None:
        assert scoped_config_path(False) == isolated_env / "config.json"
        assert scoped_config_path(True, cwd=tmp_path) == tmp_path.resolve() / ".lin" / "config.json"


class TestMaskToken:
    def test_long_token(self) -> None:
        assert mask_token("lin_api_1234567890") == "lin_api_1234..."

    def test_short_token(self) -> None:
        assert mask_token("short") == "*****"

    def test_exactly_twelve(self) -> None:
        assert mask_token("x" * 12) == "*" * 12
