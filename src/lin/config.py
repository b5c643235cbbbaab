"""Organization tokens and per-user settings.

Two JSON files share one shape, ``{"organizations": {name: token},
"default_org": name | null, "current_team": key}`` (``current_team`` is
written only when set):

- the global file, ``<config dir>/config.json``;
- an optional project-local ``.lin/config.json``, found by walking up from
  the current directory. Its organizations and settings win over global.

Writes go to the global file unless a command asks for the local scope,
which targets the nearest ``.lin/config.json`` or creates one in the
current directory.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from lin.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"
LOCAL_DIR_NAME = ".lin"
MASK_VISIBLE = 12

# Settings addressable by `lin config get/set/unset`.
SETTINGS = ("default-org", "current-team")


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def config_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Return the directory holding the global config and ``lin.log``.

    Resolution order: ``$LIN_CONFIG_DIR``, ``$XDG_CONFIG_HOME/lin``,
    ``~/.config/lin``.
    """
    env = os.environ if environ is None else environ
    explicit = env.get("LIN_CONFIG_DIR")
    if explicit:
        return Path(explicit).expanduser()
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser() / "lin"
    return Path.home() / ".config" / "lin"


def global_config_path(environ: Mapping[str, str] | None = None) -> Path:
    return config_dir(environ) / CONFIG_FILENAME


def find_local_config(start: Path | None = None) -> Path | None:
    """Walk up from start (default cwd) looking for ``.lin/config.json``."""
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        candidate = parent / LOCAL_DIR_NAME / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def local_config_target(start: Path | None = None) -> Path:
    """Where local-scope writes go: the nearest local file, else one in *start*."""
    found = find_local_config(start)
    if found is not None:
        return found
    return (start or Path.cwd()).resolve() / LOCAL_DIR_NAME / CONFIG_FILENAME


def scoped_config_path(local: bool, *, cwd: Path | None = None) -> Path:
    return local_config_target(cwd) if local else global_config_path()


def write_atomic(path: Path, content: str) -> None:
    """Write content to path atomically via temp file + os.replace()."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise


def mask_token(token: str) -> str:
    """Show the first 12 characters then ``...``; shorter tokens are all ``*``."""
    if len(token) <= MASK_VISIBLE:
        return "*" * len(token)
    return f"{token[:MASK_VISIBLE]}..."


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


@dataclass
class Config:
    organizations: dict[str, str] = field(default_factory=dict)
    default_org: str | None = None
    current_team: str | None = None

    @classmethod
    def from_dict(cls, raw: object, source: Path | None = None) -> Config:
        where = f" in {source}" if source else ""
        if not isinstance(raw, dict):
            msg = f"Invalid config{where}: expected a JSON object"
            raise ConfigError(msg)
        orgs = raw.get("organizations") or {}
        default = raw.get("default_org")
        team = raw.get("current_team")
        if not isinstance(orgs, dict) or not all(isinstance(v, str) for v in orgs.values()):
            msg = f"Invalid config{where}: 'organizations' must map names to token strings"
            raise ConfigError(msg)
        if default is not None and not isinstance(default, str):
            msg = f"Invalid config{where}: 'default_org' must be a string or null"
            raise ConfigError(msg)
        if team is not None and not isinstance(team, str):
            msg = f"Invalid config{where}: 'current_team' must be a string or null"
            raise ConfigError(msg)
        return cls(organizations=dict(orgs), default_org=default, current_team=team)

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "organizations": dict(sorted(self.organizations.items())),
            "default_org": self.default_org,
        }
        if self.current_team is not None:
            data["current_team"] = self.current_team
        return data

    # -- File I/O -------------------------------------------------------------

    @classmethod
    def load_file(cls, path: Path) -> Config:
        """Read one config file. A missing file is an empty config."""
        if not path.exists():
            return cls()
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            msg = f"Failed to parse config file {path}: {exc}"
            raise ConfigError(msg) from exc
        except OSError as exc:
            msg = f"Failed to read config file {path}: {exc}"
            raise ConfigError(msg) from exc
        return cls.from_dict(raw, path)

    @classmethod
    def load(cls, *, environ: Mapping[str, str] | None = None, cwd: Path | None = None) -> Config:
        """Load the global config and overlay the nearest local one, if any."""
        merged = cls.load_file(global_config_path(environ))
        local_path = find_local_config(cwd)
        if local_path is not None:
            logger.debug("Merging local config %s", local_path)
            merged = merged.merged_with(cls.load_file(local_path))
        return merged

    def merged_with(self, local: Config) -> Config:
        orgs = {**self.organizations, **local.organizations}
        default = local.default_org if local.default_org is not None else self.default_org
        team = local.current_team if local.current_team is not None else self.current_team
        return Config(organizations=orgs, default_org=default, current_team=team)

    def save(self, path: Path | None = None, *, environ: Mapping[str, str] | None = None) -> Path:
        """Write to *path* (default: the global file). Returns the path written."""
        target = path or global_config_path(environ)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            write_atomic(target, json.dumps(self.to_dict(), indent=2) + "\n")
        except OSError as exc:
            msg = f"Failed to write config file {target}: {exc}"
            raise ConfigError(msg) from exc
        return target

    # -- Organizations ----------------------------------------------------------

    def add_org(self, name: str, token: str) -> bool:
        """Store *token* under *name*. Returns True if it became the default.

        The first organization added becomes the default.
        """
        if not name.strip():
            msg = "Organization name cannot be empty"
            raise ConfigError(msg)
        if not token:
            msg = "Token cannot be empty"
            raise ConfigError(msg)
        self.organizations[name] = token
        if self.default_org is None:
            self.default_org = name
            return True
        return False

    def remove_org(self, name: str) -> None:
        if name not in self.organizations:
            msg = f"Organization '{name}' not found in configuration"
            raise ConfigError(msg)
        del self.organizations[name]
        if self.default_org == name:
            self.default_org = None

    def set_default(self, name: str, *, known: Collection[str] | None = None) -> None:
        """Make *name* the default. *known* widens the check beyond this file's orgs."""
        if name not in self.organizations and (known is None or name not in known):
            msg = f"Organization '{name}' not found in configuration. Add it first with 'lin org add {name}'."
            raise ConfigError(msg)
        self.default_org = name

    def get_token(self, org: str | None = None) -> str | None:
        """Token for *org* (default: the default org), or None."""
        name = org or self.default_org
        if name is None:
            return None
        return self.organizations.get(name)

    def list_orgs(self) -> list[str]:
        return sorted(self.organizations)

    # -- Settings ---------------------------------------------------------------

    def set_current_team(self, key: str) -> None:
        key = key.strip().upper()
        if not key:
            msg = "Team key cannot be empty"
            raise ConfigError(msg)
        self.current_team = key

    def get_setting(self, key: str) -> str | None:
        _check_setting(key)
        return self.default_org if key == "default-org" else self.current_team

    def set_setting(self, key: str, value: str, *, known_orgs: Collection[str] | None = None) -> None:
        _check_setting(key)
        if key == "default-org":
            self.set_default(value, known=known_orgs)
        else:
            self.set_current_team(value)

    def unset_setting(self, key: str) -> None:
        _check_setting(key)
        if key == "default-org":
            self.default_org = None
        else:
            self.current_team = None

    def validate(self) -> list[str]:
        """Return human-readable problems; empty when the config looks sane.

        Token format is not checked: personal keys and OAuth tokens are both valid.
        """
        problems: list[str] = []
        for name, token in sorted(self.organizations.items()):
            if not name.strip():
                problems.append("Organization name cannot be empty")
            if not token:
                problems.append(f"Token for organization '{name}' is empty")
        if self.default_org is not None and self.default_org not in self.organizations:
            problems.append(f"Default organization '{self.default_org}' is not in the organizations list")
        return problems


def _check_setting(key: str) -> None:
    if key not in SETTINGS:
        msg = f"Unknown configuration key '{key}'. Valid keys: {', '.join(SETTINGS)}"
        raise ConfigError(msg)
