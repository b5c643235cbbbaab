"""Error hierarchy for lin.

Every failure that reaches the CLI boundary is a ``LinError``. The ``kind``
string is what ``--json`` output reports under ``error.kind``.
"""

from __future__ import annotations

from typing import Any


class LinError(Exception):
    """Base class for all lin errors."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(LinError):
    """Missing, unreadable, or inconsistent configuration."""

    kind = "config"


class AuthError(ConfigError):
    """No API token could be resolved from any source."""

    kind = "auth"

    def __init__(self, message: str, code: str = "no_token_configured") -> None:
        super().__init__(message)
        self.code = code


class TransportError(LinError):
    """The request never produced a usable HTTP response."""

    kind = "transport"


class NetworkError(TransportError):
    """Timeout, DNS failure, refused or reset connection."""


class HttpStatusError(TransportError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str, reason: str = "") -> None:
        label = f"HTTP {status_code} {reason}".rstrip()
        super().__init__(f"{label}: {body}" if body else label)
        self.status_code = status_code
        self.body = body


class ApiError(LinError):
    """The GraphQL envelope carried a non-empty ``errors`` list."""

    kind = "api"

    def __init__(self, messages: list[str], errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__("; ".join(messages) if messages else "Unknown GraphQL error")
        self.messages = messages
        self.errors = errors or []


class MutationFailedError(ApiError):
    """A mutation payload came back with ``success: false``."""

    def __init__(self, action: str) -> None:
        super().__init__([f"{action} failed: the API reported success=false"])
        self.action = action


class DecodeError(LinError):
    """Response JSON did not match the shape of the requested record type."""

    kind = "decode"

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class VariablesError(LinError):
    """Variables did not match the operation's declared variables."""

    kind = "usage"


class NotFoundError(LinError):
    """A lookup that the caller required came back empty."""

    kind = "not_found"
