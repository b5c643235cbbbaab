"""Shared record base and the decode/encode helpers around pydantic.

Every response shape is a frozen ``Record``. Field names are snake_case in
Python and lowerCamelCase on the wire through the alias generator; a field
may pin another wire name with ``Field(alias=...)``. Optional fields are
typed ``X | None = None``, so they may be absent or ``null``. Unknown keys
are ignored.

``decode(tp, value)`` validates a JSON tree into ``tp`` and reports the
first failure as a ``DecodeError`` carrying a dotted path. ``to_dict`` and
``to_input`` dump by alias, so decode and re-encode agree.
"""

from __future__ import annotations

import functools
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from lin.errors import DecodeError

__all__ = ["Connection", "MutationResult", "Record", "decode", "to_camel", "to_dict", "to_input"]

T = TypeVar("T")


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, alias_generator=to_camel, populate_by_name=True)


class Connection(Record, Generic[T]):
    """A single unpaginated page of nodes, in server order."""

    nodes: list[T]


class MutationResult(Record):
    """Payload of mutations that only report ``success``."""

    success: bool


@functools.cache
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _format_loc(root: str, loc: tuple[int | str, ...]) -> str:
    path = root
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def decode(tp: type[T] | Any, value: Any, path: str = "data") -> T:
    """Validate JSON *value* into *tp*, raising ``DecodeError`` with a dotted path."""
    try:
        return _adapter(tp).validate_python(value)  # type: ignore[no-any-return]
    except ValidationError as exc:
        err = exc.errors()[0]
        raise DecodeError(err["msg"], _format_loc(path, err["loc"])) from None


def to_dict(obj: Any) -> Any:
    """Encode records to JSON-compatible data using wire names, keeping nulls."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True)
    if isinstance(obj, (list, tuple)):
        return [to_dict(item) for item in obj]
    if isinstance(obj, dict):
        return {k: to_dict(v) for k, v in obj.items()}
    return obj


def to_input(obj: Any) -> dict[str, Any]:
    """Encode a mutation input record, omitting fields left as ``None``."""
    if not isinstance(obj, BaseModel):
        msg = f"to_input expects a record instance, got {type(obj).__name__}"
        raise TypeError(msg)
    return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
