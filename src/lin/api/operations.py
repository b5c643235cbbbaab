"""The ``Operation`` value: a fixed GraphQL document plus its contracts.

Document text is always a module-level constant. User input only ever
reaches the server through the variables mapping, which is checked here
against the operation's declared variables before anything is sent.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from lin.errors import VariablesError


@dataclass(frozen=True, eq=False)
class Operation:
    """A named query or mutation.

    ``variables`` maps each declared variable name to its GraphQL type
    string; a trailing ``!`` marks it required. ``response`` is the record
    type the ``data`` object decodes into.
    """

    name: str
    document: str
    response: type
    variables: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    @property
    def is_mutation(self) -> bool:
        return self.document.lstrip().startswith("mutation")

    @property
    def required_variables(self) -> frozenset[str]:
        return frozenset(name for name, gql_type in self.variables.items() if gql_type.endswith("!"))

    def check_variables(self, variables: Mapping[str, Any] | None) -> dict[str, Any]:
        """Return the variables to send, or raise ``VariablesError``.

        Optional variables passed as ``None`` are dropped so the server
        applies its own default.
        """
        given = dict(variables or {})
        unknown = sorted(set(given) - set(self.variables))
        if unknown:
            msg = f"{self.name}: undeclared variable(s): {', '.join(unknown)}"
            raise VariablesError(msg)
        missing = sorted(name for name in self.required_variables if given.get(name) is None)
        if missing:
            msg = f"{self.name}: missing required variable(s): {', '.join(missing)}"
            raise VariablesError(msg)
        return {k: v for k, v in given.items() if v is not None}
