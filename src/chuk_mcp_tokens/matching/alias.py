"""
Alias resolver - follows variable aliases to a literal value.

Aliases are resolved against the full variable set (foundation included),
taking the referenced variable's first mode value at each hop. Cycles and
missing targets resolve to UNRESOLVED instead of looping or raising.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_tokens.models.variables import VariableAlias, VariableSet, is_alias

logger = logging.getLogger(__name__)


class _Unresolved:
    """Sentinel for values that could not be resolved."""

    _instance: _Unresolved | None = None

    def __new__(cls) -> _Unresolved:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED: Any = _Unresolved()


def _alias_id(value: Any) -> str:
    return value.id if isinstance(value, VariableAlias) else value["id"]


class AliasResolver:
    """
    Resolves per-mode values that may be aliases.

    Literals (including 0, '' and False) are returned unchanged.
    """

    def __init__(self, variables: VariableSet):
        """
        Initialize the resolver.

        Args:
            variables: The full variable set, not a filtered subset
        """
        self.variables = variables

    def resolve(self, value: Any, visited: set[str] | None = None) -> Any:
        """
        Resolve a raw mode value to a literal.

        Args:
            value: Literal or alias marker
            visited: Variable ids already followed; extended in place

        Returns:
            The literal value, or UNRESOLVED on a cycle or missing target
        """
        seen = visited if visited is not None else set()

        while is_alias(value):
            target_id = _alias_id(value)
            if target_id in seen:
                logger.debug("Alias cycle at %s", target_id)
                return UNRESOLVED
            seen.add(target_id)

            target = self.variables.get(target_id)
            if target is None:
                logger.debug("Alias target %s not found", target_id)
                return UNRESOLVED
            if not target.values_by_mode:
                return UNRESOLVED

            value = target.first_value

        if value is None:
            return UNRESOLVED
        return value

    def resolve_variable(self, variable_id: str) -> Any:
        """Resolve a variable's first mode value by id."""
        variable = self.variables.get(variable_id)
        if variable is None or not variable.values_by_mode:
            return UNRESOLVED
        return self.resolve(variable.first_value)

    def is_resolvable(self, value: Any, visited: set[str] | None = None) -> bool:
        """Whether a raw mode value resolves to a literal."""
        return self.resolve(value, visited) is not UNRESOLVED
