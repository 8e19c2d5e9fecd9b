"""
Pydantic models for the token system.

This module provides:
- ThemeRecord / ThemeToken: Theme-aware token catalog entries
- DesignVariable / VariableCollection / VariableSet: Live design-tool variables
- DesignNode / Paint: Serialized nodes and their matchable values
- ValueMatch and report types: Engine results
- ResolvedPhrase: Free text resolved to a token
"""

from chuk_mcp_tokens.models.catalog import (
    BoundVariable,
    MappedToken,
    NodeTokenMapping,
    NodeVariables,
    ThemeRecord,
    ThemeToken,
)
from chuk_mcp_tokens.models.match import (
    ApplyResult,
    ForegroundSelection,
    NodeMatchReport,
    PropertyMatch,
    TokenizeReport,
    ValueMatch,
)
from chuk_mcp_tokens.models.node import DesignNode, Paint
from chuk_mcp_tokens.models.phrase import ResolvedPhrase
from chuk_mcp_tokens.models.variables import (
    DesignVariable,
    VariableAlias,
    VariableCollection,
    VariableMode,
    VariableSet,
    is_alias,
)

__all__ = [
    "ApplyResult",
    "BoundVariable",
    "DesignNode",
    "DesignVariable",
    "ForegroundSelection",
    "MappedToken",
    "NodeMatchReport",
    "NodeTokenMapping",
    "NodeVariables",
    "Paint",
    "PropertyMatch",
    "ResolvedPhrase",
    "ThemeRecord",
    "ThemeToken",
    "TokenizeReport",
    "ValueMatch",
    "VariableAlias",
    "VariableCollection",
    "VariableMode",
    "VariableSet",
    "is_alias",
]
