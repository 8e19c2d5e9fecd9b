"""
Token catalog: theme-aware indices, loading and validation.
"""

from chuk_mcp_tokens.catalog.index import (
    TokenCatalog,
    map_selection_to_tokens,
    normalize_variable_name,
    to_variable_name,
)
from chuk_mcp_tokens.catalog.loader import ThemesLoader
from chuk_mcp_tokens.catalog.validator import (
    CatalogValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)

__all__ = [
    "CatalogValidator",
    "ThemesLoader",
    "TokenCatalog",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "map_selection_to_tokens",
    "normalize_variable_name",
    "to_variable_name",
]
