"""
chuk-mcp-tokens: design token resolution and matching over MCP.
"""

from chuk_mcp_tokens.catalog import TokenCatalog
from chuk_mcp_tokens.matching import VariableMatcher
from chuk_mcp_tokens.orchestrator import MatchOrchestrator
from chuk_mcp_tokens.phrases import PhraseResolver

__version__ = "0.1.0"

__all__ = [
    "MatchOrchestrator",
    "PhraseResolver",
    "TokenCatalog",
    "VariableMatcher",
    "__version__",
]
