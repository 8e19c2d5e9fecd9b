"""
MCP tool implementations.

Tools are organized by domain:
- catalog - Theme listing, id/path mapping, selection mapping, validation
- matching - Node value matching and binding plans
- phrases - Free text to token resolution
"""

from chuk_mcp_tokens.tools.catalog import register_catalog_tools
from chuk_mcp_tokens.tools.matching import register_matching_tools
from chuk_mcp_tokens.tools.phrases import register_phrase_tools

__all__ = [
    "register_catalog_tools",
    "register_matching_tools",
    "register_phrase_tools",
]
