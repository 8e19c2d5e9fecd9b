"""
Phrase tools - MCP tools for resolving free text to tokens.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.catalog import ThemesLoader
from chuk_mcp_tokens.models.variables import VariableSet
from chuk_mcp_tokens.phrases import PhraseResolver

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_phrase_tools(mcp: ChukMCPServer, loader: ThemesLoader) -> dict[str, Any]:
    """
    Register phrase resolution tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The themes loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_resolve_phrase(
        phrase: str,
        variable_collections: list[dict[str, Any]] | None = None,
    ) -> str:
        """
        Resolve a phrase to a token, style and suggested property.

        Phrases mentioning text styles, typography, shadows or effects
        resolve to styles; anything else to a variable token. Ambiguous
        phrases resolve to nothing rather than a guess.

        Args:
            phrase: Free text (e.g. "apply surface accent color", "button md text style")
            variable_collections: Optional export_variable_collections payload,
                used to report the variable's collection id

        Returns:
            JSON string with the resolution, or match=null

        Example:
            tokens_resolve_phrase(phrase="surface accent background")
        """
        try:
            variables = (
                VariableSet.from_export(variable_collections) if variable_collections else None
            )
            resolver = PhraseResolver(loader.load_catalog(), variables)
            resolved = resolver.resolve(phrase)
            if resolved is None:
                return json.dumps(
                    {
                        "status": "success",
                        "phrase": phrase,
                        "match": None,
                        "message": f"No token matches '{phrase}'",
                    }
                )
            return json.dumps({"status": "success", "phrase": phrase, "match": resolved.to_dict()})
        except Exception as e:
            logger.exception("Failed to resolve phrase")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_resolve_phrase"] = tokens_resolve_phrase

    return tools
