"""
Matching tools - MCP tools for inferring tokens from node values.

Nodes and variable collections are passed in as the design tool
serializes them (`get_node_info`, `export_variable_collections`).
Bindings are returned as a plan of `set_variable_binding` commands for
the caller to send.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.catalog import ThemesLoader
from chuk_mcp_tokens.config import TokensConfig
from chuk_mcp_tokens.constants import SuccessMessages
from chuk_mcp_tokens.models.node import DesignNode
from chuk_mcp_tokens.models.variables import VariableSet
from chuk_mcp_tokens.orchestrator import BindingPlanSession, MatchOrchestrator

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_matching_tools(
    mcp: ChukMCPServer,
    loader: ThemesLoader,
    config: TokensConfig,
) -> dict[str, Any]:
    """
    Register token matching tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The themes loader (catalog is optional for matching)
        config: Token settings (default tolerance)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def _orchestrator(variable_collections: list[dict[str, Any]]) -> MatchOrchestrator:
        variables = VariableSet.from_export(variable_collections)
        return MatchOrchestrator(variables, loader.load_catalog_or_none())

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_match_node(
        node: dict[str, Any],
        variable_collections: list[dict[str, Any]],
        description: str | None = None,
        tolerance: float | None = None,
    ) -> str:
        """
        Match a node's own property values to theme tokens.

        Only the node itself is matched (no descent into children).

        Args:
            node: Serialized node (fills, strokes, cornerRadius, padding*, itemSpacing,
                fontSize, fontWeight)
            variable_collections: export_variable_collections payload
            description: Optional description for semantic matching (e.g. "danger status")
            tolerance: Numeric tolerance in pixels (default from config)

        Returns:
            JSON string with one match (or null) per present property

        Example:
            tokens_match_node(node={"id": "1:2", "fills": [{"color": "#0650D0"}]},
                variable_collections=[...])
        """
        try:
            orchestrator = _orchestrator(variable_collections)
            report = orchestrator.match_node(
                DesignNode.model_validate(node),
                description,
                tolerance if tolerance is not None else config.tolerance,
            )
            return json.dumps({"status": "success", **report.to_dict()})
        except Exception as e:
            logger.exception("Failed to match node")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_match_node"] = tokens_match_node

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_auto_apply(
        node: dict[str, Any],
        variable_collections: list[dict[str, Any]],
        description: str | None = None,
        apply_tokens: bool = True,
        tolerance: float | None = None,
    ) -> str:
        """
        Match tokens across a node tree and plan their bindings.

        Component sets are processed per component; wrapper frames per
        child instance, with foreground tokens chosen for action-like
        instances (buttons).

        Args:
            node: Serialized node tree
            variable_collections: export_variable_collections payload
            description: Optional component description (e.g. "primary button")
            apply_tokens: Whether to plan bindings (default: true)
            tolerance: Numeric tolerance in pixels (default from config)

        Returns:
            JSON string with matches, per-property apply results and the
            set_variable_binding commands to send

        Example:
            tokens_auto_apply(node={...}, variable_collections=[...],
                description="primary button")
        """
        try:
            root = DesignNode.model_validate(node)
            orchestrator = _orchestrator(variable_collections)
            session = BindingPlanSession([root])
            report = await orchestrator.tokenize(
                root,
                description,
                tolerance if tolerance is not None else config.tolerance,
                apply=apply_tokens,
                session=session,
            )
            message = (
                SuccessMessages.TOKENS_APPLIED.format(count=len(report.applied))
                if apply_tokens
                else SuccessMessages.TOKENS_NOT_APPLIED
            )
            return json.dumps(
                {
                    "status": "success",
                    **report.to_dict(),
                    "commands": session.commands(),
                    "summary": report.summary(),
                    "message": message,
                }
            )
        except Exception as e:
            logger.exception("Failed to auto-apply tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_auto_apply"] = tokens_auto_apply

    return tools
