"""
Catalog tools - MCP tools for exploring and validating the token catalog.

Tools for listing themes, mapping variable ids and token paths in both
directions, mapping a selection's bound variables, and validating the
catalog against a design file.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.catalog import CatalogValidator, ThemesLoader, map_selection_to_tokens
from chuk_mcp_tokens.models.catalog import NodeVariables
from chuk_mcp_tokens.models.variables import VariableSet

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_catalog_tools(mcp: ChukMCPServer, loader: ThemesLoader) -> dict[str, Any]:
    """
    Register catalog tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The themes loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    validator = CatalogValidator()

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_themes() -> str:
        """
        List themes in the token catalog.

        Returns:
            JSON string with theme names, groups and reference counts

        Example:
            tokens_list_themes()
        """
        try:
            catalog = loader.load_catalog()
            return json.dumps(
                {
                    "status": "success",
                    "themes": [
                        {
                            "id": t.id,
                            "name": t.name,
                            "group": t.group,
                            "variable_references": len(t.variable_references or {}),
                            "style_references": len(t.style_references or {}),
                        }
                        for t in catalog.themes
                    ],
                    "count": len(catalog.themes),
                    "token_count": len(catalog.token_paths),
                    "style_count": len(catalog.style_token_paths),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_themes"] = tokens_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_map_variable(variable_id: str) -> str:
        """
        Find the token paths a design-tool variable stands for.

        A variable can back several token paths, and the same path in
        several themes; every pairing is returned in theme order.

        Args:
            variable_id: Design-tool variable id (e.g. "VariableID:1:23")

        Returns:
            JSON string with token paths and theme metadata

        Example:
            tokens_map_variable(variable_id="VariableID:1:23")
        """
        try:
            catalog = loader.load_catalog()
            tokens = catalog.tokens_for_variable(variable_id)
            return json.dumps(
                {
                    "status": "success",
                    "variable_id": variable_id,
                    "tokens": [t.model_dump(exclude_none=True) for t in tokens],
                    "count": len(tokens),
                }
            )
        except Exception as e:
            logger.exception("Failed to map variable")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_map_variable"] = tokens_map_variable

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_map_token_path(token_path: str) -> str:
        """
        Find the variables and styles a token path resolves to.

        Args:
            token_path: Dot-separated token path (e.g. "color.surface.action.primary.default")

        Returns:
            JSON string with per-theme variable ids and style ids

        Example:
            tokens_map_token_path(token_path="color.surface.action.primary.default")
        """
        try:
            catalog = loader.load_catalog()
            variables = catalog.variables_for_token(token_path)
            styles = catalog.styles_for_token(token_path)
            return json.dumps(
                {
                    "status": "success",
                    "token_path": token_path,
                    "variables": [t.model_dump(exclude_none=True) for t in variables],
                    "styles": [t.model_dump(exclude_none=True) for t in styles],
                }
            )
        except Exception as e:
            logger.exception("Failed to map token path")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_map_token_path"] = tokens_map_token_path

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_map_selection(selection: list[dict[str, Any]]) -> str:
        """
        Map the variables bound on a selection to token paths.

        Variables the catalog does not know (or all of them, when no
        catalog can be loaded) map to their name with '/' replaced by '.'.

        Args:
            selection: Per-node bound variables, as reported by the design tool:
                [{"nodeId", "nodeName", "variables": [{"id", "name", "props"}]}]

        Returns:
            JSON string with token mappings per node

        Example:
            tokens_map_selection(selection=[{"nodeId": "1:2", "nodeName": "Button",
                "variables": [{"id": "VariableID:1:23", "name": "color/surface/x",
                "props": ["fills"]}]}])
        """
        try:
            nodes = [NodeVariables.model_validate(item) for item in selection]
            catalog = loader.load_catalog_or_none()
            mappings = map_selection_to_tokens(nodes, catalog)
            return json.dumps(
                {
                    "status": "success",
                    "catalog_loaded": catalog is not None,
                    "nodes": [m.model_dump(exclude_none=True) for m in mappings],
                }
            )
        except Exception as e:
            logger.exception("Failed to map selection")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_map_selection"] = tokens_map_selection

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_validate_catalog(
        variable_collections: list[dict[str, Any]] | None = None,
    ) -> str:
        """
        Validate the token catalog.

        Checks theme structure and, when the design file's collections are
        given, that catalog variable ids exist and that aliases resolve.

        Args:
            variable_collections: Optional export_variable_collections payload

        Returns:
            JSON string with validation results

        Example:
            tokens_validate_catalog()
        """
        try:
            catalog = loader.load_catalog()
            variables = (
                VariableSet.from_export(variable_collections) if variable_collections else None
            )
            result = validator.validate(catalog, variables)
            return json.dumps(
                {
                    "status": "success",
                    "valid": result.is_valid,
                    "errors": [i.to_dict() for i in result.errors],
                    "warnings": [i.to_dict() for i in result.warnings],
                    "issues": [i.to_dict() for i in result.issues],
                }
            )
        except Exception as e:
            logger.exception("Failed to validate catalog")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_validate_catalog"] = tokens_validate_catalog

    return tools
