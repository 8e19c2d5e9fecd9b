#!/usr/bin/env python3
"""
Async Tokens MCP Server using chuk-mcp-server

This server provides MCP tools that keep design-tool components aligned
with a theme-aware design token catalog.

The server provides tools for:
- Exploring the token catalog (themes, variable id <-> token path)
- Mapping a selection's bound variables to token paths
- Inferring tokens for unbound node values and planning their bindings
- Resolving free-text phrases to tokens and properties
- Validating the catalog against a design file
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.catalog import ThemesLoader
from chuk_mcp_tokens.config import TokensConfig, TokensSource
from chuk_mcp_tokens.tools import (
    register_catalog_tools,
    register_matching_tools,
    register_phrase_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tokens")

# Token source settings come from the environment
config = TokensConfig.from_env()
themes_loader = ThemesLoader(config)

# Register all tools
catalog_tools = register_catalog_tools(mcp, themes_loader)
matching_tools = register_matching_tools(mcp, themes_loader, config)
phrase_tools = register_phrase_tools(mcp, themes_loader)

# Export tool functions for direct access
tokens_list_themes = catalog_tools["tokens_list_themes"]
tokens_map_variable = catalog_tools["tokens_map_variable"]
tokens_map_token_path = catalog_tools["tokens_map_token_path"]
tokens_map_selection = catalog_tools["tokens_map_selection"]
tokens_validate_catalog = catalog_tools["tokens_validate_catalog"]

tokens_match_node = matching_tools["tokens_match_node"]
tokens_auto_apply = matching_tools["tokens_auto_apply"]

tokens_resolve_phrase = phrase_tools["tokens_resolve_phrase"]

logger.info("CHUK Tokens MCP Server initialized")
logger.info(f"  Token source: {config.source.value}")
if config.source == TokensSource.LOCAL:
    logger.info(f"  Themes file: {config.themes_file}")
else:
    logger.info(f"  Themes URL: {config.themes_url}")
