#!/usr/bin/env python3
"""
Entry point for the CHUK Tokens MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http). Token source options
given on the command line override the TOKENS_* environment variables.
"""

import argparse
import asyncio
import logging
import os
from collections.abc import MutableMapping

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# CLI option -> environment variable read by TokensConfig.from_env
_ENV_OPTIONS: dict[str, str] = {
    "source": "TOKENS_SOURCE",
    "tokens_path": "TOKENS_PATH",
    "themes_url": "TOKENS_THEMES_URL",
    "tolerance": "TOKENS_TOLERANCE",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Tokens MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--source",
        choices=["local", "remote"],
        help="Where to load $themes.json from (default: TOKENS_SOURCE or local)",
    )
    parser.add_argument(
        "--tokens-path",
        help="Directory holding $themes.json for the local source",
    )
    parser.add_argument(
        "--themes-url",
        help="URL of $themes.json for the remote source",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        help="Default numeric matching tolerance in pixels",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def export_settings(
    args: argparse.Namespace,
    environ: MutableMapping[str, str] | None = None,
) -> None:
    """Copy token source options that were given into the environment."""
    env = os.environ if environ is None else environ
    for option, variable in _ENV_OPTIONS.items():
        value = getattr(args, option, None)
        if value is not None:
            env[variable] = str(value)


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    export_settings(args)

    # The server reads its config at import time
    from chuk_mcp_tokens.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
