"""
Configuration for the token server.

Settings come from environment variables so the server can be pointed at
a local tokens checkout or a remote source of truth without code changes.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import DEFAULT_TOLERANCE

DEFAULT_REMOTE_TOKENS_ROOT = "https://raw.githubusercontent.com/vkogmail/exact-tokens/main/tokens"
THEMES_FILENAME = "$themes.json"


class TokensSource(str, Enum):
    """Where theme records are loaded from."""

    LOCAL = "local"
    REMOTE = "remote"


class TokensConfig(BaseModel):
    """Token source settings."""

    source: TokensSource = Field(default=TokensSource.LOCAL, description="local or remote")
    tokens_path: Path = Field(
        default_factory=lambda: Path.cwd() / "tokens",
        description="Directory holding $themes.json (local source)",
    )
    themes_url: str = Field(
        default=f"{DEFAULT_REMOTE_TOKENS_ROOT}/%24themes.json",
        description="URL of $themes.json (remote source)",
    )
    tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        gt=0,
        description="Default numeric matching tolerance in pixels",
    )
    request_timeout: float = Field(default=30.0, gt=0, description="Remote fetch timeout (s)")

    model_config = {"frozen": True}

    @property
    def themes_file(self) -> Path:
        return self.tokens_path / THEMES_FILENAME

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> TokensConfig:
        """
        Build configuration from environment variables.

        Reads TOKENS_SOURCE, TOKENS_PATH, TOKENS_THEMES_URL,
        TOKENS_REMOTE_ROOT and TOKENS_TOLERANCE.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        if env.get("TOKENS_SOURCE"):
            values["source"] = TokensSource(env["TOKENS_SOURCE"].strip().lower())
        if env.get("TOKENS_PATH"):
            values["tokens_path"] = Path(env["TOKENS_PATH"])
        if env.get("TOKENS_THEMES_URL"):
            values["themes_url"] = env["TOKENS_THEMES_URL"]
        elif env.get("TOKENS_REMOTE_ROOT"):
            values["themes_url"] = f"{env['TOKENS_REMOTE_ROOT'].rstrip('/')}/%24themes.json"
        if env.get("TOKENS_TOLERANCE"):
            values["tolerance"] = float(env["TOKENS_TOLERANCE"])

        return cls.model_validate(values)
