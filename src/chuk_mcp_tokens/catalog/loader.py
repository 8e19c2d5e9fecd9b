"""
Themes loader - reads `$themes.json` records into a TokenCatalog.

Themes can come from:
1. A local tokens directory (JSON, or YAML for hand-written catalogs)
2. A remote source of truth (raw file URL)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests
import yaml

from chuk_mcp_tokens.catalog.index import TokenCatalog
from chuk_mcp_tokens.config import TokensConfig, TokensSource
from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.models.catalog import ThemeRecord

logger = logging.getLogger(__name__)


class ThemesLoader:
    """
    Loads theme records from the configured source.

    Parsed records are cached; call `clear_cache` to pick up changes.
    """

    def __init__(self, config: TokensConfig | None = None):
        """
        Initialize the loader.

        Args:
            config: Token source settings (defaults to environment)
        """
        self.config = config or TokensConfig.from_env()
        self._cache: list[ThemeRecord] | None = None
        self._catalog: TokenCatalog | None = None

    def load_themes(self) -> list[ThemeRecord]:
        """
        Load theme records from the configured source.

        Returns:
            Theme records in file order

        Raises:
            ValueError: If the source is missing or not an array of themes
        """
        if self._cache is not None:
            return self._cache

        if self.config.source == TokensSource.REMOTE:
            records = self.load_remote(self.config.themes_url)
        else:
            records = self.load_file(self.config.themes_file)

        self._cache = records
        return records

    def load_catalog(self) -> TokenCatalog:
        """Load themes and build the catalog (built once until the cache is cleared)."""
        if self._catalog is None:
            self._catalog = TokenCatalog(self.load_themes())
            logger.info("Built %r", self._catalog)
        return self._catalog

    def load_catalog_or_none(self) -> TokenCatalog | None:
        """
        Load the catalog, or return None when themes are unavailable.

        For callers that can fall back to name-based token paths.
        """
        try:
            return self.load_catalog()
        except (ValueError, OSError, yaml.YAMLError, requests.RequestException) as e:
            logger.warning("Proceeding without a token catalog: %s", e)
            return None

    def load_file(self, path: Path) -> list[ThemeRecord]:
        """Load theme records from a JSON or YAML file."""
        if not path.exists():
            raise ValueError(ErrorMessages.THEMES_NOT_FOUND.format(path=path))

        with open(path) as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)

        logger.info("Loaded themes from %s", path)
        return self._parse_themes(data, str(path))

    def load_remote(self, url: str) -> list[ThemeRecord]:
        """Fetch theme records from a URL."""
        resp = requests.get(url, timeout=self.config.request_timeout)
        if not resp.ok:
            raise ValueError(
                ErrorMessages.THEMES_FETCH_FAILED.format(
                    url=url, status=f"{resp.status_code} {resp.reason}"
                )
            )

        logger.info("Loaded themes from %s", url)
        return self._parse_themes(resp.json(), url)

    def _parse_themes(self, data: Any, source: str) -> list[ThemeRecord]:
        """Validate a payload as a list of theme records."""
        if not isinstance(data, list):
            raise ValueError(
                ErrorMessages.THEMES_NOT_ARRAY.format(source=source, kind=type(data).__name__)
            )
        return [ThemeRecord.model_validate(item) for item in data]

    def clear_cache(self) -> None:
        """Forget previously loaded themes."""
        self._cache = None
        self._catalog = None
