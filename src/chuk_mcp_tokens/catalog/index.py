"""
Token catalog - bidirectional indices over theme records.

The catalog answers two questions in O(1):
- which token paths does this variable id stand for (per theme)?
- which variable ids (and style ids) does this token path resolve to?

It is built once per session and never mutated afterward.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

from chuk_mcp_tokens.models.catalog import (
    MappedToken,
    NodeTokenMapping,
    NodeVariables,
    ThemeRecord,
    ThemeToken,
)

logger = logging.getLogger(__name__)


def normalize_variable_name(name: str) -> str:
    """Turn a variable name ('color/surface/x') into a token path ('color.surface.x')."""
    return name.replace("/", ".").strip()


def to_variable_name(token_path: str) -> str:
    """Turn a token path ('color.surface.x') into a variable name ('color/surface/x')."""
    return token_path.replace(".", "/")


def _freeze(index: dict[str, list[ThemeToken]]) -> MappingProxyType[str, tuple[ThemeToken, ...]]:
    return MappingProxyType({key: tuple(entries) for key, entries in index.items()})


class TokenCatalog:
    """
    Immutable, theme-aware index of design tokens.

    Records without reference maps are skipped; a variable id reused by
    several token paths (or several themes) keeps every entry, in theme
    order.
    """

    def __init__(self, themes: Iterable[ThemeRecord]):
        """
        Build the indices.

        Args:
            themes: Theme records in `$themes.json` order
        """
        self._themes = tuple(themes)

        by_variable: dict[str, list[ThemeToken]] = {}
        by_token: dict[str, list[ThemeToken]] = {}
        by_style_token: dict[str, list[ThemeToken]] = {}

        for theme in self._themes:
            if not theme.variable_references and not theme.style_references:
                logger.debug("Theme %r has no references, skipping", theme.name)
                continue

            for token_path, variable_id in (theme.variable_references or {}).items():
                if not variable_id:
                    continue
                entry = ThemeToken.from_theme(theme, token_path, variable_id=variable_id)
                by_variable.setdefault(variable_id, []).append(entry)
                by_token.setdefault(token_path, []).append(entry)

            for token_path, style_id in (theme.style_references or {}).items():
                if not style_id:
                    continue
                entry = ThemeToken.from_theme(theme, token_path, style_id=style_id)
                by_style_token.setdefault(token_path, []).append(entry)

        self._by_variable = _freeze(by_variable)
        self._by_token = _freeze(by_token)
        self._by_style_token = _freeze(by_style_token)

    @classmethod
    def from_themes(cls, data: Iterable[ThemeRecord | dict[str, Any]]) -> TokenCatalog:
        """Build from raw `$themes.json` records or parsed ThemeRecords."""
        return cls(
            item if isinstance(item, ThemeRecord) else ThemeRecord.model_validate(item)
            for item in data
        )

    def __repr__(self) -> str:
        return (
            f"TokenCatalog({len(self._themes)} themes, "
            f"{len(self._by_token)} tokens, {len(self._by_style_token)} styles)"
        )

    @property
    def themes(self) -> tuple[ThemeRecord, ...]:
        return self._themes

    @property
    def token_paths(self) -> list[str]:
        """Variable-backed token paths, in first-seen order."""
        return list(self._by_token)

    @property
    def style_token_paths(self) -> list[str]:
        """Style-backed token paths, in first-seen order."""
        return list(self._by_style_token)

    @property
    def variable_ids(self) -> list[str]:
        return list(self._by_variable)

    def tokens_for_variable(self, variable_id: str) -> tuple[ThemeToken, ...]:
        """All token paths (with theme metadata) bound to a variable id."""
        return self._by_variable.get(variable_id, ())

    def variables_for_token(self, token_path: str) -> tuple[ThemeToken, ...]:
        """All variable ids (with theme metadata) a token path resolves to."""
        return self._by_token.get(token_path, ())

    def styles_for_token(self, token_path: str) -> tuple[ThemeToken, ...]:
        """All style ids (with theme metadata) a token path resolves to."""
        return self._by_style_token.get(token_path, ())

    def primary_token_path(self, variable_id: str) -> str | None:
        """First token path bound to a variable id, if any."""
        entries = self.tokens_for_variable(variable_id)
        return entries[0].token_path if entries else None


def map_selection_to_tokens(
    selection: Iterable[NodeVariables],
    catalog: TokenCatalog | None = None,
) -> list[NodeTokenMapping]:
    """
    Map every variable bound on a selection to a token path.

    Uses the catalog's id index first (first theme wins). Variables the
    catalog does not know, or every variable when there is no catalog,
    fall back to their normalized name without theme metadata.

    Args:
        selection: Bound variables per node
        catalog: Optional token catalog

    Returns:
        One mapping per node, in selection order
    """
    result: list[NodeTokenMapping] = []

    for node in selection:
        tokens: list[MappedToken] = []
        for variable in node.variables:
            entries = catalog.tokens_for_variable(variable.id) if catalog else ()
            if entries:
                primary = entries[0]
                tokens.append(
                    MappedToken(
                        variable_id=variable.id,
                        token_path=primary.token_path,
                        theme_name=primary.theme_name,
                        theme_group=primary.theme_group,
                        theme_id=primary.theme_id,
                        props=list(variable.props),
                    )
                )
            else:
                tokens.append(
                    MappedToken(
                        variable_id=variable.id,
                        token_path=normalize_variable_name(variable.name),
                        props=list(variable.props),
                    )
                )

        result.append(NodeTokenMapping(node_id=node.node_id, node_name=node.node_name, tokens=tokens))

    return result
