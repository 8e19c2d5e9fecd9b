"""
Tests for the token catalog.

Tests catalog indexing, selection mapping, validation, theme loading
and configuration.
"""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from chuk_mcp_tokens.catalog import (
    CatalogValidator,
    ThemesLoader,
    TokenCatalog,
    ValidationSeverity,
    map_selection_to_tokens,
    normalize_variable_name,
    to_variable_name,
)
from chuk_mcp_tokens.config import TokensConfig, TokensSource
from chuk_mcp_tokens.models.catalog import NodeVariables


class TestTokenCatalog:
    """Tests for TokenCatalog indices."""

    def test_variable_to_token(self, catalog: TokenCatalog):
        """Variable ids map to token paths with theme metadata."""
        tokens = catalog.tokens_for_variable("V:surface-primary")
        assert len(tokens) == 1
        assert tokens[0].token_path == "color.surface.action.primary.default"
        assert tokens[0].theme_name == "Light"
        assert tokens[0].theme_group == "Mode"
        assert tokens[0].theme_id == "light"

    def test_token_to_variables_across_themes(self, catalog: TokenCatalog):
        """A token path resolves to one variable per theme, in theme order."""
        entries = catalog.variables_for_token("color.surface.action.primary.default")
        assert [e.variable_id for e in entries] == ["V:surface-primary", "V:surface-primary-dark"]
        assert [e.theme_name for e in entries] == ["Light", "Dark"]

    def test_styles_indexed(self, catalog: TokenCatalog):
        styles = catalog.styles_for_token("typography.button.md")
        assert styles[0].style_id == "S:button-md"
        assert catalog.style_token_paths == ["typography.button.md", "effect.shadow.md"]

    def test_variable_reused_by_several_paths(self):
        """One variable id may back more than one token path."""
        catalog = TokenCatalog.from_themes(
            [
                {
                    "name": "Light",
                    "$figmaVariableReferences": {
                        "color.status.danger": "V:red",
                        "color.accent.default": "V:red",
                    },
                }
            ]
        )
        paths = [t.token_path for t in catalog.tokens_for_variable("V:red")]
        assert paths == ["color.status.danger", "color.accent.default"]
        assert catalog.primary_token_path("V:red") == "color.status.danger"

    def test_themes_without_references_skipped(self, catalog: TokenCatalog):
        """Themes without reference maps are kept but contribute nothing."""
        assert len(catalog.themes) == 3
        assert "Base" not in {e.theme_name for e in catalog.tokens_for_variable("V:success")}

    def test_empty_ids_skipped(self):
        catalog = TokenCatalog.from_themes(
            [{"name": "Light", "$figmaVariableReferences": {"color.x": "", "color.y": "V:y"}}]
        )
        assert catalog.token_paths == ["color.y"]

    def test_unknown_lookups(self, catalog: TokenCatalog):
        assert catalog.tokens_for_variable("V:nope") == ()
        assert catalog.variables_for_token("color.nope") == ()
        assert catalog.primary_token_path("V:nope") is None

    def test_name_conversion(self):
        assert normalize_variable_name("color/surface/x") == "color.surface.x"
        assert to_variable_name("color.surface.x") == "color/surface/x"


class TestSelectionMapping:
    """Tests for map_selection_to_tokens."""

    def _selection(self) -> list[NodeVariables]:
        return [
            NodeVariables.model_validate(
                {
                    "nodeId": "1:2",
                    "nodeName": "Button",
                    "variables": [
                        {
                            "id": "V:surface-primary",
                            "name": "color/surface/action/primary/default",
                            "props": ["fills"],
                        },
                        {"id": "V:unknown", "name": "color/custom/thing", "props": ["strokes"]},
                    ],
                }
            )
        ]

    def test_maps_by_id(self, catalog: TokenCatalog):
        mapping = map_selection_to_tokens(self._selection(), catalog)
        token = mapping[0].tokens[0]
        assert token.token_path == "color.surface.action.primary.default"
        assert token.theme_name == "Light"
        assert token.props == ["fills"]

    def test_falls_back_to_name(self, catalog: TokenCatalog):
        """Unknown ids map to the normalized variable name, without theme data."""
        token = map_selection_to_tokens(self._selection(), catalog)[0].tokens[1]
        assert token.token_path == "color.custom.thing"
        assert token.theme_name is None

    def test_without_catalog(self):
        mapping = map_selection_to_tokens(self._selection())
        assert [t.token_path for t in mapping[0].tokens] == [
            "color.surface.action.primary.default",
            "color.custom.thing",
        ]
        assert mapping[0].node_name == "Button"


class TestCatalogValidator:
    """Tests for CatalogValidator."""

    def test_theme_without_references_is_info(self, catalog: TokenCatalog):
        result = CatalogValidator().validate(catalog)
        assert result.is_valid
        issue = result.issues[0]
        assert issue.code == "THEME_WITHOUT_REFERENCES"
        assert issue.severity == ValidationSeverity.INFO

    def test_unknown_variable_is_warning(self, catalog: TokenCatalog, variable_set):
        """Only the Dark variable is missing from the design file."""
        result = CatalogValidator().validate(catalog, variable_set)
        unknown = [i for i in result.warnings if i.code == "UNKNOWN_VARIABLE"]
        assert len(unknown) == 1
        assert "V:surface-primary-dark" in unknown[0].message
        assert "UNRESOLVED_ALIAS" not in result.codes()

    def test_unresolved_aliases(self, catalog: TokenCatalog, cyclic_variable_set):
        result = CatalogValidator().validate(catalog, cyclic_variable_set)
        locations = {i.location for i in result.issues if i.code == "UNRESOLVED_ALIAS"}
        assert locations == {
            "variables/loop/a/m1",
            "variables/loop/b/m1",
            "variables/loop/self/m1",
            "variables/loop/dangling/m1",
        }

    def test_duplicate_theme_id_is_error(self):
        catalog = TokenCatalog.from_themes(
            [
                {"id": "t", "name": "Light", "$figmaVariableReferences": {"a": "V:a"}},
                {"id": "t", "name": "Dark", "$figmaVariableReferences": {"a": "V:b"}},
            ]
        )
        result = CatalogValidator().validate(catalog)
        assert not result.is_valid
        assert not result
        assert result.errors[0].code == "DUPLICATE_THEME_ID"

    def test_empty_catalog(self):
        result = CatalogValidator().validate(TokenCatalog([]))
        assert result.codes() == ["NO_THEMES"]

    def test_str(self):
        result = CatalogValidator().validate(
            TokenCatalog.from_themes([{"name": "Light", "$figmaVariableReferences": {"a": "V:a"}}])
        )
        assert str(result) == "Validation passed: no issues found"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload: Any, status_code: int = 200, reason: str = "OK"):
        self._payload = payload
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        return self._payload


class TestThemesLoader:
    """Tests for ThemesLoader."""

    def test_load_local(self, temp_dir: Path, themes_file: Path):
        loader = ThemesLoader(TokensConfig(tokens_path=temp_dir))
        themes = loader.load_themes()
        assert [t.name for t in themes] == ["Light", "Dark", "Base"]
        assert themes[0].collection_id == "C:theme"

    def test_catalog_cached(self, temp_dir: Path, themes_file: Path):
        loader = ThemesLoader(TokensConfig(tokens_path=temp_dir))
        first = loader.load_catalog()
        assert loader.load_catalog() is first
        loader.clear_cache()
        assert loader.load_catalog() is not first

    def test_load_yaml(self, temp_dir: Path, themes_data: list[dict[str, Any]]):
        path = temp_dir / "themes.yaml"
        path.write_text(yaml.safe_dump(themes_data))
        themes = ThemesLoader(TokensConfig(tokens_path=temp_dir)).load_file(path)
        assert themes[1].variable_references == {
            "color.surface.action.primary.default": "V:surface-primary-dark"
        }

    def test_missing_file(self, temp_dir: Path):
        loader = ThemesLoader(TokensConfig(tokens_path=temp_dir))
        with pytest.raises(ValueError, match="not found"):
            loader.load_themes()
        assert loader.load_catalog_or_none() is None

    def test_not_an_array(self, temp_dir: Path):
        (temp_dir / "$themes.json").write_text(json.dumps({"themes": []}))
        loader = ThemesLoader(TokensConfig(tokens_path=temp_dir))
        with pytest.raises(ValueError, match="expected an array, got dict"):
            loader.load_themes()

    def test_load_remote(self, monkeypatch, themes_data: list[dict[str, Any]]):
        calls: list[tuple[str, float]] = []

        def fake_get(url: str, timeout: float) -> FakeResponse:
            calls.append((url, timeout))
            return FakeResponse(themes_data)

        monkeypatch.setattr("chuk_mcp_tokens.catalog.loader.requests.get", fake_get)
        config = TokensConfig(source=TokensSource.REMOTE, themes_url="https://example.com/t.json")
        catalog = ThemesLoader(config).load_catalog()

        assert calls == [("https://example.com/t.json", 30.0)]
        assert len(catalog.themes) == 3

    def test_remote_failure(self, monkeypatch):
        monkeypatch.setattr(
            "chuk_mcp_tokens.catalog.loader.requests.get",
            lambda url, timeout: FakeResponse(None, 404, "Not Found"),
        )
        config = TokensConfig(source=TokensSource.REMOTE, themes_url="https://example.com/t.json")
        with pytest.raises(ValueError, match="404 Not Found"):
            ThemesLoader(config).load_themes()


class TestTokensConfig:
    """Tests for TokensConfig."""

    def test_defaults(self):
        config = TokensConfig.from_env({})
        assert config.source == TokensSource.LOCAL
        assert config.tokens_path == Path.cwd() / "tokens"
        assert config.themes_file.name == "$themes.json"
        assert config.tolerance == 2.0

    def test_from_env(self):
        config = TokensConfig.from_env(
            {
                "TOKENS_SOURCE": "Remote",
                "TOKENS_REMOTE_ROOT": "https://example.com/tokens/",
                "TOKENS_TOLERANCE": "3",
            }
        )
        assert config.source == TokensSource.REMOTE
        assert config.themes_url == "https://example.com/tokens/%24themes.json"
        assert config.tolerance == 3.0

    def test_explicit_url_wins(self):
        config = TokensConfig.from_env(
            {"TOKENS_THEMES_URL": "https://a/t.json", "TOKENS_REMOTE_ROOT": "https://b"}
        )
        assert config.themes_url == "https://a/t.json"

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            TokensConfig.from_env({"TOKENS_SOURCE": "ftp"})
        with pytest.raises(ValueError):
            TokensConfig.from_env({"TOKENS_TOLERANCE": "0"})
