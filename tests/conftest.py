"""
Pytest configuration and shared fixtures.

The fixture design file has three collections:
- Brand (foundation): raw brand colors
- Scale (foundation): radius and spacing scales
- Theme: semantic tokens, several aliasing into Brand/Scale
"""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_tokens.catalog import TokenCatalog
from chuk_mcp_tokens.models.variables import VariableSet


def _variable(variable_id: str, name: str, kind: str, value: Any) -> dict[str, Any]:
    return {"id": variable_id, "name": name, "type": kind, "valuesByMode": {"m1": value}}


def _alias(variable_id: str) -> dict[str, str]:
    return {"type": "VARIABLE_ALIAS", "id": variable_id}


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def themes_data() -> list[dict[str, Any]]:
    """Raw $themes.json records: Light and Dark, plus a theme without references."""
    return [
        {
            "id": "light",
            "name": "Light",
            "group": "Mode",
            "$figmaCollectionId": "C:theme",
            "$figmaModeId": "m1",
            "$figmaVariableReferences": {
                "color.surface.action.primary.default": "V:surface-primary",
                "color.status.success": "V:success",
                "color.status.danger": "V:danger",
                "color.border.default": "V:border",
                "color.foreground.action.primary.default": "V:fg-primary",
                "spacing.md": "V:spacing-md",
            },
            "$figmaStyleReferences": {
                "typography.button.md": "S:button-md",
                "effect.shadow.md": "S:shadow-md",
            },
            "selectedTokenSets": {"core": "enabled"},
        },
        {
            "id": "dark",
            "name": "Dark",
            "group": "Mode",
            "$figmaVariableReferences": {
                "color.surface.action.primary.default": "V:surface-primary-dark",
            },
        },
        {"id": "base", "name": "Base"},
    ]


@pytest.fixture
def catalog(themes_data: list[dict[str, Any]]) -> TokenCatalog:
    return TokenCatalog.from_themes(themes_data)


@pytest.fixture
def collections_payload() -> list[dict[str, Any]]:
    """export_variable_collections payload for the fixture design file."""
    modes = [{"modeId": "m1", "name": "Default"}]
    return [
        {
            "id": "C:brand",
            "name": "Brand",
            "modes": modes,
            "variables": [
                _variable("V:brand-blue", "brand/blue/600", "COLOR", "#0650D0"),
                _variable("V:brand-red", "brand/red/600", "COLOR", "#D02020"),
            ],
        },
        {
            "id": "C:scale",
            "name": "Scale",
            "modes": modes,
            "variables": [
                _variable("V:radius-small", "radius/Small", "FLOAT", 3),
                _variable("V:radius-medium", "radius/Medium", "FLOAT", 6),
                _variable("V:scale-4", "spacing/4", "FLOAT", 16),
            ],
        },
        {
            "id": "C:theme",
            "name": "Theme",
            "modes": modes,
            "variables": [
                _variable(
                    "V:surface-primary",
                    "color/surface/action/primary/default",
                    "COLOR",
                    _alias("V:brand-blue"),
                ),
                _variable("V:success", "color/status/success", "COLOR", "#CB2C28"),
                _variable("V:danger", "color/status/danger", "COLOR", "#D43828"),
                _variable(
                    "V:border",
                    "color/border/default",
                    "COLOR",
                    {"r": 0.8, "g": 0.8, "b": 0.8, "a": 1},
                ),
                _variable(
                    "V:fg-primary", "color/foreground/action/primary/default", "COLOR", "#FFFFFF"
                ),
                _variable(
                    "V:fg-primary-inverse",
                    "color/foreground/action/primary/inverse/default",
                    "COLOR",
                    _alias("V:brand-blue"),
                ),
                _variable(
                    "V:fg-accent", "color/foreground/action/accent/default", "COLOR", "#FFFFFF"
                ),
                _variable("V:spacing-sm", "spacing/sm", "FLOAT", 8),
                _variable("V:spacing-md", "spacing/md", "FLOAT", _alias("V:scale-4")),
                _variable("V:font-body", "font/size/body", "FLOAT", 14),
                _variable("V:label", "label/default", "STRING", "Label"),
            ],
        },
    ]


@pytest.fixture
def variable_set(collections_payload: list[dict[str, Any]]) -> VariableSet:
    return VariableSet.from_export(collections_payload)


@pytest.fixture
def cyclic_variable_set() -> VariableSet:
    """Variables with self-referencing, mutual and dangling aliases."""
    return VariableSet.from_export(
        [
            {
                "id": "C:theme",
                "name": "Theme",
                "variables": [
                    _variable("V:a", "loop/a", "FLOAT", _alias("V:b")),
                    _variable("V:b", "loop/b", "FLOAT", _alias("V:a")),
                    _variable("V:self", "loop/self", "FLOAT", _alias("V:self")),
                    _variable("V:dangling", "loop/dangling", "FLOAT", _alias("V:missing")),
                    _variable("V:zero", "spacing/none", "FLOAT", 0),
                    _variable("V:to-zero", "spacing/zero-alias", "FLOAT", _alias("V:zero")),
                    {"id": "V:empty", "name": "spacing/empty", "type": "FLOAT", "valuesByMode": {}},
                ],
            }
        ]
    )


@pytest.fixture
def themes_file(temp_dir: Path, themes_data: list[dict[str, Any]]) -> Path:
    """$themes.json written to a temporary tokens directory."""
    path = temp_dir / "$themes.json"
    path.write_text(json.dumps(themes_data))
    return path
