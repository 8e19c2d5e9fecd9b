#!/usr/bin/env python3
"""
Example: Matching node values to design tokens.

This demonstrates how raw values on a design-tool node (hex colors,
pixel spacing) are paired with theme variables, how a description
steers between tokens that share a color, and how a button group is
turned into a plan of variable bindings.

Usage:
    python examples/match_tokens.py
"""

import asyncio

from chuk_mcp_tokens.catalog import TokenCatalog
from chuk_mcp_tokens.models.node import DesignNode
from chuk_mcp_tokens.models.variables import VariableSet
from chuk_mcp_tokens.orchestrator import BindingPlanSession, MatchOrchestrator
from chuk_mcp_tokens.phrases import PhraseResolver

THEMES = [
    {
        "id": "light",
        "name": "Light",
        "group": "Mode",
        "$figmaVariableReferences": {
            "color.surface.action.primary.default": "V:surface",
            "color.status.success": "V:success",
            "color.status.danger": "V:danger",
            "color.foreground.action.primary.default": "V:on-primary",
            "spacing.md": "V:spacing-md",
        },
        "$figmaStyleReferences": {"typography.button.md": "S:button-md"},
    }
]


def _variable(variable_id: str, name: str, kind: str, value: object) -> dict:
    return {"id": variable_id, "name": name, "type": kind, "valuesByMode": {"m1": value}}


COLLECTIONS = [
    {
        "id": "C:brand",
        "name": "Brand",
        "variables": [_variable("V:blue", "brand/blue/600", "COLOR", "#0650D0")],
    },
    {
        "id": "C:theme",
        "name": "Theme",
        "variables": [
            _variable(
                "V:surface",
                "color/surface/action/primary/default",
                "COLOR",
                {"type": "VARIABLE_ALIAS", "id": "V:blue"},
            ),
            _variable("V:success", "color/status/success", "COLOR", "#CB2C28"),
            _variable("V:danger", "color/status/danger", "COLOR", "#D43828"),
            _variable("V:on-primary", "color/foreground/action/primary/default", "COLOR", "#FFFFFF"),
            _variable("V:spacing-md", "spacing/md", "FLOAT", 16),
        ],
    },
]


async def main() -> None:
    """Demonstrate token matching."""
    print("CHUK Tokens Matching Demo")
    print("=" * 40)
    print()

    catalog = TokenCatalog.from_themes(THEMES)
    variables = VariableSet.from_export(COLLECTIONS)
    orchestrator = MatchOrchestrator(variables, catalog)

    # Single values
    print("Single values:")
    for kind, value, description in [
        ("fills", "#0650D0", None),
        ("fills", "#0B55D0", None),
        ("paddingTop", 15, None),
        ("fills", "#C82828", None),
        ("fills", "#C82828", "danger status"),
    ]:
        match = orchestrator.matcher.match(kind, value, description)
        label = f"{kind}={value}" + (f" ({description})" if description else "")
        if match:
            print(
                f"  {label}: {match.token_path} "
                f"[{match.match_type.value}, {match.confidence:.2f}]"
            )
        else:
            print(f"  {label}: no match")
    print()

    # A button group planned as bindings
    group = DesignNode.model_validate(
        {
            "id": "1:1",
            "name": "Button Group",
            "type": "FRAME",
            "children": [
                {
                    "id": "1:2",
                    "name": "Primary Button",
                    "type": "INSTANCE",
                    "fills": [{"color": "#0650D0"}],
                    "paddingTop": 16,
                    "children": [{"id": "1:3", "name": "Label", "type": "TEXT"}],
                }
            ],
        }
    )
    session = BindingPlanSession([group])
    report = await orchestrator.tokenize(group, apply=True, session=session)
    print(report.summary())
    print()

    print("Planned commands:")
    for command in session.commands():
        params = command["params"]
        print(f"  {command['command']}: {params['nodeId']}.{params['propertyName']} -> {params['variableId']}")
    print()

    # Phrases
    resolver = PhraseResolver(catalog, variables)
    print("Phrases:")
    for phrase in ["primary surface background", "button md text style", "banana"]:
        resolved = resolver.resolve(phrase)
        if resolved:
            print(f"  {phrase!r}: {resolved.token_path} ({resolved.property_name})")
        else:
            print(f"  {phrase!r}: no match")


if __name__ == "__main__":
    asyncio.run(main())
