"""
Node models - serialized design-tool nodes and their matchable values.

Nodes arrive as the host serializes them (`get_node_info`). Property
values are kept loosely typed on purpose: a malformed value must reach
the matchers, which skip it, rather than fail validation for the whole
node.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import PropertyKind


class Paint(BaseModel):
    """A fill or stroke paint."""

    type: str = "SOLID"
    visible: Any = None
    opacity: Any = None
    color: Any = Field(None, description="Hex, rgb(a) string or {r,g,b,a} floats")

    model_config = {"extra": "allow"}


class DesignNode(BaseModel):
    """
    A serialized node with the properties the engine can match.

    Field names follow the host's camelCase payload so nodes validate
    straight from `get_node_info` results.
    """

    id: str
    name: str = ""
    type: str = "FRAME"
    fills: list[Paint] | None = None
    strokes: list[Paint] | None = None
    cornerRadius: Any = None
    paddingTop: Any = None
    paddingRight: Any = None
    paddingBottom: Any = None
    paddingLeft: Any = None
    itemSpacing: Any = None
    fontSize: Any = None
    fontWeight: Any = None
    children: list[DesignNode] = Field(default_factory=list)

    model_config = {"extra": "allow"}

    @property
    def has_fills(self) -> bool:
        return bool(self.fills)

    @property
    def has_strokes(self) -> bool:
        return bool(self.strokes)

    def value_for(self, kind: PropertyKind) -> Any:
        """
        Raw observed value for a property, or None when absent.

        Paint properties use the color of the first paint.
        """
        if kind == PropertyKind.FILLS:
            return self.fills[0].color if self.fills else None
        if kind == PropertyKind.STROKES:
            return self.strokes[0].color if self.strokes else None
        return getattr(self, kind.value)

    def values(self) -> dict[PropertyKind, Any]:
        """All present matchable values, in property order."""
        result: dict[PropertyKind, Any] = {}
        for kind in PropertyKind:
            value = self.value_for(kind)
            if value is not None:
                result[kind] = value
        return result

    def text_descendants(self) -> list[DesignNode]:
        """TEXT nodes in this subtree, depth first, self included."""
        found: list[DesignNode] = []
        stack: list[DesignNode] = [self]
        while stack:
            node = stack.pop()
            if node.type == "TEXT":
                found.append(node)
            stack.extend(reversed(node.children))
        return found
