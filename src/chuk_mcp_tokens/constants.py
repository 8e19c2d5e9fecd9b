"""
Constants and enums for the token system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class ValueShape(str, Enum):
    """Shape of the value a property carries."""

    COLOR = "color"
    NUMERIC = "numeric"


class PropertyHint(str, Enum):
    """Property-type hint used for semantic scoring."""

    FILL = "fill"
    STROKE = "stroke"
    RADIUS = "radius"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"


class PropertyKind(str, Enum):
    """
    Closed set of node properties the matcher understands.

    Values are the design tool's own property names, so a kind can be
    sent to the host unchanged.
    """

    FILLS = "fills"
    STROKES = "strokes"
    CORNER_RADIUS = "cornerRadius"
    PADDING_TOP = "paddingTop"
    PADDING_RIGHT = "paddingRight"
    PADDING_BOTTOM = "paddingBottom"
    PADDING_LEFT = "paddingLeft"
    ITEM_SPACING = "itemSpacing"
    FONT_SIZE = "fontSize"
    FONT_WEIGHT = "fontWeight"

    @property
    def shape(self) -> ValueShape:
        """Value shape this property carries."""
        if self in (PropertyKind.FILLS, PropertyKind.STROKES):
            return ValueShape.COLOR
        return ValueShape.NUMERIC

    @property
    def hint(self) -> PropertyHint:
        """Semantic hint for this property."""
        return _PROPERTY_HINTS[self]

    @property
    def variable_type(self) -> str:
        """Design-tool variable type that can bind to this property."""
        return "COLOR" if self.shape == ValueShape.COLOR else "FLOAT"


_PROPERTY_HINTS: dict[PropertyKind, PropertyHint] = {
    PropertyKind.FILLS: PropertyHint.FILL,
    PropertyKind.STROKES: PropertyHint.STROKE,
    PropertyKind.CORNER_RADIUS: PropertyHint.RADIUS,
    PropertyKind.PADDING_TOP: PropertyHint.SPACING,
    PropertyKind.PADDING_RIGHT: PropertyHint.SPACING,
    PropertyKind.PADDING_BOTTOM: PropertyHint.SPACING,
    PropertyKind.PADDING_LEFT: PropertyHint.SPACING,
    PropertyKind.ITEM_SPACING: PropertyHint.SPACING,
    PropertyKind.FONT_SIZE: PropertyHint.TYPOGRAPHY,
    PropertyKind.FONT_WEIGHT: PropertyHint.TYPOGRAPHY,
}


class MatchType(str, Enum):
    """How a value was paired with a token."""

    EXACT = "exact"
    CLOSE = "close"
    SEMANTIC = "semantic"


class Role(str, Enum):
    """Semantic role of an action-like instance."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"


# Collections holding base scales; never proposed for component bindings
FOUNDATION_COLLECTIONS: frozenset[str] = frozenset(
    {"brand", "scale", "platform", "typography", "effect", "foundation"}
)

# The foundation collection whose radius variables are allowed for cornerRadius
RADIUS_SCALE_COLLECTION = "scale"
RADIUS_VARIABLE_PREFIX = "radius/"

ALIAS_TYPE = "VARIABLE_ALIAS"

DEFAULT_TOLERANCE = 2.0

# Minimum phrase score accepted by the phrase resolver
PHRASE_SCORE_THRESHOLD = 2

# Foreground token names used for action-like instances
FOREGROUND_TOKEN_TEMPLATE = "color/foreground/action/{role}/default"
SECONDARY_FOREGROUND_TOKEN = "color/foreground/action/primary/inverse/default"

StyleType = Literal["text", "effect"]


class HostCommand:
    """Command names understood by the design tool host."""

    GET_NODE_INFO = "get_node_info"
    SET_VARIABLE_BINDING = "set_variable_binding"


class ErrorMessages:
    """Standardized error messages."""

    NO_CATALOG = "No token catalog loaded. Configure TOKENS_PATH or TOKENS_THEMES_URL."
    THEMES_NOT_FOUND = "Themes file not found: {path}"
    THEMES_NOT_ARRAY = "Unexpected themes payload from {source}: expected an array, got {kind}"
    THEMES_FETCH_FAILED = "Failed to load themes from {url}: {status}"
    UNKNOWN_PROPERTY = "Unknown property: '{name}'"
    NO_MATCH = "No matching token found"
    VARIABLE_NOT_FOUND = 'Variable "{name}" not found in design file'
    BIND_FAILED = "Failed to bind variable"
    BIND_FOREGROUND_FAILED = "Failed to bind foreground variable"
    NODE_NOT_FOUND = "Could not fetch node data for node {node_id}"
    SESSION_REQUIRED = "Applying tokens requires a host session"


class SuccessMessages:
    """Standardized success messages."""

    TOKENS_APPLIED = "Applied {count} tokens."
    TOKENS_NOT_APPLIED = "Tokens not applied - set apply_tokens=true to apply."
