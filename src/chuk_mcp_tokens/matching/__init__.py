"""
Matching engine: value matchers, alias resolution and semantic scoring.
"""

from chuk_mcp_tokens.matching.alias import UNRESOLVED, AliasResolver
from chuk_mcp_tokens.matching.color import (
    MetricScore,
    color_confidence,
    color_distance,
    parse_color,
    score_color,
    to_hex,
)
from chuk_mcp_tokens.matching.matcher import VariableMatcher, parse_property
from chuk_mcp_tokens.matching.numeric import (
    effective_tolerance,
    numeric_confidence,
    parse_number,
    score_numeric,
)
from chuk_mcp_tokens.matching.semantic import SemanticAdjustment, SemanticScorer

__all__ = [
    "UNRESOLVED",
    "AliasResolver",
    "MetricScore",
    "SemanticAdjustment",
    "SemanticScorer",
    "VariableMatcher",
    "color_confidence",
    "color_distance",
    "effective_tolerance",
    "numeric_confidence",
    "parse_color",
    "parse_number",
    "parse_property",
    "score_color",
    "score_numeric",
    "to_hex",
]
