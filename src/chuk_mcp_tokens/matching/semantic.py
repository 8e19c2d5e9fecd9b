"""
Semantic scorer - uses a node's description to separate tokens that share
a value but differ in intent (a danger red and an accent red).

Adjustments apply to color candidates only, and only when a description
is supplied:
- status alignment: the description and the token name mention the same
  status (success, warning, danger, info) -> +0.5
- fill properties favor 'surface' tokens, strokes favor 'border' tokens -> +0.5
- 'foreground' tokens proposed for fills or strokes -> -0.3

Positive alignments also make a candidate eligible for the first ranking
phase in the matcher, so a boosted candidate outranks any purely metric one.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_tokens.constants import MatchType, PropertyHint
from chuk_mcp_tokens.matching.color import MetricScore

# Status -> words that signal it, in descriptions and in token names
STATUS_KEYWORDS: dict[str, tuple[str, ...]] = {
    "success": ("success", "planned"),
    "warning": ("warning",),
    "danger": ("danger", "error", "failed"),
    "info": ("info",),
}

STATUS_BOOST = 0.5
PROPERTY_BOOST = 0.5
MISMATCH_PENALTY = -0.3

# Hint -> token-name fragment it prefers
_PREFERRED_FRAGMENT: dict[PropertyHint, str] = {
    PropertyHint.FILL: "surface",
    PropertyHint.STROKE: "border",
}
_MISMATCH_FRAGMENT = "foreground"


@dataclass(frozen=True)
class SemanticAdjustment:
    """Net adjustment for one candidate."""

    boost: float = 0.0
    aligned: bool = False

    @property
    def applied(self) -> bool:
        """Whether any rule fired."""
        return self.aligned or self.boost != 0.0


NO_ADJUSTMENT = SemanticAdjustment()


def statuses_in(text: str) -> set[str]:
    """Statuses a piece of text mentions."""
    lowered = text.lower()
    return {
        status
        for status, words in STATUS_KEYWORDS.items()
        if any(word in lowered for word in words)
    }


class SemanticScorer:
    """Scores candidates against a free-text description and a property hint."""

    def score(
        self,
        token_name: str,
        hint: PropertyHint | None,
        description: str | None,
    ) -> SemanticAdjustment:
        """
        Compute the adjustment for one candidate.

        Args:
            token_name: Variable name or token path of the candidate
            hint: Property-type hint of the property being matched
            description: Free-text description of the node

        Returns:
            The adjustment (NO_ADJUSTMENT when no description is given)
        """
        if not description:
            return NO_ADJUSTMENT

        name = token_name.lower()
        boost = 0.0
        aligned = False

        if statuses_in(description) & statuses_in(name):
            boost += STATUS_BOOST
            aligned = True

        preferred = _PREFERRED_FRAGMENT.get(hint) if hint else None
        if preferred and preferred in name:
            boost += PROPERTY_BOOST
            aligned = True

        if preferred and _MISMATCH_FRAGMENT in name:
            boost += MISMATCH_PENALTY

        return SemanticAdjustment(boost=boost, aligned=aligned)

    def apply(self, metric: MetricScore, adjustment: SemanticAdjustment) -> tuple[float, MatchType]:
        """
        Combine a metric score with an adjustment.

        A distance-0 pairing stays an exact 1.0 match. Otherwise the boost
        is added to the bucket confidence, clamped to [0, 1], and the match
        type becomes semantic if any rule fired.
        """
        if metric.distance == 0 or not adjustment.applied:
            return metric.confidence, metric.match_type

        confidence = max(0.0, min(1.0, metric.confidence + adjustment.boost))
        return confidence, MatchType.SEMANTIC
