"""
Variable Matcher - pairs observed node values with design-file variables.

Candidates are theme variables only: variables in foundation collections
(Brand, Scale, Platform, Typography, Effect, Foundation) never match,
except that cornerRadius also draws from the Scale collection's
'radius/' variables.

Ranking is two-phase. Candidates the semantic scorer aligned with the
description are ranked first, by raw distance; the full candidate set is
ranked only when none qualify. Ties go to the first candidate seen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from chuk_mcp_tokens.catalog.index import TokenCatalog, normalize_variable_name
from chuk_mcp_tokens.constants import ErrorMessages, PropertyKind, ValueShape
from chuk_mcp_tokens.matching.alias import UNRESOLVED, AliasResolver
from chuk_mcp_tokens.matching.color import MetricScore, score_color
from chuk_mcp_tokens.matching.numeric import score_numeric
from chuk_mcp_tokens.matching.semantic import SemanticAdjustment, SemanticScorer
from chuk_mcp_tokens.models.match import PropertyMatch, ValueMatch
from chuk_mcp_tokens.models.node import DesignNode
from chuk_mcp_tokens.models.variables import DesignVariable, VariableSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Scored:
    variable: DesignVariable
    value: Any
    metric: MetricScore
    adjustment: SemanticAdjustment


def parse_property(name: str | PropertyKind) -> PropertyKind:
    """
    Parse a property name into a PropertyKind.

    Raises:
        ValueError: If the name is not a supported property
    """
    if isinstance(name, PropertyKind):
        return name
    try:
        return PropertyKind(name)
    except ValueError:
        raise ValueError(ErrorMessages.UNKNOWN_PROPERTY.format(name=name)) from None


class VariableMatcher:
    """
    Matches node values against a design file's theme variables.

    Stateless apart from the variable set and catalog it reads; safe to
    share across concurrent matches.
    """

    def __init__(
        self,
        variables: VariableSet,
        catalog: TokenCatalog | None = None,
        scorer: SemanticScorer | None = None,
    ):
        """
        Initialize the matcher.

        Args:
            variables: Full variable set (aliases resolve against all of it)
            catalog: Optional catalog used to report canonical token paths
            scorer: Semantic scorer (default instance if omitted)
        """
        self.variables = variables
        self.catalog = catalog
        self.scorer = scorer or SemanticScorer()
        self.resolver = AliasResolver(variables)
        self._theme = variables.theme_variables()
        self._radius_scale = variables.radius_scale_variables()

    def candidates_for(self, kind: PropertyKind) -> list[DesignVariable]:
        """Variables eligible for a property, in design-file order."""
        candidates = [v for v in self._theme if v.resolved_type == kind.variable_type]
        if kind == PropertyKind.CORNER_RADIUS:
            seen = {v.id for v in candidates}
            candidates.extend(v for v in self._radius_scale if v.id not in seen)
        return candidates

    def token_path_for(self, variable: DesignVariable) -> str:
        """Canonical token path for a variable (catalog first, then its name)."""
        if self.catalog is not None:
            path = self.catalog.primary_token_path(variable.id)
            if path:
                return path
        return normalize_variable_name(variable.name)

    def match(
        self,
        kind: PropertyKind | str,
        observed: Any,
        description: str | None = None,
        tolerance: float | None = None,
    ) -> ValueMatch | None:
        """
        Find the best variable for one observed value.

        Args:
            kind: Property the value belongs to
            observed: Observed value (color or number)
            description: Optional node description for semantic scoring
            tolerance: Numeric tolerance (default 2)

        Returns:
            The best match, or None if no candidate could be scored
        """
        kind = parse_property(kind)
        scored: list[_Scored] = []

        for variable in self.candidates_for(kind):
            item = self._score(kind, observed, variable, description, tolerance)
            if item is not None:
                scored.append(item)

        if not scored:
            logger.debug("No candidate scored for %s=%r", kind.value, observed)
            return None

        best = self._rank(scored)
        confidence, match_type = self.scorer.apply(best.metric, best.adjustment)

        return ValueMatch(
            token_path=self.token_path_for(best.variable),
            variable_name=best.variable.name,
            variable_id=best.variable.id,
            collection_id=best.variable.collection_id or None,
            confidence=confidence,
            match_type=match_type,
            actual_value=observed,
            token_value=best.value,
        )

    def match_node(
        self,
        node: DesignNode,
        description: str | None = None,
        tolerance: float | None = None,
    ) -> list[PropertyMatch]:
        """Match every present property of a node, independently."""
        return [
            PropertyMatch(property=kind, match=self.match(kind, value, description, tolerance))
            for kind, value in node.values().items()
        ]

    def _score(
        self,
        kind: PropertyKind,
        observed: Any,
        variable: DesignVariable,
        description: str | None,
        tolerance: float | None,
    ) -> _Scored | None:
        if not variable.values_by_mode:
            return None

        value = self.resolver.resolve(variable.first_value)
        if value is UNRESOLVED:
            logger.debug("Skipping %s: value does not resolve", variable.name)
            return None

        if kind.shape == ValueShape.COLOR:
            metric = score_color(observed, value)
            adjustment = self.scorer.score(variable.name, kind.hint, description)
        else:
            metric = score_numeric(observed, value, tolerance)
            adjustment = SemanticAdjustment()

        if metric is None:
            logger.debug("Skipping %s: cannot compare %r with %r", variable.name, observed, value)
            return None

        return _Scored(variable=variable, value=value, metric=metric, adjustment=adjustment)

    @staticmethod
    def _rank(scored: list[_Scored]) -> _Scored:
        aligned = [s for s in scored if s.adjustment.aligned]
        pool = aligned or scored
        # min() keeps the first of equal elements
        return min(pool, key=lambda s: s.metric.distance)
