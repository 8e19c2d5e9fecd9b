"""
Tests for the matching engine.

Tests color and numeric matchers, alias resolution, semantic scoring
and variable matching against the fixture design file.
"""

import math

import pytest

from chuk_mcp_tokens.catalog import TokenCatalog
from chuk_mcp_tokens.constants import MatchType, PropertyHint, PropertyKind
from chuk_mcp_tokens.matching import (
    UNRESOLVED,
    AliasResolver,
    MetricScore,
    SemanticScorer,
    VariableMatcher,
    color_confidence,
    numeric_confidence,
    parse_color,
    parse_number,
    parse_property,
    score_color,
    score_numeric,
    to_hex,
)
from chuk_mcp_tokens.models.node import DesignNode
from chuk_mcp_tokens.models.variables import VariableAlias, VariableSet


class TestParseColor:
    """Tests for color normalization."""

    def test_hex_forms(self):
        assert parse_color("#0650D0") == (6, 80, 208)
        assert parse_color("#fff") == (255, 255, 255)
        assert parse_color("#0650D0FF") == (6, 80, 208)
        assert parse_color("0650d0") == (6, 80, 208)

    def test_rgba_strings(self):
        assert parse_color("rgb(6, 80, 208)") == (6, 80, 208)
        assert parse_color("rgba(6,80,208,0.5)") == (6, 80, 208)
        assert parse_color("rgba(6.4, 79.6, 208, 1)") == (6, 80, 208)

    def test_float_components(self):
        assert parse_color({"r": 0.8, "g": 0.8, "b": 0.8, "a": 1}) == (204, 204, 204)
        assert parse_color({"r": 0, "g": 0.5, "b": 1}) == (0, 128, 255)

    @pytest.mark.parametrize(
        "value",
        ["", "#12", "#GGGGGG", "red", "rgb(1, 2)", None, 42, {"r": 1, "g": 1}, {"r": "x", "g": 0, "b": 0}],
    )
    def test_unparseable(self, value):
        """Malformed colors return None instead of raising."""
        assert parse_color(value) is None

    def test_non_finite_components(self):
        assert parse_color({"r": math.nan, "g": 0, "b": 0}) is None

    def test_to_hex(self):
        assert to_hex((6, 80, 208)) == "#0650d0"


class TestColorConfidence:
    """Tests for color distance buckets."""

    def test_buckets(self):
        assert color_confidence(0) == (1.0, MatchType.EXACT)
        assert color_confidence(9.9) == (0.95, MatchType.CLOSE)
        assert color_confidence(10) == (0.85, MatchType.CLOSE)
        assert color_confidence(29.9) == (0.85, MatchType.CLOSE)
        confidence, match_type = color_confidence(100)
        assert match_type == MatchType.SEMANTIC
        assert confidence == pytest.approx(1 - 100 / 255)

    def test_floor(self):
        assert color_confidence(441.7)[0] == 0.5

    def test_monotonic(self):
        """Confidence never increases with distance."""
        confidences = [color_confidence(d / 4)[0] for d in range(0, 1800)]
        assert all(a >= b for a, b in zip(confidences, confidences[1:]))

    def test_exact_distance(self):
        score = score_color("#0650D0", {"r": 6 / 255, "g": 80 / 255, "b": 208 / 255})
        assert score == MetricScore(0.0, 1.0, MatchType.EXACT)

    def test_unparseable_pair(self):
        assert score_color("#0650D0", "not-a-color") is None


class TestNumericMatcher:
    """Tests for numeric matching."""

    def test_parse(self):
        assert parse_number("4px") == 4.0
        assert parse_number(" 4.5 ") == 4.5
        assert parse_number(0) == 0.0
        assert parse_number(True) is None
        assert parse_number("auto") is None
        assert parse_number(float("inf")) is None

    def test_buckets(self):
        assert numeric_confidence(0, 2) == (1.0, MatchType.EXACT)
        assert numeric_confidence(2, 2) == (0.95, MatchType.CLOSE)
        assert numeric_confidence(4, 2) == (0.85, MatchType.CLOSE)
        confidence, match_type = numeric_confidence(5, 2)
        assert match_type == MatchType.SEMANTIC
        assert confidence == pytest.approx(0.75)
        assert numeric_confidence(100, 2)[0] == 0.5

    @pytest.mark.parametrize("tolerance", [0.5, 1, 2, 4, 8])
    def test_exactly_tolerance_is_close(self, tolerance):
        """A value exactly T away never scores above 0.95."""
        score = score_numeric(10, 10 + tolerance, tolerance)
        assert score is not None
        assert score.confidence == 0.95

    def test_non_positive_tolerance_uses_default(self):
        assert numeric_confidence(2, 0) == (0.95, MatchType.CLOSE)
        assert numeric_confidence(2, -1) == (0.95, MatchType.CLOSE)

    def test_monotonic(self):
        confidences = [numeric_confidence(d / 10, 2)[0] for d in range(0, 500)]
        assert all(a >= b for a, b in zip(confidences, confidences[1:]))

    def test_unparseable(self):
        assert score_numeric("abc", 4) is None
        assert score_numeric(4, None) is None


class TestAliasResolver:
    """Tests for AliasResolver."""

    def test_literal_passthrough(self, variable_set: VariableSet):
        resolver = AliasResolver(variable_set)
        assert resolver.resolve("#FFFFFF") == "#FFFFFF"
        assert resolver.resolve(0) == 0

    def test_resolves_into_foundation(self, variable_set: VariableSet):
        """Aliases resolve against the full set, foundation included."""
        resolver = AliasResolver(variable_set)
        assert resolver.resolve(VariableAlias(id="V:brand-blue")) == "#0650D0"
        assert resolver.resolve({"type": "VARIABLE_ALIAS", "id": "V:scale-4"}) == 16
        assert resolver.resolve_variable("V:spacing-md") == 16

    def test_cycles_terminate(self, cyclic_variable_set: VariableSet):
        resolver = AliasResolver(cyclic_variable_set)
        assert resolver.resolve_variable("V:a") is UNRESOLVED
        assert resolver.resolve_variable("V:b") is UNRESOLVED
        assert resolver.resolve_variable("V:self") is UNRESOLVED

    def test_missing_and_empty(self, cyclic_variable_set: VariableSet):
        resolver = AliasResolver(cyclic_variable_set)
        assert resolver.resolve_variable("V:dangling") is UNRESOLVED
        assert resolver.resolve_variable("V:empty") is UNRESOLVED
        assert resolver.resolve_variable("V:nope") is UNRESOLVED

    def test_zero_is_a_value(self, cyclic_variable_set: VariableSet):
        resolver = AliasResolver(cyclic_variable_set)
        assert resolver.resolve_variable("V:to-zero") == 0
        assert resolver.is_resolvable(VariableAlias(id="V:zero"))

    def test_visited_is_extended(self, variable_set: VariableSet):
        visited: set[str] = set()
        AliasResolver(variable_set).resolve(VariableAlias(id="V:spacing-md"), visited)
        assert visited == {"V:spacing-md", "V:scale-4"}

    def test_is_resolvable_with_visited(self, variable_set: VariableSet):
        """An alias back to an already-visited variable does not resolve."""
        resolver = AliasResolver(variable_set)
        alias = VariableAlias(id="V:scale-4")
        assert resolver.is_resolvable(alias)
        assert not resolver.is_resolvable(alias, visited={"V:scale-4"})


class TestSemanticScorer:
    """Tests for SemanticScorer."""

    def test_no_description(self):
        adjustment = SemanticScorer().score("color/surface/x", PropertyHint.FILL, None)
        assert not adjustment.applied

    def test_status_alignment(self):
        scorer = SemanticScorer()
        danger = scorer.score("color/status/danger", PropertyHint.FILL, "danger status")
        success = scorer.score("color/status/success", PropertyHint.FILL, "danger status")
        assert danger.aligned and danger.boost == 0.5
        assert not success.applied

    def test_status_synonyms(self):
        scorer = SemanticScorer()
        assert scorer.score("color/status/success", None, "planned slot").aligned
        assert scorer.score("color/status/danger", None, "upload failed").aligned
        assert scorer.score("color/status/error", None, "danger zone").aligned

    def test_property_alignment(self):
        scorer = SemanticScorer()
        assert scorer.score("color/surface/card", PropertyHint.FILL, "card").boost == 0.5
        assert scorer.score("color/border/card", PropertyHint.STROKE, "card").boost == 0.5
        assert not scorer.score("color/border/card", PropertyHint.FILL, "card").applied

    def test_foreground_penalty(self):
        scorer = SemanticScorer()
        adjustment = scorer.score("color/foreground/x", PropertyHint.STROKE, "card")
        assert adjustment.boost == pytest.approx(-0.3)
        assert not adjustment.aligned

        confidence, match_type = scorer.apply(MetricScore(5, 0.95, MatchType.CLOSE), adjustment)
        assert confidence == pytest.approx(0.65)
        assert match_type == MatchType.SEMANTIC

    def test_confidence_clamped(self):
        scorer = SemanticScorer()
        adjustment = scorer.score("color/status/danger/surface", PropertyHint.FILL, "danger")
        assert adjustment.boost == 1.0
        confidence, _ = scorer.apply(MetricScore(20, 0.85, MatchType.CLOSE), adjustment)
        assert confidence == 1.0

    def test_exact_stays_exact(self):
        scorer = SemanticScorer()
        adjustment = scorer.score("color/surface/x", PropertyHint.FILL, "card")
        assert scorer.apply(MetricScore(0, 1.0, MatchType.EXACT), adjustment) == (
            1.0,
            MatchType.EXACT,
        )


class TestVariableMatcher:
    """Tests for VariableMatcher against the fixture design file."""

    def test_exact_color(self, variable_set: VariableSet, catalog: TokenCatalog):
        """An exact color resolves through an alias to the catalog's token path."""
        match = VariableMatcher(variable_set, catalog).match(PropertyKind.FILLS, "#0650D0")
        assert match is not None
        assert match.token_path == "color.surface.action.primary.default"
        assert match.variable_id == "V:surface-primary"
        assert match.collection_id == "C:theme"
        assert match.confidence == 1.0
        assert match.match_type == MatchType.EXACT
        assert match.token_value == "#0650D0"

    @pytest.mark.parametrize("observed", ["#0650D5", "#0B55D0"])
    def test_close_color(self, variable_set: VariableSet, observed: str):
        match = VariableMatcher(variable_set).match("fills", observed)
        assert match is not None
        assert match.variable_name == "color/surface/action/primary/default"
        assert match.confidence == 0.95
        assert match.match_type == MatchType.CLOSE

    def test_radius_from_scale(self, variable_set: VariableSet):
        """cornerRadius may draw from the Scale collection's radius variables."""
        match = VariableMatcher(variable_set).match(PropertyKind.CORNER_RADIUS, 4, tolerance=2)
        assert match is not None
        assert match.variable_name == "radius/Small"
        assert match.token_path == "radius.Small"
        assert match.confidence == 0.95
        assert match.match_type == MatchType.CLOSE

    def test_semantic_dominance(self, variable_set: VariableSet):
        """A status-aligned candidate outranks a metrically closer one."""
        matcher = VariableMatcher(variable_set)
        match = matcher.match(PropertyKind.FILLS, "#C82828", description="danger status")
        assert match is not None
        assert match.variable_name == "color/status/danger"
        assert match.match_type == MatchType.SEMANTIC
        assert match.confidence == 1.0

    def test_closest_without_description(self, variable_set: VariableSet):
        match = VariableMatcher(variable_set).match(PropertyKind.FILLS, "#C82828")
        assert match is not None
        assert match.variable_name == "color/status/success"
        assert match.match_type == MatchType.CLOSE

    def test_never_matches_foundation_colors(self, variable_set: VariableSet):
        match = VariableMatcher(variable_set).match(PropertyKind.FILLS, "#D02020")
        assert match is not None
        assert not match.variable_name.startswith("brand/")
        assert match.collection_id == "C:theme"

    def test_never_matches_foundation_spacing(self, variable_set: VariableSet):
        """Spacing resolves to the theme token aliasing the Scale value."""
        match = VariableMatcher(variable_set).match(PropertyKind.ITEM_SPACING, 16)
        assert match is not None
        assert match.variable_name == "spacing/md"
        assert match.match_type == MatchType.EXACT

    def test_candidates(self, variable_set: VariableSet):
        matcher = VariableMatcher(variable_set)
        padding = {v.name for v in matcher.candidates_for(PropertyKind.PADDING_TOP)}
        radius = {v.name for v in matcher.candidates_for(PropertyKind.CORNER_RADIUS)}
        assert "radius/Small" not in padding
        assert {"radius/Small", "radius/Medium"} <= radius
        assert "spacing/4" not in radius

    def test_unparseable_observed(self, variable_set: VariableSet):
        matcher = VariableMatcher(variable_set)
        assert matcher.match(PropertyKind.FILLS, "chartreuse-ish") is None
        assert matcher.match(PropertyKind.PADDING_LEFT, "auto") is None

    def test_malformed_candidates_skipped(self):
        """Broken candidates are skipped; the rest still match."""
        variables = VariableSet.from_export(
            [
                {
                    "id": "C:theme",
                    "name": "Theme",
                    "variables": [
                        {"id": "V:bad", "name": "color/bad", "type": "COLOR", "valuesByMode": {"m": "oops"}},
                        {
                            "id": "V:loop",
                            "name": "color/loop",
                            "type": "COLOR",
                            "valuesByMode": {"m": {"type": "VARIABLE_ALIAS", "id": "V:loop"}},
                        },
                        {"id": "V:ok", "name": "color/ok", "type": "COLOR", "valuesByMode": {"m": "#000"}},
                    ],
                }
            ]
        )
        match = VariableMatcher(variables).match(PropertyKind.FILLS, "#010101")
        assert match is not None
        assert match.variable_id == "V:ok"

    def test_unknown_property(self, variable_set: VariableSet):
        with pytest.raises(ValueError, match="Unknown property"):
            VariableMatcher(variable_set).match("backgroundBlur", 4)
        assert parse_property("fontSize") == PropertyKind.FONT_SIZE

    def test_match_node(self, variable_set: VariableSet):
        node = DesignNode.model_validate(
            {
                "id": "1:1",
                "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}}],
                "paddingTop": 8,
                "fontSize": "14px",
                "fontWeight": 700,
            }
        )
        matches = VariableMatcher(variable_set).match_node(node)
        by_kind = {m.property: m.match for m in matches}
        assert list(by_kind) == [
            PropertyKind.FILLS,
            PropertyKind.PADDING_TOP,
            PropertyKind.FONT_SIZE,
            PropertyKind.FONT_WEIGHT,
        ]
        assert by_kind[PropertyKind.FILLS].variable_name == "color/foreground/action/primary/default"
        assert by_kind[PropertyKind.PADDING_TOP].variable_name == "spacing/sm"
        assert by_kind[PropertyKind.FONT_SIZE].variable_name == "font/size/body"
        assert by_kind[PropertyKind.FONT_WEIGHT].match_type == MatchType.SEMANTIC
