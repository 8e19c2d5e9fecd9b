"""
Numeric matcher - spacing, radius, size and typography values.

Distance is the absolute difference; buckets scale with the caller's
tolerance T: exact at 0, close within T and 2T, then a linear decay over
10T floored at 0.5.
"""

from __future__ import annotations

import math
from typing import Any

from chuk_mcp_tokens.constants import DEFAULT_TOLERANCE, MatchType
from chuk_mcp_tokens.matching.color import MetricScore

_FLOOR_CONFIDENCE = 0.5


def parse_number(value: Any) -> float | None:
    """
    Parse a numeric value ('4', '4px', 4.0).

    Returns None for unparseable or non-finite input; never raises.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().lower().removesuffix("px").strip()
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def effective_tolerance(tolerance: float | None) -> float:
    """Tolerance to use; missing, non-positive or non-finite means the default."""
    if tolerance is None or not math.isfinite(tolerance) or tolerance <= 0:
        return DEFAULT_TOLERANCE
    return float(tolerance)


def numeric_confidence(distance: float, tolerance: float | None = None) -> tuple[float, MatchType]:
    """Confidence bucket for a numeric distance."""
    t = effective_tolerance(tolerance)
    if distance == 0:
        return 1.0, MatchType.EXACT
    if distance <= t:
        return 0.95, MatchType.CLOSE
    if distance <= t * 2:
        return 0.85, MatchType.CLOSE
    return min(0.85, max(_FLOOR_CONFIDENCE, 1 - distance / (t * 10))), MatchType.SEMANTIC


def score_numeric(
    observed: Any,
    candidate: Any,
    tolerance: float | None = None,
) -> MetricScore | None:
    """
    Score a candidate number against an observed number.

    Args:
        observed: Observed value
        candidate: Candidate token value
        tolerance: Close-match tolerance (default 2)

    Returns:
        The score, or None if either value is unparseable
    """
    observed_num = parse_number(observed)
    candidate_num = parse_number(candidate)
    if observed_num is None or candidate_num is None:
        return None

    distance = abs(observed_num - candidate_num)
    confidence, match_type = numeric_confidence(distance, tolerance)
    return MetricScore(distance=distance, confidence=confidence, match_type=match_type)
