"""
Color matcher - distance and confidence between two colors.

Colors are normalized to 0-255 RGB triples. Accepted inputs:
- hex strings: '#RGB', '#RRGGBB', '#RRGGBBAA' (alpha ignored)
- 'rgb(r, g, b)' / 'rgba(r, g, b, a)' strings with 0-255 channels
- {r, g, b[, a]} mappings with 0..1 float channels
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chuk_mcp_tokens.constants import MatchType

RGB = tuple[int, int, int]

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_RGBA_RE = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*[\d.]+%?\s*)?\)$",
    re.IGNORECASE,
)

# Distance buckets: (exclusive upper bound, confidence)
_COLOR_BUCKETS: tuple[tuple[float, float], ...] = ((10.0, 0.95), (30.0, 0.85))
_FLOOR_CONFIDENCE = 0.5
_MAX_DISTANCE = 255.0


@dataclass(frozen=True)
class MetricScore:
    """Raw distance and the confidence bucket it falls into."""

    distance: float
    confidence: float
    match_type: MatchType


def _round_channel(value: float) -> int:
    # Half-up rounding, as the host serializes channels
    return max(0, min(255, math.floor(value + 0.5)))


def _finite(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def parse_color(value: Any) -> RGB | None:
    """
    Normalize a color value to an RGB triple.

    Returns None for anything unparseable; never raises.
    """
    if isinstance(value, str):
        text = value.strip()
        hex_match = _HEX_RE.match(text)
        if hex_match:
            digits = hex_match.group(1)
            if len(digits) == 3:
                digits = "".join(c * 2 for c in digits)
            return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

        rgba_match = _RGBA_RE.match(text)
        if rgba_match:
            try:
                channels = [float(g) for g in rgba_match.groups()]
            except ValueError:
                return None
            if not all(math.isfinite(c) for c in channels):
                return None
            r, g, b = (_round_channel(c) for c in channels)
            return (r, g, b)
        return None

    if isinstance(value, Mapping):
        channels = [_finite(value.get(key)) for key in ("r", "g", "b")]
        if any(c is None for c in channels):
            return None
        r, g, b = (_round_channel(c * 255) for c in channels)  # type: ignore[operator]
        return (r, g, b)

    return None


def to_hex(rgb: RGB) -> str:
    """Format an RGB triple as a lowercase '#rrggbb' string."""
    return "#" + "".join(f"{c:02x}" for c in rgb)


def color_distance(a: RGB, b: RGB) -> float:
    """Euclidean distance in RGB space."""
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b, strict=True)))


def color_confidence(distance: float) -> tuple[float, MatchType]:
    """
    Confidence bucket for a color distance.

    0 is exact; under 10 and under 30 are close; anything further falls
    into the semantic bucket with confidence 1 - d/255, floored at 0.5
    and never above the last close bucket.
    """
    if distance == 0:
        return 1.0, MatchType.EXACT
    for bound, confidence in _COLOR_BUCKETS:
        if distance < bound:
            return confidence, MatchType.CLOSE
    last = _COLOR_BUCKETS[-1][1]
    return min(last, max(_FLOOR_CONFIDENCE, 1 - distance / _MAX_DISTANCE)), MatchType.SEMANTIC


def score_color(observed: Any, candidate: Any) -> MetricScore | None:
    """
    Score a candidate color against an observed color.

    Args:
        observed: Observed color in any accepted form
        candidate: Candidate token color in any accepted form

    Returns:
        The score, or None if either color is unparseable
    """
    observed_rgb = parse_color(observed)
    candidate_rgb = parse_color(candidate)
    if observed_rgb is None or candidate_rgb is None:
        return None

    distance = color_distance(observed_rgb, candidate_rgb)
    confidence, match_type = color_confidence(distance)
    return MetricScore(distance=distance, confidence=confidence, match_type=match_type)
