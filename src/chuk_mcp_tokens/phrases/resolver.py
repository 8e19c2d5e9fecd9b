"""
Phrase Resolver - maps free text to a token path.

"apply surface accent color" resolves to a variable token and a guessed
property (fills); "button md text style" resolves to a text style. Scores
count phrase words that equal path segments; anything below the
threshold yields no match rather than a guess.
"""

from __future__ import annotations

import logging
import re

from chuk_mcp_tokens.catalog.index import TokenCatalog, to_variable_name
from chuk_mcp_tokens.constants import PHRASE_SCORE_THRESHOLD, ErrorMessages, StyleType
from chuk_mcp_tokens.models.phrase import ResolvedPhrase
from chuk_mcp_tokens.models.variables import VariableSet

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^a-z0-9/.\s]")
_SEGMENT_SPLIT = re.compile(r"[./]")

STYLE_WORDS = ("style", "text", "typography")
EFFECT_WORDS = ("shadow", "blur", "effect")
TEXT_STYLE_NOUNS = ("button", "heading", "body")

# Ordered (phrase fragments, property) rules; first hit wins
_PROPERTY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("fill", "background", "color"), "fills"),
    (("stroke", "border"), "strokes"),
    (("font size", "fontsize"), "fontSize"),
    (("font family", "fontfamily"), "fontFamily"),
    (("font weight", "fontweight"), "fontWeight"),
    (("letter spacing", "letterspacing"), "letterSpacing"),
    (("line height", "lineheight"), "lineHeight"),
)
_PADDING_SIDES: tuple[tuple[str, str], ...] = (
    ("top", "paddingTop"),
    ("right", "paddingRight"),
    ("bottom", "paddingBottom"),
    ("left", "paddingLeft"),
)
_LAYOUT_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("width",), "width"),
    (("height",), "height"),
    (("corner", "radius", "round"), "cornerRadius"),
    (("opacity",), "opacity"),
)


def _mentions(text: str, words: tuple[str, ...]) -> bool:
    return any(word in text for word in words)


def is_text_style_phrase(phrase: str) -> bool:
    lower = phrase.lower()
    return (
        "text style" in lower
        or "typography" in lower
        or ("style" in lower and _mentions(lower, TEXT_STYLE_NOUNS))
    )


def is_effect_style_phrase(phrase: str) -> bool:
    return _mentions(phrase.lower(), EFFECT_WORDS)


def style_type_of(phrase: str) -> StyleType | None:
    """Which kind of style a phrase targets, if any (text wins over effect)."""
    if is_text_style_phrase(phrase):
        return "text"
    if is_effect_style_phrase(phrase):
        return "effect"
    return None


def score_phrase(phrase: str, token_path: str) -> int:
    """
    Score how well a phrase describes a token path.

    +2 per phrase word equal to a path segment, +1 when a 'surface' phrase
    meets a 'color.surface' path, +2 each for style and effect keywords
    appearing in both.
    """
    lower = phrase.lower()
    words = _NON_WORD.sub(" ", lower).split()
    segments = _SEGMENT_SPLIT.split(token_path.lower())

    score = sum(2 for word in words if word in segments)

    if "surface" in lower and token_path.startswith("color.surface"):
        score += 1
    if _mentions(lower, STYLE_WORDS) and _mentions(token_path, STYLE_WORDS):
        score += 2
    if _mentions(lower, EFFECT_WORDS) and _mentions(token_path, EFFECT_WORDS):
        score += 2

    return score


def detect_property_name(phrase: str) -> str | None:
    """Guess the node property a phrase is about (None if no rule applies)."""
    lower = phrase.lower()

    for fragments, name in _PROPERTY_RULES:
        if _mentions(lower, fragments):
            return name

    if "padding" in lower:
        for side, name in _PADDING_SIDES:
            if side in lower:
                return name
        return "paddingTop"

    if "spacing" in lower or "gap" in lower:
        if "item" in lower or "between" in lower:
            return "itemSpacing"
        if "counter" in lower or "wrap" in lower:
            return "counterAxisSpacing"
        return "itemSpacing"

    for fragments, name in _LAYOUT_RULES:
        if _mentions(lower, fragments):
            return name

    if is_text_style_phrase(phrase):
        return "textStyleId"
    if is_effect_style_phrase(phrase):
        return "effectStyleId"

    return None


def _best(phrase: str, paths: list[str]) -> tuple[str | None, int]:
    """Highest-scoring path; the first path wins ties."""
    best_path: str | None = None
    best_score = 0
    for path in paths:
        score = score_phrase(phrase, path)
        if score > best_score:
            best_path, best_score = path, score
    return best_path, best_score


class PhraseResolver:
    """Resolves phrases against a token catalog and, optionally, a design file."""

    def __init__(
        self,
        catalog: TokenCatalog | None,
        variables: VariableSet | None = None,
        threshold: int = PHRASE_SCORE_THRESHOLD,
    ):
        """
        Initialize the resolver.

        Args:
            catalog: Token catalog (required)
            variables: Design-file variables, used to report collection ids
            threshold: Minimum accepted score

        Raises:
            ValueError: If no catalog is given
        """
        if catalog is None:
            raise ValueError(ErrorMessages.NO_CATALOG)
        self.catalog = catalog
        self.variables = variables
        self.threshold = threshold

    def resolve(self, phrase: str) -> ResolvedPhrase | None:
        """
        Resolve a phrase to a style or variable token.

        Returns:
            The resolution, or None when nothing scores at least the threshold
        """
        style_type = style_type_of(phrase)
        if style_type is not None:
            return self._resolve_style(phrase, style_type)
        return self._resolve_variable(phrase)

    def _resolve_style(self, phrase: str, style_type: StyleType) -> ResolvedPhrase | None:
        path, score = _best(phrase, self.catalog.style_token_paths)
        if path is None or score < self.threshold:
            logger.debug("No style token for %r (best score %d)", phrase, score)
            return None

        entries = self.catalog.styles_for_token(path)
        return ResolvedPhrase(
            phrase=phrase,
            token_path=path,
            score=score,
            style_id=entries[0].style_id if entries else None,
            style_type=style_type,
            property_name="textStyleId" if style_type == "text" else "effectStyleId",
        )

    def _resolve_variable(self, phrase: str) -> ResolvedPhrase | None:
        path, score = _best(phrase, self.catalog.token_paths)
        if path is None or score < self.threshold:
            logger.debug("No variable token for %r (best score %d)", phrase, score)
            return None

        variable_name = to_variable_name(path)
        entries = self.catalog.variables_for_token(path)

        collection_id = None
        if self.variables is not None:
            variable = self.variables.find_by_name(variable_name)
            if variable is not None:
                collection_id = variable.collection_id

        return ResolvedPhrase(
            phrase=phrase,
            token_path=path,
            score=score,
            variable_name=variable_name,
            variable_id=entries[0].variable_id if entries else None,
            collection_id=collection_id,
            property_name=detect_property_name(phrase),
        )
