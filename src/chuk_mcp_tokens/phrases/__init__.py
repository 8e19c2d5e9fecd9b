"""
Phrase resolution: free text to token paths and property names.
"""

from chuk_mcp_tokens.phrases.resolver import (
    PhraseResolver,
    detect_property_name,
    is_effect_style_phrase,
    is_text_style_phrase,
    score_phrase,
    style_type_of,
)

__all__ = [
    "PhraseResolver",
    "detect_property_name",
    "is_effect_style_phrase",
    "is_text_style_phrase",
    "score_phrase",
    "style_type_of",
]
