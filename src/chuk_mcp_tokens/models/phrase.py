"""
Phrase models - the result of resolving free text to a token.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import StyleType


class ResolvedPhrase(BaseModel):
    """
    A phrase resolved to a token path.

    Style phrases carry style_id/style_type; variable phrases carry the
    design-tool variable name and, when known, its id and collection.
    """

    phrase: str = Field(..., description="The input phrase")
    token_path: str = Field(..., description="Best-scoring token path")
    score: int = Field(..., ge=0, description="Word-overlap score of the winner")
    variable_name: str | None = Field(None, description="Variable name ('a/b/c')")
    variable_id: str | None = Field(None, description="Variable id from the catalog")
    collection_id: str | None = Field(None, description="Collection holding the variable")
    style_id: str | None = Field(None, description="Style id for style phrases")
    style_type: StyleType | None = Field(None, description="text or effect")
    property_name: str | None = Field(None, description="Suggested node property")

    model_config = {"frozen": True}

    @property
    def is_style(self) -> bool:
        return self.style_id is not None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
