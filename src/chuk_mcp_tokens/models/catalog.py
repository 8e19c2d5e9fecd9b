"""
Catalog models - theme records and the tokens they reference.

A theme record is one entry of a `$themes.json` file. Each theme carries
its own tokenPath -> variableId and tokenPath -> styleId maps, so the same
token path can resolve to different variables in Light and Dark themes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ThemeRecord(BaseModel):
    """
    A single theme entry from `$themes.json`.

    Only the keys the engine reads are modelled; anything else in the
    record (selected token sets, editor metadata) is kept as extra data.
    """

    id: str | None = Field(None, description="Theme identifier")
    name: str = Field(..., description="Theme name (e.g. 'Light', 'Dark')")
    group: str | None = Field(None, description="Theme group (e.g. 'Mode')")
    collection_id: str | None = Field(
        None,
        alias="$figmaCollectionId",
        description="Design-tool collection backing this theme",
    )
    mode_id: str | None = Field(
        None,
        alias="$figmaModeId",
        description="Design-tool mode backing this theme",
    )
    variable_references: dict[str, str] | None = Field(
        None,
        alias="$figmaVariableReferences",
        description="Token path to variable id",
    )
    style_references: dict[str, str] | None = Field(
        None,
        alias="$figmaStyleReferences",
        description="Token path to style id",
    )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "allow"}


class ThemeToken(BaseModel):
    """A token path as seen through one theme, with its bound id."""

    token_path: str = Field(..., description="Dot-separated token path")
    theme_name: str | None = Field(None, description="Owning theme name")
    theme_group: str | None = Field(None, description="Owning theme group")
    theme_id: str | None = Field(None, description="Owning theme id")
    variable_id: str | None = Field(None, description="Bound variable id")
    style_id: str | None = Field(None, description="Bound style id")

    model_config = {"frozen": True}

    @classmethod
    def from_theme(
        cls,
        theme: ThemeRecord,
        token_path: str,
        variable_id: str | None = None,
        style_id: str | None = None,
    ) -> ThemeToken:
        """Build a token entry carrying a theme's metadata."""
        return cls(
            token_path=token_path,
            theme_name=theme.name,
            theme_group=theme.group,
            theme_id=theme.id,
            variable_id=variable_id,
            style_id=style_id,
        )


class BoundVariable(BaseModel):
    """A variable bound somewhere on a node, as reported by the host."""

    id: str
    name: str
    collection_id: str | None = Field(None, alias="collectionId")
    props: list[str] = Field(default_factory=list, description="Properties it is bound to")

    model_config = {"frozen": True, "populate_by_name": True}


class NodeVariables(BaseModel):
    """Variables bound on one node of a selection."""

    node_id: str = Field(..., alias="nodeId")
    node_name: str = Field("", alias="nodeName")
    variables: list[BoundVariable] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}


class MappedToken(BaseModel):
    """A bound variable mapped to a token path."""

    variable_id: str
    token_path: str
    theme_name: str | None = None
    theme_group: str | None = None
    theme_id: str | None = None
    props: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class NodeTokenMapping(BaseModel):
    """Token paths for every variable bound on a node."""

    node_id: str
    node_name: str
    tokens: list[MappedToken] = Field(default_factory=list)

    model_config = {"frozen": True}
