"""
Variable models - the design tool's live variables and collections.

Variables carry one value per mode. A value is either a literal (hex
string, {r,g,b,a} floats, number, string) or an alias pointing at another
variable by id.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from chuk_mcp_tokens.constants import (
    ALIAS_TYPE,
    FOUNDATION_COLLECTIONS,
    RADIUS_SCALE_COLLECTION,
    RADIUS_VARIABLE_PREFIX,
)


class VariableAlias(BaseModel):
    """Reference from one variable's value to another variable."""

    type: str = Field(ALIAS_TYPE, description="Always 'VARIABLE_ALIAS'")
    id: str = Field(..., description="Referenced variable id")

    model_config = {"frozen": True}


def is_alias(value: Any) -> bool:
    """Return True if a raw mode value is an alias marker."""
    if isinstance(value, VariableAlias):
        return True
    return isinstance(value, dict) and value.get("type") == ALIAS_TYPE and "id" in value


class DesignVariable(BaseModel):
    """A design-tool variable with its per-mode values."""

    id: str
    name: str
    collection_id: str = Field(
        "",
        validation_alias=AliasChoices("collection_id", "collectionId", "variableCollectionId"),
    )
    resolved_type: str = Field(
        "STRING",
        validation_alias=AliasChoices("resolved_type", "resolvedType", "type"),
    )
    values_by_mode: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("values_by_mode", "valuesByMode"),
    )

    model_config = {"frozen": True}

    @field_validator("values_by_mode", mode="before")
    @classmethod
    def parse_aliases(cls, v: Any) -> dict[str, Any]:
        """Turn alias dicts into VariableAlias markers."""
        if not isinstance(v, dict):
            return {}
        parsed: dict[str, Any] = {}
        for mode, value in v.items():
            if isinstance(value, dict) and is_alias(value):
                value = VariableAlias(id=value["id"])
            parsed[mode] = value
        return parsed

    @property
    def first_value(self) -> Any:
        """Value of the first mode, or None if the variable has no modes."""
        for value in self.values_by_mode.values():
            return value
        return None


class VariableMode(BaseModel):
    """A mode (e.g. Light/Dark) of a collection."""

    mode_id: str = Field(..., validation_alias=AliasChoices("mode_id", "modeId", "id"))
    name: str = ""

    model_config = {"frozen": True}


class VariableCollection(BaseModel):
    """A collection of variables, as exported by the host."""

    id: str
    name: str
    modes: list[VariableMode] = Field(default_factory=list)
    variables: list[DesignVariable] = Field(default_factory=list)

    model_config = {"frozen": True}


class VariableSet:
    """
    The full set of variables in a design file.

    Holds every collection, including foundation ones, because aliases
    commonly point at foundation variables. Classification into theme
    and foundation variables happens here.
    """

    def __init__(self, collections: list[VariableCollection]):
        """
        Initialize the set.

        Args:
            collections: Collections in host order
        """
        self.collections = tuple(collections)
        self._names: dict[str, str] = {c.id: c.name for c in collections}

        variables: list[DesignVariable] = []
        for collection in collections:
            for variable in collection.variables:
                if variable.collection_id != collection.id:
                    variable = variable.model_copy(update={"collection_id": collection.id})
                variables.append(variable)

        self.variables: tuple[DesignVariable, ...] = tuple(variables)
        self._by_id: dict[str, DesignVariable] = {}
        for variable in variables:
            self._by_id.setdefault(variable.id, variable)

    @classmethod
    def from_export(cls, data: list[dict[str, Any]]) -> VariableSet:
        """Build from the host's `export_variable_collections` payload."""
        return cls([VariableCollection.model_validate(item) for item in data])

    def __len__(self) -> int:
        return len(self.variables)

    def get(self, variable_id: str) -> DesignVariable | None:
        """Look up a variable by id."""
        return self._by_id.get(variable_id)

    def find_by_name(self, name: str) -> DesignVariable | None:
        """First variable with this name, in collection order."""
        for variable in self.variables:
            if variable.name == name:
                return variable
        return None

    def collection_name(self, collection_id: str) -> str:
        """Name of a collection, 'Unknown' if not present."""
        return self._names.get(collection_id, "Unknown")

    def is_foundation(self, variable: DesignVariable) -> bool:
        """Whether a variable lives in a foundation collection."""
        return self.collection_name(variable.collection_id).lower() in FOUNDATION_COLLECTIONS

    def theme_variables(self) -> list[DesignVariable]:
        """Variables from theme (non-foundation) collections."""
        return [v for v in self.variables if not self.is_foundation(v)]

    def radius_scale_variables(self) -> list[DesignVariable]:
        """Numeric radius variables from the Scale collection."""
        return [
            v
            for v in self.variables
            if self.collection_name(v.collection_id).lower() == RADIUS_SCALE_COLLECTION
            and v.resolved_type == "FLOAT"
            and v.name.startswith(RADIUS_VARIABLE_PREFIX)
        ]
