"""
Match models - the results the engine produces.

None of these are persisted; callers decide whether to store or apply
them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import MatchType, PropertyKind, Role


class ValueMatch(BaseModel):
    """A confidence-scored pairing between an observed value and a token."""

    token_path: str = Field(..., description="Dot-separated token path")
    variable_name: str = Field(..., description="Design-tool variable name")
    variable_id: str | None = Field(None, description="Variable id")
    collection_id: str | None = Field(None, description="Owning collection id")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Certainty of the pairing")
    match_type: MatchType = Field(..., description="exact, close or semantic")
    actual_value: Any = Field(None, description="Observed value")
    token_value: Any = Field(None, description="Resolved token value")

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        return self.model_dump(mode="json")


@dataclass(frozen=True)
class PropertyMatch:
    """Best match for one property of a node (None if nothing matched)."""

    property: PropertyKind
    match: ValueMatch | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "property": self.property.value,
            "match": self.match.to_dict() if self.match else None,
        }


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of applying (or failing to apply) one binding."""

    node_id: str
    node_name: str
    property: str
    applied: bool
    variable_name: str | None = None
    variable_id: str | None = None
    confidence: float | None = None
    reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "node_id": self.node_id,
            "node_name": self.node_name,
            "property": self.property,
            "applied": self.applied,
            "variable_name": self.variable_name,
            "variable_id": self.variable_id,
        }
        if self.applied:
            data["confidence"] = self.confidence
        else:
            data["reason"] = self.reason
        return data


@dataclass(frozen=True)
class ForegroundSelection:
    """Foreground (text/icon) token chosen for an action-like instance."""

    role: Role
    variable_name: str
    variable_id: str | None
    collection_id: str | None
    text_node_ids: tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        """Whether the foreground variable exists in the design file."""
        return self.variable_id is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "variable_name": self.variable_name,
            "variable_id": self.variable_id,
            "collection_id": self.collection_id,
            "text_node_ids": list(self.text_node_ids),
        }


@dataclass
class NodeMatchReport:
    """Matches for a single processed node."""

    node_id: str
    node_name: str
    description: str
    matches: list[PropertyMatch] = field(default_factory=list)
    foreground: ForegroundSelection | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "node_id": self.node_id,
            "node_name": self.node_name,
            "description": self.description,
            "matches": [m.to_dict() for m in self.matches],
            "foreground": self.foreground.to_dict() if self.foreground else None,
        }


@dataclass
class TokenizeReport:
    """Everything one orchestrator run produced."""

    nodes: list[NodeMatchReport] = field(default_factory=list)
    results: list[ApplyResult] = field(default_factory=list)
    applied_mode: bool = False

    @property
    def applied(self) -> list[ApplyResult]:
        return [r for r in self.results if r.applied]

    @property
    def failed(self) -> list[ApplyResult]:
        return [r for r in self.results if not r.applied]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "apply": self.applied_mode,
            "applied": [r.to_dict() for r in self.applied],
            "failed": [r.to_dict() for r in self.failed],
        }

    def summary(self) -> str:
        """Human-readable summary, one line per property."""
        lines = ["Token matching summary:", ""]
        for node in self.nodes:
            lines.append(f'- Node "{node.node_name or node.node_id}":')
            for pm in node.matches:
                if pm.match:
                    lines.append(
                        f"    {pm.property.value}: {pm.match.variable_name} "
                        f"(confidence: {pm.match.confidence * 100:.0f}%, "
                        f"type: {pm.match.match_type.value})"
                    )
                else:
                    lines.append(f"    {pm.property.value}: No match found")
            if node.foreground:
                lines.append(f"    foreground: {node.foreground.variable_name}")
        if self.applied_mode:
            lines.append("")
            lines.append(f"Successfully applied {len(self.applied)} tokens")
            for r in self.failed:
                lines.append(f"  {r.property}: {r.reason}")
        return "\n".join(lines)
