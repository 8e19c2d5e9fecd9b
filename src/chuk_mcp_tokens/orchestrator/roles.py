"""
Naming heuristics - node descriptions, action roles and foreground tokens.
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import FOREGROUND_TOKEN_TEMPLATE, SECONDARY_FOREGROUND_TOKEN, Role

# Node-name fragment(s) -> status kind, first hit wins
STATUS_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("failed", "error"), "danger"),
    (("tentative",), "warning"),
    (("planned",), "success"),
    (("reserved",), "info"),
    (("unavailable",), "neutral"),
    (("absence",), "warning"),
    (("leave",), "neutral"),
)

ACTION_KEYWORDS: tuple[str, ...] = ("button", "primary", "secondary", "secundary", "action")
SECONDARY_KEYWORDS: tuple[str, ...] = ("secondary", "secundary")


def status_hint(node_name: str) -> str | None:
    """Status kind implied by a node name, if any."""
    lower = node_name.lower()
    for fragments, kind in STATUS_HINTS:
        if any(fragment in lower for fragment in fragments):
            return kind
    return None


def build_description(base: str | None, node_name: str) -> str:
    """
    Derive a node-specific description.

    The base description is kept and a 'status <kind>' hint appended when
    the node name implies one. With neither, the node name itself is used.
    """
    parts: list[str] = []
    if base:
        parts.append(base)

    kind = status_hint(node_name)
    if kind:
        parts.append(f"status {kind}")
    elif not base:
        parts.append(node_name)

    return " ".join(parts).strip()


def is_action_like(node_name: str) -> bool:
    lower = node_name.lower()
    return any(keyword in lower for keyword in ACTION_KEYWORDS)


def infer_role(node_name: str) -> Role:
    """Role of an action-like node; primary unless the name says otherwise."""
    lower = node_name.lower()
    if any(keyword in lower for keyword in SECONDARY_KEYWORDS):
        return Role.SECONDARY
    if "accent" in lower:
        return Role.ACCENT
    return Role.PRIMARY


def foreground_token_name(role: Role) -> str:
    """
    Variable name of the foreground (text/icon) token for a role.

    Secondary actions sit on light surfaces and keep the primary action's
    content color, so they use the inverse primary foreground.
    """
    if role == Role.SECONDARY:
        return SECONDARY_FOREGROUND_TOKEN
    return FOREGROUND_TOKEN_TEMPLATE.format(role=role.value)
