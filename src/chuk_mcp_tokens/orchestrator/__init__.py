"""
Orchestration: node-tree matching, role inference and host sessions.
"""

from chuk_mcp_tokens.orchestrator.orchestrator import MatchOrchestrator, is_wrapper
from chuk_mcp_tokens.orchestrator.roles import (
    build_description,
    foreground_token_name,
    infer_role,
    is_action_like,
    status_hint,
)
from chuk_mcp_tokens.orchestrator.session import (
    BindingPlanSession,
    CommandHostSession,
    HostSession,
    PlannedBinding,
)

__all__ = [
    "BindingPlanSession",
    "CommandHostSession",
    "HostSession",
    "MatchOrchestrator",
    "PlannedBinding",
    "build_description",
    "foreground_token_name",
    "infer_role",
    "is_action_like",
    "is_wrapper",
    "status_hint",
]
