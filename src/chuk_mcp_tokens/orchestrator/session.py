"""
Host sessions - the orchestrator's only way to talk to the design tool.

A session is passed explicitly to each orchestrator call; there is no
module-level connection. Two implementations ship:
- CommandHostSession: wraps an async `send_command(name, params)` callable
  (the transport is the caller's concern)
- BindingPlanSession: records the commands it would send, for dry runs and
  for servers without a live design-tool connection
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from chuk_mcp_tokens.constants import HostCommand
from chuk_mcp_tokens.models.node import DesignNode

logger = logging.getLogger(__name__)

SendCommand = Callable[[str, dict[str, Any]], Awaitable[Any]]


@runtime_checkable
class HostSession(Protocol):
    """Read and write access to a design document."""

    async def read_node(self, node_id: str) -> DesignNode | None:
        """Fetch a fresh serialization of a node (None if unavailable)."""
        ...

    async def apply_binding(
        self,
        node_id: str,
        property_name: str,
        variable_id: str,
        collection_id: str | None,
    ) -> bool:
        """Bind a variable to a node property; True on success."""
        ...


class CommandHostSession:
    """Host session over an async command channel."""

    def __init__(self, send_command: SendCommand):
        """
        Initialize the session.

        Args:
            send_command: Coroutine function sending one command to the host
        """
        self._send = send_command

    async def read_node(self, node_id: str) -> DesignNode | None:
        result = await self._send(HostCommand.GET_NODE_INFO, {"nodeId": node_id})
        if not isinstance(result, dict) or not result.get("id"):
            logger.debug("Host returned no data for node %s", node_id)
            return None
        return DesignNode.model_validate(result)

    async def apply_binding(
        self,
        node_id: str,
        property_name: str,
        variable_id: str,
        collection_id: str | None,
    ) -> bool:
        result = await self._send(
            HostCommand.SET_VARIABLE_BINDING,
            {
                "nodeId": node_id,
                "propertyName": property_name,
                "variableId": variable_id,
                "collectionId": collection_id,
            },
        )
        return isinstance(result, dict) and bool(result.get("success"))


@dataclass(frozen=True)
class PlannedBinding:
    """A binding command that was recorded instead of sent."""

    node_id: str
    property_name: str
    variable_id: str
    collection_id: str | None

    def to_command(self) -> dict[str, Any]:
        """The `set_variable_binding` command a host would receive."""
        return {
            "command": HostCommand.SET_VARIABLE_BINDING,
            "params": {
                "nodeId": self.node_id,
                "propertyName": self.property_name,
                "variableId": self.variable_id,
                "collectionId": self.collection_id,
            },
        }


class BindingPlanSession:
    """
    Host session that plans bindings instead of executing them.

    Node reads are served from the supplied trees; every binding
    succeeds and is appended to `planned`.
    """

    def __init__(self, nodes: Iterable[DesignNode] = ()):
        self.planned: list[PlannedBinding] = []
        self._nodes: dict[str, DesignNode] = {}
        stack = list(nodes)
        while stack:
            node = stack.pop()
            self._nodes.setdefault(node.id, node)
            stack.extend(node.children)

    async def read_node(self, node_id: str) -> DesignNode | None:
        return self._nodes.get(node_id)

    async def apply_binding(
        self,
        node_id: str,
        property_name: str,
        variable_id: str,
        collection_id: str | None,
    ) -> bool:
        self.planned.append(PlannedBinding(node_id, property_name, variable_id, collection_id))
        return True

    def commands(self) -> list[dict[str, Any]]:
        """Planned bindings as host commands, in order."""
        return [p.to_command() for p in self.planned]
