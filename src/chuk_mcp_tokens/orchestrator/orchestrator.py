"""
Match Orchestrator - drives matching across a node tree and applies results.

Processing rules:
1. A COMPONENT_SET is processed as its COMPONENT children
2. A wrapper node (no fills, no strokes, has children) is processed as its
   INSTANCE children; action-like instances also get a foreground token
   for their TEXT descendants
3. Any other node has its own properties matched

Every property and node is handled independently. In apply mode bindings
are awaited one at a time and failures are recorded, never rolled back.
"""

from __future__ import annotations

import logging

from chuk_mcp_tokens.catalog.index import TokenCatalog
from chuk_mcp_tokens.constants import ErrorMessages, PropertyKind
from chuk_mcp_tokens.matching.matcher import VariableMatcher
from chuk_mcp_tokens.models.match import (
    ApplyResult,
    ForegroundSelection,
    NodeMatchReport,
    TokenizeReport,
    ValueMatch,
)
from chuk_mcp_tokens.models.node import DesignNode
from chuk_mcp_tokens.models.variables import DesignVariable, VariableSet
from chuk_mcp_tokens.orchestrator.roles import (
    build_description,
    foreground_token_name,
    infer_role,
    is_action_like,
)
from chuk_mcp_tokens.orchestrator.session import HostSession

logger = logging.getLogger(__name__)


def is_wrapper(node: DesignNode) -> bool:
    """A node with no visual styling of its own but with children."""
    return not node.has_fills and not node.has_strokes and bool(node.children)


class MatchOrchestrator:
    """Matches node trees against a design file's variables."""

    def __init__(
        self,
        variables: VariableSet,
        catalog: TokenCatalog | None = None,
        matcher: VariableMatcher | None = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            variables: Full variable set of the design file
            catalog: Optional catalog for canonical token paths
            matcher: Matcher to use (built from variables/catalog if omitted)
        """
        self.variables = variables
        self.catalog = catalog
        self.matcher = matcher or VariableMatcher(variables, catalog)

    def match_node(
        self,
        node: DesignNode,
        description: str | None = None,
        tolerance: float | None = None,
    ) -> NodeMatchReport:
        """Match a single node's own properties (no descent)."""
        return NodeMatchReport(
            node_id=node.id,
            node_name=node.name,
            description=description or "",
            matches=self.matcher.match_node(node, description, tolerance),
        )

    def select_foreground(self, node: DesignNode) -> ForegroundSelection | None:
        """
        Foreground token for an action-like node.

        Returns:
            The selection (variable id None if the file lacks the token),
            or None if the node is not action-like
        """
        if not is_action_like(node.name):
            return None

        role = infer_role(node.name)
        name = foreground_token_name(role)
        variable = self.variables.find_by_name(name)

        return ForegroundSelection(
            role=role,
            variable_name=name,
            variable_id=variable.id if variable else None,
            collection_id=variable.collection_id if variable else None,
            text_node_ids=tuple(t.id for t in node.text_descendants()),
        )

    async def tokenize(
        self,
        node: DesignNode,
        description: str | None = None,
        tolerance: float | None = None,
        apply: bool = False,
        session: HostSession | None = None,
    ) -> TokenizeReport:
        """
        Match (and optionally apply) tokens for a node tree.

        Args:
            node: Root node as serialized by the host
            description: Optional component description
            tolerance: Numeric tolerance (default 2)
            apply: Whether to bind matched variables through the session
            session: Host session; child nodes are re-read through it when given

        Returns:
            Per-node matches and, in apply mode, per-property results

        Raises:
            ValueError: If apply is requested without a session
        """
        if apply and session is None:
            raise ValueError(ErrorMessages.SESSION_REQUIRED)

        report = TokenizeReport(applied_mode=apply)

        for target in await self._targets(node, session):
            target_description = build_description(description, target.name or node.name)

            if not is_wrapper(target):
                report.nodes.append(self.match_node(target, target_description, tolerance))
                continue

            for child in target.children:
                if child.type != "INSTANCE":
                    continue
                instance = await self._fresh(child, session)
                child_description = build_description(
                    target_description, child.name or target.name
                )
                child_report = self.match_node(instance, child_description, tolerance)
                child_report.foreground = self.select_foreground(instance)
                report.nodes.append(child_report)

        if apply and session is not None:
            for node_report in report.nodes:
                report.results.extend(await self._apply_matches(node_report, session))
                if node_report.foreground is not None:
                    report.results.extend(
                        await self._apply_foreground(node_report, node_report.foreground, session)
                    )

        logger.info(
            "Tokenized %s: %d nodes, %d applied, %d failed",
            node.id,
            len(report.nodes),
            len(report.applied),
            len(report.failed),
        )
        return report

    async def tokenize_node_id(
        self,
        node_id: str,
        session: HostSession,
        description: str | None = None,
        tolerance: float | None = None,
        apply: bool = False,
    ) -> TokenizeReport:
        """
        Read a node through the session, then tokenize it.

        Raises:
            ValueError: If the host cannot provide the node
        """
        node = await session.read_node(node_id)
        if node is None:
            raise ValueError(ErrorMessages.NODE_NOT_FOUND.format(node_id=node_id))
        return await self.tokenize(node, description, tolerance, apply, session)

    async def _targets(self, node: DesignNode, session: HostSession | None) -> list[DesignNode]:
        if node.type != "COMPONENT_SET" or not node.children:
            return [node]
        return [
            await self._fresh(child, session) for child in node.children if child.type == "COMPONENT"
        ]

    async def _fresh(self, node: DesignNode, session: HostSession | None) -> DesignNode:
        """Re-read a node through the session, falling back to the embedded copy."""
        if session is None:
            return node
        try:
            fresh = await session.read_node(node.id)
        except Exception as e:
            logger.warning("Could not re-read node %s: %s", node.id, e)
            return node
        return fresh or node

    async def _apply_matches(
        self,
        node_report: NodeMatchReport,
        session: HostSession,
    ) -> list[ApplyResult]:
        results: list[ApplyResult] = []

        for pm in node_report.matches:
            base = {
                "node_id": node_report.node_id,
                "node_name": node_report.node_name,
                "property": pm.property.value,
            }
            match = pm.match
            if match is None:
                results.append(ApplyResult(applied=False, reason=ErrorMessages.NO_MATCH, **base))
                continue

            variable = self._variable_for(match)
            if variable is None:
                results.append(
                    ApplyResult(
                        applied=False,
                        variable_name=match.variable_name,
                        reason=ErrorMessages.VARIABLE_NOT_FOUND.format(name=match.variable_name),
                        **base,
                    )
                )
                continue

            reason = await self._bind(
                session,
                node_report.node_id,
                pm.property,
                variable.id,
                variable.collection_id,
                failure=ErrorMessages.BIND_FAILED,
            )
            results.append(
                ApplyResult(
                    applied=reason is None,
                    variable_name=match.variable_name,
                    variable_id=variable.id,
                    confidence=match.confidence,
                    reason=reason,
                    **base,
                )
            )

        return results

    def _variable_for(self, match: ValueMatch) -> DesignVariable | None:
        """The matched variable in the design file; by name only when the match has no id."""
        if match.variable_id is not None:
            return self.variables.get(match.variable_id)
        return self.variables.find_by_name(match.variable_name)

    async def _apply_foreground(
        self,
        node_report: NodeMatchReport,
        foreground: ForegroundSelection,
        session: HostSession,
    ) -> list[ApplyResult]:
        if not foreground.found or foreground.variable_id is None:
            return []

        results: list[ApplyResult] = []
        for text_id in foreground.text_node_ids:
            reason = await self._bind(
                session,
                text_id,
                PropertyKind.FILLS,
                foreground.variable_id,
                foreground.collection_id,
                failure=ErrorMessages.BIND_FOREGROUND_FAILED,
            )
            results.append(
                ApplyResult(
                    node_id=text_id,
                    node_name=node_report.node_name,
                    property=PropertyKind.FILLS.value,
                    applied=reason is None,
                    variable_name=foreground.variable_name,
                    variable_id=foreground.variable_id,
                    confidence=1.0,
                    reason=reason,
                )
            )
        return results

    async def _bind(
        self,
        session: HostSession,
        node_id: str,
        kind: PropertyKind,
        variable_id: str,
        collection_id: str | None,
        failure: str,
    ) -> str | None:
        """
        Apply one binding.

        Returns:
            None on success, otherwise the failure reason
        """
        try:
            ok = await session.apply_binding(node_id, kind.value, variable_id, collection_id)
        except Exception as e:
            logger.warning("Binding %s on %s failed: %s", kind.value, node_id, e)
            return str(e) or type(e).__name__
        if not ok:
            logger.warning("Host rejected binding %s on %s", kind.value, node_id)
            return failure
        return None
