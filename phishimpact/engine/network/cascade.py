"""
Cascade Propagation Engine — Impact Relaxation over the Dependency Network.

Propagates a phishing compromise from the feeder nodes (attack entry points)
through the dependency network to the receiver nodes (business systems).

Algorithm:
    1. Seed (step 0): each feeder gets
       min(compromise_ratio x vulnerability x 2, 1)
    2. Propagate (steps 1..max_steps): visit edges in definition order;
       propagated = impact[source] x dependency_strength x vulnerability[target].
       A target is updated only on strict improvement, capped at 1.
    3. Stop as soon as a step improves nothing, or after max_steps.

State lives in a per-run arena (node id -> impact) that is updated in place
while a step's edges are processed, so later edges in the same step see
earlier updates (Gauss-Seidel relaxation). Final values do not depend on
edge order; the step at which an improvement is attributed does.

Impact never decreases within a run. No cycle detection is performed:
on cyclic topologies the step bound terminates the run, possibly before a
fixed point is reached.

Version: cascade_v1
"""

from typing import Optional

import structlog

from phishimpact.config import get_settings
from phishimpact.engine.network.dependency_graph import DependencyNetwork
from phishimpact.models.enums import NodeType
from phishimpact.models.network import (
    CascadeImpact,
    CascadeResults,
    NetworkEdge,
    NetworkNode,
)
from phishimpact.models.profile import BusinessProfile

logger = structlog.get_logger()

# Feeder seeding amplification
SEED_AMPLIFICATION = 2.0
MAX_IMPACT = 1.0


class CascadeEngine:
    """
    Runs bounded impact propagation over a dependency network.

    Attributes:
        max_steps: Maximum number of propagation steps after seeding
        logger: Structured logger for observability

    Example:
        >>> engine = CascadeEngine(max_steps=3)
        >>> results = engine.run(profile, compromised_accounts=3, nodes=nodes, edges=edges)
        >>> [len(wave) for wave in results.cascade_levels]
        [3, 4]
    """

    def __init__(self, max_steps: Optional[int] = None):
        """
        Initialize the cascade engine.

        Args:
            max_steps: Propagation step bound (Settings.cascade_max_steps if None)

        Raises:
            ValueError: If max_steps is negative
        """
        if max_steps is None:
            max_steps = get_settings().cascade_max_steps
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        self.max_steps = max_steps
        self.logger = structlog.get_logger()

    def run(
        self,
        profile: BusinessProfile,
        compromised_accounts: int,
        nodes: list[NetworkNode],
        edges: list[NetworkEdge],
    ) -> CascadeResults:
        """
        Propagate a compromise through the network.

        The input nodes are not modified; the result carries copies with
        their final impact levels.

        Args:
            profile: Business profile (employee count sets the compromise ratio)
            compromised_accounts: Number of compromised accounts
            nodes: Network nodes
            edges: Network edges, in evaluation order

        Returns:
            CascadeResults with final nodes and the ordered cascade waves
        """
        network = DependencyNetwork(nodes, edges)
        for edge in network.dangling_edges:
            self.logger.warning(
                "cascade_edge_skipped",
                source=edge.source,
                target=edge.target,
                reason="unresolved_endpoint",
            )
        if not network.is_acyclic():
            self.logger.info("cascade_network_has_cycles", max_steps=self.max_steps)

        compromise_ratio = compromised_accounts / profile.employee_count
        arena: dict[str, float] = {node_id: 0.0 for node_id in network.nodes}

        seed_wave = self._seed(network, arena, compromise_ratio)
        cascade_levels = [seed_wave]

        edge_plan = network.resolvable_edges
        steps_run = 0
        converged = False
        for step in range(1, self.max_steps + 1):
            steps_run = step
            wave = self._propagate_step(network, arena, edge_plan, step)
            if not wave:
                converged = True
                break
            cascade_levels.append(wave)

        result_nodes = [
            node.model_copy(update={"impact_level": arena[node.id]}) for node in nodes
        ]

        self.logger.info(
            "cascade_completed",
            compromise_ratio=compromise_ratio,
            waves=len(cascade_levels),
            steps_run=steps_run,
            converged=converged,
            impacted_nodes=sum(1 for v in arena.values() if v > 0),
        )

        return CascadeResults(
            nodes=result_nodes,
            cascade_levels=cascade_levels,
            steps_run=steps_run,
            converged=converged,
        )

    def _seed(
        self,
        network: DependencyNetwork,
        arena: dict[str, float],
        compromise_ratio: float,
    ) -> list[CascadeImpact]:
        """Set feeder impacts and return wave 0."""
        wave = []
        for node_id in network.feeder_ids:
            node = network.nodes[node_id]
            impact = min(
                compromise_ratio * node.vulnerability_level * SEED_AMPLIFICATION, MAX_IMPACT
            )
            arena[node_id] = impact
            if impact > 0:
                wave.append(CascadeImpact(node_id=node_id, impact_level=impact, step=0))
        return wave

    def _propagate_step(
        self,
        network: DependencyNetwork,
        arena: dict[str, float],
        edges: list[NetworkEdge],
        step: int,
    ) -> list[CascadeImpact]:
        """
        Run one relaxation pass over all edges.

        Returns the nodes improved in this step, one record per node holding
        its latest value, ordered by first improvement.
        """
        improved: dict[str, float] = {}
        for edge in edges:
            target = network.nodes[edge.target]
            propagated = arena[edge.source] * edge.dependency_strength * target.vulnerability_level
            candidate = min(propagated, MAX_IMPACT)
            if candidate > arena[edge.target]:
                arena[edge.target] = candidate
                improved[edge.target] = candidate

        if improved:
            self.logger.debug("cascade_step_applied", step=step, improved_nodes=len(improved))

        return [
            CascadeImpact(node_id=node_id, impact_level=impact, step=step)
            for node_id, impact in improved.items()
        ]


def compute_cascade(
    profile: BusinessProfile,
    compromised_accounts: int,
    nodes: list[NetworkNode],
    edges: list[NetworkEdge],
    max_steps: Optional[int] = None,
) -> CascadeResults:
    """
    Compute the cascade of a phishing compromise through a dependency network.

    Convenience wrapper around CascadeEngine.run.
    """
    return CascadeEngine(max_steps=max_steps).run(profile, compromised_accounts, nodes, edges)
