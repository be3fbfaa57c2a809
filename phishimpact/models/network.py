"""
Dependency network models for cascade analysis.

This module defines the concrete nodes and edges of a business dependency
network, the declarative topology they are built from, and the results of
propagating a phishing compromise through that network.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import CIACategory, DependencyCategory, NodeType


class NetworkNode(BaseModel):
    """
    A system or entry point in the dependency network.

    Attributes:
        id: Unique key within one network
        name: Human-readable label
        type: Feeder (attack entry point) or receiver (impacted business system)
        category: CIA dimension the node primarily serves
        importance: Business importance, 0-10
        vulnerability_level: Susceptibility to propagated impact, derived from
            tech maturity; may exceed 1 for especially exposed entry points
        impact_level: Degree of impact, 0-1; starts at 0
    """

    id: str = Field(min_length=1)
    name: str
    type: NodeType
    category: CIACategory
    importance: float = Field(ge=0.0, le=10.0)
    vulnerability_level: float = Field(ge=0.0)
    impact_level: float = Field(default=0.0, ge=0.0, le=1.0)


class NetworkEdge(BaseModel):
    """
    Directed dependency: impact on ``source`` propagates to ``target``.

    Multiple edges between the same pair of nodes are allowed.
    """

    source: str
    target: str
    dependency_strength: float = Field(ge=0.0, le=1.0)
    category: DependencyCategory


class NodeSpec(BaseModel):
    """
    Declarative description of a network node.

    ``vulnerability_factor`` scales the profile's base vulnerability. When
    ``critical_systems_threshold`` is set the node only exists for profiles
    with more critical systems than the threshold.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    type: NodeType
    category: CIACategory
    importance: float = Field(ge=0.0, le=10.0)
    vulnerability_factor: float = Field(ge=0.0)
    critical_systems_threshold: Optional[int] = Field(default=None, ge=0)


class EdgeSpec(BaseModel):
    """Declarative description of a dependency edge."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    dependency_strength: float = Field(ge=0.0, le=1.0)
    category: DependencyCategory


class NetworkTopology(BaseModel):
    """
    A swappable dependency network definition.

    Edge order is significant: the cascade engine visits edges in the order
    they are listed here.
    """

    model_config = ConfigDict(frozen=True)

    name: str = "custom"
    nodes: list[NodeSpec]
    edges: list[EdgeSpec] = Field(default_factory=list)

    @field_validator("nodes")
    @classmethod
    def validate_unique_node_ids(cls, v: list[NodeSpec]) -> list[NodeSpec]:
        """Ensure node ids are unique."""
        ids = [n.id for n in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Node ids must be unique within a topology")
        return v

    @model_validator(mode="after")
    def validate_edge_endpoints(self) -> "NetworkTopology":
        """Ensure every edge references a declared node."""
        ids = {n.id for n in self.nodes}
        for edge in self.edges:
            if edge.source not in ids or edge.target not in ids:
                raise ValueError(
                    f"Edge {edge.source} -> {edge.target} references an undeclared node"
                )
        return self


class CascadeImpact(BaseModel):
    """A node whose impact increased at a given propagation step."""

    node_id: str
    impact_level: float = Field(ge=0.0, le=1.0)
    step: int = Field(ge=0)


class CascadeResults(BaseModel):
    """
    Outcome of one cascade propagation run.

    Attributes:
        nodes: Nodes with their final impact levels, in input order
        cascade_levels: Waves of newly increased impacts; wave 0 holds the
            seeded feeders and is always present, later waves are only
            recorded when at least one node improved
        steps_run: Propagation steps executed (excluding seeding)
        converged: True when the final step produced no improvement
    """

    nodes: list[NetworkNode]
    cascade_levels: list[list[CascadeImpact]]
    steps_run: int = Field(ge=0)
    converged: bool

    def get_node(self, node_id: str) -> Optional[NetworkNode]:
        """Return the node with the given id, if present."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    @property
    def max_receiver_impact(self) -> float:
        """Highest impact reached by any receiver node."""
        return max(
            (n.impact_level for n in self.nodes if n.type == NodeType.RECEIVER),
            default=0.0,
        )
