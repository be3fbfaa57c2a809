"""
Dependency Network Model — Declarative Topology and Builder.

The business dependency network is data, not logic. A NetworkTopology lists
node and edge specifications; the builder instantiates them for a specific
business profile, deriving each node's vulnerability from tech maturity and
dropping nodes whose critical-systems threshold the profile does not exceed.

Default topology (simplified stand-in for a richer graph):
- Feeders: email, credentials, workstations
- Receivers: customer_data, financial_systems, productivity_apps, communication
- crm receiver (+2 edges) when critical_systems_count > 5
- erp receiver (+2 edges) when critical_systems_count > 7; erp feeds crm,
  and the thresholds are cumulative so crm is always present with erp

A different topology can be supplied per call, or globally through the
PHISHIMPACT_TOPOLOGY_PATH setting (a JSON document in the NetworkTopology
schema).
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from phishimpact.config import get_settings
from phishimpact.models.enums import CIACategory, DependencyCategory, NodeType
from phishimpact.models.network import (
    EdgeSpec,
    NetworkEdge,
    NetworkNode,
    NetworkTopology,
    NodeSpec,
)
from phishimpact.models.profile import BusinessProfile

logger = structlog.get_logger()

C = CIACategory
D = DependencyCategory

DEFAULT_TOPOLOGY = NetworkTopology(
    name="small_business_default",
    nodes=[
        # Feeders: attack entry points
        NodeSpec(id="email", name="Email System", type=NodeType.FEEDER,
                 category=C.CONFIDENTIALITY, importance=8, vulnerability_factor=1.2),
        NodeSpec(id="credentials", name="User Credentials", type=NodeType.FEEDER,
                 category=C.CONFIDENTIALITY, importance=9, vulnerability_factor=1.3),
        NodeSpec(id="workstations", name="Employee Workstations", type=NodeType.FEEDER,
                 category=C.AVAILABILITY, importance=7, vulnerability_factor=1.0),
        # Receivers: business systems
        NodeSpec(id="customer_data", name="Customer Data", type=NodeType.RECEIVER,
                 category=C.CONFIDENTIALITY, importance=9, vulnerability_factor=0.8),
        NodeSpec(id="financial_systems", name="Financial Systems", type=NodeType.RECEIVER,
                 category=C.INTEGRITY, importance=10, vulnerability_factor=0.7),
        NodeSpec(id="productivity_apps", name="Productivity Applications", type=NodeType.RECEIVER,
                 category=C.AVAILABILITY, importance=6, vulnerability_factor=0.9),
        NodeSpec(id="communication", name="Internal Communication", type=NodeType.RECEIVER,
                 category=C.AVAILABILITY, importance=7, vulnerability_factor=1.0),
        # Conditional receivers
        NodeSpec(id="crm", name="CRM System", type=NodeType.RECEIVER,
                 category=C.CONFIDENTIALITY, importance=8, vulnerability_factor=0.8,
                 critical_systems_threshold=5),
        NodeSpec(id="erp", name="ERP System", type=NodeType.RECEIVER,
                 category=C.INTEGRITY, importance=9, vulnerability_factor=0.7,
                 critical_systems_threshold=7),
    ],
    edges=[
        EdgeSpec(source="email", target="communication", dependency_strength=0.9, category=D.C_TO_A),
        EdgeSpec(source="email", target="productivity_apps", dependency_strength=0.6, category=D.C_TO_A),
        EdgeSpec(source="credentials", target="customer_data", dependency_strength=0.8, category=D.C_TO_C),
        EdgeSpec(source="credentials", target="financial_systems", dependency_strength=0.9, category=D.C_TO_I),
        EdgeSpec(source="credentials", target="communication", dependency_strength=0.7, category=D.C_TO_A),
        EdgeSpec(source="workstations", target="productivity_apps", dependency_strength=0.8, category=D.A_TO_A),
        EdgeSpec(source="workstations", target="financial_systems", dependency_strength=0.5, category=D.A_TO_I),
        EdgeSpec(source="workstations", target="customer_data", dependency_strength=0.6, category=D.A_TO_C),
        # crm
        EdgeSpec(source="credentials", target="crm", dependency_strength=0.8, category=D.C_TO_C),
        EdgeSpec(source="crm", target="customer_data", dependency_strength=0.7, category=D.C_TO_C),
        # erp
        EdgeSpec(source="financial_systems", target="erp", dependency_strength=0.8, category=D.I_TO_I),
        EdgeSpec(source="erp", target="crm", dependency_strength=0.6, category=D.I_TO_C),
    ],
)


def load_topology(path: Union[str, Path]) -> NetworkTopology:
    """
    Load and validate a topology from a JSON file.

    Args:
        path: Path to a JSON document in the NetworkTopology schema

    Returns:
        Validated NetworkTopology

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the document does not match the schema
    """
    topology = NetworkTopology.model_validate_json(Path(path).read_text(encoding="utf-8"))
    logger.info(
        "topology_loaded",
        path=str(path),
        name=topology.name,
        node_count=len(topology.nodes),
        edge_count=len(topology.edges),
    )
    return topology


def get_topology() -> NetworkTopology:
    """Return the configured topology, or the default one when none is set."""
    settings = get_settings()
    if settings.topology_path:
        return load_topology(settings.topology_path)
    return DEFAULT_TOPOLOGY


def _node_applies(spec: NodeSpec, profile: BusinessProfile) -> bool:
    if spec.critical_systems_threshold is None:
        return True
    return profile.critical_systems_count > spec.critical_systems_threshold


def build_dependency_network(
    profile: BusinessProfile,
    topology: Optional[NetworkTopology] = None,
) -> tuple[list[NetworkNode], list[NetworkEdge]]:
    """
    Instantiate the dependency network for a business profile.

    Args:
        profile: Business profile (tech maturity and critical systems count
            drive the result)
        topology: Topology to instantiate (configured default if None)

    Returns:
        (nodes, edges) with every impact level at 0; edges keep topology
        order and only connect nodes that were instantiated
    """
    topology = topology or get_topology()
    base_vulnerability = 1 - profile.tech_maturity / 10

    nodes = [
        NetworkNode(
            id=spec.id,
            name=spec.name,
            type=spec.type,
            category=spec.category,
            importance=spec.importance,
            vulnerability_level=max(0.0, base_vulnerability * spec.vulnerability_factor),
        )
        for spec in topology.nodes
        if _node_applies(spec, profile)
    ]
    node_ids = {node.id for node in nodes}

    edges = [
        NetworkEdge(
            source=spec.source,
            target=spec.target,
            dependency_strength=spec.dependency_strength,
            category=spec.category,
        )
        for spec in topology.edges
        if spec.source in node_ids and spec.target in node_ids
    ]

    logger.debug(
        "dependency_network_built",
        topology=topology.name,
        node_count=len(nodes),
        edge_count=len(edges),
        base_vulnerability=base_vulnerability,
    )

    return nodes, edges
