"""
FDNA-Cyber Graph — CIA Performance View.

A two-node Functional Dependency Network Analysis in which the user-facing
systems (feeder) support the business systems (receiver) along five CIA
dependencies. Each node's confidentiality, integrity and availability
performance drops with the compromise ratio, the node's vulnerability and
the importance of what it holds:

    performance = max(0, 1 - compromise_ratio x vulnerability x importance / 10)

Overall system performance is the receiver's performance, banded as
HIGH (> 0.8), MEDIUM (> 0.5) or LOW.
"""

import structlog

from phishimpact.models.enums import CIACategory, NodeType, PerformanceLevel
from phishimpact.models.fdna import FDNAGraph, FDNAGraphEdge, FDNAGraphNode
from phishimpact.models.profile import BusinessProfile

logger = structlog.get_logger()

FEEDER_ID = "user_systems"
RECEIVER_ID = "business_systems"

# (edge id, source category, target category, alpha, beta)
FDNA_EDGE_DEFINITIONS = [
    ("c_to_c", CIACategory.CONFIDENTIALITY, CIACategory.CONFIDENTIALITY, 0.8, 0.7),
    ("i_to_i", CIACategory.INTEGRITY, CIACategory.INTEGRITY, 0.7, 0.8),
    ("a_to_a", CIACategory.AVAILABILITY, CIACategory.AVAILABILITY, 0.6, 0.6),
    ("c_to_i", CIACategory.CONFIDENTIALITY, CIACategory.INTEGRITY, 0.5, 0.6),
    ("i_to_a", CIACategory.INTEGRITY, CIACategory.AVAILABILITY, 0.4, 0.5),
]


def classify_performance(performance: float) -> PerformanceLevel:
    """Band a 0-1 performance value."""
    if performance > 0.8:
        return PerformanceLevel.HIGH
    if performance > 0.5:
        return PerformanceLevel.MEDIUM
    return PerformanceLevel.LOW


def compute_fdna_cyber_graph(
    profile: BusinessProfile, compromised_accounts: int
) -> FDNAGraph:
    """
    Build the FDNA-Cyber graph for a profile and compromise level.

    Args:
        profile: Business profile
        compromised_accounts: Number of compromised accounts

    Returns:
        FDNAGraph with per-CIA performance for both nodes
    """
    compromise_ratio = compromised_accounts / profile.employee_count
    base_vulnerability = 1 - profile.tech_maturity / 10

    def performance(importance: float, vulnerability: float) -> float:
        return max(0.0, 1 - compromise_ratio * vulnerability * (importance / 10))

    receiver_importance = (profile.data_importance + profile.critical_systems_count + 8) / 3

    nodes = [
        FDNAGraphNode(
            id=FEEDER_ID,
            name="User Systems",
            type=NodeType.FEEDER,
            confidentiality=performance(8, base_vulnerability * 1.2),
            integrity=performance(7, base_vulnerability * 1.1),
            availability=performance(6, base_vulnerability),
            performance=performance(7, base_vulnerability * 1.1),
        ),
        FDNAGraphNode(
            id=RECEIVER_ID,
            name="Business Systems",
            type=NodeType.RECEIVER,
            confidentiality=performance(profile.data_importance, base_vulnerability * 0.9),
            integrity=performance(profile.critical_systems_count, base_vulnerability * 0.8),
            availability=performance(8, base_vulnerability * 0.9),
            performance=performance(receiver_importance, base_vulnerability * 0.9),
        ),
    ]

    edges = [
        FDNAGraphEdge(
            id=edge_id,
            source=FEEDER_ID,
            target=RECEIVER_ID,
            source_category=source_category,
            target_category=target_category,
            alpha=alpha,
            beta=beta,
        )
        for edge_id, source_category, target_category, alpha, beta in FDNA_EDGE_DEFINITIONS
    ]

    overall = nodes[1].performance
    level = classify_performance(overall)

    logger.debug(
        "fdna_graph_computed",
        compromise_ratio=compromise_ratio,
        overall_performance=overall,
        performance_level=level.value,
    )

    return FDNAGraph(
        nodes=nodes,
        edges=edges,
        overall_performance=overall,
        performance_level=level,
    )
