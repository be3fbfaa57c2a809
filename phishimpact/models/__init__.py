"""
Pydantic v2 data models for the phishing impact engine.

Model Organization:
    - enums: Enumeration types for consistent classification
    - profile: Business profile and attack parameters (inputs)
    - simulation: Financial/operational impact, risk levels, sweep steps
    - network: Dependency network nodes, edges, topology and cascade results
    - fdna: FDNA-Cyber CIA performance graph

Usage:
    >>> from phishimpact.models import BusinessProfile, SimulationParameters
    >>> profile = BusinessProfile(
    ...     industry="Finance",
    ...     employee_count=100,
    ...     annual_revenue=5_000_000,
    ...     data_importance=8,
    ...     tech_maturity=6,
    ...     average_salary=75_000,
    ...     critical_systems_count=5,
    ... )
"""

from .enums import CIACategory, DependencyCategory, NodeType, PerformanceLevel, RiskLevel
from .fdna import FDNAGraph, FDNAGraphEdge, FDNAGraphNode
from .network import (
    CascadeImpact,
    CascadeResults,
    EdgeSpec,
    NetworkEdge,
    NetworkNode,
    NetworkTopology,
    NodeSpec,
)
from .profile import BusinessProfile, SimulationParameters
from .simulation import (
    FinancialImpact,
    ImpactAssessment,
    IncidenceStep,
    OperationalImpact,
    RiskLevels,
    SimulationResults,
)

__all__ = [
    # Enums
    "RiskLevel",
    "NodeType",
    "CIACategory",
    "DependencyCategory",
    "PerformanceLevel",
    # Inputs
    "BusinessProfile",
    "SimulationParameters",
    # Simulation
    "FinancialImpact",
    "OperationalImpact",
    "RiskLevels",
    "SimulationResults",
    "IncidenceStep",
    "ImpactAssessment",
    # Network
    "NetworkNode",
    "NetworkEdge",
    "NodeSpec",
    "EdgeSpec",
    "NetworkTopology",
    "CascadeImpact",
    "CascadeResults",
    # FDNA
    "FDNAGraph",
    "FDNAGraphNode",
    "FDNAGraphEdge",
]
