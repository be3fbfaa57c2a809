"""
Dependency Network Analysis.

Components:
    topology: Declarative default topology and the per-profile builder
    DependencyNetwork: NetworkX view for structural queries
    CascadeEngine: Bounded impact propagation from feeders to receivers
    fdna_cyber: Two-node FDNA-Cyber CIA performance graph

Example:
    >>> from phishimpact.engine.network import build_dependency_network, compute_cascade
    >>> nodes, edges = build_dependency_network(profile)
    >>> cascade = compute_cascade(profile, compromised_accounts=3, nodes=nodes, edges=edges)
"""

from .cascade import CascadeEngine, compute_cascade
from .dependency_graph import DependencyNetwork
from .fdna_cyber import compute_fdna_cyber_graph
from .topology import DEFAULT_TOPOLOGY, build_dependency_network, load_topology

__all__ = [
    "CascadeEngine",
    "DependencyNetwork",
    "DEFAULT_TOPOLOGY",
    "build_dependency_network",
    "compute_cascade",
    "compute_fdna_cyber_graph",
    "load_topology",
]
