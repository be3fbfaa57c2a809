"""
Dependency Network Graph View.

Wraps a list of NetworkNode / NetworkEdge in a NetworkX MultiDiGraph so the
cascade engine and callers can ask structural questions: which edges
resolve, whether the network is acyclic, and what a node can reach.

The node/edge lists remain the source of truth; the graph is a read-only
index built once per instance. Parallel edges between the same pair are
kept, as are edges in their original order.
"""

import networkx as nx
import structlog

from phishimpact.models.enums import NodeType
from phishimpact.models.network import NetworkEdge, NetworkNode

logger = structlog.get_logger()


class DependencyNetwork:
    """
    Graph view over a dependency network.

    Attributes:
        nodes: Nodes keyed by id, in input order
        edges: All edges as supplied
        graph: NetworkX MultiDiGraph over the resolvable edges
        logger: Structured logger for observability

    Example:
        >>> network = DependencyNetwork(nodes, edges)
        >>> network.is_acyclic()
        True
        >>> sorted(network.reachable_from("credentials"))
        ['communication', 'customer_data', 'financial_systems']
    """

    def __init__(self, nodes: list[NetworkNode], edges: list[NetworkEdge]):
        self.nodes: dict[str, NetworkNode] = {node.id: node for node in nodes}
        self.edges = list(edges)
        self.logger = structlog.get_logger()

        self.graph = nx.MultiDiGraph()
        for node in nodes:
            self.graph.add_node(node.id, type=node.type.value, category=node.category.value)

        self._resolvable: list[NetworkEdge] = []
        self._dangling: list[NetworkEdge] = []
        for edge in self.edges:
            if edge.source in self.nodes and edge.target in self.nodes:
                self._resolvable.append(edge)
                self.graph.add_edge(
                    edge.source,
                    edge.target,
                    dependency_strength=edge.dependency_strength,
                    category=edge.category.value,
                )
            else:
                self._dangling.append(edge)

    @property
    def resolvable_edges(self) -> list[NetworkEdge]:
        """Edges whose source and target both exist, in original order."""
        return list(self._resolvable)

    @property
    def dangling_edges(self) -> list[NetworkEdge]:
        """Edges referencing a node that is not in the network."""
        return list(self._dangling)

    @property
    def feeder_ids(self) -> list[str]:
        """Ids of feeder nodes in input order."""
        return [nid for nid, n in self.nodes.items() if n.type == NodeType.FEEDER]

    @property
    def receiver_ids(self) -> list[str]:
        """Ids of receiver nodes in input order."""
        return [nid for nid, n in self.nodes.items() if n.type == NodeType.RECEIVER]

    def is_acyclic(self) -> bool:
        """True when the resolvable edges form a DAG."""
        return nx.is_directed_acyclic_graph(self.graph)

    def reachable_from(self, node_id: str) -> set[str]:
        """
        All nodes reachable from ``node_id`` along dependency edges.

        Returns an empty set for unknown ids.
        """
        if node_id not in self.graph:
            self.logger.warning("node_not_in_network", node_id=node_id)
            return set()
        return set(nx.descendants(self.graph, node_id))

    def unreachable_receivers(self) -> list[str]:
        """Receivers that no feeder can reach; they can never be impacted."""
        reached: set[str] = set()
        for feeder in self.feeder_ids:
            reached |= self.reachable_from(feeder)
        return [rid for rid in self.receiver_ids if rid not in reached]
