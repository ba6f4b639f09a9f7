"""NetworkX graph conversion utilities.

Converts between `networkx.Graph` and `TravelGraph`. Edge costs travel in a
numeric edge attribute (``cost`` by default).

Example:
    >>> import networkx as nx
    >>> from journeygraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", cost=10)
    >>> G.add_edge("B", "C", cost=5)
    >>>
    >>> graph = from_networkx(G)
    >>> graph.neighbors("B")
    ((10, 'A'), (5, 'C'))
    >>>
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

import networkx as nx

from journeygraph.lib.graph import TravelGraph


def from_networkx(nx_graph: nx.Graph, cost_attr: str = "cost") -> TravelGraph:
    """Build a TravelGraph from an undirected NetworkX graph.

    Args:
        nx_graph: Undirected, non-multi NetworkX graph.
        cost_attr: Edge attribute holding the integer cost.

    Returns:
        TravelGraph with the same nodes and edges. Isolated nodes are kept.

    Raises:
        ValueError: If the graph is directed or a multigraph, an edge lacks
            the cost attribute, or a cost is invalid.
    """
    if nx_graph.is_directed():
        raise ValueError("Only undirected graphs can be converted.")
    if nx_graph.is_multigraph():
        raise ValueError("Multigraphs are not supported; merge parallel edges first.")

    edges = []
    for u, v, data in nx_graph.edges(data=True):
        if cost_attr not in data:
            raise ValueError(f"Edge '{u}'-'{v}' has no '{cost_attr}' attribute.")
        edges.append((u, v, data[cost_attr]))
    return TravelGraph.from_edges(edges, nodes=nx_graph.nodes)


def to_networkx(graph: TravelGraph, cost_attr: str = "cost") -> nx.Graph:
    """Convert a TravelGraph to a NetworkX graph.

    Args:
        graph: Graph to convert.
        cost_attr: Edge attribute name to store costs under.

    Returns:
        New `networkx.Graph`; modifying it does not affect `graph`.
    """
    nx_graph = nx.Graph()
    nx_graph.add_nodes_from(graph)
    for a, b, cost in graph.edges():
        nx_graph.add_edge(a, b, **{cost_attr: cost})
    return nx_graph
