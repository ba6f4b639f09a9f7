from __future__ import annotations

from typing import Iterable, List, Optional

from journeygraph.lib.algorithms.base import NodePath, PredecessorMap
from journeygraph.lib.graph import NodeID, TravelGraph


def resolve_to_path(
    src_node: NodeID,
    dst_node: NodeID,
    pred: PredecessorMap,
) -> Optional[NodePath]:
    """
    Rebuild the recorded source->destination route from a predecessor map.

    Walks predecessor links back from dst_node and reverses the result once.

    Args:
        src_node: Source node ID.
        dst_node: Destination node ID.
        pred: Predecessor map from SPF.

    Returns:
        The node sequence from src_node to dst_node, or None if the links do
        not lead back to src_node. A source resolves to ``(src_node,)``.
    """
    reversed_path: List[NodeID] = [dst_node]
    seen = {dst_node}
    current = dst_node

    while current != src_node:
        prev = pred.get(current)
        if prev is None or prev in seen:
            # unreachable, or a malformed map with a cycle
            return None
        seen.add(prev)
        reversed_path.append(prev)
        current = prev

    return tuple(reversed(reversed_path))


def path_cost(graph: TravelGraph, nodes: Iterable[NodeID]) -> int:
    """
    Sum the edge costs along a node sequence.

    Args:
        graph: Graph holding the edges.
        nodes: Consecutive nodes of a route.

    Returns:
        Total cost; 0 for a route of fewer than two nodes.

    Raises:
        ValueError: If two consecutive nodes are not adjacent.
    """
    total = 0
    nodes = list(nodes)
    for a, b in zip(nodes, nodes[1:]):
        edge_cost = graph.cost(a, b)
        if edge_cost is None:
            raise ValueError(f"Nodes '{a}' and '{b}' are not adjacent.")
        total += edge_cost
    return total
