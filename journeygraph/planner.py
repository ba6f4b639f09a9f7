"""Point-to-point and budget queries over a travel network."""

from __future__ import annotations

from typing import List, Optional, Tuple

from journeygraph.lib.algorithms.base import INF, Cost, DistanceMap, PredecessorMap
from journeygraph.lib.algorithms.path_utils import resolve_to_path
from journeygraph.lib.algorithms.spf import spf
from journeygraph.lib.graph import NodeID, TravelGraph
from journeygraph.lib.path import Path
from journeygraph.logging import get_logger

logger = get_logger(__name__)


def _node_order(node: NodeID) -> Tuple[str, NodeID]:
    # group by type first so mixed-type node IDs still sort
    return type(node).__name__, node


def _to_path(
    graph: TravelGraph,
    src_node: NodeID,
    dst_node: NodeID,
    dist: DistanceMap,
    pred: PredecessorMap,
) -> Optional[Path]:
    if dst_node not in graph:
        return None
    cost = dist[dst_node]
    if cost == INF:
        return None
    nodes = resolve_to_path(src_node, dst_node, pred)
    if nodes is None:
        return None
    return Path(nodes=nodes, cost=int(cost))


def shortest_path(
    graph: TravelGraph, src_node: NodeID, dst_node: NodeID
) -> Optional[Path]:
    """Return the minimum-cost route from src_node to dst_node.

    Args:
        graph: Graph to search.
        src_node: Start of the route.
        dst_node: End of the route.

    Returns:
        The route with its total cost, or None when no path exists. Unknown
        nodes are reported as unreachable rather than raising.
    """
    dist, pred = spf(graph, src_node)
    path = _to_path(graph, src_node, dst_node, dist, pred)
    if path is None:
        logger.debug("No path exists from '%s' to '%s'", src_node, dst_node)
    return path


def reachable_within(
    graph: TravelGraph, src_node: NodeID, budget: Cost
) -> List[Path]:
    """Return every destination reachable from src_node within budget.

    Args:
        graph: Graph to search.
        src_node: Start of every route.
        budget: Inclusive cost ceiling.

    Returns:
        One route per node whose minimum cost is at most `budget`, sorted by
        destination. The source itself is never included, so a budget of 0
        yields an empty list.
    """
    dist, pred = spf(graph, src_node)
    paths: List[Path] = []
    for node in sorted(dist, key=_node_order):
        # written as "not <=" so a NaN budget matches nothing
        if node == src_node or not dist[node] <= budget:
            continue
        path = _to_path(graph, src_node, node, dist, pred)
        if path is not None:
            paths.append(path)

    logger.debug(
        "%d destination(s) from '%s' within %s", len(paths), src_node, budget
    )
    return paths


class JourneyPlanner:
    """Query front end bound to one immutable graph.

    The planner keeps no per-query state; every call runs a fresh SPF, so a
    single instance may serve any number of queries.

    Attributes:
        graph: The travel network being queried.
    """

    def __init__(self, graph: TravelGraph) -> None:
        self.graph = graph

    def distances(self, src_node: NodeID) -> Tuple[DistanceMap, PredecessorMap]:
        """Return the raw (dist, pred) maps of an SPF run from src_node."""
        return spf(self.graph, src_node)

    def route(self, src_node: NodeID, dst_node: NodeID) -> Optional[Path]:
        """Return the cheapest route between two nodes, or None if there is none."""
        logger.info("Routing '%s' -> '%s'", src_node, dst_node)
        return shortest_path(self.graph, src_node, dst_node)

    def within_budget(self, src_node: NodeID, budget: Cost) -> List[Path]:
        """Return routes to every destination that costs at most `budget`."""
        logger.info("Listing destinations from '%s' within %s", src_node, budget)
        return reachable_within(self.graph, src_node, budget)
