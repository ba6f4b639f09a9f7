from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import List, Tuple

from journeygraph.lib.algorithms.base import (
    INF,
    Cost,
    DistanceMap,
    PredecessorMap,
)
from journeygraph.lib.graph import NodeID, TravelGraph
from journeygraph.logging import get_logger

logger = get_logger(__name__)


def spf(
    graph: TravelGraph,
    src_node: NodeID,
) -> Tuple[DistanceMap, PredecessorMap]:
    """
    Compute minimum costs from `src_node` to every node using Dijkstra's method.

    Every call allocates fresh maps. Each node starts at INF with no
    predecessor; the source starts at 0. Entries popped from the heap with a
    cost above the node's recorded distance are stale and skipped. A neighbor
    is only updated on a strictly smaller candidate, so among equal-cost
    routes the predecessor recorded first is kept.

    Args:
        graph: The graph to search.
        src_node: The source node. An unknown source reaches nothing.

    Returns:
        A tuple of (dist, pred):
          - dist: Maps every node in the graph to its minimal cost from
            src_node, or INF when unreachable.
          - pred: Maps every node to its predecessor on the recorded shortest
            path; None for the source and for unreachable nodes.
    """
    dist: DistanceMap = {node: INF for node in graph}
    pred: PredecessorMap = {node: None for node in graph}

    if src_node not in graph:
        logger.debug("Source '%s' is not in the graph; nothing is reachable", src_node)
        return dist, pred

    dist[src_node] = 0
    # The counter breaks cost ties so node IDs are never compared
    tie = count()
    min_pq: List[Tuple[Cost, int, NodeID]] = [(0, next(tie), src_node)]
    settled = 0
    stale = 0

    while min_pq:
        current_cost, _, node_id = heappop(min_pq)
        if current_cost > dist[node_id]:
            stale += 1
            continue
        settled += 1

        for edge_cost, neighbor_id in graph.neighbors(node_id):
            new_cost = current_cost + edge_cost
            if new_cost < dist[neighbor_id]:
                dist[neighbor_id] = new_cost
                pred[neighbor_id] = node_id
                heappush(min_pq, (new_cost, next(tie), neighbor_id))

    logger.debug(
        "SPF from '%s' settled %d of %d nodes, skipped %d stale heap entries",
        src_node,
        settled,
        len(dist),
        stale,
    )
    return dist, pred
