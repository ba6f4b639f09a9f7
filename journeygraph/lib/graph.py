from __future__ import annotations

from types import MappingProxyType
from typing import (
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from journeygraph.logging import get_logger

logger = get_logger(__name__)

NodeID = Hashable
#: A single adjacency entry: (cost, neighbor).
AdjEntry = Tuple[int, NodeID]
#: An undirected edge as loaded: (node_a, node_b, cost).
EdgeTuple = Tuple[NodeID, NodeID, int]


def _check_cost(a: NodeID, b: NodeID, cost: object) -> int:
    """Return `cost` if it is a valid edge cost, otherwise raise ValueError."""
    # bool is an int subclass but never a meaningful cost
    if isinstance(cost, bool) or not isinstance(cost, int):
        raise ValueError(
            f"Edge '{a}'-'{b}' has non-integer cost {cost!r}; costs must be integers."
        )
    if cost < 0:
        raise ValueError(
            f"Edge '{a}'-'{b}' has negative cost {cost}; costs must be non-negative."
        )
    return cost


class TravelGraph:
    """
    An immutable, weighted, undirected graph with ordered adjacency lists.

    This class enforces, at construction time:
      - Every edge cost is a non-negative integer.
      - No self-loops and no duplicate edges between the same pair of nodes.
      - Every undirected edge appears in both endpoints' adjacency lists with
        the same cost.

    Instances expose read-only views only; there are no mutation methods.
    Build one with `from_edges` or `from_adjacency`.
    """

    __slots__ = ("_adj", "_edges", "_costs")

    def __init__(
        self,
        adjacency: Mapping[NodeID, Sequence[AdjEntry]],
        edges: Sequence[EdgeTuple],
    ) -> None:
        """
        Wrap already validated adjacency data.

        Use the `from_edges` / `from_adjacency` constructors instead of
        calling this directly; they perform the validation.

        Args:
            adjacency: Node -> sequence of (cost, neighbor).
            edges: Each undirected edge exactly once, in load order.
        """
        self._adj: Mapping[NodeID, Tuple[AdjEntry, ...]] = MappingProxyType(
            {node: tuple(entries) for node, entries in adjacency.items()}
        )
        self._edges: Tuple[EdgeTuple, ...] = tuple(edges)
        costs: Dict[NodeID, Dict[NodeID, int]] = {node: {} for node in self._adj}
        for a, b, cost in self._edges:
            costs[a][b] = cost
            costs[b][a] = cost
        self._costs: Mapping[NodeID, Mapping[NodeID, int]] = MappingProxyType(
            {node: MappingProxyType(nbrs) for node, nbrs in costs.items()}
        )

    #
    # Construction
    #
    @classmethod
    def from_edges(
        cls,
        edges: Iterable[EdgeTuple],
        nodes: Iterable[NodeID] = (),
    ) -> TravelGraph:
        """
        Build a graph from an undirected edge list.

        Each edge is recorded in both endpoints' adjacency lists, in the order
        edges are given.

        Args:
            edges: Iterable of (node_a, node_b, cost) triples.
            nodes: Extra nodes to include even if they have no edges.

        Returns:
            TravelGraph: The new graph.

        Raises:
            ValueError: On a negative or non-integer cost, a self-loop, or a
                duplicate edge.
        """
        adjacency: Dict[NodeID, List[AdjEntry]] = {}
        for node in nodes:
            adjacency.setdefault(node, [])

        seen: Dict[FrozenSet[NodeID], int] = {}
        loaded: List[EdgeTuple] = []
        for a, b, cost in edges:
            cost = _check_cost(a, b, cost)
            if a == b:
                raise ValueError(f"Self-loop on node '{a}' is not allowed.")
            pair = frozenset((a, b))
            if pair in seen:
                raise ValueError(f"Duplicate edge between '{a}' and '{b}'.")
            seen[pair] = cost
            adjacency.setdefault(a, []).append((cost, b))
            adjacency.setdefault(b, []).append((cost, a))
            loaded.append((a, b, cost))

        logger.debug(
            "Built graph with %d nodes and %d edges", len(adjacency), len(loaded)
        )
        return cls(adjacency, loaded)

    @classmethod
    def from_adjacency(
        cls, adjacency: Mapping[NodeID, Iterable[AdjEntry]]
    ) -> TravelGraph:
        """
        Build a graph from a symmetric adjacency table.

        The table maps every node to its (cost, neighbor) entries and must list
        each undirected edge on both sides with the same cost. List order is
        preserved as given.

        Args:
            adjacency: Node -> iterable of (cost, neighbor) pairs.

        Returns:
            TravelGraph: The new graph.

        Raises:
            ValueError: On a negative or non-integer cost, a self-loop, a
                duplicate entry, or an edge whose reverse entry is missing or
                has a different cost.
        """
        table: Dict[NodeID, List[AdjEntry]] = {}
        costs: Dict[NodeID, Dict[NodeID, int]] = {}
        for node, entries in adjacency.items():
            table[node] = []
            costs[node] = {}
            for cost, nbr in entries:
                cost = _check_cost(node, nbr, cost)
                if nbr == node:
                    raise ValueError(f"Self-loop on node '{node}' is not allowed.")
                if nbr in costs[node]:
                    raise ValueError(
                        f"Duplicate edge between '{node}' and '{nbr}'."
                    )
                costs[node][nbr] = cost
                table[node].append((cost, nbr))

        loaded: List[EdgeTuple] = []
        emitted = set()
        for node, nbrs in costs.items():
            for nbr, cost in nbrs.items():
                reverse = costs.get(nbr, {}).get(node)
                if reverse is None:
                    raise ValueError(
                        f"Edge '{node}'-'{nbr}' has no reverse entry in '{nbr}'."
                    )
                if reverse != cost:
                    raise ValueError(
                        f"Edge '{node}'-'{nbr}' is asymmetric: "
                        f"cost {cost} one way, {reverse} the other."
                    )
                pair = frozenset((node, nbr))
                if pair not in emitted:
                    emitted.add(pair)
                    loaded.append((node, nbr, cost))

        logger.debug(
            "Built graph with %d nodes and %d edges", len(table), len(loaded)
        )
        return cls(table, loaded)

    #
    # Read-only access
    #
    def neighbors(self, node: NodeID) -> Tuple[AdjEntry, ...]:
        """
        Return the (cost, neighbor) entries of `node` in load order.

        An unknown node yields an empty tuple, same as a node with no edges.
        """
        return self._adj.get(node, ())

    def nodes(self) -> FrozenSet[NodeID]:
        """Return every node of the graph."""
        return frozenset(self._adj)

    def edges(self) -> Tuple[EdgeTuple, ...]:
        """Return each undirected edge once as (node_a, node_b, cost), in load order."""
        return self._edges

    def cost(self, a: NodeID, b: NodeID) -> Optional[int]:
        """Return the cost of edge a-b, or None if the nodes are not adjacent."""
        return self._costs.get(a, {}).get(b)

    def degree(self, node: NodeID) -> int:
        """Return the number of edges incident to `node` (0 for unknown nodes)."""
        return len(self._adj.get(node, ()))

    def __contains__(self, node: object) -> bool:
        try:
            return node in self._adj
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._adj)

    def __repr__(self) -> str:
        return f"TravelGraph(nodes={len(self._adj)}, edges={len(self._edges)})"
