from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator

from journeygraph.lib.algorithms.base import NodePath
from journeygraph.lib.graph import NodeID


@dataclass(frozen=True)
class Path:
    """
    A single minimum-cost route through the graph.

    Attributes:
        nodes (NodePath):
            The visited nodes in order, source first and destination last. A
            route from a node to itself holds just that node.
        cost (int):
            The total edge cost of the route.
    """

    nodes: NodePath
    cost: int

    def __post_init__(self) -> None:
        if not self.nodes:
            raise ValueError("A path must contain at least one node.")

    def __iter__(self) -> Iterator[NodeID]:
        """Iterate over the nodes of the path in order."""
        return iter(self.nodes)

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.nodes)

    def __getitem__(self, idx: int) -> NodeID:
        return self.nodes[idx]

    def __lt__(self, other: Any) -> bool:
        """
        Order paths by cost, then by node sequence.

        Returns NotImplemented if `other` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return (self.cost, self.nodes) < (other.cost, other.nodes)

    @property
    def src_node(self) -> NodeID:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Return the number of edges traversed."""
        return len(self.nodes) - 1

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "source": self.src_node,
            "destination": self.dst_node,
            "cost": self.cost,
            "path": list(self.nodes),
        }
