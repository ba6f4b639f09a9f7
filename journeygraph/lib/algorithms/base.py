from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from journeygraph.lib.graph import NodeID

#: Numeric cost along a route. Reached nodes carry ints; unreached ones carry INF.
Cost = Union[int, float]

#: Distance recorded for nodes the source never reaches.
INF: float = float("inf")

#: Node -> minimum known cost from the source.
DistanceMap = Dict[NodeID, Cost]

#: Node -> node preceding it on the recorded shortest path (None if unset).
PredecessorMap = Dict[NodeID, Optional[NodeID]]

#: An ordered route, source first.
NodePath = Tuple[NodeID, ...]
