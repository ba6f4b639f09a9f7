"""Graph store, path values, and NetworkX interop for journeygraph."""

from journeygraph.lib.graph import NodeID, TravelGraph
from journeygraph.lib.nx import from_networkx, to_networkx
from journeygraph.lib.path import Path

__all__ = [
    "NodeID",
    "TravelGraph",
    "Path",
    "from_networkx",
    "to_networkx",
]
