"""Shortest-path algorithms over `TravelGraph`."""

from journeygraph.lib.algorithms.base import INF, Cost, DistanceMap, PredecessorMap
from journeygraph.lib.algorithms.path_utils import path_cost, resolve_to_path
from journeygraph.lib.algorithms.spf import spf

__all__ = [
    "INF",
    "Cost",
    "DistanceMap",
    "PredecessorMap",
    "path_cost",
    "resolve_to_path",
    "spf",
]
