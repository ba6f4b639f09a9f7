"""journeygraph: cheapest routes through small travel networks.

journeygraph computes single-source shortest paths over a static, weighted,
undirected network and answers two kinds of query: the cheapest route between
two nodes, and every destination reachable within a budget.

Primary API:
    TravelGraph - Immutable weighted adjacency store
    JourneyPlanner - Query front end bound to one graph
    shortest_path(), reachable_within() - Functional forms of the queries
    spf() - Raw distance and predecessor maps
    load_network(), load_network_file(), load_sample_network() - YAML loaders

Example:
    from journeygraph import TravelGraph, JourneyPlanner

    graph = TravelGraph.from_edges([("A", "B", 5), ("B", "C", 3)])
    planner = JourneyPlanner(graph)

    path = planner.route("A", "C")        # Path(nodes=('A', 'B', 'C'), cost=8)
    cheap = planner.within_budget("A", 5)  # [Path(nodes=('A', 'B'), cost=5)]
"""

from __future__ import annotations

from journeygraph import logging
from journeygraph.lib.algorithms import INF, path_cost, resolve_to_path, spf
from journeygraph.lib.graph import TravelGraph
from journeygraph.lib.nx import from_networkx, to_networkx
from journeygraph.lib.path import Path
from journeygraph.loader import load_network, load_network_file, load_sample_network
from journeygraph.planner import JourneyPlanner, reachable_within, shortest_path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "TravelGraph",
    "Path",
    "JourneyPlanner",
    "shortest_path",
    "reachable_within",
    "spf",
    "resolve_to_path",
    "path_cost",
    "INF",
    "load_network",
    "load_network_file",
    "load_sample_network",
    "from_networkx",
    "to_networkx",
    "logging",
]
