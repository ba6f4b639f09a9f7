"""YAML loader for travel network descriptions.

A network description maps to a `TravelGraph`:

    network:
      name: travel            # optional
      nodes: [Iceland]        # optional, nodes that have no links
      links:
        - {source: Bangladesh, target: Canada, cost: 200}

Every link is undirected. Shape problems raise ValueError naming the bad
entry; cost problems are reported by `TravelGraph` itself.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from journeygraph.config import PLANNER_CONFIG
from journeygraph.lib.graph import EdgeTuple, NodeID, TravelGraph
from journeygraph.logging import get_logger

logger = get_logger(__name__)

_NETWORK_KEYS = {"name", "nodes", "links"}
_LINK_KEYS = {"source", "target", "cost"}


def _parse_links(raw_links: Any) -> List[EdgeTuple]:
    if not isinstance(raw_links, list):
        raise ValueError("'links' must be a list")

    edges: List[EdgeTuple] = []
    for idx, entry in enumerate(raw_links):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Link #{idx} must be a mapping with 'source', 'target' and 'cost'"
            )
        missing = _LINK_KEYS - set(entry)
        if missing:
            raise ValueError(
                f"Link #{idx} is missing key(s): {', '.join(sorted(missing))}"
            )
        extra = set(entry) - _LINK_KEYS
        if extra:
            raise ValueError(
                f"Unrecognized key(s) in link #{idx}: {', '.join(sorted(extra))}"
            )
        for key in ("source", "target"):
            if isinstance(entry[key], (dict, list)):
                raise ValueError(
                    f"Link #{idx} '{key}' must be a scalar node name, got {entry[key]!r}"
                )
        edges.append((entry["source"], entry["target"], entry["cost"]))
    return edges


def _parse_nodes(raw_nodes: Any) -> List[NodeID]:
    if not isinstance(raw_nodes, list):
        raise ValueError("'nodes' must be a list of node names")
    for node in raw_nodes:
        if isinstance(node, (dict, list)):
            raise ValueError(f"Node name must be a scalar, got {node!r}")
    return list(raw_nodes)


def network_from_dict(data: Dict[str, Any]) -> TravelGraph:
    """Build a TravelGraph from an already parsed network description.

    Args:
        data: Mapping with a top-level ``network`` section.

    Returns:
        The loaded graph.

    Raises:
        ValueError: If the description is malformed or the graph is invalid.
    """
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(data) - {"network"}
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s): {', '.join(sorted(map(str, extra)))}. "
            "Only 'network' is allowed."
        )

    section = data.get("network")
    if not isinstance(section, dict):
        raise ValueError("'network' section must be a mapping")

    extra = set(section) - _NETWORK_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized key(s) in 'network': {', '.join(sorted(map(str, extra)))}"
        )

    edges = _parse_links(section.get("links", []))
    nodes = _parse_nodes(section.get("nodes", []))
    graph = TravelGraph.from_edges(edges, nodes=nodes)

    logger.debug(
        "Loaded network '%s' with %d nodes and %d links",
        section.get("name", "unnamed"),
        len(graph),
        len(edges),
    )
    return graph


def load_network(yaml_str: str) -> TravelGraph:
    """Parse a YAML network description into a TravelGraph."""
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise ValueError(f"The network description is not valid YAML: {exc}") from exc
    if data is None:
        raise ValueError("The network description is empty.")
    return network_from_dict(data)


def load_network_file(file_path: Union[str, Path]) -> TravelGraph:
    """Read and parse a YAML network description from disk.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the description is malformed or the graph is invalid.
    """
    file_path = Path(file_path)
    logger.info("Loading network from %s", file_path)
    return load_network(file_path.read_text(encoding="utf-8"))


def load_sample_network(resource_name: Optional[str] = None) -> TravelGraph:
    """Load a network description packaged under ``journeygraph/resources``.

    Args:
        resource_name: File name inside the resources package. Defaults to
            `PLANNER_CONFIG.sample_network_resource`.
    """
    name = resource_name or PLANNER_CONFIG.sample_network_resource
    logger.debug("Loading packaged network resource %s", name)
    text = (
        resources.files("journeygraph.resources")
        .joinpath(name)
        .read_text(encoding="utf-8")
    )
    return load_network(text)
