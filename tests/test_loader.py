from pathlib import Path

import pytest
import yaml

from journeygraph.loader import (
    load_network,
    load_network_file,
    load_sample_network,
    network_from_dict,
)


def test_load_network_basic():
    graph = load_network(
        """
network:
  name: tiny
  nodes: [Iceland]
  links:
    - {source: A, target: B, cost: 5}
    - source: B
      target: C
      cost: 7
"""
    )
    assert graph.nodes() == frozenset({"A", "B", "C", "Iceland"})
    assert graph.neighbors("B") == ((5, "A"), (7, "C"))
    assert graph.neighbors("Iceland") == ()


def test_load_network_links_only():
    graph = load_network("network:\n  links:\n    - {source: A, target: B, cost: 1}\n")
    assert len(graph) == 2


def test_sample_network_matches_adjacency_table(travel):
    sample = load_sample_network()
    assert sample.nodes() == travel.nodes()
    for a, b, cost in travel.edges():
        assert sample.cost(a, b) == cost
    assert len(sample.edges()) == len(travel.edges())


def test_load_network_file(tmp_path: Path):
    network_file = tmp_path / "net.yaml"
    network_file.write_text(
        "network:\n  links:\n    - {source: X, target: Y, cost: 3}\n",
        encoding="utf-8",
    )
    graph = load_network_file(network_file)
    assert graph.cost("X", "Y") == 3
    assert load_network_file(str(network_file)).cost("Y", "X") == 3


def test_load_network_file_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_network_file(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "yaml_str, message",
    [
        ("", "empty"),
        ("- just\n- a list\n", "dictionary at top-level"),
        ("network: [1, 2]\n", "'network' section must be a mapping"),
        ("nodes: []\n", "Unrecognized top-level key"),
        ("network:\n  edges: []\n", "Unrecognized key\\(s\\) in 'network'"),
        ("network:\n  links: {a: 1}\n", "'links' must be a list"),
        ("network:\n  links: [[A, B, 1]]\n", "Link #0 must be a mapping"),
        (
            "network:\n  links:\n    - {source: A, target: B}\n",
            "Link #0 is missing key\\(s\\): cost",
        ),
        (
            "network:\n  links:\n    - {source: A, target: B, cost: 1, speed: 2}\n",
            "Unrecognized key\\(s\\) in link #0: speed",
        ),
        ("network:\n  nodes: {A: {}}\n", "'nodes' must be a list"),
        ("network:\n  nodes: [[A]]\n", "Node name must be a scalar"),
        (
            "network:\n  links:\n    - {source: [a, b], target: C, cost: 1}\n",
            "Link #0 'source' must be a scalar node name",
        ),
        (
            "network:\n  links:\n    - {source: A, target: B, cost: 1}\n"
            "    - {source: B, target: {x: 1}, cost: 1}\n",
            "Link #1 'target' must be a scalar node name",
        ),
        ("network: {links: [\n", "not valid YAML"),
        ("network:\n  links:\n  - {source: A\n", "not valid YAML"),
    ],
)
def test_load_network_shape_errors(yaml_str, message):
    with pytest.raises(ValueError, match=message):
        load_network(yaml_str)


def test_load_network_rejects_negative_cost():
    with pytest.raises(ValueError, match="negative cost"):
        load_network("network:\n  links:\n    - {source: A, target: B, cost: -1}\n")


def test_load_network_rejects_duplicate_link():
    yaml_str = """
network:
  links:
    - {source: A, target: B, cost: 1}
    - {source: B, target: A, cost: 2}
"""
    with pytest.raises(ValueError, match="Duplicate edge"):
        load_network(yaml_str)


def test_network_from_dict():
    graph = network_from_dict(
        {"network": {"links": [{"source": "P", "target": "Q", "cost": 0}]}}
    )
    assert graph.cost("P", "Q") == 0


def test_load_network_logs(caplog):
    with caplog.at_level("DEBUG", logger="journeygraph"):
        load_network("network:\n  name: demo\n  links: []\n  nodes: [A]\n")
    assert any(
        "Loaded network 'demo' with 1 nodes and 0 links" in r.message
        for r in caplog.records
    )


def test_load_network_yaml_error_is_chained():
    with pytest.raises(ValueError, match="not valid YAML") as exc_info:
        load_network("network: {links: [\n")
    assert isinstance(exc_info.value.__cause__, yaml.YAMLError)


def test_load_network_file_with_bad_yaml(tmp_path: Path):
    network_file = tmp_path / "broken.yaml"
    network_file.write_text("network:\n\tlinks: []\n", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid YAML"):
        load_network_file(network_file)
