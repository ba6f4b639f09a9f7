"""Shared graph fixtures for the journeygraph test suite."""

from __future__ import annotations

import pytest

from journeygraph.lib.graph import TravelGraph
from journeygraph.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Give every test a freshly configured journeygraph root logger."""
    reset_logging()
    setup_root_logger()
    yield
    reset_logging()
    setup_root_logger()


@pytest.fixture
def line1():
    # Cost:
    #      [1]       [2]
    #  A◄───────►B◄───────►C
    return TravelGraph.from_edges([("A", "B", 1), ("B", "C", 2)])


@pytest.fixture
def square1():
    # Cost:
    #       [1]        [1]
    #   ┌─────────B─────────┐
    #   │                   │
    #   A                   C
    #   │                   │
    #   │   [1]        [1]  │
    #   └─────────D─────────┘
    #
    # Two equal-cost routes A->C; the one via B is discovered first.
    return TravelGraph.from_edges(
        [("A", "B", 1), ("A", "D", 1), ("B", "C", 1), ("D", "C", 1)]
    )


@pytest.fixture
def triangle1():
    # Cost:
    #     [1]        [1]
    #   ┌───────B───────┐
    #   │               │
    #   A───────────────C
    #          [5]
    #
    # The two-hop route A->B->C beats the direct link.
    return TravelGraph.from_edges([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


@pytest.fixture
def disconnected1():
    # Cost:
    #      [3]
    #  A◄───────►B        X◄───────►Y        Z
    #                         [4]
    return TravelGraph.from_edges(
        [("A", "B", 3), ("X", "Y", 4)],
        nodes=["Z"],
    )


@pytest.fixture
def zero_cost1():
    # Cost:
    #      [0]       [0]       [2]
    #  A◄───────►B◄───────►C◄───────►D
    return TravelGraph.from_edges([("A", "B", 0), ("B", "C", 0), ("C", "D", 2)])


TRAVEL_ADJACENCY = {
    "Bangladesh": [(200, "Canada"), (800, "Denmark")],
    "Canada": [(200, "Bangladesh"), (900, "Argentina"), (700, "France"), (1300, "England")],
    "Denmark": [(800, "Bangladesh"), (300, "Germany"), (900, "Sweden")],
    "Argentina": [(900, "Canada"), (1100, "France")],
    "France": [
        (700, "Canada"),
        (1100, "Argentina"),
        (500, "Spain"),
        (500, "Italy"),
        (200, "Germany"),
    ],
    "England": [(1300, "Canada"), (1500, "Norway")],
    "Germany": [(300, "Denmark"), (200, "France")],
    "Spain": [(500, "France"), (700, "Portugal")],
    "Italy": [(500, "France")],
    "Norway": [(1500, "England")],
    "Sweden": [(900, "Denmark")],
    "Portugal": [(700, "Spain")],
}


@pytest.fixture
def travel():
    """The twelve-country sample network as an adjacency table."""
    return TravelGraph.from_adjacency(TRAVEL_ADJACENCY)
