import pytest

from journeygraph.lib.path import Path


def test_path_init():
    """Test basic initialization and derived properties."""
    p = Path(("A", "B", "C"), cost=10)

    assert p.nodes == ("A", "B", "C")
    assert p.cost == 10
    assert p.src_node == "A"
    assert p.dst_node == "C"
    assert p.hops == 2


def test_single_node_path_has_no_hops():
    p = Path(("A",), cost=0)
    assert p.src_node == p.dst_node == "A"
    assert p.hops == 0
    assert len(p) == 1


def test_empty_path_is_rejected():
    with pytest.raises(ValueError, match="at least one node"):
        Path((), cost=0)


def test_path_indexing_and_iteration():
    p = Path(("N1", "N2", "N3"), cost=3)
    assert p[0] == "N1"
    assert p[-1] == "N3"
    assert list(p) == ["N1", "N2", "N3"]
    assert len(p) == 3


def test_path_comparison_orders_by_cost_then_nodes():
    cheap = Path(("A", "B"), cost=1)
    pricey = Path(("A", "C"), cost=5)
    same_cost = Path(("A", "D"), cost=5)

    assert cheap < pricey
    assert pricey < same_cost
    assert sorted([same_cost, pricey, cheap]) == [cheap, pricey, same_cost]
    assert cheap.__lt__("not a path") is NotImplemented


def test_path_equality_and_hash():
    p1 = Path(("A", "B"), cost=4)
    p2 = Path(("A", "B"), cost=4)
    p3 = Path(("A", "B"), cost=5)

    assert p1 == p2
    assert p1 != p3
    assert len({p1, p2, p3}) == 2


def test_path_is_frozen():
    p = Path(("A", "B"), cost=4)
    with pytest.raises(AttributeError):
        p.cost = 1


def test_path_to_dict():
    p = Path(("Canada", "France", "Germany"), cost=900)
    assert p.to_dict() == {
        "source": "Canada",
        "destination": "Germany",
        "cost": 900,
        "path": ["Canada", "France", "Germany"],
    }
