from pullstar.search.visited import Visited


def test_hashable_positions():
    v = Visited()
    v.add((1, 2))
    assert (1, 2) in v
    assert (2, 1) not in v
    assert len(v) == 1


def test_unhashable_positions_match_by_equality():
    v = Visited()
    v.add([1, 2])
    v.add({"x": 3})
    assert [1, 2] in v
    assert {"x": 3} in v
    assert [2, 1] not in v
    assert len(v) == 2


def test_tuple_holding_a_list_falls_back_to_scan():
    v = Visited()
    v.add(("a", [1]))
    assert ("a", [1]) in v
    assert ("a", [2]) not in v


def test_clear():
    v = Visited()
    v.add(1)
    v.add([1])
    v.clear()
    assert len(v) == 0
    assert 1 not in v
