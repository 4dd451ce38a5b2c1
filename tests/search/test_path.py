from pullstar.domain.heuristics import chebyshev
from pullstar.search.outcome import Done, NoPath, Request
from pullstar.search.path import Path


def test_new_path_has_zero_cost_and_holds_only_current():
    p = Path((0, 0))
    assert p.cost == 0
    assert p.path == []
    assert p.positions() == [(0, 0)]
    assert not hasattr(p, "__len__")


def test_extend_copies_route_and_moves_tip():
    parent = Path((1, 1), path=[(0, 0)])
    child = parent.extend((2, 2))
    assert child.path == [(0, 0), (1, 1)]
    assert child.current == (2, 2)
    assert child.cost == parent.cost + 1

    # no sharing between parent and child
    child.path.append((9, 9))
    assert parent.path == [(0, 0)]


def test_finalize_appends_tip_and_end():
    p = Path((1, 1), path=[(0, 0)]).finalize((2, 2))
    assert p.finalized
    assert p.current == (2, 2)
    assert p.path == [(0, 0), (1, 1), (2, 2)]
    assert p.positions() == p.path
    assert p.cost == 2


def test_arrive_closes_a_path_already_at_the_end():
    p = Path((3, 3)).arrive()
    assert p.finalized
    assert p.current == (3, 3)
    assert p.positions() == [(3, 3)]
    assert p.cost == 0


def test_f_is_cost_plus_heuristic():
    p = Path((1, 0), path=[(0, 0)])
    assert p.f(chebyshev, (4, 3)) == 1 + 3


def test_outcome_variants():
    assert not Request((0, 0)).terminal
    assert Done(Path((0, 0))).terminal
    assert NoPath().terminal
    assert NoPath() == NoPath()
    assert Done(Path((0, 0), [(0, 0)], finalized=True)).route == [(0, 0)]
