import math

import pytest

from pullstar.domain import heuristics as h


def test_values():
    a, b = (0, 0), (3, 4)
    assert h.chebyshev(a, b) == 4
    assert h.manhattan(a, b) == 7
    assert h.euclidean(a, b) == 5.0
    assert h.octile(a, b) == pytest.approx(4 + (math.sqrt(2) - 1) * 3)
    assert h.min_axis(a, b) == 3
    assert h.zero(a, b) == 0


def test_symmetric():
    a, b = (2, -1), (-3, 5)
    for fn in (h.chebyshev, h.manhattan, h.euclidean, h.octile, h.min_axis):
        assert fn(a, b) == fn(b, a)


def test_weighted():
    double = h.weighted(h.manhattan, 2.0)
    assert double((0, 0), (1, 2)) == 6.0
    assert h.weighted(h.manhattan, 1.0) is h.manhattan
    with pytest.raises(ValueError):
        h.weighted(h.manhattan, -1.0)
