import numpy as np
import pytest

from acotsp import PheromoneTrail


def test_reset_and_evaporate():
    t = PheromoneTrail(4, c=2.0)
    t.evaporate(0.5)
    assert np.allclose(t.tau, 1.0)
    t.reset(3.0)
    assert np.all(t.tau == 3.0)


def test_deposit_is_order_independent():
    deposits = [(0, 1, 0.3), (1, 2, 1.7), (0, 1, 2.5), (2, 0, 0.01)]
    a = PheromoneTrail(3, c=1.0)
    b = PheromoneTrail(3, c=1.0)
    for i, j, amt in deposits:
        a.deposit(i, j, amt)
    for i, j, amt in reversed(deposits):
        b.deposit(i, j, amt)
    assert np.allclose(a.tau, b.tau)
    assert a[0, 1] == pytest.approx(3.8)
    assert a[1, 0] == 1.0


def test_deposit_tour_includes_closing_edge():
    t = PheromoneTrail(3, c=0.0)
    t.deposit_tour([2, 0, 1], 1.5)
    assert t[2, 0] == 1.5 and t[0, 1] == 1.5 and t[1, 2] == 1.5
    assert t.tau.sum() == pytest.approx(4.5)


@pytest.mark.parametrize("amount", [-1.0, float("inf"), float("nan")])
def test_bad_deposit_rejected(amount):
    with pytest.raises(ValueError):
        PheromoneTrail(2).deposit(0, 1, amount)


def test_bad_retention_rejected():
    with pytest.raises(ValueError):
        PheromoneTrail(2).evaporate(1.5)


def test_read_only_view():
    t = PheromoneTrail(3, c=1.0)
    view = t.read_only()
    with pytest.raises(ValueError):
        view[0, 1] = 5.0
    t.deposit(0, 1, 1.0)
    assert view[0, 1] == 2.0
