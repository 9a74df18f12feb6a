import pytest

from acotsp import Ant, TourConstructionError


def test_visit_and_current_city():
    ant = Ant(4)
    ant.place(2)
    assert ant.current_city(0) == 2
    ant.visit_city(0, 0)
    assert ant.current_city(1) == 0
    assert ant.remaining == 2
    assert ant.unvisited() == [1, 3]


def test_revisit_fails_loudly():
    ant = Ant(3)
    ant.place(1)
    with pytest.raises(TourConstructionError):
        ant.visit_city(0, 1)


def test_step_must_match_assignments():
    ant = Ant(3)
    ant.place(0)
    with pytest.raises(TourConstructionError):
        ant.visit_city(1, 2)


def test_tour_length_closes_cycle(small_matrix):
    ant = Ant(3)
    ant.place(0)
    ant.visit_city(0, 1)
    ant.visit_city(1, 2)
    assert ant.tour_length(small_matrix) == 2.0 + 4.0 + 3.0
    edges = list(zip(ant.get_tour(), ant.get_tour()[1:] + ant.get_tour()[:1]))
    assert ant.tour_length(small_matrix) == pytest.approx(sum(small_matrix[i][j] for i, j in edges))


def test_clear_keeps_buffer():
    ant = Ant(3)
    buf = ant.tour
    ant.place(0)
    ant.visit_city(0, 2)
    ant.clear()
    assert ant.tour is buf
    assert ant.remaining == 3
    ant.place(2)
    assert ant.current_city(0) == 2
