from __future__ import annotations
from typing import List

import numpy as np


class TourConstructionError(RuntimeError):
    """An ant was asked to do something that would corrupt its tour."""


class Ant:
    """Tour and visited-set of one ant.

    The tour buffer is allocated once and overwritten on every iteration.
    Positions are addressed by the construction step owned by the engine:
    at step ``k`` the ant has filled positions ``0..k``.
    """

    def __init__(self, n_cities: int):
        self.n = n_cities
        self.tour = np.zeros(n_cities, dtype=np.int64)
        self.visited = np.zeros(n_cities, dtype=bool)
        self.n_visited = 0

    def clear(self):
        self.visited[:] = False
        self.n_visited = 0

    def place(self, city: int):
        """Put the ant on its start city (position 0)."""
        self.visit_city(-1, city)

    def visit_city(self, step: int, city: int):
        if self.visited[city]:
            raise TourConstructionError(f"city {city} already visited (step {step})")
        if step + 1 != self.n_visited:
            raise TourConstructionError(
                f"step {step} does not match {self.n_visited} cities already assigned")
        self.tour[step + 1] = city
        self.visited[city] = True
        self.n_visited += 1

    def current_city(self, step: int) -> int:
        return int(self.tour[step])

    @property
    def remaining(self) -> int:
        return self.n - self.n_visited

    def unvisited(self) -> List[int]:
        return [int(j) for j in np.flatnonzero(~self.visited)]

    def tour_length(self, dist) -> float:
        n = self.n
        length = 0.0
        for k in range(n):
            i, j = self.tour[k], self.tour[(k + 1) % n]
            length += dist[i][j]
        return float(length)

    def get_tour(self) -> List[int]:
        return [int(c) for c in self.tour]
