from __future__ import annotations
import math
from typing import Sequence

import numpy as np


class PheromoneTrail:
    """N x N matrix of trail strengths, indexed ``[from_city, to_city]``."""

    def __init__(self, n: int, c: float = 1.0):
        self.n = n
        self.tau = np.full((n, n), float(c))

    def reset(self, c: float):
        self.tau.fill(float(c))

    def evaporate(self, retention: float):
        # retention is a multiplier: 0.5 halves every trail
        if not 0.0 <= retention <= 1.0:
            raise ValueError(f"retention must be in [0, 1], got {retention}")
        self.tau *= retention

    def deposit(self, i: int, j: int, amount: float):
        if not (amount >= 0.0 and math.isfinite(amount)):
            raise ValueError(f"deposit amount must be finite and >= 0, got {amount}")
        self.tau[i, j] += amount

    def deposit_tour(self, tour: Sequence[int], amount: float):
        """Deposit ``amount`` on every edge of the closed cycle ``tour``."""
        n = len(tour)
        for k in range(n):
            self.deposit(tour[k], tour[(k + 1) % n], amount)

    def read_only(self) -> np.ndarray:
        view = self.tau.view()
        view.flags.writeable = False
        return view

    def __getitem__(self, key):
        return self.tau[key]
