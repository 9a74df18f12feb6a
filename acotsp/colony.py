from __future__ import annotations
import logging
import math
import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from .ant import Ant
from .pheromone import PheromoneTrail
from .selector import probabilities, select_next

log = logging.getLogger(__name__)


@dataclass
class ACOConfig:
    c: float = 1.0                  # initial trail on every edge
    alpha: float = 1.0              # trail preference
    beta: float = 5.0               # greedy (1/d) preference
    evaporation: float = 0.5        # per-iteration retention multiplier
    Q: float = 500.0                # deposit scale
    ant_factor: float = 0.8         # ants = floor(n * ant_factor)
    exploration_rate: float = 0.01  # chance of a uniform random move
    n_iterations: int = 2000
    seed: Optional[int] = None

    def validate(self):
        if not (self.c > 0 and math.isfinite(self.c)):
            raise ValueError("c must be a positive finite number.")
        for name in ("alpha", "beta", "Q", "ant_factor"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite.")
        if not 0.0 <= self.evaporation <= 1.0:
            raise ValueError("evaporation must be in [0, 1].")
        if self.Q < 0:
            raise ValueError("Q must be >= 0.")
        if self.ant_factor <= 0:
            raise ValueError("ant_factor must be > 0.")
        if not 0.0 <= self.exploration_rate <= 1.0:
            raise ValueError("exploration_rate must be in [0, 1].")
        if self.n_iterations < 1:
            raise ValueError("n_iterations must be >= 1.")


@dataclass
class SolveResult:
    best_tour: List[int]
    best_length: float
    history_best_lengths: List[float]
    history_best_tours: List[List[int]]
    config: ACOConfig
    elapsed_sec: float
    n_solves: int = field(default=1)


class ColonyEngine:
    """Ant System for the TSP over a strictly positive distance matrix.

    Trails and ants are per-solve state and are reset by :meth:`solve`;
    the best tour is engine-lifetime state and survives repeated solves.
    """

    def __init__(self, dist_matrix, cfg: Optional[ACOConfig] = None):
        self.cfg = cfg or ACOConfig()
        self.cfg.validate()
        D = np.array(dist_matrix, dtype=np.float64)
        if D.ndim != 2 or D.shape[0] != D.shape[1]:
            raise ValueError(f"distance matrix must be square, got shape {D.shape}")
        if D.shape[0] < 2:
            raise ValueError("need at least 2 cities.")
        if not np.all(np.isfinite(D)) or np.any(D <= 0):
            raise ValueError("distances must be finite and strictly positive.")
        self.D = D
        self.D.flags.writeable = False
        self.n = D.shape[0]
        self.n_ants = int(self.n * self.cfg.ant_factor)
        if self.n_ants < 1:
            raise ValueError(f"ant_factor {self.cfg.ant_factor} gives no ants for {self.n} cities.")

        self.rng = random.Random(self.cfg.seed)
        self.trails = PheromoneTrail(self.n, self.cfg.c)
        self.ants = [Ant(self.n) for _ in range(self.n_ants)]
        self.probs = np.zeros(self.n)

        self._best_tour: Optional[List[int]] = None
        self._best_length = math.inf
        self.n_solves = 0
        self.history_best_lengths: List[float] = []
        self.history_best_tours: List[List[int]] = []

    @property
    def best_tour(self) -> Optional[List[int]]:
        return None if self._best_tour is None else list(self._best_tour)

    @property
    def best_length(self) -> float:
        return self._best_length

    def place_ants(self):
        for ant in self.ants:
            ant.clear()
            ant.place(self.rng.randrange(self.n))

    def construct_tours(self):
        # trails are read-only until every ant has a full tour
        tau = self.trails.read_only()
        cfg = self.cfg
        step = 0
        while step < self.n - 1:
            for ant in self.ants:
                cur = ant.current_city(step)
                probs = probabilities(ant, cur, tau, self.D, cfg.alpha, cfg.beta, out=self.probs)
                ant.visit_city(step, select_next(ant, probs, self.rng, cfg.exploration_rate))
            step += 1

    def update_trails(self):
        self.trails.evaporate(self.cfg.evaporation)
        for ant in self.ants:
            self.trails.deposit_tour(ant.tour, self.cfg.Q / ant.tour_length(self.D))

    def update_best(self):
        if self._best_tour is None:
            self._best_tour = self.ants[0].get_tour()
            self._best_length = self.ants[0].tour_length(self.D)
        for ant in self.ants:
            L = ant.tour_length(self.D)
            if L < self._best_length:
                log.debug("new best tour length %.6g (was %.6g)", L, self._best_length)
                self._best_length = L
                self._best_tour = ant.get_tour()

    def solve(self, callback: Optional[Callable[[int, float], None]] = None) -> List[int]:
        """Reset trails, run ``n_iterations`` iterations and return a copy of the best tour."""
        self.trails.reset(self.cfg.c)
        self.history_best_lengths = []
        self.history_best_tours = []
        for it in range(self.cfg.n_iterations):
            self.place_ants()
            self.construct_tours()
            self.update_trails()
            self.update_best()
            self.history_best_lengths.append(self._best_length)
            self.history_best_tours.append(list(self._best_tour))
            if callback is not None:
                callback(it + 1, self._best_length)
        self.n_solves += 1
        log.info("solve %d done: %d iterations, %d ants, best length %.6g",
                 self.n_solves, self.cfg.n_iterations, self.n_ants, self._best_length)
        return list(self._best_tour)

    def run(self, callback: Optional[Callable[[int, float], None]] = None) -> SolveResult:
        start = time.time()
        tour = self.solve(callback)
        elapsed = time.time() - start
        return SolveResult(best_tour=tour, best_length=self._best_length,
                           history_best_lengths=list(self.history_best_lengths),
                           history_best_tours=list(self.history_best_tours),
                           config=self.cfg, elapsed_sec=elapsed, n_solves=self.n_solves)
