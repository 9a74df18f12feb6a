from __future__ import annotations
import math
import random
from typing import Optional

import numpy as np

from .ant import Ant
from .approx import approx_pow


class DegenerateDistributionError(ValueError):
    """No probability mass to sample from (all visited, or zero weights)."""


def probabilities(ant: Ant, current: int, trails, dist, alpha: float, beta: float,
                  out: Optional[np.ndarray] = None) -> np.ndarray:
    """Selection probability of each city for ``ant`` standing on ``current``.

    Weight of an unvisited city j is ``tau[current, j]**alpha * (1/d[current, j])**beta``
    using :func:`approx_pow`; visited cities get 0. Written into ``out`` when given.
    """
    if out is None:
        out = np.empty(ant.n)
    mask = ~ant.visited
    out.fill(0.0)
    if not mask.any():
        raise DegenerateDistributionError(f"ant at city {current} has no unvisited city left")
    tau = np.asarray(trails[current])[mask]
    eta = 1.0 / np.asarray(dist[current], dtype=np.float64)[mask]
    weights = approx_pow(tau, alpha) * approx_pow(eta, beta)
    denom = float(weights.sum())
    if not (denom > 0.0 and math.isfinite(denom)):
        raise DegenerateDistributionError(
            f"selection weights from city {current} sum to {denom}")
    out[mask] = weights / denom
    return out


def select_next(ant: Ant, probs, rng: random.Random, exploration_rate: float) -> int:
    """Pick the next city: uniform among unvisited with ``exploration_rate``, else roulette."""
    candidates = ant.unvisited()
    if not candidates:
        raise DegenerateDistributionError("ant has no unvisited city left")
    if rng.random() < exploration_rate:
        t = rng.randrange(ant.remaining)
        return candidates[t]
    r = rng.random()
    acc = 0.0
    for j in candidates:
        acc += probs[j]
        if acc >= r:
            return j
    # rounding left the cumulative mass just short of r
    return candidates[-1]
