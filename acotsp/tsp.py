from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

# added to every edge on load so no distance is zero
DEFAULT_OFFSET = 1.0


class MatrixFormatError(ValueError):
    pass


def load_distance_matrix(path: str, offset: float = DEFAULT_OFFSET) -> np.ndarray:
    """Read a full adjacency matrix: one row per line, whitespace-separated doubles.

    ``offset`` is added to every entry. Blank lines are skipped.
    """
    try:
        with open(path, encoding="utf-8") as f:
            rows = [line.split() for line in f if line.strip()]
    except UnicodeDecodeError as e:
        raise MatrixFormatError(f"{path}: not a text matrix ({e})") from e
    if not rows:
        raise MatrixFormatError(f"{path}: empty matrix")
    n = len(rows)
    for i, row in enumerate(rows):
        if len(row) != n:
            raise MatrixFormatError(
                f"{path}: row {i} has {len(row)} columns, expected {n} (matrix must be square)")
    try:
        D = np.array(rows, dtype=np.float64)
    except ValueError as e:
        raise MatrixFormatError(f"{path}: {e}") from e
    if not np.all(np.isfinite(D)):
        raise MatrixFormatError(f"{path}: non-finite entries")
    if np.any(D < 0):
        raise MatrixFormatError(f"{path}: negative entries")
    return D + offset


@dataclass
class TSPInstance:
    distances: np.ndarray
    name: str = "tsp"
    offset: float = DEFAULT_OFFSET
    coords: Optional[List[Tuple[float, float]]] = None

    @staticmethod
    def from_file(path: str, offset: float = DEFAULT_OFFSET, name: Optional[str] = None):
        D = load_distance_matrix(path, offset=offset)
        return TSPInstance(distances=D, name=name or path, offset=offset)

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, square_size: float = 100.0,
                         name: str = "random_euclidean", offset: float = DEFAULT_OFFSET):
        rng = random.Random(seed)
        coords = [(rng.uniform(0, square_size), rng.uniform(0, square_size)) for _ in range(n)]
        D = np.zeros((n, n))
        for i in range(n):
            for j in range(i + 1, n):
                D[i, j] = D[j, i] = round(math.hypot(coords[i][0] - coords[j][0],
                                                     coords[i][1] - coords[j][1]))
        return TSPInstance(distances=D + offset, name=name, offset=offset, coords=coords)

    def n_cities(self) -> int:
        return self.distances.shape[0]

    def tour_length(self, tour: Sequence[int]) -> float:
        n = self.n_cities()
        dist = 0.0
        for k in range(n):
            i, j = tour[k], tour[(k + 1) % n]
            dist += self.distances[i, j]
        return float(dist)

    def reported_length(self, length: float) -> float:
        """Undo the load offset: a closed tour crosses exactly n edges."""
        return length - self.n_cities() * self.offset
