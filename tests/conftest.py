import numpy as np
import pytest

from acotsp import TSPInstance

from matrices import SMALL


@pytest.fixture
def small_matrix():
    return np.array(SMALL)


@pytest.fixture
def euclid():
    return TSPInstance.random_euclidean(n=12, seed=7)


@pytest.fixture
def matrix_file(tmp_path):
    p = tmp_path / "graph.txt"
    p.write_text("0 1 2\n1 0 3\n2  3 0\n")
    return str(p)
