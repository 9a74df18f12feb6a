import numpy as np
import pytest

from acotsp import approx_pow


def test_known_values():
    assert approx_pow(2.0, 2.0) == 4.231937408447266
    assert approx_pow(1.0, 5.0) == 1.2319374084472656
    assert isinstance(approx_pow(2.0, 3.0), float)


def test_zero_exponent_gives_the_bias():
    # every base collapses onto the bias, just under 1.0
    assert approx_pow(3.7, 0.0) == approx_pow(0.2, 0.0)
    assert approx_pow(3.7, 0.0) == pytest.approx(0.9710087776184082)


@pytest.mark.parametrize("base", [0.01, 0.3, 0.9, 1.5, 7.0, 123.0])
@pytest.mark.parametrize("exponent", [0.5, 1.0, 2.0, 5.0])
def test_within_error_bound(base, exponent):
    exact = base ** exponent
    assert abs(approx_pow(base, exponent) - exact) <= 0.3 * exact


def test_array_matches_scalar():
    bases = np.array([0.2, 0.5, 1.0, 3.0, 10.0])
    got = approx_pow(bases, 5.0)
    assert got.shape == bases.shape
    for b, g in zip(bases, got):
        assert g == approx_pow(float(b), 5.0)


def test_deterministic():
    assert approx_pow(0.123, 5.0) == approx_pow(0.123, 5.0)


def test_zero_base_stays_zero_for_unit_exponent():
    assert approx_pow(0.0, 1.0) == 0.0
