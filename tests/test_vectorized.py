import math

import numpy as np
import pytest
from numpy.testing import assert_array_equal, assert_allclose
from scipy import special

import SpecialFunctions
from SpecialFunctions import vectorized


def test_gamma_elementwise():
    x = np.array([[0.1, 1.5, 5.0], [-2.5, 10.1, np.nan]])
    result = vectorized.gamma(x)

    assert result.shape == x.shape
    assert result.dtype == np.float64
    assert_array_equal(result, [[SpecialFunctions.gamma(v) for v in row] for row in x])


def test_ln_gamma_matches_scipy():
    x = np.linspace(0.01, 1000.0, 500)
    assert_allclose(vectorized.ln_gamma(x), special.gammaln(x), rtol=1e-13, atol=1e-14)


def test_ln_gamma_accepts_lists():
    assert_array_equal(vectorized.ln_gamma([1.0, 3.0]), [SpecialFunctions.ln_gamma(1.0), SpecialFunctions.ln_gamma(3.0)])


def test_factorial_elementwise():
    n = np.arange(0, 175)
    result = vectorized.factorial(n)

    assert_array_equal(result, [SpecialFunctions.factorial(int(m)) for m in n])
    assert np.all(np.isinf(result[171:]))


def test_ln_factorial_elementwise():
    n = np.array([0, 1, 2, 10, 170, 171, 1 << 17])
    assert_array_equal(vectorized.ln_factorial(n), [SpecialFunctions.ln_factorial(int(m)) for m in n])


def test_binomial_broadcasts():
    n = np.arange(8)[:, None]
    k = np.arange(8)[None, :]
    result = vectorized.binomial(n, k)

    assert result.shape == (8, 8)
    for i in range(8):
        for j in range(8):
            assert result[i, j] == (float(math.comb(i, j)) if j <= i else 0.0)


def test_ln_binomial_broadcasts():
    result = vectorized.ln_binomial(10, np.arange(12))

    assert result.shape == (12,)
    assert_array_equal(result, [SpecialFunctions.ln_binomial(10, j) for j in range(12)])
    assert result[-1] == -np.inf


def test_integer_functions_reject_floats():
    with pytest.raises(AssertionError):
        vectorized.factorial(np.array([1.0, 2.0]))
    with pytest.raises(AssertionError):
        vectorized.binomial(5, np.array([1.5]))
