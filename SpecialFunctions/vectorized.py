"""
Array versions of the gamma and factorial functions, for evaluating densities over many covariates at once.

Each function broadcasts its inputs like a numpy ufunc and applies the scalar function elementwise, so results agree
exactly with SpecialFunctions.lanczos and SpecialFunctions.factorials.
"""
import numpy as np

from .lanczos import gamma as _gamma, ln_gamma as _ln_gamma
from .factorials import factorial as _factorial, ln_factorial as _ln_factorial, binomial as _binomial, \
    ln_binomial as _ln_binomial

__all__ = ['gamma', 'ln_gamma', 'factorial', 'ln_factorial', 'binomial', 'ln_binomial']

_gamma_v = np.vectorize(_gamma, otypes=[np.float64])
_ln_gamma_v = np.vectorize(_ln_gamma, otypes=[np.float64])
_factorial_v = np.vectorize(_factorial, otypes=[np.float64])
_ln_factorial_v = np.vectorize(_ln_factorial, otypes=[np.float64])
_binomial_v = np.vectorize(_binomial, otypes=[np.float64])
_ln_binomial_v = np.vectorize(_ln_binomial, otypes=[np.float64])


def _integers(a, name):
    a = np.asarray(a)
    assert np.issubdtype(a.dtype, np.integer) or a.dtype == object, \
        '{0}(): expected integer input, got dtype {1}'.format(name, a.dtype)
    return a


def gamma(x):
    """
    Gamma(x) elementwise.

    :param x:       real arguments
        :type       array_like
    :return:        float64 ndarray with the shape of x
    """
    return _gamma_v(np.asarray(x, dtype=np.float64))


def ln_gamma(x):
    """
    ln(Gamma(x)) elementwise.

    :param x:       real arguments
        :type       array_like
    :return:        float64 ndarray with the shape of x
    """
    return _ln_gamma_v(np.asarray(x, dtype=np.float64))


def factorial(n):
    """ n! elementwise, inf where n > 170 """
    return _factorial_v(_integers(n, 'factorial'))


def ln_factorial(n):
    """ ln(n!) elementwise """
    return _ln_factorial_v(_integers(n, 'ln_factorial'))


def binomial(n, k):
    """
    Binomial coefficients C(n, k), broadcasting n against k.

    :param n:       non-negative integers
        :type       array_like
    :param k:       non-negative integers
        :type       array_like
    :return:        float64 ndarray with the broadcast shape of n and k, 0.0 where k > n
    """
    return _binomial_v(_integers(n, 'binomial'), _integers(k, 'binomial'))


def ln_binomial(n, k):
    """ ln(C(n, k)) elementwise with broadcasting, -inf where k > n """
    return _ln_binomial_v(_integers(n, 'ln_binomial'), _integers(k, 'ln_binomial'))
