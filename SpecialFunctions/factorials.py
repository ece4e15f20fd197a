"""
Factorial related functions (factorial, log factorial, binomial coefficient and its logarithm) for non-negative
integer arguments, in double precision.

The factorials 0!, ..., 170! are held in a cache which is built on first use and shared, read-only, by every caller.
Larger log factorials are delegated to the log gamma function.
"""
import math
import numbers
import threading
import numpy as np
import logging
logger = logging.getLogger(__name__)

from .lanczos import ln_gamma

__all__ = ['factorial', 'ln_factorial', 'binomial', 'ln_binomial', 'MAX_ARG', 'CACHE_SIZE']

MAX_ARG = 170                                           # largest n with n! representable by a double
CACHE_SIZE = MAX_ARG + 1

_fcache = None                                          # published once, never written to afterwards
_fcache_lock = threading.Lock()


def _build_fcache():
    """
    Compute the table 0!, 1!, ..., 170! by iterated products and freeze it.

    :return:        the factorial table
        :type       read-only float64 ndarray [CACHE_SIZE]
    """
    cache = np.empty(CACHE_SIZE)
    acc = 1.0
    cache[0] = acc
    for i in range(1, CACHE_SIZE):
        acc *= i
        cache[i] = acc
    cache.setflags(write=False)

    logger.debug('Built factorial cache 0!..{0}!'.format(MAX_ARG))
    return cache


def _get_fcache():
    """
    Return the factorial table, building it if this is the first request.

    The table is built by exactly one thread while holding the lock and only then published, so callers arriving
    during the build wait on the lock and never see a partially filled table.
    """
    global _fcache

    cache = _fcache
    if cache is None:
        with _fcache_lock:
            if _fcache is None:
                _fcache = _build_fcache()
            cache = _fcache
    return cache


def _nonnegative(n, name):
    """ Check that n is a non-negative integer and return it as a Python int """
    assert isinstance(n, numbers.Integral) and n >= 0, \
        '{0}(): expected a non-negative integer - {1!r}'.format(name, n)
    return int(n)


def factorial(n):
    """
    Compute n! for 0 <= n <= 170. Every larger factorial overflows a double.

    :param n:       non-negative integer
        :type       int
    :return:        n!, or inf if n > 170
        :type       float
    """
    n = _nonnegative(n, 'factorial')

    if n > MAX_ARG:
        return math.inf
    return float(_get_fcache()[n])


def ln_factorial(n):
    """
    Compute ln(n!) for n >= 0. Unlike factorial(), this remains finite for n > 170.

    :param n:       non-negative integer
        :type       int
    :return:        ln(n!), 0.0 if n <= 1
        :type       float
    """
    n = _nonnegative(n, 'ln_factorial')

    if n <= 1:
        return 0.0
    if n > MAX_ARG:
        return ln_gamma(float(n) + 1.0)                 # Gamma(n + 1) = n!
    return math.log(_get_fcache()[n])


def binomial(n, k):
    """
    Compute the binomial coefficient n choose k.

    Evaluated in log space and rounded to the nearest integer, which recovers the exact value for every coefficient
    a double can represent exactly.

    :param n:       non-negative integer
    :param k:       non-negative integer
    :return:        C(n, k), 0.0 if k > n
        :type       float
    """
    n = _nonnegative(n, 'binomial')
    k = _nonnegative(k, 'binomial')

    if k > n:
        return 0.0
    with np.errstate(over='ignore'):
        return float(np.floor(0.5 + np.exp(ln_factorial(n) - ln_factorial(k) - ln_factorial(n - k))))


def ln_binomial(n, k):
    """
    Compute the natural logarithm of the binomial coefficient, ln(n choose k). No rounding is applied.

    :param n:       non-negative integer
    :param k:       non-negative integer
    :return:        ln(C(n, k)), -inf if k > n
        :type       float
    """
    n = _nonnegative(n, 'ln_binomial')
    k = _nonnegative(k, 'ln_binomial')

    if k > n:
        return -math.inf
    return ln_factorial(n) - ln_factorial(k) - ln_factorial(n - k)
