# modules
from . import constants
from . import lanczos
from . import factorials
from . import vectorized
from .lanczos import gamma, ln_gamma
from .factorials import factorial, ln_factorial, binomial, ln_binomial, MAX_ARG

__all__ = ['gamma', 'ln_gamma', 'factorial', 'ln_factorial', 'binomial', 'ln_binomial', 'MAX_ARG',
           'constants', 'vectorized']
