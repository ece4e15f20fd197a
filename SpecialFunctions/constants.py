"""
Mathematical expressions commonly used when computing distribution values, stored as constants.
"""

__all__ = ['LN_PI', 'LN_2_SQRT_E_OVER_PI', 'TWO_SQRT_E_OVER_PI']

LN_PI = 1.1447298858494001741434273513530587116472948129153                      # ln(pi)

LN_2_SQRT_E_OVER_PI = 0.6207822376352452223455184457816472122518527279025978     # ln(2 * sqrt(e / pi))

TWO_SQRT_E_OVER_PI = 1.8603827342052657173362492472666631120594218414085755      # 2 * sqrt(e / pi)
