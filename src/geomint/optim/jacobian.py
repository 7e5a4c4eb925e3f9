########################################################################################
##
##                        JACOBIAN APPROXIMATION AND LINEAR SOLVES
##                                (optim/jacobian.py)
##
########################################################################################

# IMPORTS ==============================================================================

import warnings

import numpy as np

from scipy.linalg import (
    lu_factor,
    lu_solve,
    lstsq,
    LinAlgWarning
    )

from .._constants import (
    SOL_FD_FORWARD,
    SOL_FD_CENTRAL,
    SOL_COMPLEX_STEP
    )


# JACOBIAN =============================================================================

def compute_jacobian(func, x, b=None, strategy="forward"):
    """Approximate the jacobian of 'func' at 'x' column by column.

    The 'complex' strategy evaluates 'func' in complex arithmetic,
    which gives the jacobian to machine precision but requires the
    residual and all callbacks to accept complex input.

    Parameters
    ----------
    func : callable
        residual function
    x : array[float]
        evaluation point
    b : array[float], None
        'func(x)', reused by forward differences if given
    strategy : str
        one of 'forward', 'central', 'complex'

    Returns
    -------
    J : array[float]
        jacobian matrix
    evaluations : int
        number of calls of 'func'
    """

    n = len(x)
    evaluations = 0

    if strategy == "complex":

        h = SOL_COMPLEX_STEP
        _x = x.astype(complex)

        columns = []
        for j in range(n):
            _x[j] += 1j * h
            columns.append(np.imag(func(_x)) / h)
            _x[j] = x[j]

        return np.array(columns).T, n

    _x = np.array(x, dtype=float)

    if strategy == "central":

        columns = []
        for j in range(n):
            h = SOL_FD_CENTRAL * max(1.0, abs(x[j]))
            _x[j] = x[j] + h
            b_plus = func(_x)
            _x[j] = x[j] - h
            b_minus = func(_x)
            _x[j] = x[j]
            columns.append((b_plus - b_minus) / (2 * h))

        return np.array(columns).T, 2 * n

    #forward differences
    if b is None:
        b = func(_x)
        evaluations += 1

    columns = []
    for j in range(n):
        h = SOL_FD_FORWARD * max(1.0, abs(x[j]))
        _x[j] = x[j] + h
        columns.append((func(_x) - b) / h)
        _x[j] = x[j]

    return np.array(columns).T, evaluations + n


# LINEAR SOLVE =========================================================================

def factorize(J):
    """LU factorisation of the jacobian.

    Exactly singular matrices fall back to the minimum norm least
    squares solution, which leaves unknowns the residual does not
    depend on untouched.

    Parameters
    ----------
    J : array[float]
        square jacobian matrix

    Returns
    -------
    solve : callable
        'solve(r)' returns the solution 'dx' of 'J dx = r'
    """

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", LinAlgWarning)
        lu, piv = lu_factor(J, check_finite=False)

    if np.any(np.diag(lu) == 0.0) or not np.all(np.isfinite(lu)):
        return lambda r: lstsq(J, r)[0]

    return lambda r: lu_solve((lu, piv), r, check_finite=False)
