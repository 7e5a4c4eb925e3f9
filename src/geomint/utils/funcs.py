########################################################################################
##
##                            NUMERICAL HELPER FUNCTIONS
##                                 (utils/funcs.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np


# NORMS ================================================================================

def norm_inf(x):
    """Maximum norm that also works for empty and complex arrays."""
    _x = np.asarray(x)
    return float(np.max(np.abs(_x))) if _x.size else 0.0


def rel_err(x, ref):
    """Relative error of 'x' with respect to the reference 'ref' in the 2-norm.

    Parameters
    ----------
    x : array[float]
        computed values
    ref : array[float]
        reference values

    Returns
    -------
    err : float
        relative error
    """
    _x, _ref = np.asarray(x), np.asarray(ref)
    return float(np.linalg.norm(_x - _ref) / np.linalg.norm(_ref))


# PERIODICITY ==========================================================================

def cut_periodic_solution(q, periodicity):
    """Reduce periodic coordinates of 'q' into '[0, period)' in place.

    Coordinates with zero period are left untouched, coordinates that
    are already reduced are not modified, so the reduction is idempotent.

    Parameters
    ----------
    q : array[float]
        state, modified in place
    periodicity : array[float]
        period of each coordinate, zero for non-periodic coordinates

    Returns
    -------
    shift : array[float]
        offset that was added to 'q'
    """

    shift = np.zeros_like(q)

    for k, period in enumerate(periodicity):

        #non-periodic or already reduced coordinates
        if period == 0.0 or 0.0 <= q[k] < period:
            continue

        q_old = q[k]
        q[k] = q[k] - period * np.floor(q[k] / period)

        #rounding can put the result on the upper boundary
        if q[k] >= period:
            q[k] -= period
        if q[k] < 0.0:
            q[k] += period

        shift[k] = q[k] - q_old

    return shift


# WIENER INCREMENTS ====================================================================

def truncation_bound(K, dt):
    """Milstein-Tretyakov truncation bound for the wiener increments

    .. math::

        A = \\sqrt{2 K \\Delta t \\, |\\log \\Delta t|}

    Parameters
    ----------
    K : float
        truncation parameter, no truncation if not positive
    dt : float
        timestep

    Returns
    -------
    A : float
        truncation bound, zero means no truncation
    """
    if K <= 0.0 or dt <= 0.0:
        return 0.0
    return float(np.sqrt(2.0 * K * dt * abs(np.log(dt))))


def truncate_increments(dW, A):
    """Clip all components of 'dW' to '[-A, A]' if 'A > 0'.

    Parameters
    ----------
    dW : array[float]
        wiener increments
    A : float
        truncation bound

    Returns
    -------
    dW : array[float]
        truncated copy of the increments
    """
    _dW = np.array(dW, dtype=float)
    if A > 0.0:
        np.clip(_dW, -A, A, out=_dW)
    return _dW
