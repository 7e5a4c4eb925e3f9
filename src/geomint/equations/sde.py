########################################################################################
##
##                       STOCHASTIC DIFFERENTIAL EQUATION
##                               (equations/sde.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._equation import Equation

from ..errors import DimensionMismatch


# EQUATION =============================================================================

class SDE(Equation):
    """Stratonovich stochastic differential equation

    .. math::

        dq = v(t, q) \\, dt + B(t, q) \\circ dW

    with an 'm'-dimensional Wiener process 'W'.

    Parameters
    ----------
    v : callable
        drift 'v(t, q, v)'
    B : callable
        diffusion matrix 'B(t, q, B)' with 'B' of shape (d, m)
    q0 : array[float]
        initial state, shared by all sample paths
    m : int
        dimension of the wiener process
    t0 : float
        initial time
    periodicity : array[float], None
        period of each coordinate of 'q'
    """

    def __init__(self, v, B, q0, m=1, t0=0.0, periodicity=None):
        super().__init__(q0, t0, periodicity)

        if m < 1:
            raise DimensionMismatch(f"wiener process needs at least one dimension, got {m}")

        self.v = v
        self.B = B
        self.m = int(m)
