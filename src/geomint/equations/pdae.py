########################################################################################
##
##                  PARTITIONED DIFFERENTIAL-ALGEBRAIC EQUATION
##                               (equations/pdae.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._equation import Equation, as_state


# EQUATION =============================================================================

class PDAE(Equation):
    """Partitioned differential-algebraic equation of index two

    .. math::

        \\dot{q} = v(t, q, p) + u(t, q, p, \\lambda), \\quad
        \\dot{p} = f(t, q, p) + g(t, q, p, \\lambda), \\quad
        0 = \\phi(t, q, p)

    The constraint has one component per coordinate of 'q'.

    Parameters
    ----------
    v, f : callable
        'v(t, q, p, v)' and 'f(t, q, p, f)'
    u, g : callable
        multiplier terms 'u(t, q, p, lam, u)' and 'g(t, q, p, lam, g)'
    phi : callable
        constraint 'phi(t, q, p, phi)'
    q0, p0 : array[float]
        initial position and momentum
    lambda0 : array[float], None
        initial multiplier, zero if None
    t0 : float
        initial time
    periodicity : array[float], None
        period of each coordinate of 'q'
    """

    def __init__(self, v, f, u, g, phi, q0, p0, lambda0=None, t0=0.0, periodicity=None):
        super().__init__(q0, t0, periodicity)

        self.v = v
        self.f = f
        self.u = u
        self.g = g
        self.phi = phi

        self.p0 = as_state("p0", p0, self.d)
        self.lambda0 = np.zeros(self.d) if lambda0 is None else as_state("lambda0", lambda0, self.d)
