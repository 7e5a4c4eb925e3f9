########################################################################################
##
##                        IMPLICIT ORDINARY DIFFERENTIAL EQUATION
##                               (equations/iode.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._equation import Equation, as_state


# EQUATION =============================================================================

class IODE(Equation):
    """Implicit ordinary differential equation of variational type

    .. math::

        p = \\vartheta(t, q, \\dot{q}), \\qquad \\dot{p} = f(t, q, \\dot{q})

    as obtained from a (possibly degenerate) Lagrangian. All callbacks
    write their result into the last argument.

    Parameters
    ----------
    theta : callable
        one-form 'theta(t, q, v, p)'
    f : callable
        force 'f(t, q, v, f)'
    g : callable
        projection 'g(t, q, lam, g)', the contraction of the derivative
        of the one-form with 'lam'
    v : callable
        velocity 'v(t, q, p, v)', used for the initial guess
    q0 : array[float]
        initial position
    p0 : array[float]
        initial momentum
    t0 : float
        initial time
    periodicity : array[float], None
        period of each coordinate of 'q'
    """

    def __init__(self, theta, f, g, v, q0, p0, t0=0.0, periodicity=None):
        super().__init__(q0, t0, periodicity)

        self.theta = theta
        self.f = f
        self.g = g
        self.v = v

        self.p0 = as_state("p0", p0, self.d)
