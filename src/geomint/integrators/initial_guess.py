########################################################################################
##
##                  INITIAL GUESS FOR PARTITIONED IMPLICIT EQUATIONS
##                          (integrators/initial_guess.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ..interpolation import HermiteInterpolation


# CLASS ================================================================================

class InitialGuessPODE:
    """Predictor for the stage unknowns of variational integrators.

    Keeps the last two accepted states '(q, p)' together with the
    velocity 'v' and force 'f' there and extrapolates them with a cubic
    Hermite polynomial to the stage times of the next step.

    At the start of the integration the previous state is generated
    with one backward explicit midpoint step.

    Parameters
    ----------
    equation : IODE
        provides the callbacks 'v(t, q, p, v)' and 'f(t, q, v, f)'
    dt : float
        timestep
    """

    def __init__(self, equation, dt):

        self.equation = equation
        self.dt = dt

        self.interpolation = HermiteInterpolation(dt)

        d = equation.d

        #previous accepted state
        self.t0 = equation.t0
        self.q0 = np.zeros(d)
        self.p0 = np.zeros(d)
        self.v0 = np.zeros(d)
        self.f0 = np.zeros(d)

        #current accepted state
        self.t1 = equation.t0
        self.q1 = np.zeros(d)
        self.p1 = np.zeros(d)
        self.v1 = np.zeros(d)
        self.f1 = np.zeros(d)


    def _evaluate_fields(self, t, q, p, v, f):
        self.equation.v(t, q, p, v)
        self.equation.f(t, q, v, f)


    def initialize(self, t, q, p):
        """Set the current state and generate the previous one.

        Parameters
        ----------
        t : float
            current time
        q, p : array[float]
            current state
        """

        self.t1 = t
        self.q1[:] = q
        self.p1[:] = p
        self._evaluate_fields(self.t1, self.q1, self.p1, self.v1, self.f1)

        #backward explicit midpoint step
        h = -self.dt

        qm = self.q1 + 0.5 * h * self.v1
        pm = self.p1 + 0.5 * h * self.f1
        vm = np.zeros_like(qm)
        fm = np.zeros_like(pm)
        self._evaluate_fields(t + 0.5 * h, qm, pm, vm, fm)

        self.t0 = t + h
        self.q0[:] = self.q1 + h * vm
        self.p0[:] = self.p1 + h * fm
        self._evaluate_fields(self.t0, self.q0, self.p0, self.v0, self.f0)


    def update(self, t, q, p, shift=None):
        """Accept a new state, the current one becomes the previous one.

        Parameters
        ----------
        t : float
            time of the new state
        q, p : array[float]
            new state
        shift : array[float], None
            offset of a periodic wrap-around of 'q', also applied to the
            previous state to keep the history continuous
        """

        self.t0 = self.t1
        self.q0[:] = self.q1
        self.p0[:] = self.p1
        self.v0[:] = self.v1
        self.f0[:] = self.f1

        if shift is not None:
            self.q0 += shift

        self.t1 = t
        self.q1[:] = q
        self.p1[:] = p
        self._evaluate_fields(self.t1, self.q1, self.p1, self.v1, self.f1)


    def evaluate(self, c_q, c_p=None):
        """Extrapolate to the fraction 'c' of the next step.

        Parameters
        ----------
        c_q : float
            step fraction for position and velocity
        c_p : float, None
            step fraction for the momentum, 'c_q' if None

        Returns
        -------
        q, p, v : array[float]
            predicted position, momentum and velocity
        """

        if c_p is None:
            c_p = c_q

        #no history to extrapolate from
        if self.dt == 0.0:
            return self.q1.copy(), self.p1.copy(), self.v1.copy()

        hermite = self.interpolation

        q = hermite.evaluate(self.q0, self.q1, self.v0, self.v1, 1.0 + c_q)
        v = hermite.evaluate_derivative(self.q0, self.q1, self.v0, self.v1, 1.0 + c_q)
        p = hermite.evaluate(self.p0, self.p1, self.f0, self.f1, 1.0 + c_p)

        return q, p, v
