########################################################################################
##
##                   STOCHASTIC EXPLICIT RUNGE-KUTTA INTEGRATOR
##                              (integrators/serk.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._integrator import Integrator

from ..optim import SolverStatus
from ..solutions import SolutionSDE

from .._constants import INT_LOG


# INTEGRATOR ===========================================================================

class IntegratorSERK(Integrator):
    """Explicit stochastic Runge-Kutta integrator

    .. math::

        Q_i = q_n + \\sum_{j<i} \\left( a^{drift}_{ij} V_j \\Delta t
            + a^{diff}_{ij} B_j \\Delta W + a^{diff2}_{ij} B_j \\frac{\\Delta Z}{\\Delta t} \\right)

    with the update built the same way from the weights 'b'. The
    'diff2' terms are only present if the tableau defines them.

    Parameters
    ----------
    equation : SDE
        the equation to integrate
    tableau : TableauSERK
        coefficients of the method
    dt : float
        timestep
    config : IntegratorConfig, None
        failure policy settings
    log : bool
        log run progress
    """

    solution_class = SolutionSDE

    def __init__(self, equation, tableau, dt, config=None, log=INT_LOG):
        super().__init__(equation, dt, config, log)

        self.tableau = tableau

        d, m, s = equation.d, equation.m, tableau.s

        #stage values
        self.Q = np.zeros((s, d))
        self.V = np.zeros((s, d))
        self.B = np.zeros((s, d, m))

        #current state of each sample path
        self.q = np.zeros((1, d))


    def __repr__(self):
        return f"IntegratorSERK(tableau={self.tableau.name!r}, dt={self.dt})"


    def initialize(self, sol):
        self.q = np.array(sol.q[0])


    def _increment(self, a, a_diff, a_diff2, dW, dZ_dt):
        """Weighted sum of the contributions of the first len(a) stages"""
        j = len(a)
        dq = self.dt * a @ self.V[:j] + a_diff @ (self.B[:j] @ dW)
        if a_diff2 is not None:
            dq += a_diff2 @ (self.B[:j] @ dZ_dt)
        return dq


    def integrate_step(self, sol, n, k=0):

        equation, tableau = self.equation, self.tableau

        t = sol.t[n-1]
        q = self.q[k]

        dW = sol.W.dW[n-1, k]
        dZ_dt = sol.W.dZ[n-1, k] / self.dt if self.dt != 0.0 else np.zeros_like(dW)

        qdiff2 = tableau.qdiff2

        for i in range(tableau.s):

            self.Q[i] = q + self._increment(
                tableau.qdrift.a[i, :i],
                tableau.qdiff.a[i, :i],
                None if qdiff2 is None else qdiff2.a[i, :i],
                dW, dZ_dt
                )

            t_i = t + self.dt * tableau.qdrift.c[i]
            equation.v(t_i, self.Q[i], self.V[i])
            equation.B(t_i, self.Q[i], self.B[i])

        q += self._increment(
            tableau.qdrift.b,
            tableau.qdiff.b,
            None if qdiff2 is None else qdiff2.b,
            dW, dZ_dt
            )

        self.wrap_periodic(q)

        sol.q[n, k] = q

        return SolverStatus.explicit()
