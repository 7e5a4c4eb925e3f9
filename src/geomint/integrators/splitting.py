########################################################################################
##
##                              SPLITTING INTEGRATOR
##                           (integrators/splitting.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._integrator import Integrator

from ..optim import SolverStatus
from ..solutions import SolutionODE

from .._constants import INT_LOG


# INTEGRATOR ===========================================================================

class IntegratorSplitting(Integrator):
    """Composition of the exact flows of a split equation.

    The tableau determines the order 'f' in which the sub-flows are
    applied and the step fractions 'c', one step is

    .. math::

        q_{n+1} = \\varphi^{f_N}_{c_N \\Delta t} \\circ \\dots \\circ \\varphi^{f_1}_{c_1 \\Delta t} (q_n)

    Parameters
    ----------
    equation : SODE
        the split equation
    tableau : TableauSplitting
        composition coefficients
    dt : float
        timestep
    config : IntegratorConfig, None
        failure policy settings
    log : bool
        log run progress
    """

    solution_class = SolutionODE

    def __init__(self, equation, tableau, dt, config=None, log=INT_LOG):
        super().__init__(equation, dt, config, log)

        self.tableau = tableau

        f, c = tableau.coefficients(len(equation.flows))

        #flows with zero step are identities
        nonzero = c != 0.0
        self.f = f[nonzero]
        self.c = c[nonzero]

        self.q = equation.q0.copy()
        self._q_new = np.zeros(equation.d)


    def __repr__(self):
        return f"IntegratorSplitting(tableau={self.tableau.name!r}, dt={self.dt})"


    def initialize(self, sol):
        self.q[:] = sol.q[0]


    def integrate_step(self, sol, n, k=0):

        t = sol.t[n-1]

        for f_i, c_i in zip(self.f, self.c):
            self.equation.flows[f_i](t + self.dt * c_i, self.q, self._q_new, c_i * self.dt)
            self.q[:] = self._q_new

        self.wrap_periodic(self.q)

        sol.q[n] = self.q

        return SolverStatus.explicit()
