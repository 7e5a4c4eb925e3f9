########################################################################################
##
##                   VARIATIONAL PARTITIONED RUNGE-KUTTA INTEGRATOR
##                              (integrators/vprk.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._integrator import VariationalIntegrator
from ._layout import StageLayout

from .._constants import INT_LOG


# PARAMETERS AND CACHE =================================================================

class ParametersVPRK:
    """Per-step context of the VPRK stage equations"""

    def __init__(self, equation, tableau, dt):
        self.equation = equation
        self.tableau = tableau
        self.dt = dt

        self.t = equation.t0
        self.q = equation.q0.copy()
        self.p = equation.p0.copy()


class CacheVPRK:
    """Stage positions, velocities, one-forms and forces"""

    def __init__(self, d, s, dtype=float):
        self.Q = np.zeros((s, d), dtype=dtype)
        self.V = np.zeros((s, d), dtype=dtype)
        self.P = np.zeros((s, d), dtype=dtype)
        self.F = np.zeros((s, d), dtype=dtype)


# STAGE EQUATIONS ======================================================================

def compute_stages_vprk(x, params, cache, layout):
    """Unpack the stage velocities and evaluate the one-form and the
    force at the stages

    .. math::

        Q_i = q + \\Delta t \\sum_j a^q_{ij} V_j, \\quad
        P_i = \\vartheta(t_i, Q_i, V_i), \\quad
        F_i = f(t_i, Q_i, V_i)
    """

    equation, tableau, dt = params.equation, params.tableau, params.dt

    layout.unpack(x, cache.V)

    cache.Q[...] = params.q + dt * tableau.q.a @ cache.V

    for i in range(tableau.s):
        t_i = params.t + dt * tableau.q.c[i]
        equation.theta(t_i, cache.Q[i], cache.V[i], cache.P[i])
        equation.f(t_i, cache.Q[i], cache.V[i], cache.F[i])


def function_stages_vprk(x, params, cache, layout):
    """Residual of the VPRK stage equations

    .. math::

        b_i = -(P_i - p) + \\Delta t \\sum_j a^p_{ij} F_j

    reduced by 'd_i \\sum_j d_j V_j' if the tableau carries a projection
    vector 'd'.
    """

    compute_stages_vprk(x, params, cache, layout)

    tableau = params.tableau

    b = -(cache.P - params.p) + params.dt * tableau.p.a @ cache.F

    if tableau.d is not None:
        b -= np.outer(tableau.d, tableau.d @ cache.V)

    return layout.pack(b)


# INTEGRATOR ===========================================================================

class IntegratorVPRK(VariationalIntegrator):
    """Variational partitioned Runge-Kutta integrator for implicit
    equations of the form

    .. math::

        p = \\vartheta(t, q, \\dot{q}), \\qquad \\dot{p} = f(t, q, \\dot{q})

    The unknowns are the 'S' stage velocities, the new state is

    .. math::

        q_{n+1} = q_n + \\Delta t \\sum_i b^q_i V_i, \\qquad
        p_{n+1} = p_n + \\Delta t \\sum_i b^p_i F_i

    Parameters
    ----------
    equation : IODE
        the equation to integrate
    tableau : TableauVPRK
        coefficients of the method
    dt : float
        timestep
    config : IntegratorConfig, None
        solver and failure policy settings
    log : bool
        log run progress and per-step solver status
    """

    def __init__(self, equation, tableau, dt, config=None, log=INT_LOG):
        super().__init__(equation, dt, config, log)

        self.tableau = tableau

        self.layout = StageLayout(equation.d, tableau.s)
        self.params = ParametersVPRK(equation, tableau, dt)


    def __repr__(self):
        return f"IntegratorVPRK(tableau={self.tableau.name!r}, dt={self.dt})"


    def create_cache(self, dtype):
        return CacheVPRK(self.equation.d, self.tableau.s, dtype)


    def assemble(self, x, params, cache):
        return function_stages_vprk(x, params, cache, self.layout)


    def initial_guess(self, k=0):
        V = np.zeros((self.tableau.s, self.equation.d))
        for i in range(self.tableau.s):
            _, _, V[i] = self.iguess.evaluate(self.tableau.q.c[i], self.tableau.p.c[i])
        return self.layout.pack(V)


    def update_solution(self, x, k=0):

        #stages of the solved step in real arithmetic
        cache = self.get_cache(float)
        compute_stages_vprk(x, self.params, cache, self.layout)

        self.q += self.dt * self.tableau.q.b @ cache.V
        self.p += self.dt * self.tableau.p.b @ cache.F
