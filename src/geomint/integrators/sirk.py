########################################################################################
##
##                   STOCHASTIC IMPLICIT RUNGE-KUTTA INTEGRATOR
##                              (integrators/sirk.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._integrator import ImplicitIntegrator
from ._layout import StageLayout

from ..solutions import SolutionSDE
from ..utils.funcs import truncation_bound, truncate_increments

from .._constants import INT_LOG


# PARAMETERS AND CACHE =================================================================

class ParametersSIRK:
    """Per-step context of the SIRK stage equations, including the
    (truncated) wiener increment of the step"""

    def __init__(self, equation, tableau, dt, A=0.0):
        self.equation = equation
        self.tableau = tableau
        self.dt = dt
        self.A = A

        self.t = equation.t0
        self.q = equation.q0.copy()
        self.dW = np.zeros(equation.m)


class CacheSIRK:
    """Stage increments, positions, drift and diffusion matrices"""

    def __init__(self, d, m, s, dtype=float):
        self.Y = np.zeros((s, d), dtype=dtype)
        self.Q = np.zeros((s, d), dtype=dtype)
        self.V = np.zeros((s, d), dtype=dtype)
        self.B = np.zeros((s, d, m), dtype=dtype)


# STAGE EQUATIONS ======================================================================

def compute_stages_sirk(x, params, cache, layout):

    equation, tableau, dt = params.equation, params.tableau, params.dt

    layout.unpack(x, cache.Y)

    cache.Q[...] = params.q + cache.Y

    for i in range(tableau.s):
        t_i = params.t + dt * tableau.qdrift.c[i]
        equation.v(t_i, cache.Q[i], cache.V[i])
        equation.B(t_i, cache.Q[i], cache.B[i])


def function_stages_sirk(x, params, cache, layout):
    """Residual of the SIRK stage equations

    .. math::

        b_i = -Y_i + \\sum_j \\left( a^{drift}_{ij} V_j \\Delta t
            + a^{diff}_{ij} B_j \\Delta W \\right)
    """

    compute_stages_sirk(x, params, cache, layout)

    tableau = params.tableau

    b = -cache.Y + params.dt * tableau.qdrift.a @ cache.V \
        + tableau.qdiff.a @ (cache.B @ params.dW)

    return layout.pack(b)


# INTEGRATOR ===========================================================================

class IntegratorSIRK(ImplicitIntegrator):
    """Stochastic implicit Runge-Kutta integrator for Stratonovich SDEs

    .. math::

        dq = v(t, q) \\, dt + B(t, q) \\circ dW

    The unknowns are the stage increments 'Y_i = Q_i - q_n', the new
    state is

    .. math::

        q_{n+1} = q_n + \\Delta t \\sum_i b^{drift}_i V_i + \\sum_i b^{diff}_i B_i \\Delta W

    For 'K > 0' the wiener increments are truncated to '[-A, A]' with
    'A = sqrt(2 K dt |log dt|)', which keeps the stage equations solvable
    for large increments.

    Parameters
    ----------
    equation : SDE
        the equation to integrate
    tableau : TableauSIRK
        coefficients of the method
    dt : float
        timestep
    K : float
        truncation parameter, no truncation if zero
    config : IntegratorConfig, None
        solver and failure policy settings
    log : bool
        log run progress and per-step solver status
    """

    solution_class = SolutionSDE

    def __init__(self, equation, tableau, dt, K=0.0, config=None, log=INT_LOG):
        super().__init__(equation, dt, config, log)

        self.tableau = tableau
        self.K = K

        self.layout = StageLayout(equation.d, tableau.s)
        self.params = ParametersSIRK(equation, tableau, dt, truncation_bound(K, dt))

        #current state of each sample path
        self.q = np.zeros((1, equation.d))


    def __repr__(self):
        return f"IntegratorSIRK(tableau={self.tableau.name!r}, dt={self.dt}, K={self.K})"


    def create_cache(self, dtype):
        return CacheSIRK(self.equation.d, self.equation.m, self.tableau.s, dtype)


    def assemble(self, x, params, cache):
        return function_stages_sirk(x, params, cache, self.layout)


    def initialize(self, sol):
        self.q = np.array(sol.q[0])


    def update_params(self, sol, n, k=0):
        self.params.t = sol.t[n-1]
        self.params.q[:] = self.q[k]
        self.params.dW[:] = truncate_increments(sol.W.dW[n-1, k], self.params.A)


    def initial_guess(self, k=0):
        """Stage increments predicted with the two stage explicit method
        of Burrage and Burrage, applied from the start of the step to
        each stage time"""

        equation, params = self.equation, self.params
        d, m = equation.d, equation.m

        V1, V2 = np.zeros(d), np.zeros(d)
        B1, B2 = np.zeros((d, m)), np.zeros((d, m))

        equation.v(params.t, params.q, V1)
        equation.B(params.t, params.q, B1)

        Y = np.zeros((self.tableau.s, d))

        for i, c_i in enumerate(self.tableau.qdrift.c):

            dt_i = c_i * self.dt
            dW_i = c_i * params.dW

            Q = params.q + 2/3 * dt_i * V1 + 2/3 * B1 @ dW_i

            t_2 = params.t + 2/3 * dt_i
            equation.v(t_2, Q, V2)
            equation.B(t_2, Q, B2)

            Y[i] = dt_i * (0.25 * V1 + 0.75 * V2) + (0.25 * B1 + 0.75 * B2) @ dW_i

        return self.layout.pack(Y)


    def update_solution(self, x, k=0):

        cache = self.get_cache(float)
        compute_stages_sirk(x, self.params, cache, self.layout)

        self.q[k] += self.dt * self.tableau.qdrift.b @ cache.V \
            + self.tableau.qdiff.b @ (cache.B @ self.params.dW)


    def wrap_state(self, k=0):
        return self.wrap_periodic(self.q[k])


    def copy_solution(self, sol, n, k=0):
        sol.q[n, k] = self.q[k]
