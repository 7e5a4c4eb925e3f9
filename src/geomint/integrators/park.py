########################################################################################
##
##                     PROJECTED ADDITIVE RUNGE-KUTTA INTEGRATOR
##                              (integrators/park.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._integrator import ImplicitIntegrator
from ._layout import ParkLayout

from ..solutions import SolutionPDAE

from .._constants import INT_LOG


# PARAMETERS AND CACHE =================================================================

class ParametersPARK:
    """Per-step context of the PARK stage equations"""

    def __init__(self, equation, tableau, dt):
        self.equation = equation
        self.tableau = tableau
        self.dt = dt

        self.t = equation.t0
        self.q = equation.q0.copy()
        self.p = equation.p0.copy()
        self.lam = equation.lambda0.copy()


class CachePARK:
    """Internal stages (s, d) and projective stages (r, d)"""

    def __init__(self, d, s, r, dtype=float):

        #internal stages
        self.Y = np.zeros((s, d), dtype=dtype)
        self.Z = np.zeros((s, d), dtype=dtype)
        self.Q = np.zeros((s, d), dtype=dtype)
        self.P = np.zeros((s, d), dtype=dtype)
        self.V = np.zeros((s, d), dtype=dtype)
        self.F = np.zeros((s, d), dtype=dtype)

        #projective stages
        self.Y_tilde = np.zeros((r, d), dtype=dtype)
        self.Z_tilde = np.zeros((r, d), dtype=dtype)
        self.Lambda = np.zeros((r, d), dtype=dtype)
        self.Q_tilde = np.zeros((r, d), dtype=dtype)
        self.P_tilde = np.zeros((r, d), dtype=dtype)
        self.U = np.zeros((r, d), dtype=dtype)
        self.G = np.zeros((r, d), dtype=dtype)
        self.Phi = np.zeros((r, d), dtype=dtype)


# STAGE EQUATIONS ======================================================================

def compute_stages_park(x, params, cache, layout):
    """Unpack the stage increments and evaluate the vector fields, the
    multiplier terms and the constraint at the stages"""

    equation, tableau, dt = params.equation, params.tableau, params.dt

    layout.unpack(x, cache.Y, cache.Z, cache.Y_tilde, cache.Z_tilde, cache.Lambda)

    cache.Q[...] = params.q + dt * cache.Y
    cache.P[...] = params.p + dt * cache.Z

    for i in range(tableau.s):
        t_i = params.t + dt * tableau.q.c[i]
        equation.v(t_i, cache.Q[i], cache.P[i], cache.V[i])
        equation.f(t_i, cache.Q[i], cache.P[i], cache.F[i])

    cache.Q_tilde[...] = params.q + dt * cache.Y_tilde
    cache.P_tilde[...] = params.p + dt * cache.Z_tilde

    for i in range(tableau.r):
        t_i = params.t + dt * tableau.q_tilde.c[i]
        equation.u(t_i, cache.Q_tilde[i], cache.P_tilde[i], cache.Lambda[i], cache.U[i])
        equation.g(t_i, cache.Q_tilde[i], cache.P_tilde[i], cache.Lambda[i], cache.G[i])
        equation.phi(t_i, cache.Q_tilde[i], cache.P_tilde[i], cache.Phi[i])


def function_stages_park(x, params, cache, layout):
    """Residual of the PARK stage equations

    .. math::

        Y = A^q V + \\alpha^q U, \\quad Z = A^p F + \\alpha^p G, \\quad
        \\tilde{Y} = \\tilde{A}^q V + \\tilde{\\alpha}^q U, \\quad
        \\tilde{Z} = \\tilde{A}^p F + \\tilde{\\alpha}^p G, \\quad
        0 = \\phi(\\tilde{Q}, \\tilde{P})

    If the first multiplier node is zero, the constraint of the first
    projective stage is replaced by 'Lambda_0 = lambda_n'.
    """

    compute_stages_park(x, params, cache, layout)

    tableau = params.tableau

    b_Y = -cache.Y + tableau.q.a @ cache.V + tableau.q.alpha @ cache.U
    b_Z = -cache.Z + tableau.p.a @ cache.F + tableau.p.alpha @ cache.G

    b_Y_tilde = -cache.Y_tilde + tableau.q_tilde.a @ cache.V + tableau.q_tilde.alpha @ cache.U
    b_Z_tilde = -cache.Z_tilde + tableau.p_tilde.a @ cache.F + tableau.p_tilde.alpha @ cache.G

    b_Lambda = -cache.Phi

    if tableau.lambda_.c[0] == 0.0:
        b_Lambda[0] = params.lam - cache.Lambda[0]

    return layout.pack(b_Y, b_Z, b_Y_tilde, b_Z_tilde, b_Lambda)


# INTEGRATOR ===========================================================================

class IntegratorPARK(ImplicitIntegrator):
    """Projected additive Runge-Kutta integrator for partitioned index-two
    differential-algebraic equations

    .. math::

        \\dot{q} = v(q, p) + u(q, p, \\lambda), \\quad
        \\dot{p} = f(q, p) + g(q, p, \\lambda), \\quad
        0 = \\phi(q, p)

    The unknowns are the increments of the internal and projective stages
    and the multipliers of the projective stages. The new state is

    .. math::

        q_{n+1} = q_n + \\Delta t (b^q V + \\beta^q U), \\quad
        p_{n+1} = p_n + \\Delta t (b^p F + \\beta^p G), \\quad
        \\lambda_{n+1} = b^\\lambda \\Lambda

    Parameters
    ----------
    equation : PDAE
        the equation to integrate
    tableau : TableauPARK
        coefficients of the method
    dt : float
        timestep
    config : IntegratorConfig, None
        solver and failure policy settings
    log : bool
        log run progress and per-step solver status
    """

    solution_class = SolutionPDAE

    def __init__(self, equation, tableau, dt, config=None, log=INT_LOG):
        super().__init__(equation, dt, config, log)

        self.tableau = tableau

        self.layout = ParkLayout(equation.d, tableau.s, tableau.r)
        self.params = ParametersPARK(equation, tableau, dt)

        #current state
        self.q = equation.q0.copy()
        self.p = equation.p0.copy()
        self.lam = equation.lambda0.copy()


    def __repr__(self):
        return f"IntegratorPARK(tableau={self.tableau.name!r}, dt={self.dt})"


    def create_cache(self, dtype):
        return CachePARK(self.equation.d, self.tableau.s, self.tableau.r, dtype)


    def assemble(self, x, params, cache):
        return function_stages_park(x, params, cache, self.layout)


    def initialize(self, sol):
        self.q[:] = sol.q[0]
        self.p[:] = sol.p[0]
        self.lam[:] = sol.lam[0]


    def update_params(self, sol, n, k=0):
        self.params.t = sol.t[n-1]
        self.params.q[:] = self.q
        self.params.p[:] = self.p
        self.params.lam[:] = self.lam


    def initial_guess(self, k=0):

        #vector fields at the current state
        v = np.zeros(self.equation.d)
        f = np.zeros(self.equation.d)
        self.equation.v(self.params.t, self.q, self.p, v)
        self.equation.f(self.params.t, self.q, self.p, f)

        s, r = self.tableau.s, self.tableau.r

        return self.layout.pack(
            np.tile(v, (s, 1)),
            np.tile(f, (s, 1)),
            np.tile(v, (r, 1)),
            np.tile(f, (r, 1)),
            np.tile(self.lam, (r, 1))
            )


    def update_solution(self, x, k=0):

        cache = self.get_cache(float)
        compute_stages_park(x, self.params, cache, self.layout)

        tableau = self.tableau

        self.q += self.dt * (tableau.q.b @ cache.V + tableau.q.beta @ cache.U)
        self.p += self.dt * (tableau.p.b @ cache.F + tableau.p.beta @ cache.G)
        self.lam[:] = tableau.lambda_.b @ cache.Lambda


    def wrap_state(self, k=0):
        return self.wrap_periodic(self.q)


    def copy_solution(self, sol, n, k=0):
        sol.q[n] = self.q
        sol.p[n] = self.p
        sol.lam[n] = self.lam
