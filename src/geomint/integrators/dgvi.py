########################################################################################
##
##                 DISCONTINUOUS GALERKIN VARIATIONAL INTEGRATOR
##                              (integrators/dgvi.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._integrator import VariationalIntegrator
from ._layout import StageLayout
from ._galerkin import GalerkinCoefficients

from .._constants import INT_LOG


# PARAMETERS AND CACHE =================================================================

class ParametersDGVI:
    """Per-step context of the DGVI stage equations.

    'q' is the boundary value at the start of the step, 'q_minus' the
    trace of the previous element there.
    """

    def __init__(self, equation, coefficients, dt):
        self.equation = equation
        self.coefficients = coefficients
        self.dt = dt

        self.t = equation.t0
        self.q = equation.q0.copy()
        self.q_minus = equation.q0.copy()


class CacheDGVI:
    """Basis coefficients, boundary values, jumps and the one-form and
    projection evaluations at the element boundaries"""

    def __init__(self, d, s, r, dtype=float):
        self.X = np.zeros((s, d), dtype=dtype)
        self.q_bar = np.zeros(d, dtype=dtype)

        self.Q = np.zeros((r, d), dtype=dtype)
        self.V = np.zeros((r, d), dtype=dtype)
        self.P = np.zeros((r, d), dtype=dtype)
        self.F = np.zeros((r, d), dtype=dtype)

        #traces of the element at both ends
        self.q_plus = np.zeros(d, dtype=dtype)
        self.q_bar_minus = np.zeros(d, dtype=dtype)

        #jumps
        self.lam = np.zeros(d, dtype=dtype)
        self.lam_plus = np.zeros(d, dtype=dtype)
        self.lam_bar_minus = np.zeros(d, dtype=dtype)

        #one-form at the boundaries
        self.theta = np.zeros(d, dtype=dtype)
        self.theta_minus = np.zeros(d, dtype=dtype)
        self.theta_plus = np.zeros(d, dtype=dtype)
        self.Theta_bar = np.zeros(d, dtype=dtype)
        self.Theta_bar_minus = np.zeros(d, dtype=dtype)

        #projections of the jumps
        self.g = np.zeros(d, dtype=dtype)
        self.g_plus = np.zeros(d, dtype=dtype)
        self.g_bar_minus = np.zeros(d, dtype=dtype)


# STAGE EQUATIONS ======================================================================

def compute_stages_dgvi(x, params, cache, layout):

    equation, co, dt = params.equation, params.coefficients, params.dt

    layout.unpack(x, cache.X, cache.q_bar)

    #values at the quadrature nodes
    cache.Q[...] = co.m @ cache.X
    cache.V[...] = co.a @ cache.X / dt

    for j in range(co.r):
        t_j = params.t + dt * co.c[j]
        equation.theta(t_j, cache.Q[j], cache.V[j], cache.P[j])
        equation.f(t_j, cache.Q[j], cache.V[j], cache.F[j])

    #traces of the element
    cache.q_plus[...] = co.r_plus @ cache.X
    cache.q_bar_minus[...] = co.r_minus @ cache.X

    cache.lam[...] = cache.q_plus - params.q_minus
    cache.lam_plus[...] = cache.q_plus - params.q
    cache.lam_bar_minus[...] = cache.q_bar - cache.q_bar_minus

    t0, t1 = params.t, params.t + dt

    #the one-form at the boundaries gets the position in the velocity slot
    equation.theta(t0, params.q, params.q, cache.theta)
    equation.theta(t0, params.q_minus, params.q_minus, cache.theta_minus)
    equation.theta(t0, cache.q_plus, cache.q_plus, cache.theta_plus)
    equation.theta(t1, cache.q_bar, cache.q_bar, cache.Theta_bar)
    equation.theta(t1, cache.q_bar_minus, cache.q_bar_minus, cache.Theta_bar_minus)

    equation.g(t0, params.q, cache.lam, cache.g)
    equation.g(t0, cache.q_plus, cache.lam_plus, cache.g_plus)
    equation.g(t1, cache.q_bar_minus, cache.lam_bar_minus, cache.g_bar_minus)


def function_stages_dgvi(x, params, cache, layout):
    """Residual of the discrete Euler-Lagrange equations of the
    discontinuous Galerkin discretisation

    .. math::

        b_i = \\sum_j b_j (\\Delta t \\, m_{ji} F_j + a_{ji} P_j)
            + \\frac{r^+_i}{2} (\\theta + \\theta^+ + g^+)
            - \\frac{r^-_i}{2} (\\bar{\\Theta} + \\bar{\\Theta}^- - \\bar{g}^-)

    closed by the jump condition

    .. math::

        \\vartheta(q_n^+) - \\vartheta(q_n^-) - \\nabla \\vartheta(q_n) \\cdot (q_n^+ - q_n^-) = 0
    """

    compute_stages_dgvi(x, params, cache, layout)

    co = params.coefficients

    b = params.dt * co.mw @ cache.F + co.aw @ cache.P \
        + np.outer(co.r_plus, 0.5 * (cache.theta + cache.theta_plus)) \
        - np.outer(co.r_minus, 0.5 * (cache.Theta_bar + cache.Theta_bar_minus)) \
        + np.outer(co.r_plus, 0.5 * cache.g_plus) \
        + np.outer(co.r_minus, 0.5 * cache.g_bar_minus)

    b_jump = cache.theta_plus - cache.theta_minus - cache.g

    return layout.pack(b, b_jump)


# INTEGRATOR ===========================================================================

class IntegratorDGVI(VariationalIntegrator):
    """Discontinuous Galerkin variational integrator.

    The trajectory is a polynomial on each step that may jump at the
    step boundaries. The unknowns are the 'S' basis coefficients and the
    boundary value 'q' at the end of the step. Besides 'q' the integrator
    carries the trace 'q_minus' of the last element at the boundary, the
    momentum in the trajectory store is the boundary one-form

    .. math::

        p_{n+1} = \\frac{1}{2} (\\bar{\\Theta} + \\bar{\\Theta}^-) - \\frac{1}{2} \\bar{g}^-

    Parameters
    ----------
    equation : IODE
        the equation to integrate
    basis : LagrangeBasis
        basis on the unit interval
    quadrature : Quadrature
        quadrature rule on the unit interval
    dt : float
        timestep
    config : IntegratorConfig, None
        solver and failure policy settings
    log : bool
        log run progress and per-step solver status
    """

    def __init__(self, equation, basis, quadrature, dt, config=None, log=INT_LOG):
        super().__init__(equation, dt, config, log)

        self.basis = basis
        self.quadrature = quadrature
        self.coefficients = GalerkinCoefficients(basis, quadrature)

        self.layout = StageLayout(equation.d, self.coefficients.s, extra=1)
        self.params = ParametersDGVI(equation, self.coefficients, dt)

        #trace of the previous element at the current boundary
        self.q_minus = equation.q0.copy()


    def __repr__(self):
        co = self.coefficients
        return f"IntegratorDGVI(S={co.s}, R={co.r}, dt={self.dt})"


    def create_cache(self, dtype):
        co = self.coefficients
        return CacheDGVI(self.equation.d, co.s, co.r, dtype)


    def assemble(self, x, params, cache):
        return function_stages_dgvi(x, params, cache, self.layout)


    def initialize(self, sol):
        super().initialize(sol)

        #no jump at the initial boundary
        self.q_minus[:] = self.q


    def update_params(self, sol, n, k=0):
        #the residual only reads the boundary values, not the momentum
        self.params.t = sol.t[n-1]
        self.params.q[:] = self.q
        self.params.q_minus[:] = self.q_minus


    def initial_guess(self, k=0):

        X = np.zeros((self.coefficients.s, self.equation.d))
        for i, node in enumerate(self.basis.nodes):
            X[i], _, _ = self.iguess.evaluate(node)

        q_bar, _, _ = self.iguess.evaluate(1.0)

        return self.layout.pack(X, q_bar)


    def update_solution(self, x, k=0):

        cache = self.get_cache(float)
        compute_stages_dgvi(x, self.params, cache, self.layout)

        self.q[:] = cache.q_bar
        self.q_minus[:] = cache.q_bar_minus
        self.p[:] = 0.5 * (cache.Theta_bar + cache.Theta_bar_minus) - 0.5 * cache.g_bar_minus


    def wrap_state(self, k=0):
        shift = self.wrap_periodic(self.q)
        self.q_minus += shift
        return shift
