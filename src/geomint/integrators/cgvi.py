########################################################################################
##
##                  CONTINUOUS GALERKIN VARIATIONAL INTEGRATOR
##                              (integrators/cgvi.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._integrator import VariationalIntegrator
from ._layout import StageLayout
from ._galerkin import GalerkinCoefficients

from .._constants import INT_LOG


# PARAMETERS AND CACHE =================================================================

class ParametersCGVI:
    """Per-step context of the CGVI stage equations"""

    def __init__(self, equation, coefficients, dt):
        self.equation = equation
        self.coefficients = coefficients
        self.dt = dt

        self.t = equation.t0
        self.q = equation.q0.copy()
        self.p = equation.p0.copy()


class CacheCGVI:
    """Basis coefficients, next momentum and the values at the
    quadrature nodes"""

    def __init__(self, d, s, r, dtype=float):
        self.X = np.zeros((s, d), dtype=dtype)
        self.p_tilde = np.zeros(d, dtype=dtype)

        self.Q = np.zeros((r, d), dtype=dtype)
        self.V = np.zeros((r, d), dtype=dtype)
        self.P = np.zeros((r, d), dtype=dtype)
        self.F = np.zeros((r, d), dtype=dtype)


# STAGE EQUATIONS ======================================================================

def compute_stages_cgvi(x, params, cache, layout):

    equation, co, dt = params.equation, params.coefficients, params.dt

    layout.unpack(x, cache.X, cache.p_tilde)

    cache.Q[...] = co.m @ cache.X
    cache.V[...] = co.a @ cache.X / dt

    for j in range(co.r):
        t_j = params.t + dt * co.c[j]
        equation.theta(t_j, cache.Q[j], cache.V[j], cache.P[j])
        equation.f(t_j, cache.Q[j], cache.V[j], cache.F[j])


def function_stages_cgvi(x, params, cache, layout):
    """Residual of the discrete Euler-Lagrange equations of the continuous
    Galerkin discretisation

    .. math::

        b_i = \\sum_j b_j (\\Delta t \\, m_{ji} F_j + a_{ji} P_j)
            + r^+_i p_n - r^-_i \\tilde{p}

    closed by the continuity condition 'q_n = \\sum_i r^+_i X_i'.
    """

    compute_stages_cgvi(x, params, cache, layout)

    co = params.coefficients

    b = params.dt * co.mw @ cache.F + co.aw @ cache.P \
        + np.outer(co.r_plus, params.p) - np.outer(co.r_minus, cache.p_tilde)

    b_continuity = params.q - co.r_plus @ cache.X

    return layout.pack(b, b_continuity)


# INTEGRATOR ===========================================================================

class IntegratorCGVI(VariationalIntegrator):
    """Continuous Galerkin variational integrator.

    The trajectory on each step is a polynomial in the basis, the
    unknowns are its 'S' coefficients and the momentum at the end of
    the step. The action is approximated with the quadrature rule.

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
        self.params = ParametersCGVI(equation, self.coefficients, dt)


    def __repr__(self):
        co = self.coefficients
        return f"IntegratorCGVI(S={co.s}, R={co.r}, dt={self.dt})"


    def create_cache(self, dtype):
        co = self.coefficients
        return CacheCGVI(self.equation.d, co.s, co.r, dtype)


    def assemble(self, x, params, cache):
        return function_stages_cgvi(x, params, cache, self.layout)


    def initial_guess(self, k=0):

        #lagrange coefficients are the values at the nodes
        X = np.zeros((self.coefficients.s, self.equation.d))
        for i, node in enumerate(self.basis.nodes):
            X[i], _, _ = self.iguess.evaluate(node)

        _, p_tilde, _ = self.iguess.evaluate(1.0)

        return self.layout.pack(X, p_tilde)


    def update_solution(self, x, k=0):
        cache = self.get_cache(float)
        self.layout.unpack(x, cache.X, cache.p_tilde)

        self.q[:] = self.coefficients.r_minus @ cache.X
        self.p[:] = cache.p_tilde
