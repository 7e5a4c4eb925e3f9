########################################################################################
##
##                               ANDERSON ACCELERATION
##                                (optim/anderson.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from collections import deque

from ._solver import NonlinearSolver

from .._constants import TOLERANCE


# CLASS ================================================================================

class AndersonSolver(NonlinearSolver):
    """Anderson accelerated fixed-point iteration for 'func(x) = 0'.

    The residual is turned into the fixed-point map :math:`g(x) = x + b(x)`
    and the next iterate is a linear combination of previous iterates
    whose coefficients minimise the least-squares residual

    .. math::

        x_{k+1} = \\sum_{i=0}^{m_k} \\alpha_i^{(k)}\\, g(x_{k-m_k+i})
        \\quad\\text{with}\\quad
        \\alpha^{(k)} = \\arg\\min \\bigl\\|\\sum_i \\alpha_i\\, r_{k-m_k+i}\\bigr\\|

    where :math:`r_k = g(x_k) - x_k` and :math:`m_k \\le m` is the current
    buffer depth.

    This only converges when 'g' is a contraction. The stage equations
    of the stochastic integrators are written as 'b = -Y + h(Y)', so 'g'
    is the Picard map 'h' which contracts for small timesteps. No
    jacobian is needed.

    Parameters
    ----------
    config : SolverConfig, None
        solver settings, 'anderson_history' is the buffer depth 'm' and
        'anderson_restart' clears the buffer once it is full

    References
    ----------
    .. [1] Anderson, D. G. (1965). "Iterative Procedures for Nonlinear
           Integral Equations". Journal of the ACM, 12(4), 547--560.
           :doi:`10.1145/321296.321305`
    .. [2] Walker, H. F., & Ni, P. (2011). "Anderson Acceleration for
           Fixed-Point Iterations". SIAM Journal on Numerical Analysis,
           49(4), 1715--1735. :doi:`10.1137/10078356X`
    """

    def __init__(self, config=None):
        super().__init__(config)

        #length of buffer for next estimate
        self.m = self.config.anderson_history

        #restart after buffer length is reached?
        self.restart = self.config.anderson_restart

        #rolling difference buffers
        self.dx_buffer = deque(maxlen=self.m)
        self.dr_buffer = deque(maxlen=self.m)

        #previous iterate and fixed-point residual
        self.x_prev = None
        self.r_prev = None


    def __len__(self):
        return len(self.dx_buffer)


    def reset(self):
        """clear the mixing history"""

        self.dx_buffer.clear()
        self.dr_buffer.clear()

        self.x_prev = None
        self.r_prev = None


    def step(self, x, g):
        """Perform one mixing step on the fixed-point iteration.

        Parameters
        ----------
        x : array[float]
            current iterate
        g : array[float]
            current evaluation of g(x)

        Returns
        -------
        x : array[float]
            next iterate
        res : float
            fixed-point residual norm
        """

        _x = np.asarray(x, dtype=float).flatten()
        _g = np.asarray(g, dtype=float).flatten()

        #fixed-point residual (this gets minimized)
        _res = _g - _x

        #plain fixed-point iteration without history
        if self.m == 0:
            return _g, np.linalg.norm(_res)

        #first iteration has no differences yet
        if self.x_prev is None:
            self.x_prev = _x
            self.r_prev = _res
            return _g, np.linalg.norm(_res)

        self.dx_buffer.append(_x - self.x_prev)
        self.dr_buffer.append(_res - self.r_prev)

        self.x_prev = _x
        self.r_prev = _res

        #buffer full, start over
        if self.restart and len(self.dx_buffer) >= self.m:
            self.reset()
            return _g, np.linalg.norm(_res)

        dX = np.vstack(self.dx_buffer)
        dR = np.vstack(self.dr_buffer)

        #scalar problems reduce to a secant update
        if _res.size == 1:

            dR_flat = dR.flatten()
            dX_flat = dX.flatten()

            dR2 = np.dot(dR_flat, dR_flat)

            #catch division by zero
            if dR2 <= TOLERANCE:
                return _g, abs(_res[0])

            gamma = _res[0] * np.dot(dR_flat, dX_flat + dR_flat) / dR2
            return _g - gamma, abs(_res[0])

        #mixing coefficients from least squares problem
        C, *_ = np.linalg.lstsq(dR.T, _res, rcond=None)

        return _g - C @ (dX + dR), np.linalg.norm(_res)


    def solve(self, func, x0):

        self.reset()

        x, b, status = self._initialize(func, x0)

        if status.converged or status.diverged:
            return x, status

        for i in range(1, self.config.iterations_max + 1):

            x_new, _ = self.step(x, x + b)
            dx = x_new - x
            x = x_new

            b = func(x)

            status.iterations = i
            status.evaluations += 1

            if self._assess(status, x, b, dx):
                break

        return x, status
