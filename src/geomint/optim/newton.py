########################################################################################
##
##                          NEWTON AND QUASI-NEWTON SOLVERS
##                                 (optim/newton.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._solver import NonlinearSolver
from .jacobian import compute_jacobian, factorize


# SOLVERS ==============================================================================

class NewtonSolver(NonlinearSolver):
    """Newton's method with an approximated jacobian

    .. math::

        x_{k+1} = x_k - J(x_k)^{-1} b(x_k)

    The jacobian is rebuilt in every iteration, either by finite
    differences or by complex steps, depending on 'config.jacobian'.

    Parameters
    ----------
    config : SolverConfig, None
        solver settings, defaults if None
    """

    def solve(self, func, x0):

        x, b, status = self._initialize(func, x0)

        if status.converged or status.diverged:
            return x, status

        linear_solve = None

        for i in range(1, self.config.iterations_max + 1):

            if linear_solve is None or self._update_jacobian(i):

                J, evaluations = compute_jacobian(func, x, b, self.config.jacobian)
                status.evaluations += evaluations

                if not np.all(np.isfinite(J)):
                    status.diverged = True
                    return x, status

                linear_solve = factorize(J)

            #newton update
            dx = linear_solve(-b)
            x = x + dx

            b = func(x)

            status.iterations = i
            status.evaluations += 1

            if self._assess(status, x, b, dx):
                break

        return x, status


    def _update_jacobian(self, iteration):
        return True


class QuasiNewtonSolver(NewtonSolver):
    """Newton's method with a frozen jacobian that is only rebuilt every
    'config.jacobian_refresh' iterations.

    Cheaper per iteration than 'NewtonSolver' for large stage systems,
    at the price of linear instead of quadratic convergence between
    jacobian updates.

    Parameters
    ----------
    config : SolverConfig, None
        solver settings, defaults if None
    """

    def _update_jacobian(self, iteration):
        return (iteration - 1) % self.config.jacobian_refresh == 0
