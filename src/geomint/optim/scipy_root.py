########################################################################################
##
##                          SCIPY ROOT FINDING BACKEND
##                             (optim/scipy_root.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from scipy import optimize

from ._solver import NonlinearSolver


# SOLVER ===============================================================================

class ScipyRootSolver(NonlinearSolver):
    """Delegates the stage equations to 'scipy.optimize.root'.

    The method is taken from 'config.scipy_method' (default 'hybr',
    MINPACK's modified Powell method). scipy's own success flag only
    reflects its step tolerance, so convergence is decided on the
    residual of the returned point with the criteria of 'SolverConfig'.

    Parameters
    ----------
    config : SolverConfig, None
        solver settings, defaults if None
    """

    def solve(self, func, x0):

        x, b, status = self._initialize(func, x0)

        if status.converged or status.diverged:
            return x, status

        tol = self.config.atol if self.config.atol > 0.0 else None

        sol = optimize.root(func, x, method=self.config.scipy_method, tol=tol)

        dx = sol.x - x
        x = np.asarray(sol.x, dtype=float)
        b = func(x)

        status.iterations = int(sol.get("nit", sol.get("nfev", 1)))
        status.evaluations += int(sol.get("nfev", 0)) + 1

        self._assess(status, x, b, dx)

        return x, status
