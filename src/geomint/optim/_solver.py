########################################################################################
##
##                          BASE CLASS FOR NONLINEAR SOLVERS
##                                (optim/_solver.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._status import SolverStatus

from ..config import SolverConfig
from ..utils.funcs import norm_inf


# BASE CLASS ===========================================================================

class NonlinearSolver:
    """Base class of the solvers for 'func(x) = 0'.

    Implements the convergence and divergence checks shared by all
    solvers, see 'SolverConfig' for the criteria.

    Note
    ----
    Not to be used directly!

    Parameters
    ----------
    config : SolverConfig, None
        solver settings, defaults if None
    """

    def __init__(self, config=None):
        self.config = SolverConfig() if config is None else config


    def __repr__(self):
        return f"{type(self).__name__}(config={self.config})"


    def solve(self, func, x0):
        """Iterate from 'x0' towards a root of 'func'.

        Parameters
        ----------
        func : callable
            residual function, returns an array of the same length as 'x'
        x0 : array[float]
            initial guess

        Returns
        -------
        x : array[float]
            last iterate
        status : SolverStatus
            outcome of the solve
        """
        raise NotImplementedError


    def _initialize(self, func, x0):
        """Evaluate the residual of the initial guess"""

        x = np.array(x0, dtype=float)
        b = func(x)

        status = SolverStatus(evaluations=1)
        if np.all(np.isfinite(b)):
            status.residual_initial = norm_inf(b)

        self._assess(status, x, b)

        return x, b, status


    def _assess(self, status, x, b, dx=None):
        """Update the residual norms of 'status' for the iterate 'x' with
        residual 'b' and last update 'dx'.

        Returns
        -------
        finished : bool
            True if converged or diverged
        """

        if not (np.all(np.isfinite(b)) and np.all(np.isfinite(x))):
            status.converged = False
            status.diverged = True
            return True

        status.residual_abs = norm_inf(b)

        if status.residual_initial > 0.0:
            status.residual_rel = status.residual_abs / status.residual_initial
        else:
            status.residual_rel = 0.0

        if dx is not None:
            status.residual_step = norm_inf(dx) / max(1.0, norm_inf(x))

        status.converged = self._check_convergence(status)

        return status.converged


    def _check_convergence(self, status):
        cfg = self.config
        return (
            status.residual_abs <= cfg.atol
            or (cfg.rtol > 0.0 and status.residual_rel <= cfg.rtol)
            or (cfg.stol > 0.0 and status.residual_step <= cfg.stol)
            )
