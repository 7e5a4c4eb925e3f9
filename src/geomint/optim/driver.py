########################################################################################
##
##                            NONLINEAR SOLVE DRIVER
##                               (optim/driver.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._status import SolverStatus
from .newton import NewtonSolver, QuasiNewtonSolver
from .anderson import AndersonSolver
from .scipy_root import ScipyRootSolver

from ..config import SolverConfig
from ..errors import ConfigurationError


# REGISTRY =============================================================================

SOLVERS = {
    "newton": NewtonSolver,
    "quasi-newton": QuasiNewtonSolver,
    "anderson": AndersonSolver,
    "scipy": ScipyRootSolver,
    }


def create_solver(config=None):
    """Instantiate the nonlinear solver selected by 'config.solver'"""

    _config = SolverConfig() if config is None else config

    if _config.solver not in SOLVERS:
        raise ConfigurationError(f"unknown nonlinear solver '{_config.solver}'")

    return SOLVERS[_config.solver](_config)


# DRIVER ===============================================================================

class NonlinearSolveDriver:
    """Drives a nonlinear solver on the stage equations of one timestep.

    The driver does not retry on failure, the status is handed to the
    integrator, which decides whether to abort or to log a warning.

    Parameters
    ----------
    config : SolverConfig, None
        solver settings, defaults if None

    Attributes
    ----------
    solver : NonlinearSolver
        solver instance, reused for every timestep
    """

    def __init__(self, config=None):
        self.config = SolverConfig() if config is None else config
        self.solver = create_solver(self.config)


    def __repr__(self):
        return f"NonlinearSolveDriver(solver={type(self.solver).__name__})"


    def solve(self, initial_guess, residual_fn):
        """Solve 'residual_fn(x) = 0' starting from 'initial_guess'.

        Parameters
        ----------
        initial_guess : array[float]
            starting point, not modified
        residual_fn : callable
            residual of the stage equations

        Returns
        -------
        x : array[float]
            converged or last iterate
        status : SolverStatus
            outcome of the solve
        """

        x0 = np.array(initial_guess, dtype=float)

        if not np.all(np.isfinite(x0)):
            return x0, SolverStatus(diverged=True)

        x, status = self.solver.solve(residual_fn, x0)

        #final check of the candidate solution
        if not np.all(np.isfinite(x)):
            status.converged = False
            status.diverged = True

        return x, status
