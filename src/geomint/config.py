########################################################################################
##
##                         SOLVER AND INTEGRATOR CONFIGURATION
##                                   (config.py)
##
########################################################################################

# IMPORTS ==============================================================================

from dataclasses import dataclass, field

from .errors import ConfigurationError

from ._constants import (
    SOL_SOLVER,
    SOL_SOLVERS,
    SOL_TOLERANCE_ABS,
    SOL_TOLERANCE_REL,
    SOL_TOLERANCE_STEP,
    SOL_ITERATIONS_MAX,
    SOL_JACOBIAN,
    SOL_JACOBIANS,
    SOL_JACOBIAN_REFRESH,
    SOL_SCIPY_METHOD,
    OPT_HISTORY,
    OPT_RESTART,
    INT_ABORT_ON_NONCONVERGENCE
    )


# CONFIGURATION ========================================================================

@dataclass
class SolverConfig:
    """Settings of the nonlinear solver used for the stage equations.

    A solve is converged when any of the three criteria holds

    .. math::

        \\|b\\|_\\infty \\le atol, \\quad
        \\|b\\|_\\infty \\le rtol \\, \\|b_0\\|_\\infty, \\quad
        \\|\\Delta x\\|_\\infty \\le stol \\, \\max(1, \\|x\\|_\\infty)

    Setting a tolerance to zero disables its criterion.

    Attributes
    ----------
    solver : str
        one of 'newton', 'quasi-newton', 'anderson', 'scipy'
    atol : float
        absolute tolerance on the residual norm
    rtol : float
        tolerance on the residual norm relative to the initial residual
    stol : float
        tolerance on the size of the last update
    iterations_max : int
        iteration limit of one solve
    jacobian : str
        jacobian approximation, one of 'forward', 'central', 'complex'
    jacobian_refresh : int
        iterations between jacobian updates for 'quasi-newton'
    anderson_history : int
        buffer depth of the anderson mixing
    anderson_restart : bool
        clear the anderson buffer when it is full
    scipy_method : str
        method argument of 'scipy.optimize.root'
    """

    solver: str = SOL_SOLVER
    atol: float = SOL_TOLERANCE_ABS
    rtol: float = SOL_TOLERANCE_REL
    stol: float = SOL_TOLERANCE_STEP
    iterations_max: int = SOL_ITERATIONS_MAX
    jacobian: str = SOL_JACOBIAN
    jacobian_refresh: int = SOL_JACOBIAN_REFRESH
    anderson_history: int = OPT_HISTORY
    anderson_restart: bool = OPT_RESTART
    scipy_method: str = SOL_SCIPY_METHOD

    def __post_init__(self):

        if self.solver not in SOL_SOLVERS:
            raise ConfigurationError(
                f"unknown nonlinear solver '{self.solver}', expected one of {SOL_SOLVERS}"
                )

        if self.jacobian not in SOL_JACOBIANS:
            raise ConfigurationError(
                f"unknown jacobian strategy '{self.jacobian}', expected one of {SOL_JACOBIANS}"
                )

        for name in ("atol", "rtol", "stol"):
            if getattr(self, name) < 0.0:
                raise ConfigurationError(f"tolerance '{name}' must be non-negative")

        if self.iterations_max < 1:
            raise ConfigurationError("'iterations_max' must be at least 1")

        if self.jacobian_refresh < 1:
            raise ConfigurationError("'jacobian_refresh' must be at least 1")

        if self.anderson_history < 0:
            raise ConfigurationError("'anderson_history' must be non-negative")


@dataclass
class IntegratorConfig:
    """Settings shared by all integrators.

    Attributes
    ----------
    solver : SolverConfig
        nonlinear solver settings
    abort_on_nonconvergence : bool
        raise 'SolverNonConvergence' instead of logging a warning
    """

    solver: SolverConfig = field(default_factory=SolverConfig)
    abort_on_nonconvergence: bool = INT_ABORT_ON_NONCONVERGENCE
