########################################################################################
##
##                           BASE CLASSES FOR INTEGRATORS
##                          (integrators/_integrator.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from .initial_guess import InitialGuessPODE

from ..config import IntegratorConfig
from ..errors import SolverNonConvergence, NumericalDivergence
from ..optim.driver import NonlinearSolveDriver
from ..solutions import SolutionPODE
from ..utils.funcs import cut_periodic_solution
from ..utils.logger import get_logger

from .._constants import INT_LOG


# LOGGING ==============================================================================

logger = get_logger(__name__)


# BASE INTEGRATOR ======================================================================

class Integrator:
    """Base class of all integrators that defines the integration loop.

    Every integrator advances the trajectory store by one step with
    'integrate_step(sol, n, k)' and returns the status of the step.
    The index 'k' selects the sample path of stochastic integrators and
    is zero for deterministic ones.

    Note
    ----
    Not to be used directly!

    Parameters
    ----------
    equation : Equation
        the equation to integrate
    dt : float
        timestep
    config : IntegratorConfig, None
        solver and failure policy settings, defaults if None
    log : bool
        log run progress and per-step solver status

    Attributes
    ----------
    solution_class : type
        trajectory store created by 'run'
    """

    solution_class = None

    def __init__(self, equation, dt, config=None, log=INT_LOG):

        self.equation = equation
        self.dt = dt
        self.config = IntegratorConfig() if config is None else config
        self.log = log


    def __len__(self):
        """number of unknowns of the stage equations"""
        return 0


    def __repr__(self):
        return f"{type(self).__name__}(equation={self.equation!r}, dt={self.dt})"


    def create_solution(self, nt, **solution_kwargs):
        """Trajectory store for 'nt' timesteps"""
        return self.solution_class(self.equation, self.dt, nt, **solution_kwargs)


    def initialize(self, sol):
        """Copy the initial conditions from slot 0 of 'sol'"""
        raise NotImplementedError


    def integrate_step(self, sol, n, k=0):
        """Advance path 'k' from step 'n-1' to step 'n' and write the
        result into slot 'n' of 'sol'.

        Returns
        -------
        status : SolverStatus
            outcome of the nonlinear solve of the step
        """
        raise NotImplementedError


    def integrate(self, sol):
        """Integrate all timesteps and sample paths of 'sol'.

        Parameters
        ----------
        sol : Solution
            trajectory store, slot 0 holds the initial conditions

        Returns
        -------
        sol : Solution
            the filled trajectory store
        """

        self.initialize(sol)

        if self.log:
            logger.info(
                "integrating %d steps of %d path(s) with %s",
                sol.nt, sol.ns, type(self).__name__
                )

        failures = 0
        for k in range(sol.ns):
            for n in range(1, sol.nt + 1):
                status = self.integrate_step(sol, n, k)
                failures += status.failed

        if failures:
            logger.warning("%d of %d steps did not converge", failures, sol.nt * sol.ns)
        elif self.log:
            logger.info("finished integration up to t=%g", sol.t[-1])

        return sol


    def run(self, nt, **solution_kwargs):
        """Create a trajectory store for 'nt' timesteps and integrate it"""
        return self.integrate(self.create_solution(nt, **solution_kwargs))


    def check_solver_status(self, status, n, k=0):
        """Report the status of the nonlinear solve of step 'n'.

        Divergence always raises, nonconvergence raises only when the
        configuration asks to abort, otherwise it is logged.
        """

        if status.diverged:
            logger.error("timestep %d of path %d: %s", n, k, status)
            raise NumericalDivergence(
                f"NaN or Inf in the stage equations at timestep {n} of path {k}", status
                )

        if not status.converged:
            message = f"nonlinear solver failed at timestep {n} of path {k}: {status}"
            if self.config.abort_on_nonconvergence:
                raise SolverNonConvergence(message, status)
            logger.warning(message)

        elif self.log:
            logger.debug("timestep %d of path %d: %s", n, k, status)


    def wrap_periodic(self, q):
        """Reduce the periodic coordinates of 'q' in place, returns the shift"""
        return cut_periodic_solution(q, self.equation.periodicity)


# IMPLICIT INTEGRATOR ==================================================================

class ImplicitIntegrator(Integrator):
    """Base class of integrators that solve a nonlinear system for the
    stage unknowns in every timestep.

    One step runs through

    1. 'update_params': time advance and copy of the current state
    2. 'initial_guess': starting point of the nonlinear solve
    3. solve of 'residual(x) = 0' by the nonlinear solve driver
    4. 'check_solver_status': report and apply the failure policy
    5. 'update_solution': reconstruct the new state from the stages
    6. 'wrap_state': periodic wrap-around of the new state
    7. 'update_initial_guess': feed the new state to the predictor
    8. 'copy_solution': write the new state into the trajectory store

    Subclasses set 'layout' and 'params', implement the residual assembler
    'assemble(x, params, cache)' and the hooks.

    Note
    ----
    Not to be used directly!

    Attributes
    ----------
    driver : NonlinearSolveDriver
        driver of the nonlinear solver
    layout : StageLayout, ParkLayout
        layout of the flat unknown vector
    params : object
        per-step context of the residual assembler
    """

    def __init__(self, equation, dt, config=None, log=INT_LOG):
        super().__init__(equation, dt, config, log)

        self.driver = NonlinearSolveDriver(self.config.solver)

        self.layout = None
        self.params = None

        #stage caches, one per scalar type of the unknowns
        self._caches = {}


    def __len__(self):
        return len(self.layout)


    def assemble(self, x, params, cache):
        """Residual of the stage equations with the stage cache 'cache'"""
        raise NotImplementedError


    def create_cache(self, dtype):
        """Stage cache for unknowns of the scalar type 'dtype'"""
        raise NotImplementedError


    def get_cache(self, dtype=float):
        """Stage cache for 'dtype', created on first use"""
        key = np.dtype(dtype)
        if key not in self._caches:
            self._caches[key] = self.create_cache(key)
        return self._caches[key]


    def residual(self, x):
        """Residual of the stage equations of the current timestep at 'x'"""
        _x = np.asarray(x)
        return self.assemble(_x, self.params, self.get_cache(_x.dtype))


    def integrate_step(self, sol, n, k=0):

        self.update_params(sol, n, k)

        x0 = self.initial_guess(k)
        x, status = self.driver.solve(x0, self.residual)

        self.check_solver_status(status, n, k)

        self.update_solution(x, k)

        shift = self.wrap_state(k)

        self.update_initial_guess(sol.t[n], k, shift)
        self.copy_solution(sol, n, k)

        return status


    def update_params(self, sol, n, k=0):
        raise NotImplementedError


    def initial_guess(self, k=0):
        raise NotImplementedError


    def update_solution(self, x, k=0):
        raise NotImplementedError


    def wrap_state(self, k=0):
        raise NotImplementedError


    def update_initial_guess(self, t, k=0, shift=None):
        pass


    def copy_solution(self, sol, n, k=0):
        raise NotImplementedError


# VARIATIONAL INTEGRATOR ===============================================================

class VariationalIntegrator(ImplicitIntegrator):
    """Base class of integrators for implicit equations 'IODE' with
    state '(q, p)' and a Hermite predictor for the stage unknowns.

    Note
    ----
    Not to be used directly!
    """

    solution_class = SolutionPODE

    def __init__(self, equation, dt, config=None, log=INT_LOG):
        super().__init__(equation, dt, config, log)

        #current state
        self.q = equation.q0.copy()
        self.p = equation.p0.copy()

        self.iguess = InitialGuessPODE(equation, dt)


    def initialize(self, sol):
        self.q[:] = sol.q[0]
        self.p[:] = sol.p[0]
        self.iguess.initialize(sol.t[0], self.q, self.p)


    def update_params(self, sol, n, k=0):
        self.params.t = sol.t[n-1]
        self.params.q[:] = self.q
        self.params.p[:] = self.p


    def wrap_state(self, k=0):
        return self.wrap_periodic(self.q)


    def update_initial_guess(self, t, k=0, shift=None):
        self.iguess.update(t, self.q, self.p, shift)


    def copy_solution(self, sol, n, k=0):
        sol.q[n] = self.q
        sol.p[n] = self.p
